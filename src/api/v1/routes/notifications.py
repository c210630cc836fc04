"""Notification API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.v1.dependencies import LoggedInUser, get_notification_service
from api.v1.schemas.notification import (
    MarkAllReadResponse,
    NotificationCreate,
    NotificationDetailResponse,
    NotificationListResponse,
    NotificationResponse,
    UnreadCountResponse,
)
from core.config import settings
from core.rate_limit import limiter
from domain.entities.notification import NewNotification, NotificationType
from domain.services.notification_service import NotificationService

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get(
    "",
    response_model=NotificationListResponse,
    summary="List notifications",
    responses={
        200: {"description": "Notification feed, most recent first"},
        401: {"description": "Not logged in"},
    },
)
@limiter.limit("60/minute")  # type: ignore[untyped-decorator]
async def list_notifications(
    request: Request,
    user: LoggedInUser,
    service: NotificationService = Depends(get_notification_service),
) -> NotificationListResponse:
    """List the current user's notifications with the unread count.

    ``meta.poll_interval_seconds`` tells clients how often to refresh.
    """
    notifications = await service.get_notifications(user.id)
    unread_count = sum(1 for n in notifications if not n.read)
    return NotificationListResponse(
        data=[NotificationResponse.model_validate(n) for n in notifications],
        meta={
            "unread_count": unread_count,
            "poll_interval_seconds": settings.notification_poll_seconds,
        },
    )


@router.post(
    "",
    response_model=NotificationDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a system notification",
    responses={401: {"description": "Not logged in"}},
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def add_notification(
    request: Request,
    body: NotificationCreate,
    user: LoggedInUser,
    service: NotificationService = Depends(get_notification_service),
) -> NotificationDetailResponse:
    """Post a system message to any profile's feed.

    Follow and view notifications are only produced by their own operations.
    """
    notification = await service.add_notification(
        NewNotification(
            user_id=body.user_id,
            message=body.message,
            type=NotificationType.SYSTEM,
        )
    )
    return NotificationDetailResponse(data=NotificationResponse.model_validate(notification))


@router.get(
    "/unread-count",
    response_model=UnreadCountResponse,
    summary="Get unread notification count",
)
@limiter.limit("60/minute")  # type: ignore[untyped-decorator]
async def get_unread_count(
    request: Request,
    user: LoggedInUser,
    service: NotificationService = Depends(get_notification_service),
) -> UnreadCountResponse:
    count = await service.get_unread_count(user.id)
    return UnreadCountResponse(count=count)


@router.patch(
    "/{notification_id}/read",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Mark notification as read",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def mark_notification_read(
    request: Request,
    notification_id: str,
    user: LoggedInUser,
    service: NotificationService = Depends(get_notification_service),
) -> None:
    """Mark one of your notifications as read.

    Unknown ids and notifications addressed to someone else are ignored.
    """
    own = await service.get_notifications(user.id)
    if any(n.id == notification_id for n in own):
        await service.mark_read(notification_id)


@router.post(
    "/mark-all-read",
    response_model=MarkAllReadResponse,
    summary="Mark all notifications as read",
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def mark_all_notifications_read(
    request: Request,
    user: LoggedInUser,
    service: NotificationService = Depends(get_notification_service),
) -> MarkAllReadResponse:
    count = await service.mark_all_read(user.id)
    return MarkAllReadResponse(count=count)
