"""Form validation helper routes."""

from fastapi import APIRouter, Request

from api.v1.schemas.validation import PasswordStrengthRequest, PasswordStrengthResponse
from core.rate_limit import limiter
from domain.services.validation import get_password_strength, validate_password

router = APIRouter(prefix="/validation", tags=["validation"])


@router.post(
    "/password-strength",
    response_model=PasswordStrengthResponse,
    summary="Rate a password",
)
@limiter.limit("60/minute")  # type: ignore[untyped-decorator]
async def password_strength(
    request: Request,
    body: PasswordStrengthRequest,
) -> PasswordStrengthResponse:
    """Strength tier for the form's password meter, plus whether it is acceptable."""
    return PasswordStrengthResponse(
        strength=get_password_strength(body.password),
        valid=validate_password(body.password),
    )
