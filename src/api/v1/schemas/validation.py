"""Pydantic schemas for form validation helpers."""

from pydantic import BaseModel

from domain.services.validation import PasswordStrength


class PasswordStrengthRequest(BaseModel):
    password: str


class PasswordStrengthResponse(BaseModel):
    strength: PasswordStrength
    valid: bool
