# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication schemas."""
from typing import Optional

from pydantic import EmailStr, Field, model_validator

from sce_portal.schemas.common import CamelModel
from sce_portal.schemas.user import UserResponse


class LoginRequest(CamelModel):
    """Login form."""

    email: EmailStr
    password: str = Field(..., min_length=6)


class RegisterRequest(CamelModel):
    """Registration form."""

    name: str = Field(..., min_length=2, max_length=200)
    email: EmailStr
    password: str = Field(..., min_length=6)
    password_confirm: str = Field(..., min_length=6)

    @model_validator(mode="after")
    def passwords_match(self) -> "RegisterRequest":
        if self.password_confirm != self.password:
            raise ValueError("Passwords do not match")
        return self


class ProfileUpdate(CamelModel):
    """Schema for updating the logged-in user's own profile."""

    name: str = Field(..., min_length=2, max_length=200)
    current_password: str = Field(..., min_length=1)
    new_password: Optional[str] = Field(None, min_length=6)
    confirm_password: Optional[str] = None


class AuthResponse(CamelModel):
    """Logged-in user with the outcome message of the action."""

    user: UserResponse
    message: Optional[str] = None


class AuthStatusResponse(CamelModel):
    """Authentication state of the calling profile."""

    first_run: bool
    is_authenticated: bool
    user: Optional[UserResponse] = None
