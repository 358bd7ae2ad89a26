# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User schemas."""
import datetime
from typing import Optional

from pydantic import Field

from sce_portal.schemas.common import CamelModel


class UserResponse(CamelModel):
    """Schema for user response. Never carries the password."""

    id: str
    name: str
    email: str
    role_id: str
    role_name: Optional[str] = None
    permissions: list[str] = []
    created_at: datetime.datetime
    last_login: Optional[datetime.datetime] = None


class RoleAssignment(CamelModel):
    """Schema for changing a user's role (admin use)."""

    role_id: str = Field(..., min_length=1)


class PermissionResponse(CamelModel):
    """A permission code of the vocabulary."""

    code: str
    description: str
