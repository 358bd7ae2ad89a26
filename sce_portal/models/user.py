# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User records."""

from datetime import datetime

from sce_portal.models.base import Record


class SessionUser(Record):
    """A user as kept in a session record: everything but the password."""

    name: str
    email: str
    role_id: str
    created_at: datetime
    last_login: datetime | None = None


class User(SessionUser):
    """A registered portal account.

    ``password`` holds a bcrypt digest unless plaintext passwords are
    explicitly allowed in the settings.
    """

    password: str

    def to_session_user(self) -> SessionUser:
        return SessionUser.model_validate(self.model_dump(exclude={"password"}))
