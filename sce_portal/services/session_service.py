# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Per-profile authentication state."""

import logging
from dataclasses import dataclass

from pydantic import ValidationError as PydanticValidationError

from sce_portal.models import Role, SessionUser, User
from sce_portal.repositories import Store
from sce_portal.services import auth_service, rbac_service

logger = logging.getLogger(__name__)


@dataclass
class AuthState:
    """Snapshot of who is logged in."""

    user: SessionUser | None = None
    role: Role | None = None
    is_loading: bool = True
    is_authenticated: bool = False


@dataclass
class RegistrationResult:
    """Outcome of a successful registration."""

    user: SessionUser
    role_id: str
    message: str


class AuthSession:
    """Authentication state of one client profile.

    The session record is a serialized user (without password) stored under
    ``session_key``. It is not a verified token: whoever can write that key
    is logged in.
    """

    def __init__(self, store: Store, session_key: str):
        self.store = store
        self.session_key = session_key
        self.state = AuthState()

    @property
    def user(self) -> SessionUser | None:
        return self.state.user

    @property
    def role(self) -> Role | None:
        return self.state.role

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    @property
    def is_authenticated(self) -> bool:
        return self.state.is_authenticated

    def initialize(self) -> AuthState:
        """Load the persisted session record.

        A record that cannot be parsed is removed. A record whose role does
        not resolve leaves the profile unauthenticated.
        """
        raw = self.store.storage.get_item(self.session_key)
        if raw is None:
            self.state = AuthState(is_loading=False)
            return self.state

        try:
            user = SessionUser.model_validate_json(raw)
        except PydanticValidationError:
            logger.warning(f"Discarding malformed session record {self.session_key!r}")
            self.logout()
            return self.state

        role = rbac_service.get_role_by_id(self.store, user.role_id)
        if role is None:
            logger.warning(
                f"Role {user.role_id!r} of user {user.id} does not exist, "
                "treating session as unauthenticated"
            )
            self.state = AuthState(is_loading=False)
            return self.state

        self.state = AuthState(
            user=user, role=role, is_loading=False, is_authenticated=True
        )
        return self.state

    def login(self, email: str, password: str) -> bool:
        """Log in with email and password.

        Returns False on any mismatch, and for a user whose role does not
        resolve. Nothing is written and the current state is kept in that case.
        """
        user = auth_service.verify_credentials(self.store, email, password)
        if not user:
            return False

        if rbac_service.get_role_by_id(self.store, user.role_id) is None:
            logger.warning(
                f"Refusing login of user {user.id}: role {user.role_id!r} does not exist"
            )
            return False

        self._establish(auth_service.record_login(self.store, user))
        return self.state.is_authenticated

    def register(self, name: str, email: str, password: str) -> RegistrationResult:
        """Register a new account and log it in.

        Raises:
            DuplicateEmailError: If the email is already registered.
        """
        user = auth_service.register_user(self.store, name, email, password)
        self._establish(user)
        return RegistrationResult(
            user=self.state.user,
            role_id=user.role_id,
            message=auth_service.registration_message(user.role_id),
        )

    def logout(self) -> None:
        """Clear the session record. Safe to call repeatedly."""
        self.store.storage.remove_item(self.session_key)
        self.state = AuthState(is_loading=False)

    def check_permission(self, permission: str) -> bool:
        if not self.state.is_authenticated:
            return False
        return rbac_service.role_has_permission(self.state.role, permission)

    def refresh_user(self, user: User) -> None:
        """Rewrite the session record after the logged-in user changed."""
        if self.state.user is None or self.state.user.id != user.id:
            return
        self._establish(user)

    def _establish(self, user: User) -> None:
        session_user = user.to_session_user()
        self.store.storage.set_item(
            self.session_key, session_user.model_dump_json(by_alias=True)
        )
        role = rbac_service.get_role_by_id(self.store, user.role_id)
        self.state = AuthState(
            user=session_user,
            role=role,
            is_loading=False,
            is_authenticated=role is not None,
        )
