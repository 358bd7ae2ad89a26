# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User management for administrators."""

import logging

from sce_portal.exceptions import NotFoundError, SelfDeletionError, ValidationError
from sce_portal.models import User
from sce_portal.rbac.permissions import ALL
from sce_portal.repositories import Store
from sce_portal.services import rbac_service
from sce_portal.services.session_service import AuthSession

logger = logging.getLogger(__name__)


def list_users(store: Store, session: AuthSession) -> list[User]:
    """List all users in registration order."""
    rbac_service.ensure_permission(session, ALL)
    return store.users.list()


def change_role(store: Store, session: AuthSession, user_id: str, role_id: str) -> User:
    """Assign another role to a user.

    Raises:
        NotFoundError: If the user does not exist.
        ValidationError: If the role does not exist.
    """
    rbac_service.ensure_permission(session, ALL)

    user = store.users.get(user_id)
    if not user:
        raise NotFoundError("User not found")

    if not rbac_service.get_role_by_id(store, role_id):
        raise ValidationError(f"Unknown role: {role_id}")

    user = store.users.update(user.model_copy(update={"role_id": role_id}))
    session.refresh_user(user)
    logger.info(f"User {user_id} moved to role {role_id} by {session.user.id}")
    return user


def delete_user(store: Store, session: AuthSession, user_id: str) -> None:
    """Delete a user account.

    Raises:
        SelfDeletionError: If the acting administrator targets themself.
        NotFoundError: If the user does not exist.
    """
    rbac_service.ensure_permission(session, ALL)

    if user_id == session.user.id:
        raise SelfDeletionError("You cannot delete your own account")

    if not store.users.delete(user_id):
        raise NotFoundError("User not found")
    logger.info(f"User {user_id} deleted by {session.user.id}")
