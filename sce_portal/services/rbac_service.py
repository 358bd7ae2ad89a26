# sce_portal/services/rbac_service.py
from typing import TYPE_CHECKING

from sce_portal.exceptions import PermissionDeniedError
from sce_portal.models import Role, User
from sce_portal.rbac.permissions import ALL
from sce_portal.repositories import Store

if TYPE_CHECKING:
    from sce_portal.services.session_service import AuthSession


def get_role_by_id(store: Store, role_id: str) -> Role | None:
    """Get a role by its id."""
    return store.roles.get(role_id)


def get_roles(store: Store) -> list[Role]:
    return store.roles.list()


def resolve_role(store: Store, user: User) -> Role | None:
    """Resolve the role a user points at. None for a dangling roleId."""
    return get_role_by_id(store, user.role_id)


def role_has_permission(role: Role | None, permission: str) -> bool:
    """Check a permission string against a role.

    ``"all"`` in the role grants everything; any other permission must be
    present verbatim. A missing role grants nothing.
    """
    if role is None:
        return False

    if ALL in role.permissions:
        return True

    return permission in role.permissions


def user_has_permission(store: Store, user: User, permission: str) -> bool:
    """Check if a user has a specific permission."""
    return role_has_permission(resolve_role(store, user), permission)


def is_admin(store: Store, user: User) -> bool:
    """Check for the universal ``all`` permission."""
    return user_has_permission(store, user, ALL)


def ensure_permission(session: "AuthSession", permission: str) -> None:
    """Raise unless the session holds ``permission``.

    Raises:
        PermissionDeniedError: If the check fails.
    """
    if not session.check_permission(permission):
        raise PermissionDeniedError(f"Permission denied: {permission}")
