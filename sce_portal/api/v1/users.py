# sce_portal/api/v1/users.py
"""User management API endpoints."""

from fastapi import APIRouter, Depends, status

from sce_portal.api.deps import get_store, require_permission
from sce_portal.api.v1.auth import build_user_response
from sce_portal.rbac.permissions import ALL
from sce_portal.repositories import Store
from sce_portal.schemas.user import RoleAssignment, UserResponse
from sce_portal.services import user_service
from sce_portal.services.session_service import AuthSession

router = APIRouter()


@router.get(
    "/users",
    response_model=list[UserResponse],
    summary="List all users",
)
def list_users(
    store: Store = Depends(get_store),
    session: AuthSession = Depends(require_permission(ALL)),
) -> list[UserResponse]:
    """Retrieve a list of all users in the system.

    Requires the all permission.
    """
    return [
        build_user_response(store, user)
        for user in user_service.list_users(store, session)
    ]


@router.put(
    "/users/{user_id}/role",
    response_model=UserResponse,
    summary="Change a user's role",
)
def change_user_role(
    user_id: str,
    data: RoleAssignment,
    store: Store = Depends(get_store),
    session: AuthSession = Depends(require_permission(ALL)),
) -> UserResponse:
    """Assign another role to a user.

    Requires the all permission.
    """
    user = user_service.change_role(store, session, user_id, data.role_id)
    return build_user_response(store, user)


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
)
def delete_user(
    user_id: str,
    store: Store = Depends(get_store),
    session: AuthSession = Depends(require_permission(ALL)),
) -> None:
    """Delete a user account. Administrators cannot delete themselves.

    Requires the all permission.
    """
    user_service.delete_user(store, session, user_id)
