# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication API endpoints."""

import logging

from fastapi import APIRouter, Depends, Response, status

from sce_portal.api.deps import (
    get_auth_session,
    get_profile_id,
    get_store,
    require_authenticated,
    set_profile_cookie,
)
from sce_portal.exceptions import InvalidCredentialsError
from sce_portal.models import SessionUser
from sce_portal.repositories import Store
from sce_portal.schemas.auth import (
    AuthResponse,
    AuthStatusResponse,
    LoginRequest,
    ProfileUpdate,
    RegisterRequest,
)
from sce_portal.schemas.user import UserResponse
from sce_portal.services import auth_service, rbac_service
from sce_portal.services.session_service import AuthSession

logger = logging.getLogger(__name__)

router = APIRouter()


def build_user_response(store: Store, user: SessionUser) -> UserResponse:
    """Build UserResponse with the permissions of the user's role."""
    role = rbac_service.get_role_by_id(store, user.role_id)
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        role_id=user.role_id,
        role_name=role.name if role else None,
        permissions=role.permissions if role else [],
        created_at=user.created_at,
        last_login=user.last_login,
    )


@router.get("/status", response_model=AuthStatusResponse)
def get_auth_status(
    store: Store = Depends(get_store),
    session: AuthSession = Depends(get_auth_session),
) -> AuthStatusResponse:
    """Get authentication status of the calling profile."""
    return AuthStatusResponse(
        first_run=auth_service.is_first_run(store),
        is_authenticated=session.is_authenticated,
        user=build_user_response(store, session.user) if session.user else None,
    )


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
def register(
    data: RegisterRequest,
    response: Response,
    profile_id: str = Depends(get_profile_id),
    store: Store = Depends(get_store),
    session: AuthSession = Depends(get_auth_session),
) -> AuthResponse:
    """Register a new user and log them in.

    The first account ever registered becomes administrator.
    """
    result = session.register(data.name, data.email, data.password)
    set_profile_cookie(response, profile_id)
    return AuthResponse(
        user=build_user_response(store, result.user), message=result.message
    )


@router.post("/login", response_model=AuthResponse)
def login(
    data: LoginRequest,
    response: Response,
    profile_id: str = Depends(get_profile_id),
    store: Store = Depends(get_store),
    session: AuthSession = Depends(get_auth_session),
) -> AuthResponse:
    """Login with email and password."""
    if not session.login(data.email, data.password):
        raise InvalidCredentialsError("Invalid email or password")

    set_profile_cookie(response, profile_id)
    return AuthResponse(user=build_user_response(store, session.user))


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(session: AuthSession = Depends(get_auth_session)) -> None:
    """Logout the calling profile. Succeeds when already logged out."""
    if session.user:
        logger.info(f"User {session.user.id} logged out")
    session.logout()


@router.get("/me", response_model=AuthResponse)
def get_current_user_info(
    store: Store = Depends(get_store),
    session: AuthSession = Depends(require_authenticated),
) -> AuthResponse:
    """Get current authenticated user."""
    return AuthResponse(user=build_user_response(store, session.user))


@router.put("/me", response_model=AuthResponse)
def update_current_user_profile(
    data: ProfileUpdate,
    store: Store = Depends(get_store),
    session: AuthSession = Depends(require_authenticated),
) -> AuthResponse:
    """Update current user's name and, optionally, password."""
    user = auth_service.update_profile(
        store,
        session.user.id,
        name=data.name,
        current_password=data.current_password,
        new_password=data.new_password,
        confirm_password=data.confirm_password,
    )
    session.refresh_user(user)
    return AuthResponse(
        user=build_user_response(store, session.user),
        message="Profile updated",
    )
