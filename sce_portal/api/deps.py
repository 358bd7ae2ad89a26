# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

import re
import uuid
from urllib.parse import quote

from fastapi import Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from sce_portal.config import settings
from sce_portal.database import get_db
from sce_portal.guard import GuardDecision, GuardOutcome, evaluate_access
from sce_portal.repositories import Store
from sce_portal.services.session_service import AuthSession
from sce_portal.storage import DatabaseStorage, KeyValueStorage

PROFILE_ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")


def get_storage(db: Session = Depends(get_db)) -> KeyValueStorage:
    """Get the key-value storage for this request."""
    return DatabaseStorage(db)


def get_store(storage: KeyValueStorage = Depends(get_storage)) -> Store:
    """Get the collection store for this request."""
    return Store(storage)


def get_profile_id(request: Request) -> str:
    """Get the client profile id from its cookie, or mint a new one."""
    profile_id = request.cookies.get(settings.PROFILE_COOKIE_NAME)
    if not profile_id or not PROFILE_ID_PATTERN.match(profile_id):
        profile_id = uuid.uuid4().hex
    return profile_id


def set_profile_cookie(response: Response, profile_id: str) -> None:
    response.set_cookie(
        key=settings.PROFILE_COOKIE_NAME,
        value=profile_id,
        httponly=True,
        secure=settings.PROFILE_COOKIE_SECURE,
        samesite="lax",
        max_age=settings.PROFILE_COOKIE_MAX_AGE,
    )


def get_auth_session(
    profile_id: str = Depends(get_profile_id),
    store: Store = Depends(get_store),
) -> AuthSession:
    """Load the authentication state of the calling profile."""
    session = AuthSession(store, store.session_key(profile_id))
    session.initialize()
    return session


def guard_exception(decision: GuardDecision) -> HTTPException:
    """HTTP counterpart of a guard redirect."""
    if decision.outcome is GuardOutcome.REDIRECT_LOGIN:
        location = decision.redirect_to
        if decision.from_path:
            location = f"{location}?from={quote(decision.from_path, safe='/')}"
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"Location": location},
        )
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Access denied",
        headers={"Location": decision.redirect_to},
    )


def require_authenticated(
    request: Request,
    session: AuthSession = Depends(get_auth_session),
) -> AuthSession:
    """Dependency for views that only need a logged-in user."""
    decision = evaluate_access(
        session.is_loading,
        session.is_authenticated,
        None,
        session.check_permission,
        request.url.path,
    )
    if not decision.allowed:
        raise guard_exception(decision)
    return session


def require_permission(permission: str):
    """Dependency for permission-gated views."""

    def dependency(
        request: Request,
        session: AuthSession = Depends(get_auth_session),
    ) -> AuthSession:
        decision = evaluate_access(
            session.is_loading,
            session.is_authenticated,
            permission,
            session.check_permission,
            request.url.path,
        )
        if not decision.allowed:
            raise guard_exception(decision)
        return session

    return dependency
