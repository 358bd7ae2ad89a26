# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Route guard endpoint for the frontend router."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sce_portal.api.deps import get_auth_session
from sce_portal.guard import evaluate_route, resolve_route
from sce_portal.schemas.guard import RouteAccessResponse
from sce_portal.services.session_service import AuthSession

router = APIRouter()


@router.get("/access", response_model=RouteAccessResponse)
def check_route_access(
    path: str = Query(..., description="View path, e.g. /posts/create"),
    session: AuthSession = Depends(get_auth_session),
) -> RouteAccessResponse:
    """Tell the frontend whether a view may be rendered or where to redirect."""
    route = resolve_route(path)
    if not route:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown route")

    decision = evaluate_route(
        route,
        session.is_loading,
        session.is_authenticated,
        session.check_permission,
        path,
    )
    return RouteAccessResponse(
        path=path,
        access=route.access,
        required_permission=route.permission,
        outcome=decision.outcome,
        redirect_to=decision.redirect_to,
        from_path=decision.from_path,
    )
