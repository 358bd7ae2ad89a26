# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Admin panel API endpoints."""

from fastapi import APIRouter, Depends

from sce_portal.api.deps import get_store, require_permission
from sce_portal.rbac.permissions import ALL
from sce_portal.repositories import Store
from sce_portal.schemas.dashboard import DashboardStats
from sce_portal.services import dashboard_service
from sce_portal.services.session_service import AuthSession

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
def get_stats(
    store: Store = Depends(get_store),
    session: AuthSession = Depends(require_permission(ALL)),
) -> DashboardStats:
    """Record counts for the admin panel."""
    return dashboard_service.get_stats(store, session)
