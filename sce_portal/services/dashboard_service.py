# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Dashboard service for the admin panel."""

from sce_portal.rbac.permissions import ALL
from sce_portal.repositories import Store
from sce_portal.schemas.dashboard import DashboardStats
from sce_portal.services import rbac_service
from sce_portal.services.session_service import AuthSession


def get_stats(store: Store, session: AuthSession) -> DashboardStats:
    """Count users, objects and posts (drafts included)."""
    rbac_service.ensure_permission(session, ALL)
    return DashboardStats(
        users=store.users.count(),
        objects=store.objects.count(),
        posts=store.posts.count(),
    )
