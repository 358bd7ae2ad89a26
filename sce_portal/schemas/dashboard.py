# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Admin dashboard schemas."""
from sce_portal.schemas.common import CamelModel


class DashboardStats(CamelModel):
    """Record counts shown on the admin panel."""

    users: int
    objects: int
    posts: int
