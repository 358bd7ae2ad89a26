# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Route guard schemas."""
from typing import Optional

from sce_portal.guard import GuardOutcome, RouteAccess
from sce_portal.schemas.common import CamelModel


class RouteAccessResponse(CamelModel):
    """Guard decision for one view."""

    path: str
    access: RouteAccess
    required_permission: Optional[str] = None
    outcome: GuardOutcome
    redirect_to: Optional[str] = None
    from_path: Optional[str] = None
