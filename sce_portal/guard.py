# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Route guard for portal views.

The guard is a pure function of the session state. It keeps no state of its
own and is evaluated again for every request.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from sce_portal.rbac.permissions import ALL, CREATE_OBJECT, CREATE_POST, EDIT_OBJECT

LOGIN_PATH = "/login"
ACCESS_DENIED_PATH = "/access-denied"


class GuardOutcome(str, Enum):
    LOADING = "loading"
    REDIRECT_LOGIN = "redirect_login"
    REDIRECT_DENIED = "redirect_denied"
    ALLOW = "allow"


class RouteAccess(str, Enum):
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    PERMISSION = "permission"


@dataclass(frozen=True)
class GuardDecision:
    outcome: GuardOutcome
    redirect_to: str | None = None
    from_path: str | None = None

    @property
    def allowed(self) -> bool:
        return self.outcome is GuardOutcome.ALLOW


@dataclass(frozen=True)
class Route:
    """A view of the portal and what it takes to open it."""

    pattern: str
    access: RouteAccess = RouteAccess.PUBLIC
    permission: str | None = None

    @property
    def regex(self) -> re.Pattern[str]:
        return re.compile("^" + re.sub(r"\{[^/]+\}", "[^/]+", self.pattern) + "/?$")


# Static segments must come before parameterized ones sharing a prefix
# ("/objects/create" before "/objects/{id}").
ROUTES = [
    Route("/"),
    Route(LOGIN_PATH),
    Route("/register"),
    Route("/about"),
    Route("/privacy"),
    Route(ACCESS_DENIED_PATH),
    Route("/profile", RouteAccess.AUTHENTICATED),
    Route("/objects"),
    Route("/objects/create", RouteAccess.PERMISSION, CREATE_OBJECT),
    Route("/objects/edit/{id}", RouteAccess.PERMISSION, EDIT_OBJECT),
    Route("/objects/{id}"),
    Route("/posts"),
    Route("/posts/create", RouteAccess.PERMISSION, CREATE_POST),
    # Post ownership is checked when saving, not by the guard.
    Route("/posts/edit/{id}", RouteAccess.AUTHENTICATED),
    Route("/posts/{id}"),
    Route("/admin", RouteAccess.PERMISSION, ALL),
    Route("/admin/users", RouteAccess.PERMISSION, ALL),
]


def resolve_route(path: str) -> Route | None:
    """Find the route entry matching a concrete path."""
    for route in ROUTES:
        if route.regex.match(path):
            return route
    return None


def evaluate_access(
    is_loading: bool,
    is_authenticated: bool,
    required_permission: str | None,
    check_permission: Callable[[str], bool],
    requested_path: str | None = None,
) -> GuardDecision:
    """Decide whether a protected view may be shown.

    Evaluated in order, first match wins: still loading, not logged in,
    missing the required permission, allowed.
    """
    if is_loading:
        return GuardDecision(GuardOutcome.LOADING)

    if not is_authenticated:
        return GuardDecision(
            GuardOutcome.REDIRECT_LOGIN,
            redirect_to=LOGIN_PATH,
            from_path=requested_path,
        )

    if required_permission and not check_permission(required_permission):
        return GuardDecision(GuardOutcome.REDIRECT_DENIED, redirect_to=ACCESS_DENIED_PATH)

    return GuardDecision(GuardOutcome.ALLOW)


def evaluate_route(
    route: Route,
    is_loading: bool,
    is_authenticated: bool,
    check_permission: Callable[[str], bool],
    requested_path: str | None = None,
) -> GuardDecision:
    """Apply the guard to a route entry. Public routes are never guarded."""
    if route.access is RouteAccess.PUBLIC:
        return GuardDecision(GuardOutcome.ALLOW)
    return evaluate_access(
        is_loading,
        is_authenticated,
        route.permission,
        check_permission,
        requested_path or route.pattern,
    )
