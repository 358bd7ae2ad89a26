"""Services package."""
from sce_portal.services import (
    auth_service,
    dashboard_service,
    object_service,
    post_service,
    rbac_service,
    seed_service,
    session_service,
    user_service,
)

__all__ = [
    "auth_service",
    "dashboard_service",
    "object_service",
    "post_service",
    "rbac_service",
    "seed_service",
    "session_service",
    "user_service",
]
