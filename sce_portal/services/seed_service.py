# sce_portal/services/seed_service.py
import logging

from sce_portal.models import Category, Department, Position, Role
from sce_portal.rbac.roles import DEFAULT_DEPARTMENTS, DEFAULT_POSITIONS, DEFAULT_ROLES
from sce_portal.repositories import Store

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    {"id": "research", "name": "Исследования", "color": "bg-blue-600"},
    {"id": "briefing", "name": "Брифинги", "color": "bg-green-600"},
    {"id": "incident", "name": "Инциденты", "color": "bg-red-600"},
    {"id": "protocol", "name": "Протоколы", "color": "bg-purple-600"},
]


def seed_store(store: Store) -> None:
    """Seeds reference collections and creates the empty ones.

    Only collections missing from storage are written, so this function is
    idempotent and never overwrites edited data.
    @param store: Store to seed
    """
    defaults = [
        (store.roles, [Role(**data) for data in DEFAULT_ROLES]),
        (store.departments, [Department(**data) for data in DEFAULT_DEPARTMENTS]),
        (store.positions, [Position(**data) for data in DEFAULT_POSITIONS]),
        (store.categories, [Category(**data) for data in DEFAULT_CATEGORIES]),
        (store.users, []),
        (store.objects, []),
        (store.posts, []),
    ]

    seeded = []
    for repository, records in defaults:
        if not repository.exists():
            repository.replace_all(records)
            seeded.append(repository.key)

    if seeded:
        logger.info(f"Seeded storage keys: {', '.join(seeded)}")
