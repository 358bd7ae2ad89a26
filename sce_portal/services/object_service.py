# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Service for SCE object records."""

import logging

from sce_portal.exceptions import NotFoundError, PermissionDeniedError
from sce_portal.models import ObjectClass, SCEObject
from sce_portal.models.base import utcnow
from sce_portal.rbac.permissions import ALL, CREATE_OBJECT, EDIT_OBJECT
from sce_portal.repositories import Store
from sce_portal.schemas.content import ObjectCreate, ObjectUpdate
from sce_portal.services import rbac_service
from sce_portal.services.session_service import AuthSession

logger = logging.getLogger(__name__)

OBJECT_NAME_PREFIX = "SCE-"


def normalize_object_name(name: str) -> str:
    """Make sure an object name reads ``SCE-<designation>``."""
    if name.startswith(OBJECT_NAME_PREFIX):
        return name
    return f"{OBJECT_NAME_PREFIX}{name}"


def list_objects(
    store: Store,
    search: str | None = None,
    object_class: ObjectClass | None = None,
) -> list[SCEObject]:
    """Get objects, optionally filtered.

    Args:
        store: Data store
        search: Case-insensitive substring of name or description
        object_class: Only objects of this class

    Returns:
        Matching objects in stored order
    """
    objects = store.objects.list()

    if search:
        term = search.lower()
        objects = [
            obj
            for obj in objects
            if term in obj.name.lower() or term in obj.description.lower()
        ]

    if object_class:
        objects = [obj for obj in objects if obj.object_class == object_class]

    return objects


def get_object(store: Store, object_id: str) -> SCEObject:
    """Get an object by id.

    Raises:
        NotFoundError: If the object does not exist.
    """
    obj = store.objects.get(object_id)
    if not obj:
        raise NotFoundError("Object not found")
    return obj


def create_object(store: Store, session: AuthSession, data: ObjectCreate) -> SCEObject:
    """Register a new object on behalf of the logged-in user."""
    rbac_service.ensure_permission(session, CREATE_OBJECT)

    now = utcnow()
    obj = SCEObject(
        id=store.next_object_id(),
        name=normalize_object_name(data.name),
        object_class=data.object_class,
        description=data.description,
        containment=data.containment,
        procedures=data.procedures,
        discovery=data.discovery,
        addenda=data.addenda,
        created_by=session.user.id,
        created_at=now,
        updated_at=now,
    )
    store.objects.add(obj)
    logger.info(f"Object {obj.id} ({obj.name}) created by {obj.created_by}")
    return obj


def update_object(
    store: Store, session: AuthSession, object_id: str, data: ObjectUpdate
) -> SCEObject:
    """Replace the editable fields of an object and stamp ``updatedAt``."""
    rbac_service.ensure_permission(session, EDIT_OBJECT)

    obj = get_object(store, object_id)
    obj = obj.model_copy(
        update={
            "name": normalize_object_name(data.name),
            "object_class": data.object_class,
            "description": data.description,
            "containment": data.containment,
            "procedures": data.procedures,
            "discovery": data.discovery,
            "addenda": data.addenda,
            "updated_at": utcnow(),
        }
    )
    return store.objects.update(obj)


def delete_object(store: Store, session: AuthSession, object_id: str) -> None:
    """Delete an object. Only holders of ``all`` may delete."""
    if not session.check_permission(ALL):
        raise PermissionDeniedError("Only administrators can delete objects")

    if not store.objects.delete(object_id):
        raise NotFoundError("Object not found")
    logger.info(f"Object {object_id} deleted by {session.user.id}")
