# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""SCE object API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from sce_portal.api.deps import get_store, require_permission
from sce_portal.models import ObjectClass, SCEObject
from sce_portal.rbac.permissions import ALL, CREATE_OBJECT, EDIT_OBJECT
from sce_portal.repositories import Store
from sce_portal.schemas.content import ObjectCreate, ObjectUpdate
from sce_portal.services import object_service
from sce_portal.services.session_service import AuthSession

router = APIRouter()


@router.get("", response_model=list[SCEObject])
def list_objects(
    search: Optional[str] = Query(None, description="Match name or description"),
    object_class: Optional[ObjectClass] = Query(None, alias="class"),
    store: Store = Depends(get_store),
) -> list[SCEObject]:
    """List objects. Public."""
    return object_service.list_objects(store, search=search, object_class=object_class)


@router.get("/{object_id}", response_model=SCEObject)
def get_object(object_id: str, store: Store = Depends(get_store)) -> SCEObject:
    """Get a single object. Public."""
    return object_service.get_object(store, object_id)


@router.post("", response_model=SCEObject, status_code=status.HTTP_201_CREATED)
def create_object(
    data: ObjectCreate,
    store: Store = Depends(get_store),
    session: AuthSession = Depends(require_permission(CREATE_OBJECT)),
) -> SCEObject:
    """Register a new object. Requires create:object permission."""
    return object_service.create_object(store, session, data)


@router.put("/{object_id}", response_model=SCEObject)
def update_object(
    object_id: str,
    data: ObjectUpdate,
    store: Store = Depends(get_store),
    session: AuthSession = Depends(require_permission(EDIT_OBJECT)),
) -> SCEObject:
    """Edit an object. Requires edit:object permission."""
    return object_service.update_object(store, session, object_id, data)


@router.delete("/{object_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_object(
    object_id: str,
    store: Store = Depends(get_store),
    session: AuthSession = Depends(require_permission(ALL)),
) -> None:
    """Delete an object. Administrators only."""
    object_service.delete_object(store, session, object_id)
