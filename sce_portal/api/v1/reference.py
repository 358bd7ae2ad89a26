# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Read-only reference data endpoints."""

from fastapi import APIRouter, Depends

from sce_portal.api.deps import get_store
from sce_portal.models import Category, Department, Position, Role
from sce_portal.rbac.permissions import CORE_PERMISSIONS
from sce_portal.repositories import Store
from sce_portal.schemas.user import PermissionResponse
from sce_portal.services import rbac_service

router = APIRouter()


@router.get("/roles", response_model=list[Role])
def list_roles(store: Store = Depends(get_store)) -> list[Role]:
    return rbac_service.get_roles(store)


@router.get("/permissions", response_model=list[PermissionResponse])
def list_permissions() -> list[PermissionResponse]:
    """List the permission vocabulary."""
    return [PermissionResponse(**permission) for permission in CORE_PERMISSIONS]


@router.get("/categories", response_model=list[Category])
def list_categories(store: Store = Depends(get_store)) -> list[Category]:
    return store.categories.list()


@router.get("/departments", response_model=list[Department])
def list_departments(store: Store = Depends(get_store)) -> list[Department]:
    return store.departments.list()


@router.get("/positions", response_model=list[Position])
def list_positions(store: Store = Depends(get_store)) -> list[Position]:
    return store.positions.list()
