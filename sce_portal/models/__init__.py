# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Stored record types and the storage table."""

from sce_portal.models.base import Base, Record, TimestampMixin
from sce_portal.models.content import Category, Post, SCEObject
from sce_portal.models.enums import Collection, ObjectClass
from sce_portal.models.organization import Department, Position
from sce_portal.models.role import Role
from sce_portal.models.storage_entry import StorageEntry
from sce_portal.models.user import SessionUser, User

__all__ = [
    "Base",
    "Category",
    "Collection",
    "Department",
    "ObjectClass",
    "Position",
    "Post",
    "Record",
    "Role",
    "SCEObject",
    "SessionUser",
    "StorageEntry",
    "TimestampMixin",
    "User",
]
