# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for stored records."""

from enum import Enum


class ObjectClass(str, Enum):
    """Containment class of an SCE object."""

    SAFE = "Безопасный"
    EUCLID = "Евклид"
    KETER = "Кетер"
    THAUMIEL = "Таумиэль"
    NEUTRALIZED = "Нейтрализованный"


class Collection(str, Enum):
    """Names of the stored collections."""

    USERS = "users"
    ROLES = "roles"
    OBJECTS = "objects"
    POSTS = "posts"
    CATEGORIES = "categories"
    DEPARTMENTS = "departments"
    POSITIONS = "positions"
