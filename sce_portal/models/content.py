# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Content records: SCE objects, posts and post categories."""

from datetime import datetime

from pydantic import Field

from sce_portal.models.base import Record
from sce_portal.models.enums import ObjectClass


class SCEObject(Record):
    """A catalogued anomaly."""

    name: str
    object_class: ObjectClass = Field(alias="class")
    description: str
    containment: str
    procedures: str
    discovery: str
    addenda: str | None = None
    created_by: str
    created_at: datetime
    updated_at: datetime


class Post(Record):
    """An article; unpublished posts are drafts."""

    title: str
    excerpt: str
    content: str
    category_id: str
    author_id: str
    author_name: str
    date: datetime
    read_time: int
    published: bool = True


class Category(Record):
    """Post category."""

    name: str
    color: str
