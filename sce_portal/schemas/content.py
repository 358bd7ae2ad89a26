# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""SCE object and post schemas."""
from typing import Optional

from pydantic import Field

from sce_portal.models.enums import ObjectClass
from sce_portal.schemas.common import CamelModel


class ObjectBase(CamelModel):
    """Fields of the object form."""

    name: str = Field(..., min_length=1, max_length=100)
    object_class: ObjectClass = Field(..., alias="class")
    description: str = Field(..., min_length=10)
    containment: str = Field(..., min_length=10)
    procedures: str = Field(..., min_length=10)
    discovery: str = Field(..., min_length=10)
    addenda: Optional[str] = None


class ObjectCreate(ObjectBase):
    """Schema for registering a new object."""


class ObjectUpdate(ObjectBase):
    """Schema for editing an object. The whole form is resubmitted."""


class PostBase(CamelModel):
    """Fields of the post form."""

    title: str = Field(..., min_length=1, max_length=200)
    excerpt: str = Field(..., min_length=10)
    content: str = Field(..., min_length=50)
    category_id: str = Field(..., min_length=1)
    read_time: int = Field(..., ge=1)
    published: bool = True


class PostCreate(PostBase):
    """Schema for creating a post."""


class PostUpdate(PostBase):
    """Schema for editing a post. The whole form is resubmitted."""
