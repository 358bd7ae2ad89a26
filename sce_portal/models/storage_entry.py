# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Key-value storage table."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sce_portal.models.base import Base, TimestampMixin


class StorageEntry(Base, TimestampMixin):
    """One storage key and its serialized value."""

    __tablename__ = "storage_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
