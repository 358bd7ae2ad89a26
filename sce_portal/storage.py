# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Key-value storage backing all portal state."""

from abc import ABC, abstractmethod

from sqlalchemy.orm import Session

from sce_portal.models.storage_entry import StorageEntry


class KeyValueStorage(ABC):
    """Flat string-to-string storage.

    Every write completes before the call returns. There is no transaction
    spanning several calls, so concurrent read-modify-write cycles on the
    same key end with the last write winning.
    """

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the value stored under ``key`` or None."""
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove ``key``. Removing a missing key is a no-op."""
        ...

    @abstractmethod
    def keys(self) -> list[str]:
        """List all stored keys."""
        ...


class DatabaseStorage(KeyValueStorage):
    """Storage kept in the ``storage_entries`` table, one row per key."""

    def __init__(self, db: Session):
        self.db = db

    def get_item(self, key: str) -> str | None:
        entry = self.db.get(StorageEntry, key)
        return entry.value if entry else None

    def set_item(self, key: str, value: str) -> None:
        entry = self.db.get(StorageEntry, key)
        if entry:
            entry.value = value
        else:
            self.db.add(StorageEntry(key=key, value=value))
        self.db.commit()

    def remove_item(self, key: str) -> None:
        entry = self.db.get(StorageEntry, key)
        if entry:
            self.db.delete(entry)
            self.db.commit()

    def keys(self) -> list[str]:
        return [
            key
            for (key,) in self.db.query(StorageEntry.key).order_by(StorageEntry.key)
        ]
