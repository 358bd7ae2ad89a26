# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Whole-collection repositories on top of the key-value storage."""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable
from typing import Generic, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from sce_portal.config import settings
from sce_portal.exceptions import NotFoundError
from sce_portal.models import (
    Category,
    Collection,
    Department,
    Position,
    Post,
    Record,
    Role,
    SCEObject,
    User,
)
from sce_portal.storage import KeyValueStorage

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)

OBJECT_ID_PATTERN = re.compile(r"^sce-(\d+)$")


class CollectionRepository(Generic[R]):
    """An ordered collection of records stored under a single key.

    Reads parse the whole collection, writes serialize the whole collection
    back. A value that cannot be parsed reads as an empty collection.
    """

    def __init__(self, storage: KeyValueStorage, key: str, record_type: type[R]):
        self.storage = storage
        self.key = key
        self.record_type = record_type
        self._adapter = TypeAdapter(list[record_type])

    def exists(self) -> bool:
        return self.storage.get_item(self.key) is not None

    def list(self) -> list[R]:
        raw = self.storage.get_item(self.key)
        if raw is None:
            return []
        try:
            return self._adapter.validate_json(raw)
        except PydanticValidationError as e:
            logger.warning(f"Unreadable collection {self.key!r}, treating as empty: {e}")
            return []

    def replace_all(self, records: list[R]) -> None:
        payload = self._adapter.dump_json(records, by_alias=True)
        self.storage.set_item(self.key, payload.decode("utf-8"))

    def count(self) -> int:
        return len(self.list())

    def get(self, record_id: str) -> R | None:
        return next((r for r in self.list() if r.id == record_id), None)

    def find(self, predicate: Callable[[R], bool]) -> R | None:
        """Return the first record matching ``predicate``."""
        return next((r for r in self.list() if predicate(r)), None)

    def next_timestamp_id(self, prefix: str) -> str:
        """Build a ``<prefix>-<unix millis>`` id that is not taken yet."""
        stamp = int(time.time() * 1000)
        taken = {r.id for r in self.list()}
        while f"{prefix}-{stamp}" in taken:
            stamp += 1
        return f"{prefix}-{stamp}"

    def add(self, record: R) -> R:
        records = self.list()
        records.append(record)
        self.replace_all(records)
        return record

    def update(self, record: R) -> R:
        """Replace the stored record carrying the same id.

        Raises:
            NotFoundError: If no record has that id.
        """
        records = self.list()
        for index, existing in enumerate(records):
            if existing.id == record.id:
                records[index] = record
                self.replace_all(records)
                return record
        raise NotFoundError(f"{self.record_type.__name__} {record.id} not found")

    def delete(self, record_id: str) -> bool:
        """Remove a record. Returns True if removed, False if not found."""
        records = self.list()
        remaining = [r for r in records if r.id != record_id]
        if len(remaining) == len(records):
            return False
        self.replace_all(remaining)
        return True


class Store:
    """All portal collections, keyed under a common prefix."""

    def __init__(self, storage: KeyValueStorage, prefix: str | None = None):
        self.storage = storage
        self.prefix = settings.STORAGE_PREFIX if prefix is None else prefix

        self.users = self._repository(Collection.USERS, User)
        self.roles = self._repository(Collection.ROLES, Role)
        self.objects = self._repository(Collection.OBJECTS, SCEObject)
        self.posts = self._repository(Collection.POSTS, Post)
        self.categories = self._repository(Collection.CATEGORIES, Category)
        self.departments = self._repository(Collection.DEPARTMENTS, Department)
        self.positions = self._repository(Collection.POSITIONS, Position)

    def _repository(
        self, collection: Collection, record_type: type[R]
    ) -> CollectionRepository[R]:
        return CollectionRepository(self.storage, self.key(collection.value), record_type)

    def key(self, name: str) -> str:
        """Full storage key for ``name``."""
        return f"{self.prefix}{name}"

    def session_key(self, profile_id: str) -> str:
        """Storage key of the session record for one client profile."""
        return self.key(f"current-user:{profile_id}")

    def get_user_by_email(self, email: str) -> User | None:
        return self.users.find(lambda u: u.email == email)

    def next_object_id(self) -> str:
        """Next free object id, ``sce-NNN``."""
        highest = 0
        for obj in self.objects.list():
            match = OBJECT_ID_PATTERN.match(obj.id)
            if match:
                highest = max(highest, int(match.group(1)))
        return f"sce-{highest + 1:03d}"
