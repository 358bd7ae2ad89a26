# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role record."""

from sce_portal.models.base import Record


class Role(Record):
    """Named bundle of permission strings.

    ``level`` is stored for display and ordering only; permission checks
    never consult it.
    """

    name: str
    permissions: list[str]
    level: int = 0
