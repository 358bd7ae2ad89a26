# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Organisation reference data: departments and positions."""

from sce_portal.models.base import Record


class Department(Record):
    name: str
    description: str


class Position(Record):
    name: str
    department_id: str
    permissions: list[str]
    level: int = 0
