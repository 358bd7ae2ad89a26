# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for dashboard_service."""

import pytest

from sce_portal.exceptions import PermissionDeniedError
from sce_portal.schemas.content import PostCreate
from sce_portal.services import dashboard_service, post_service


def test_stats_count_drafts(store, admin_session, reader_session):
    post_service.create_post(
        store,
        admin_session,
        PostCreate(
            title="Draft",
            excerpt="Unfinished briefing text.",
            content="Briefing content that is long enough to be accepted.",
            category_id="briefing",
            read_time=1,
            published=False,
        ),
    )

    stats = dashboard_service.get_stats(store, admin_session)

    assert stats.users == 2
    assert stats.objects == 0
    assert stats.posts == 1


def test_stats_require_admin(store, reader_session):
    with pytest.raises(PermissionDeniedError):
        dashboard_service.get_stats(store, reader_session)
