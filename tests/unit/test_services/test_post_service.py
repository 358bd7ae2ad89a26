# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for post_service."""

import pytest

from sce_portal.exceptions import NotFoundError, PermissionDeniedError, ValidationError
from sce_portal.models import Role
from sce_portal.schemas.content import PostCreate, PostUpdate
from sce_portal.services import post_service

CONTENT = "Observation log of the anomaly. " * 3


def post_data(**overrides) -> dict:
    data = {
        "title": "Field report",
        "excerpt": "Summary of the latest field report.",
        "content": CONTENT,
        "category_id": "research",
        "read_time": 3,
    }
    data.update(overrides)
    return data


@pytest.fixture
def author_sessions(store, admin_session, make_session):
    """Two users whose role may only edit their own posts."""
    store.roles.add(
        Role(
            id="author",
            name="Author",
            permissions=["create:post", "edit:own:post"],
            level=3,
        )
    )
    sessions = []
    for name in ("first", "second"):
        session = make_session(store, name)
        session.register(name.title(), f"{name}@example.com", "secret1")
        user = store.users.get(session.user.id)
        user = store.users.update(user.model_copy(update={"role_id": "author"}))
        session.refresh_user(user)
        sessions.append(session)
    return sessions


def test_create_post(store, researcher_session):
    post = post_service.create_post(store, researcher_session, PostCreate(**post_data()))

    assert post.id.startswith("post-")
    assert post.author_id == researcher_session.user.id
    assert post.author_name == "Researcher"
    assert post.published is True
    assert store.posts.get(post.id) == post


def test_create_post_requires_permission(store, reader_session):
    with pytest.raises(PermissionDeniedError):
        post_service.create_post(store, reader_session, PostCreate(**post_data()))


def test_create_post_unknown_category(store, admin_session):
    with pytest.raises(ValidationError):
        post_service.create_post(
            store, admin_session, PostCreate(**post_data(category_id="gossip"))
        )
    assert store.posts.count() == 0


def test_list_posts_hides_drafts(store, admin_session, reader_session, researcher_session):
    post_service.create_post(store, researcher_session, PostCreate(**post_data()))
    post_service.create_post(
        store,
        researcher_session,
        PostCreate(**post_data(title="Draft", published=False)),
    )

    assert len(post_service.list_posts(store, admin_session)) == 2
    assert [p.title for p in post_service.list_posts(store, reader_session)] == ["Field report"]
    assert [p.title for p in post_service.list_posts(store, researcher_session)] == [
        "Field report"
    ]


def test_list_posts_filters(store, admin_session):
    post_service.create_post(store, admin_session, PostCreate(**post_data()))
    post_service.create_post(
        store,
        admin_session,
        PostCreate(**post_data(title="Breach protocol", category_id="protocol")),
    )

    by_search = post_service.list_posts(store, admin_session, search="breach")
    by_category = post_service.list_posts(store, admin_session, category_id="research")

    assert [p.title for p in by_search] == ["Breach protocol"]
    assert [p.title for p in by_category] == ["Field report"]


def test_get_draft_visibility(store, admin_session, reader_session, researcher_session):
    draft = post_service.create_post(
        store, researcher_session, PostCreate(**post_data(published=False))
    )

    assert post_service.get_post(store, researcher_session, draft.id) == draft
    assert post_service.get_post(store, admin_session, draft.id) == draft
    with pytest.raises(NotFoundError):
        post_service.get_post(store, reader_session, draft.id)


def test_get_post_not_found(store, reader_session):
    with pytest.raises(NotFoundError):
        post_service.get_post(store, reader_session, "post-1")


def test_edit_post_permission_edits_any_post(store, admin_session, researcher_session):
    post = post_service.create_post(store, admin_session, PostCreate(**post_data()))

    updated = post_service.update_post(
        store, researcher_session, post.id, PostUpdate(**post_data(title="Edited"))
    )

    assert updated.title == "Edited"
    assert updated.author_id == admin_session.user.id
    assert store.posts.get(post.id).title == "Edited"


def test_edit_own_post_only(store, author_sessions):
    first, second = author_sessions
    post = post_service.create_post(store, first, PostCreate(**post_data()))

    assert post_service.can_edit_post(first, post) is True
    assert post_service.can_edit_post(second, post) is False

    post_service.update_post(store, first, post.id, PostUpdate(**post_data(title="Mine")))
    with pytest.raises(PermissionDeniedError):
        post_service.update_post(store, second, post.id, PostUpdate(**post_data()))

    assert store.posts.get(post.id).title == "Mine"


def test_reader_cannot_edit(store, admin_session, reader_session):
    post = post_service.create_post(store, admin_session, PostCreate(**post_data()))

    with pytest.raises(PermissionDeniedError):
        post_service.update_post(store, reader_session, post.id, PostUpdate(**post_data()))


def test_update_missing_post(store, admin_session):
    with pytest.raises(NotFoundError):
        post_service.update_post(store, admin_session, "post-1", PostUpdate(**post_data()))


def test_delete_post_admin_only(store, admin_session, researcher_session):
    post = post_service.create_post(store, researcher_session, PostCreate(**post_data()))

    with pytest.raises(PermissionDeniedError):
        post_service.delete_post(store, researcher_session, post.id)

    post_service.delete_post(store, admin_session, post.id)
    assert store.posts.count() == 0
