# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Service for posts."""

import logging

from sce_portal.exceptions import NotFoundError, PermissionDeniedError, ValidationError
from sce_portal.models import Category, Post
from sce_portal.models.base import utcnow
from sce_portal.rbac.permissions import ALL, CREATE_POST, EDIT_OWN_POST, EDIT_POST
from sce_portal.repositories import Store
from sce_portal.schemas.content import PostCreate, PostUpdate
from sce_portal.services import rbac_service
from sce_portal.services.session_service import AuthSession

logger = logging.getLogger(__name__)


def is_author(session: AuthSession, post: Post) -> bool:
    return session.is_authenticated and session.user.id == post.author_id


def can_view_post(session: AuthSession, post: Post) -> bool:
    """Published posts are public; drafts are visible to admins and the author."""
    if post.published:
        return True
    return session.check_permission(ALL) or is_author(session, post)


def can_edit_post(session: AuthSession, post: Post) -> bool:
    """``edit:post`` edits any post, ``edit:own:post`` only the user's own."""
    if not session.is_authenticated:
        return False
    if session.check_permission(EDIT_POST):
        return True
    return session.check_permission(EDIT_OWN_POST) and is_author(session, post)


def list_posts(
    store: Store,
    session: AuthSession,
    search: str | None = None,
    category_id: str | None = None,
) -> list[Post]:
    """Get posts visible in the listing.

    Drafts are listed for holders of ``all`` only. ``search`` matches the
    title or excerpt case-insensitively.
    """
    posts = store.posts.list()

    if not session.check_permission(ALL):
        posts = [post for post in posts if post.published]

    if search:
        term = search.lower()
        posts = [
            post
            for post in posts
            if term in post.title.lower() or term in post.excerpt.lower()
        ]

    if category_id:
        posts = [post for post in posts if post.category_id == category_id]

    return posts


def get_post(store: Store, session: AuthSession, post_id: str) -> Post:
    """Get a post by id.

    Raises:
        NotFoundError: If the post does not exist or is a draft the session
            may not see.
    """
    post = store.posts.get(post_id)
    if not post or not can_view_post(session, post):
        raise NotFoundError("Post not found")
    return post


def get_category(store: Store, category_id: str) -> Category:
    category = store.categories.get(category_id)
    if not category:
        raise ValidationError(f"Unknown category: {category_id}")
    return category


def create_post(store: Store, session: AuthSession, data: PostCreate) -> Post:
    """Create a post authored by the logged-in user."""
    rbac_service.ensure_permission(session, CREATE_POST)
    get_category(store, data.category_id)

    post = Post(
        id=store.posts.next_timestamp_id("post"),
        title=data.title,
        excerpt=data.excerpt,
        content=data.content,
        category_id=data.category_id,
        author_id=session.user.id,
        author_name=session.user.name,
        date=utcnow(),
        read_time=data.read_time,
        published=data.published,
    )
    store.posts.add(post)
    logger.info(f"Post {post.id} created by {post.author_id}")
    return post


def update_post(
    store: Store, session: AuthSession, post_id: str, data: PostUpdate
) -> Post:
    """Edit a post.

    Raises:
        NotFoundError: If the post does not exist.
        PermissionDeniedError: If the session may not edit this post.
    """
    post = store.posts.get(post_id)
    if not post:
        raise NotFoundError("Post not found")

    if not can_edit_post(session, post):
        raise PermissionDeniedError("Not allowed to edit this post")

    get_category(store, data.category_id)

    post = post.model_copy(
        update={
            "title": data.title,
            "excerpt": data.excerpt,
            "content": data.content,
            "category_id": data.category_id,
            "read_time": data.read_time,
            "published": data.published,
        }
    )
    return store.posts.update(post)


def delete_post(store: Store, session: AuthSession, post_id: str) -> None:
    """Delete a post. Only holders of ``all`` may delete."""
    if not session.check_permission(ALL):
        raise PermissionDeniedError("Only administrators can delete posts")

    if not store.posts.delete(post_id):
        raise NotFoundError("Post not found")
    logger.info(f"Post {post_id} deleted by {session.user.id}")
