# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Post API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from sce_portal.api.deps import (
    get_auth_session,
    get_store,
    require_authenticated,
    require_permission,
)
from sce_portal.models import Post
from sce_portal.rbac.permissions import ALL, CREATE_POST
from sce_portal.repositories import Store
from sce_portal.schemas.content import PostCreate, PostUpdate
from sce_portal.services import post_service
from sce_portal.services.session_service import AuthSession

router = APIRouter()


@router.get("", response_model=list[Post])
def list_posts(
    search: Optional[str] = Query(None, description="Match title or excerpt"),
    category: Optional[str] = Query(None, description="Category id"),
    store: Store = Depends(get_store),
    session: AuthSession = Depends(get_auth_session),
) -> list[Post]:
    """List posts. Drafts are only listed for administrators."""
    return post_service.list_posts(store, session, search=search, category_id=category)


@router.get("/{post_id}", response_model=Post)
def get_post(
    post_id: str,
    store: Store = Depends(get_store),
    session: AuthSession = Depends(get_auth_session),
) -> Post:
    """Get a post. Drafts are visible to administrators and their author."""
    return post_service.get_post(store, session, post_id)


@router.post("", response_model=Post, status_code=status.HTTP_201_CREATED)
def create_post(
    data: PostCreate,
    store: Store = Depends(get_store),
    session: AuthSession = Depends(require_permission(CREATE_POST)),
) -> Post:
    """Create a post. Requires create:post permission."""
    return post_service.create_post(store, session, data)


@router.put("/{post_id}", response_model=Post)
def update_post(
    post_id: str,
    data: PostUpdate,
    store: Store = Depends(get_store),
    session: AuthSession = Depends(require_authenticated),
) -> Post:
    """Edit a post.

    Requires edit:post, or edit:own:post when editing one's own post.
    """
    return post_service.update_post(store, session, post_id, data)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: str,
    store: Store = Depends(get_store),
    session: AuthSession = Depends(require_permission(ALL)),
) -> None:
    """Delete a post. Administrators only."""
    post_service.delete_post(store, session, post_id)
