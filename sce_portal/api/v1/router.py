# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from sce_portal.api.v1 import admin, auth, objects, posts, reference, routes, users

api_router = APIRouter()

# Auth routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Route guard
api_router.include_router(routes.router, prefix="/routes", tags=["routes"])

# Content routes
api_router.include_router(objects.router, prefix="/objects", tags=["objects"])
api_router.include_router(posts.router, prefix="/posts", tags=["posts"])

# Admin panel
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])

# User management routes
api_router.include_router(users.router, tags=["users"])

# Roles, categories, departments, positions
api_router.include_router(reference.router, tags=["reference"])
