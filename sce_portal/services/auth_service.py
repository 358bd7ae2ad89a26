# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication service."""

import logging

from sce_portal.exceptions import (
    DuplicateEmailError,
    NotFoundError,
    ValidationError,
)
from sce_portal.models import User
from sce_portal.models.base import utcnow
from sce_portal.rbac.roles import ADMIN_ROLE_ID, DEFAULT_ROLE_ID
from sce_portal.repositories import Store
from sce_portal.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)

FIRST_RUN_COMPLETE_KEY = "first-run-complete"


def get_first_run_complete_setting(store: Store) -> bool:
    """Check if the first registration has already happened."""
    return store.storage.get_item(store.key(FIRST_RUN_COMPLETE_KEY)) == "true"


def set_first_run_complete(store: Store) -> None:
    """Mark first run as complete."""
    store.storage.set_item(store.key(FIRST_RUN_COMPLETE_KEY), "true")


def is_first_run(store: Store) -> bool:
    """Check if this is the first run (no user was ever registered)."""
    return store.users.count() == 0 and not get_first_run_complete_setting(store)


def registration_message(role_id: str) -> str:
    if role_id == ADMIN_ROLE_ID:
        return "You are registered as an administrator with full access to the system"
    return "You are successfully registered as a reader"


def register_user(store: Store, name: str, email: str, password: str) -> User:
    """Register a new user. First user ever becomes admin.

    Raises:
        DuplicateEmailError: If the email is already registered.
    """
    if get_user_by_email(store, email):
        raise DuplicateEmailError("A user with this email already exists")

    first_run = is_first_run(store)
    user = User(
        id=store.users.next_timestamp_id("user"),
        name=name,
        email=email,
        password=get_password_hash(password),
        role_id=ADMIN_ROLE_ID if first_run else DEFAULT_ROLE_ID,
        created_at=utcnow(),
    )
    store.users.add(user)

    if first_run:
        set_first_run_complete(store)

    logger.info(f"Registered {email} with role {user.role_id}")
    return user


def verify_credentials(store: Store, email: str, password: str) -> User | None:
    """Look up a user by email and check the password. Writes nothing.

    Returns None for an unknown email and for a wrong password alike.
    """
    user = get_user_by_email(store, email)
    if not user or not verify_password(password, user.password):
        logger.info(f"Failed login for {email}")
        return None
    return user


def record_login(store: Store, user: User) -> User:
    """Stamp ``lastLogin`` on a verified user and store it."""
    user = user.model_copy(update={"last_login": utcnow()})
    store.users.update(user)
    logger.info(f"User {user.id} logged in")
    return user


def authenticate(store: Store, email: str, password: str) -> User | None:
    """Authenticate a user by email and password and stamp ``lastLogin``."""
    user = verify_credentials(store, email, password)
    if not user:
        return None
    return record_login(store, user)


def update_profile(
    store: Store,
    user_id: str,
    name: str,
    current_password: str,
    new_password: str | None = None,
    confirm_password: str | None = None,
) -> User:
    """Update name and optionally password of a user.

    Raises:
        NotFoundError: If the user no longer exists.
        ValidationError: If ``current_password`` does not match, or the new
            password and its confirmation differ.
    """
    user = get_user_by_id(store, user_id)
    if not user:
        raise NotFoundError("User not found")

    if not verify_password(current_password, user.password):
        raise ValidationError("Current password is incorrect")

    updates: dict = {"name": name}
    if new_password:
        if new_password != confirm_password:
            raise ValidationError("Passwords do not match")
        updates["password"] = get_password_hash(new_password)

    user = user.model_copy(update=updates)
    store.users.update(user)
    return user


def get_user_by_id(store: Store, user_id: str) -> User | None:
    """Get a user by ID."""
    return store.users.get(user_id)


def get_user_by_email(store: Store, email: str) -> User | None:
    """Get a user by email."""
    return store.get_user_by_email(email)
