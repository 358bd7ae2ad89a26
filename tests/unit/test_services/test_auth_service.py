# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for auth_service."""

import pytest

from sce_portal.exceptions import DuplicateEmailError, NotFoundError, ValidationError
from sce_portal.security import verify_password
from sce_portal.services import auth_service


def test_is_first_run_true_when_no_users(store):
    assert auth_service.is_first_run(store) is True


def test_is_first_run_false_when_user_exists(store):
    auth_service.register_user(store, "Alice", "alice@example.com", "secret1")
    assert auth_service.is_first_run(store) is False


def test_first_run_complete_setting(store):
    assert auth_service.get_first_run_complete_setting(store) is False
    auth_service.set_first_run_complete(store)
    assert auth_service.get_first_run_complete_setting(store) is True


def test_register_user_first_run_creates_admin(store):
    user = auth_service.register_user(store, "Alice", "alice@example.com", "secret1")

    assert user.role_id == "admin"
    assert user.id.startswith("user-")
    assert user.last_login is None
    assert auth_service.get_first_run_complete_setting(store) is True


def test_register_user_after_first_run(store):
    auth_service.register_user(store, "Alice", "alice@example.com", "secret1")
    user = auth_service.register_user(store, "Bob", "bob@example.com", "secret2")

    assert user.role_id == "reader"
    assert store.users.count() == 2


def test_register_after_all_users_deleted_is_not_admin(store):
    alice = auth_service.register_user(store, "Alice", "alice@example.com", "secret1")
    store.users.delete(alice.id)

    user = auth_service.register_user(store, "Bob", "bob@example.com", "secret2")

    assert user.role_id == "reader"


def test_register_user_duplicate_email(store):
    auth_service.register_user(store, "Alice", "alice@example.com", "secret1")

    with pytest.raises(DuplicateEmailError):
        auth_service.register_user(store, "Other", "alice@example.com", "secret2")

    assert store.users.count() == 1


def test_register_user_hashes_password(store):
    user = auth_service.register_user(store, "Alice", "alice@example.com", "secret1")

    assert user.password != "secret1"
    assert verify_password("secret1", user.password)


def test_registration_message():
    assert "administrator" in auth_service.registration_message("admin")
    assert "reader" in auth_service.registration_message("reader")


def test_authenticate_success_stamps_last_login(store):
    created = auth_service.register_user(store, "Alice", "alice@example.com", "secret1")

    user = auth_service.authenticate(store, "alice@example.com", "secret1")

    assert user is not None
    assert user.id == created.id
    assert user.last_login is not None
    assert store.users.get(created.id).last_login == user.last_login


def test_authenticate_wrong_password_writes_nothing(store):
    auth_service.register_user(store, "Alice", "alice@example.com", "secret1")
    before = store.storage.get_item(store.users.key)

    assert auth_service.authenticate(store, "alice@example.com", "wrong!") is None
    assert store.storage.get_item(store.users.key) == before


def test_authenticate_unknown_email(store):
    assert auth_service.authenticate(store, "nobody@example.com", "secret1") is None


def test_authenticate_email_is_case_sensitive(store):
    auth_service.register_user(store, "Alice", "alice@example.com", "secret1")
    assert auth_service.authenticate(store, "Alice@example.com", "secret1") is None


def test_update_profile_name_only(store):
    user = auth_service.register_user(store, "Alice", "alice@example.com", "secret1")

    updated = auth_service.update_profile(store, user.id, "Alice B.", "secret1")

    assert updated.name == "Alice B."
    assert updated.password == user.password
    assert store.users.get(user.id).name == "Alice B."


def test_update_profile_changes_password(store):
    user = auth_service.register_user(store, "Alice", "alice@example.com", "secret1")

    auth_service.update_profile(
        store, user.id, "Alice", "secret1", new_password="newpass", confirm_password="newpass"
    )

    assert auth_service.authenticate(store, "alice@example.com", "newpass") is not None
    assert auth_service.authenticate(store, "alice@example.com", "secret1") is None


def test_update_profile_wrong_current_password(store):
    user = auth_service.register_user(store, "Alice", "alice@example.com", "secret1")

    with pytest.raises(ValidationError):
        auth_service.update_profile(store, user.id, "Alice", "wrong!")


def test_update_profile_password_mismatch(store):
    user = auth_service.register_user(store, "Alice", "alice@example.com", "secret1")

    with pytest.raises(ValidationError):
        auth_service.update_profile(
            store, user.id, "Alice", "secret1", new_password="newpass", confirm_password="other"
        )


def test_update_profile_missing_user(store):
    with pytest.raises(NotFoundError):
        auth_service.update_profile(store, "user-1", "Ghost", "secret1")


def test_verify_credentials_writes_nothing(store):
    auth_service.register_user(store, "Alice", "alice@example.com", "secret1")
    before = store.storage.get_item(store.users.key)

    user = auth_service.verify_credentials(store, "alice@example.com", "secret1")

    assert user is not None
    assert user.last_login is None
    assert store.storage.get_item(store.users.key) == before


def test_record_login_stamps_last_login(store):
    created = auth_service.register_user(store, "Alice", "alice@example.com", "secret1")

    user = auth_service.record_login(store, created)

    assert user.last_login is not None
    assert store.users.get(created.id).last_login == user.last_login
