# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Password hashing helpers."""

import hmac

import bcrypt

from sce_portal.config import settings


def get_password_hash(password: str) -> str:
    """Hash a password using bcrypt.

    With ``ALLOW_PLAINTEXT_PASSWORDS`` enabled the password is returned as is.
    That mode exists for prototypes and tests only.
    """
    if settings.ALLOW_PLAINTEXT_PASSWORDS:
        return password
    pwd_bytes = password.encode("utf-8")
    hashed = bcrypt.hashpw(pwd_bytes, bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(plain_password: str, stored_password: str) -> bool:
    """Verify a password against the stored digest (or raw value in plaintext mode)."""
    if settings.ALLOW_PLAINTEXT_PASSWORDS:
        return hmac.compare_digest(
            plain_password.encode("utf-8"), stored_password.encode("utf-8")
        )
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), stored_password.encode("utf-8")
        )
    except ValueError:
        # Stored value is not a bcrypt digest.
        return False
