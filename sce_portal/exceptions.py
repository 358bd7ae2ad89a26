# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Domain exceptions raised by the services."""


class PortalError(Exception):
    """Base exception for the portal."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class DuplicateEmailError(PortalError):
    """Raised when registering an email that is already taken."""


class InvalidCredentialsError(PortalError):
    """Raised when an email/password pair does not match a stored user."""


class PermissionDeniedError(PortalError):
    """Raised when the acting user lacks a permission."""


class NotFoundError(PortalError):
    """Raised when a requested record does not exist."""


class SelfDeletionError(PortalError):
    """Raised when an administrator tries to delete their own account."""


class ValidationError(PortalError):
    """Raised when input passes schema validation but breaks a domain rule."""
