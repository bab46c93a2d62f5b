"""Errors raised by the account, session and post services."""


class ServiceError(Exception):
    """Base for service failures that routes turn into a rendered message or status."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class DuplicateUsername(ServiceError):
    """Raised when registering a username that already exists."""


class InvalidCredentials(ServiceError):
    """Raised for an unknown username or a wrong password (deliberately indistinguishable)."""


class PostNotFound(ServiceError):
    """Raised when a post id is malformed or does not resolve."""


class StoreFailure(ServiceError):
    """Raised when the database rejects a write or read."""
