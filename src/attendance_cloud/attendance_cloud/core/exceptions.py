from __future__ import annotations

from .enums import ErrorCode


class DomainError(Exception):
    """Base exception for business rule violations.

    Each subclass maps to one error kind of the check-in callable.
    """

    code: ErrorCode = ErrorCode.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PermissionDeniedError(DomainError):
    """Raised when a request does not carry the pre-shared key."""

    code = ErrorCode.PERMISSION_DENIED


class InvalidArgumentError(DomainError):
    """Raised when input data is invalid or fails the integrity check."""

    code = ErrorCode.INVALID_ARGUMENT


class InternalError(DomainError):
    """Raised when the attendance store could not record a check-in."""

    code = ErrorCode.INTERNAL
