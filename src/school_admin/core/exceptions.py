from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when form data fails the local pre-submit checks."""


class NotFoundError(DomainError):
    """Raised when a key is absent from the local store."""


class ConflictError(DomainError):
    """Raised when a confirmed result cannot be applied without duplicating a key."""


class GatewayError(Exception):
    """Base exception for failures talking to the REST API."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequestError(GatewayError):
    """The API answered with a non-2xx status."""

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = int(status)


class TransportError(GatewayError):
    """The API could not be reached or returned an unreadable body."""
