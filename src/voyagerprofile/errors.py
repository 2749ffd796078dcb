"""Exceptions raised while fetching and resolving profile responses."""

from __future__ import annotations


class ProfileResolutionError(Exception):
    """Base class for all resolution failures."""


class RootEntityNotFoundError(ProfileResolutionError):
    """Raised when the response's root pointer names no included entity."""

    def __init__(self, root_urn: str | None):
        super().__init__(f"Root entity not found: {root_urn!r}")
        self.root_urn = root_urn


class MissingReferenceError(ProfileResolutionError):
    """Raised when a collection member URN has no matching included entity."""

    def __init__(self, urn: str, field: str | None = None):
        message = f"Dangling reference {urn!r}"
        if field:
            message += f" in section {field!r}"
        super().__init__(message)
        self.urn = urn
        self.field = field


class InvalidResponseError(ProfileResolutionError):
    """Raised when a payload is not a usable response envelope."""


class TransportError(ProfileResolutionError):
    """Raised when the transport cannot deliver a response payload."""

    def __init__(self, message: str, *, url: str | None = None, status: int | None = None):
        super().__init__(message)
        self.url = url
        self.status = status

    def __str__(self) -> str:  # pragma: no cover - trivial
        base = super().__str__()
        if self.status is not None:
            return f"{base} (status={self.status}, url={self.url})"
        return base
