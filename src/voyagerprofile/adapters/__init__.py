"""Transports that deliver raw Voyager response payloads."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .http import VoyagerHTTPTransport
from .static import StaticTransport


@runtime_checkable
class ProfileTransport(Protocol):
    """Source of response envelopes.

    Implementations own authentication, retries and timeouts. The resolver
    awaits one call per profile it resolves.
    """

    async def get_profile(self, public_identifier: str) -> dict[str, Any]:
        """Return the full profile response for ``public_identifier``."""

    async def get_own_profile(self) -> dict[str, Any]:
        """Return the session owner's ``/me`` response."""


__all__ = ["ProfileTransport", "StaticTransport", "VoyagerHTTPTransport"]
