"""In-memory transport for saved responses."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import TransportError


class StaticTransport:
    """Serve pre-recorded responses keyed by public identifier."""

    def __init__(
        self,
        profiles: dict[str, dict[str, Any]] | None = None,
        own: dict[str, Any] | None = None,
    ) -> None:
        self._profiles = dict(profiles or {})
        self._own = own

    @classmethod
    def from_files(
        cls,
        profiles: dict[str, Path] | None = None,
        own: Path | None = None,
    ) -> "StaticTransport":
        return cls(
            profiles={key: _read_json(path) for key, path in (profiles or {}).items()},
            own=_read_json(own) if own else None,
        )

    async def get_profile(self, public_identifier: str) -> dict[str, Any]:
        try:
            return self._profiles[public_identifier]
        except KeyError as exc:
            raise TransportError(f"No recorded response for {public_identifier!r}") from exc

    async def get_own_profile(self) -> dict[str, Any]:
        if self._own is None:
            raise TransportError("No recorded /me response")
        return self._own


def _read_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        try:
            return json.load(handle)
        except json.JSONDecodeError as exc:
            raise TransportError(f"Invalid JSON in {path}: {exc}") from exc
