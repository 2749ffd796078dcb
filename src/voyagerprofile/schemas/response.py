"""Response envelope returned by the transport."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import InvalidResponseError


class ResponseEnvelope(BaseModel):
    """Primary body plus the flat list of included entity records.

    ``included`` is kept as given; entries that are not records are skipped by
    the consumers rather than rejecting the whole response.
    """

    data: dict[str, Any] | None = None
    included: list[Any] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")

    @classmethod
    def parse(cls, payload: "ResponseEnvelope | dict[str, Any] | str | bytes") -> "ResponseEnvelope":
        """Validate a raw payload, raising :class:`InvalidResponseError` on failure."""
        if isinstance(payload, cls):
            return payload
        if isinstance(payload, bytes):
            try:
                payload = payload.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise InvalidResponseError(f"Response is not valid UTF-8: {exc}") from exc
        if isinstance(payload, str):
            try:
                payload = json.loads(payload)
            except json.JSONDecodeError as exc:
                raise InvalidResponseError(f"Response is not valid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise InvalidResponseError("Response must be a JSON object")
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise InvalidResponseError(f"Malformed response envelope: {exc}") from exc

    def root_urn(self, pointer_field: str = "*elements") -> str | None:
        """First URN of the primary body's root list, if any."""
        roots = (self.data or {}).get(pointer_field)
        if isinstance(roots, str):
            return roots
        if isinstance(roots, list) and roots:
            return roots[0]
        return None
