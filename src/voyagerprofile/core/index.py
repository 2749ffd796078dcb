"""Identifier to entity lookup over a response's included records."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, TypeVar

from ..schemas import EntityRecord, VoyagerContract

E = TypeVar("E", bound=EntityRecord)


class EntityIndex(Mapping[str, dict[str, Any]]):
    """Read-only mapping of ``entityUrn`` to raw record.

    Built once per response. When two records share a URN the later one wins;
    the number of overwritten records is kept in :attr:`duplicates`.
    """

    def __init__(
        self,
        records: Mapping[str, dict[str, Any]],
        *,
        duplicates: int = 0,
        contract: VoyagerContract | None = None,
    ) -> None:
        self._records = dict(records)
        self.duplicates = duplicates
        self._contract = contract or VoyagerContract()

    @property
    def contract(self) -> VoyagerContract:
        return self._contract

    @classmethod
    def build(
        cls,
        records: Iterable[dict[str, Any]],
        *,
        contract: VoyagerContract | None = None,
    ) -> "EntityIndex":
        indexed: dict[str, dict[str, Any]] = {}
        duplicates = 0
        for record in records:
            if not isinstance(record, dict):
                continue
            urn = record.get("entityUrn")
            if not isinstance(urn, str):
                continue
            if urn in indexed:
                duplicates += 1
            indexed[urn] = record
        return cls(indexed, duplicates=duplicates, contract=contract)

    def __getitem__(self, urn: str) -> dict[str, Any]:
        return self._records[urn]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def lookup(self, urn: Any) -> dict[str, Any] | None:
        if not isinstance(urn, str):
            return None
        return self._records.get(urn)

    def narrow(self, urn: Any, model: type[E] | None = None) -> E | EntityRecord | None:
        """Look up ``urn`` and validate it as ``model``.

        Without an explicit model the record's ``$type`` picks one from the
        contract; unknown kinds come back as a plain :class:`EntityRecord`.
        Raises :class:`pydantic.ValidationError` for malformed records.
        """
        record = self.lookup(urn)
        if record is None:
            return None
        target = model or self._contract.model_for(record.get("$type"))
        return target.model_validate(record)
