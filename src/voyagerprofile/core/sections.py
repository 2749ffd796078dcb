"""Follow a reference field through its collection entity to typed entries."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import structlog
from pydantic import ValidationError

from ..errors import MissingReferenceError
from ..schemas import CollectionEntity, EntityRecord
from .index import EntityIndex

E = TypeVar("E", bound=EntityRecord)
T = TypeVar("T")


def resolve_section(
    index: EntityIndex,
    root: EntityRecord,
    reference_field: str,
    transform: Callable[[E], T | list[T]],
    *,
    member_model: type[E] = EntityRecord,  # type: ignore[assignment]
    strict: bool = False,
    logger: Any | None = None,
) -> list[T]:
    """Resolve one profile section.

    ``root[reference_field]`` names a collection entity whose ``*elements``
    list the member URNs. A missing collection is an empty section. A missing
    or malformed member raises :class:`MissingReferenceError` when ``strict``
    and is otherwise skipped with a warning. List results from ``transform``
    are flattened one level; member order is preserved.
    """
    log = logger or structlog.get_logger(__name__)

    collection_urn = root.get(reference_field)
    try:
        collection = index.narrow(collection_urn, CollectionEntity)
    except ValidationError as exc:
        log.warning(
            "section.invalid_collection",
            field=reference_field,
            urn=collection_urn,
            error=str(exc),
        )
        return []
    if collection is None:
        return []

    results: list[T] = []
    for member_urn in collection.elements:
        try:
            member = index.narrow(member_urn, member_model)
        except ValidationError as exc:
            if strict:
                raise MissingReferenceError(member_urn, reference_field) from exc
            log.warning(
                "section.invalid_member",
                field=reference_field,
                urn=member_urn,
                error=str(exc),
            )
            continue
        if member is None:
            if strict:
                raise MissingReferenceError(member_urn, reference_field)
            log.warning(
                "section.missing_reference",
                field=reference_field,
                urn=member_urn,
                collection_urn=collection_urn,
            )
            continue
        expected_type = index.contract.discriminator_for(member_model)
        if expected_type and member.entity_type and member.entity_type != expected_type:
            if strict:
                raise MissingReferenceError(member_urn, reference_field)
            log.warning(
                "section.invalid_member",
                field=reference_field,
                urn=member_urn,
                error=f"expected $type {expected_type!r}, got {member.entity_type!r}",
            )
            continue

        mapped = transform(member)
        if isinstance(mapped, list):
            results.extend(mapped)
        else:
            results.append(mapped)
    return results
