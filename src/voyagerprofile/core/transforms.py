"""Pure per-facet transforms from typed entities to profile entries."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import ValidationError

from ..schemas import (
    DateRange,
    Education,
    EducationEntity,
    LanguageEntity,
    PositionEntity,
    ProfileLanguage,
    Skill,
    SkillEntity,
    VectorImage,
    Work,
    YearMonth,
)


def map_date_range(raw: Any) -> DateRange:
    """Copy year/month of start and end through, leaving missing parts ``None``."""
    if not isinstance(raw, Mapping):
        return DateRange()
    return DateRange(start=_year_month(raw.get("start")), end=_year_month(raw.get("end")))


def _year_month(raw: Any) -> YearMonth:
    if not isinstance(raw, Mapping):
        return YearMonth()
    return YearMonth(year=raw.get("year"), month=raw.get("month"))


def map_education(entity: EducationEntity) -> Education:
    return Education(
        school_name=entity.school_name,
        field_of_study=entity.field_of_study,
        date_range=map_date_range(entity.date_range),
        description=entity.description,
        degree_name=entity.degree_name,
        grade=entity.grade,
    )


def map_skill(entity: SkillEntity) -> Skill:
    return Skill(name=entity.name)


def map_language(entity: LanguageEntity) -> ProfileLanguage:
    return ProfileLanguage(name=entity.name, proficiency=entity.proficiency)


def map_position(entity: PositionEntity) -> Work:
    return Work(
        name=entity.company_name,
        position=entity.title,
        date_range=map_date_range(entity.date_range),
        summary=entity.description,
    )


def picture_urls(
    container: Mapping[str, Any] | None,
    path: tuple[str, ...],
    *,
    wrapper_key: str | None = None,
    logger: Any | None = None,
) -> list[str]:
    """Follow ``path`` to a vector image and build one URL per artifact.

    Some payloads wrap the image in a single-key union object named
    ``wrapper_key``; that layer is unwrapped. Any missing step yields ``[]``,
    and so does an image that fails validation, with a warning.
    """
    node: Any = container
    for key in path:
        if not isinstance(node, Mapping):
            return []
        node = node.get(key)
    if not isinstance(node, Mapping):
        return []
    if wrapper_key and isinstance(node.get(wrapper_key), Mapping):
        node = node[wrapper_key]
    try:
        image = VectorImage.model_validate(node)
    except ValidationError as exc:
        log = logger or structlog.get_logger(__name__)
        log.warning("picture.invalid_image", path=".".join(path), error=str(exc))
        return []
    return image.urls()
