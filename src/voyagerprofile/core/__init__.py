"""Core resolution components."""

from __future__ import annotations

from .index import EntityIndex
from .resolver import ProfileResolver
from .sections import resolve_section
from .transforms import (
    map_date_range,
    map_education,
    map_language,
    map_position,
    map_skill,
    picture_urls,
)

__all__ = [
    "EntityIndex",
    "ProfileResolver",
    "resolve_section",
    "map_date_range",
    "map_education",
    "map_language",
    "map_position",
    "map_skill",
    "picture_urls",
]
