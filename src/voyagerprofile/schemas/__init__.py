"""Pydantic schema definitions for Voyager payloads and resolved profiles."""

from __future__ import annotations

from .config import AppConfig, ResolverConfig, TransportConfig, VoyagerContract, load_config
from .entities import (
    CollectionEntity,
    EducationEntity,
    EntityRecord,
    LanguageEntity,
    MiniProfileEntity,
    PositionEntity,
    PositionGroupEntity,
    ProfileEntity,
    SkillEntity,
    VectorImage,
)
from .profile import (
    DateRange,
    Education,
    MiniProfile,
    Profile,
    ProfileLanguage,
    Skill,
    Work,
    YearMonth,
)
from .response import ResponseEnvelope

__all__ = [
    "AppConfig",
    "ResolverConfig",
    "TransportConfig",
    "VoyagerContract",
    "load_config",
    "CollectionEntity",
    "EducationEntity",
    "EntityRecord",
    "LanguageEntity",
    "MiniProfileEntity",
    "PositionEntity",
    "PositionGroupEntity",
    "ProfileEntity",
    "SkillEntity",
    "VectorImage",
    "DateRange",
    "Education",
    "MiniProfile",
    "Profile",
    "ProfileLanguage",
    "Skill",
    "Work",
    "YearMonth",
    "ResponseEnvelope",
]
