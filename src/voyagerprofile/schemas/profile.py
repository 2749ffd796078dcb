"""Consumer-facing profile model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class YearMonth(BaseModel):
    """One end of a date range. ``None`` means unknown, never zero."""

    year: int | None = None
    month: int | None = None

    model_config = ConfigDict(extra="forbid")


class DateRange(BaseModel):
    """Start and end of an education or work entry."""

    start: YearMonth = Field(default_factory=YearMonth)
    end: YearMonth = Field(default_factory=YearMonth)

    model_config = ConfigDict(extra="forbid")


class Education(BaseModel):
    """Education history entry."""

    school_name: str | None = None
    field_of_study: str | None = None
    date_range: DateRange = Field(default_factory=DateRange)
    description: str | None = None
    degree_name: str | None = None
    grade: str | None = None

    model_config = ConfigDict(extra="forbid")


class Work(BaseModel):
    """Single position held at a company."""

    name: str | None = None
    position: str | None = None
    date_range: DateRange = Field(default_factory=DateRange)
    summary: str | None = None

    model_config = ConfigDict(extra="forbid")


class Skill(BaseModel):
    name: str | None = None

    model_config = ConfigDict(extra="forbid")


class ProfileLanguage(BaseModel):
    name: str | None = None
    proficiency: str | None = None

    model_config = ConfigDict(extra="forbid")


class Profile(BaseModel):
    """Fully resolved profile."""

    first_name: str | None = None
    last_name: str | None = None
    summary: str | None = None
    picture_urls: list[str] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    work: list[Work] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    languages: list[ProfileLanguage] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class MiniProfile(BaseModel):
    """Compact identity projected from a mini profile entity."""

    profile_id: str
    entity_urn: str | None = None
    public_identifier: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    occupation: str | None = None
    object_urn: str | None = None
    tracking_id: str | None = None
    picture_urls: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")
