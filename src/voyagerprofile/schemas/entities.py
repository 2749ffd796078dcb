"""Typed views over the records found in a response's ``included`` list.

Every record carries a ``$type`` discriminator and an ``entityUrn``. Fields
whose name starts with ``*`` hold the URN (or list of URNs) of other records
rather than literal values. The models below only declare the literal fields
that resolution reads; everything else is kept as extra data and reachable
through :meth:`EntityRecord.get`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EntityRecord(BaseModel):
    """Generic included record."""

    entity_urn: str | None = Field(default=None, alias="entityUrn")
    entity_type: str | None = Field(default=None, alias="$type")

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    def get(self, name: str, default: Any = None) -> Any:
        """Return a field by its wire name, declared or not."""
        extra = self.model_extra or {}
        if name in extra:
            return extra[name]
        for field_name, info in type(self).model_fields.items():
            if name in (info.alias, field_name):
                return getattr(self, field_name)
        return default


class CollectionEntity(EntityRecord):
    """Intermediary record holding the ordered member URNs of a section."""

    elements: list[str] = Field(default_factory=list, alias="*elements")


class EducationEntity(EntityRecord):
    school_name: str | None = Field(default=None, alias="schoolName")
    field_of_study: str | None = Field(default=None, alias="fieldOfStudy")
    description: str | None = None
    degree_name: str | None = Field(default=None, alias="degreeName")
    grade: str | None = None
    date_range: dict[str, Any] | None = Field(default=None, alias="dateRange")


class SkillEntity(EntityRecord):
    name: str | None = None


class LanguageEntity(EntityRecord):
    name: str | None = None
    proficiency: str | None = None


class PositionGroupEntity(EntityRecord):
    """Company grouping whose positions sit behind one more collection."""

    company_name: str | None = Field(default=None, alias="companyName")


class PositionEntity(EntityRecord):
    title: str | None = None
    company_name: str | None = Field(default=None, alias="companyName")
    description: str | None = None
    date_range: dict[str, Any] | None = Field(default=None, alias="dateRange")


class ProfileEntity(EntityRecord):
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    summary: str | None = None


class MiniProfileEntity(EntityRecord):
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    occupation: str | None = None
    public_identifier: str | None = Field(default=None, alias="publicIdentifier")
    object_urn: str | None = Field(default=None, alias="objectUrn")
    tracking_id: str | None = Field(default=None, alias="trackingId")


class VectorArtifact(BaseModel):
    file_identifying_url_path_segment: str = Field(
        default="", alias="fileIdentifyingUrlPathSegment"
    )
    width: int | None = None
    height: int | None = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class VectorImage(BaseModel):
    """Image descriptor: one root URL plus per-resolution path segments."""

    root_url: str = Field(default="", alias="rootUrl")
    artifacts: list[VectorArtifact] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def urls(self) -> list[str]:
        return [
            f"{self.root_url}{artifact.file_identifying_url_path_segment}"
            for artifact in self.artifacts
        ]
