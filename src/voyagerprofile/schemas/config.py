"""Pydantic configuration schema for the resolver, transport and CLI."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

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
)


class VoyagerContract(BaseModel):
    """Field names and discriminators of the Voyager profile payload.

    ``$type``, ``entityUrn`` and the ``*elements`` member list are the
    normalized-JSON framing and live on the entity models; this contract holds
    the profile-specific names.
    """

    root_pointer_field: str = "*elements"

    profile_type: str = "com.linkedin.voyager.dash.identity.profile.Profile"
    mini_profile_type: str = "com.linkedin.voyager.identity.shared.MiniProfile"
    collection_type: str = "com.linkedin.restli.common.CollectionResponse"
    education_type: str = "com.linkedin.voyager.dash.identity.profile.Education"
    position_group_type: str = "com.linkedin.voyager.dash.identity.profile.PositionGroup"
    position_type: str = "com.linkedin.voyager.dash.identity.profile.Position"
    skill_type: str = "com.linkedin.voyager.dash.identity.profile.Skill"
    language_type: str = "com.linkedin.voyager.dash.identity.profile.Language"

    education_field: str = "*profileEducations"
    position_groups_field: str = "*profilePositionGroups"
    positions_in_group_field: str = "*profilePositionInPositionGroup"
    skills_field: str = "*profileSkills"
    languages_field: str = "*profileLanguages"

    profile_picture_path: tuple[str, ...] = (
        "profilePicture",
        "displayImageReference",
        "vectorImage",
    )
    mini_profile_picture_path: tuple[str, ...] = ("picture",)
    vector_image_wrapper_key: str = "com.linkedin.common.VectorImage"

    mini_profile_urn_prefix: str = "urn:li:fs_miniProfile:"

    model_config = ConfigDict(extra="forbid", frozen=True)

    def entity_models(self) -> dict[str, type[EntityRecord]]:
        """Discriminator to entity model mapping for the consumed kinds."""
        return {
            self.profile_type: ProfileEntity,
            self.mini_profile_type: MiniProfileEntity,
            self.collection_type: CollectionEntity,
            self.education_type: EducationEntity,
            self.position_group_type: PositionGroupEntity,
            self.position_type: PositionEntity,
            self.skill_type: SkillEntity,
            self.language_type: LanguageEntity,
        }

    def discriminator_for(self, model: type[EntityRecord]) -> str | None:
        for discriminator, candidate in self.entity_models().items():
            if candidate is model:
                return discriminator
        return None

    def model_for(self, discriminator: str | None) -> type[EntityRecord]:
        if discriminator is None:
            return EntityRecord
        return self.entity_models().get(discriminator, EntityRecord)


class ResolverConfig(BaseModel):
    strict_references: bool = False

    model_config = ConfigDict(extra="forbid")


class TransportConfig(BaseModel):
    base_url: str = "https://www.linkedin.com/voyager/api"
    timeout: float = 10.0
    headers: dict[str, str] = Field(default_factory=dict)
    cookies: dict[str, str] = Field(default_factory=dict)
    profile_decoration_id: str = (
        "com.linkedin.voyager.dash.deco.identity.profile.FullProfileWithEntities-93"
    )

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    contract: VoyagerContract = Field(default_factory=VoyagerContract)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    transport: TransportConfig = Field(default_factory=TransportConfig)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        for section in ("contract", "resolver", "transport"):
            value = getattr(self, section)
            overrides = value.model_dump(exclude_defaults=True)
            if overrides:
                settings[section] = overrides
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
