"""Profile resolution over one response envelope."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError

from ..errors import InvalidResponseError, RootEntityNotFoundError
from ..schemas import (
    EducationEntity,
    LanguageEntity,
    MiniProfile,
    MiniProfileEntity,
    PositionEntity,
    PositionGroupEntity,
    Profile,
    ProfileEntity,
    ResponseEnvelope,
    SkillEntity,
    VoyagerContract,
    Work,
)
from .index import EntityIndex
from .sections import resolve_section
from .transforms import map_education, map_language, map_position, map_skill, picture_urls

if TYPE_CHECKING:  # pragma: no cover
    from ..adapters import ProfileTransport


class ProfileResolver:
    """Turns Voyager responses into :class:`Profile` values.

    Each call builds its own :class:`EntityIndex`; nothing is shared between
    calls. The transport is only needed for the ``async`` fetching helpers.
    """

    def __init__(
        self,
        *,
        contract: VoyagerContract | None = None,
        transport: "ProfileTransport | None" = None,
        strict_references: bool = False,
        logger: Any | None = None,
    ) -> None:
        self._contract = contract or VoyagerContract()
        self._transport = transport
        self._strict = strict_references
        self._logger = logger or structlog.get_logger(__name__)

    def build_index(self, response: ResponseEnvelope) -> EntityIndex:
        index = EntityIndex.build(response.included, contract=self._contract)
        if index.duplicates:
            self._logger.debug("index.duplicate_urns", count=index.duplicates)
        return index

    def resolve_profile(self, response: ResponseEnvelope | dict[str, Any]) -> Profile:
        envelope = ResponseEnvelope.parse(response)
        index = self.build_index(envelope)

        root_urn = envelope.root_urn(self._contract.root_pointer_field)
        try:
            root = index.narrow(root_urn, ProfileEntity)
        except ValidationError as exc:
            raise InvalidResponseError(f"Malformed root entity {root_urn!r}: {exc}") from exc
        if root is None:
            raise RootEntityNotFoundError(root_urn)

        contract = self._contract
        return Profile(
            first_name=root.first_name,
            last_name=root.last_name,
            summary=root.summary,
            picture_urls=picture_urls(
                index.lookup(root_urn),
                contract.profile_picture_path,
                wrapper_key=contract.vector_image_wrapper_key,
                logger=self._logger,
            ),
            education=self._section(
                index, root, contract.education_field, map_education, EducationEntity
            ),
            work=self._section(
                index,
                root,
                contract.position_groups_field,
                lambda group: self._positions(index, group),
                PositionGroupEntity,
            ),
            skills=self._section(index, root, contract.skills_field, map_skill, SkillEntity),
            languages=self._section(
                index, root, contract.languages_field, map_language, LanguageEntity
            ),
        )

    def project_mini_profiles(
        self, response: ResponseEnvelope | dict[str, Any]
    ) -> dict[str, MiniProfile]:
        """Mini profiles in ``included`` keyed by their stripped profile id.

        Later entities overwrite earlier ones that derive the same id.
        """
        envelope = ResponseEnvelope.parse(response)
        contract = self._contract
        projected: dict[str, MiniProfile] = {}
        for record in envelope.included:
            if not isinstance(record, dict) or record.get("$type") != contract.mini_profile_type:
                continue
            try:
                entity = MiniProfileEntity.model_validate(record)
            except ValidationError as exc:
                self._logger.warning(
                    "mini_profile.invalid", urn=record.get("entityUrn"), error=str(exc)
                )
                continue
            profile_id = (entity.entity_urn or "").replace(contract.mini_profile_urn_prefix, "")
            projected[profile_id] = MiniProfile(
                profile_id=profile_id,
                entity_urn=entity.entity_urn,
                public_identifier=entity.public_identifier,
                first_name=entity.first_name,
                last_name=entity.last_name,
                occupation=entity.occupation,
                object_urn=entity.object_urn,
                tracking_id=entity.tracking_id,
                picture_urls=picture_urls(
                    record,
                    contract.mini_profile_picture_path,
                    wrapper_key=contract.vector_image_wrapper_key,
                    logger=self._logger,
                ),
            )
        return projected

    async def get_profile(self, public_identifier: str) -> Profile:
        """Fetch and resolve the profile of ``public_identifier``."""
        response = await self._require_transport().get_profile(public_identifier)
        return self.resolve_profile(response)

    async def resolve_own_profile(self) -> Profile | None:
        """Resolve the session owner's profile, or ``None`` without an identity."""
        response = ResponseEnvelope.parse(await self._require_transport().get_own_profile())
        record = next(
            (
                item
                for item in response.included
                if isinstance(item, dict)
                and item.get("$type") == self._contract.mini_profile_type
            ),
            None,
        )
        if record is None:
            return None
        try:
            mini_profile = MiniProfileEntity.model_validate(record)
        except ValidationError as exc:
            raise InvalidResponseError(
                f"Malformed mini profile {record.get('entityUrn')!r}: {exc}"
            ) from exc
        if not mini_profile.public_identifier:
            self._logger.warning(
                "own_profile.missing_public_identifier", urn=mini_profile.entity_urn
            )
            return None
        return await self.get_profile(mini_profile.public_identifier)

    def _section(self, index, root, field, transform, member_model):
        return resolve_section(
            index,
            root,
            field,
            transform,
            member_model=member_model,
            strict=self._strict,
            logger=self._logger,
        )

    def _positions(self, index: EntityIndex, group: PositionGroupEntity) -> list[Work]:
        return self._section(
            index, group, self._contract.positions_in_group_field, map_position, PositionEntity
        )

    def _require_transport(self) -> "ProfileTransport":
        if self._transport is None:
            raise RuntimeError("ProfileResolver needs a transport to fetch responses")
        return self._transport
