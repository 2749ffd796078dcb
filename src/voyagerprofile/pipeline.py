"""Batch resolution of saved responses."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pendulum
import structlog

from . import __version__
from .core import ProfileResolver
from .errors import InvalidResponseError, ProfileResolutionError
from .schemas import ResponseEnvelope


class ResponseLoadError(ValueError):
    """Raised when some records of a response file cannot be used."""

    def __init__(self, errors: list[str], partial: list[ResponseEnvelope]):
        super().__init__("Response loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Response loading failed: {self.errors}"


class ResponseLoader:
    """Load response envelopes from a JSON document or a JSONL file."""

    def load(self, path: Path) -> list[ResponseEnvelope]:
        text = path.read_text(encoding="utf-8")
        stripped = text.strip()
        if not stripped:
            return []

        try:
            document = json.loads(stripped)
        except json.JSONDecodeError:
            document = None
        if isinstance(document, dict):
            return self._collect([(1, document)], label="document")
        if isinstance(document, list):
            return self._collect(enumerate(document, start=1), label="item")

        return self._collect(
            ((idx, line.strip()) for idx, line in enumerate(text.splitlines(), start=1)),
            label="line",
        )

    @staticmethod
    def _collect(items, *, label: str) -> list[ResponseEnvelope]:
        envelopes: list[ResponseEnvelope] = []
        errors: list[str] = []
        for idx, raw in items:
            if raw == "":
                continue
            try:
                envelopes.append(ResponseEnvelope.parse(raw))
            except InvalidResponseError as exc:
                errors.append(f"{label} {idx}: {exc}")
        if errors:
            raise ResponseLoadError(errors, envelopes)
        return envelopes


class OutputWriter:
    """Persist resolved profiles."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class ResolutionPipeline:
    """Resolve every response in a file and write the profiles with metadata."""

    def __init__(
        self,
        *,
        resolver: ProfileResolver,
        loader: ResponseLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._resolver = resolver
        self._loader = loader or ResponseLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(self, *, responses_path: Path, output_path: Path) -> list[dict[str, Any]]:
        errors: list[str] = []
        try:
            responses = self._loader.load(responses_path)
        except ResponseLoadError as exc:
            responses = exc.partial
            errors.extend(exc.errors)
            self._logger.warning("pipeline.partial_load", errors=exc.errors)

        results: list[dict[str, Any]] = []
        for position, response in enumerate(responses, start=1):
            try:
                profile = self._resolver.resolve_profile(response)
            except ProfileResolutionError as exc:
                errors.append(f"response {position}: {exc}")
                self._logger.warning("pipeline.unresolved", position=position, error=str(exc))
                continue
            results.append(profile.model_dump(mode="json"))
            self._logger.info(
                "pipeline.resolved",
                position=position,
                education=len(profile.education),
                work=len(profile.work),
                skills=len(profile.skills),
                languages=len(profile.languages),
            )

        metadata = {
            "response_count": len(responses),
            "profile_count": len(results),
            "errors": errors,
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        self._writer.write(output_path, {"metadata": metadata, "results": results})
        return results
