"""Typer CLI entrypoint for profile resolution."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .container import ResolverContainer, create_container
from .errors import ProfileResolutionError
from .logging import configure_logging
from .pipeline import OutputWriter, ResponseLoadError, ResponseLoader
from .schemas import load_config

app = typer.Typer(help="Resolve LinkedIn Voyager responses into profiles.")


def _build_container(config: Optional[Path]) -> ResolverContainer:
    if not config:
        return create_container()
    with config.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    try:
        app_config = load_config(loaded)
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid config: {exc}", param_name="config") from exc
    return create_container(settings=app_config.to_settings())


def _emit(payload: Any, output: Optional[Path]) -> None:
    if output:
        OutputWriter().write(output, payload)
        typer.echo(f"Saved to {output}.")
    else:
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@app.command()
def resolve(
    responses: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, help="Response JSON or JSONL path."
    ),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    log_format: str = typer.Option("json", help="Log renderer: json or console."),
) -> None:
    """Resolve saved profile responses."""
    configure_logging(log_level, fmt=log_format)

    container = _build_container(config)
    pipeline = container.pipeline()
    results = pipeline.run(responses_path=responses, output_path=output)
    typer.echo(f"Resolved {len(results)} profiles. Results saved to {output}.")


@app.command("mini-profiles")
def mini_profiles(
    response: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Response JSON path."),
    output: Optional[Path] = typer.Option(None, dir_okay=False, help="Output JSON path (stdout if omitted)."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("WARNING", help="Log level for structured logging."),
) -> None:
    """List the mini profiles included in a response."""
    configure_logging(log_level)

    try:
        envelopes = ResponseLoader().load(response)
    except ResponseLoadError as exc:
        raise typer.BadParameter("; ".join(exc.errors), param_name="response") from exc

    resolver = _build_container(config).resolver()
    projected: dict[str, Any] = {}
    for envelope in envelopes:
        for profile_id, mini in resolver.project_mini_profiles(envelope).items():
            projected[profile_id] = mini.model_dump(mode="json")
    _emit(projected, output)


@app.command()
def fetch(
    public_id: Optional[str] = typer.Argument(None, help="Public identifier of the profile."),
    own: bool = typer.Option(False, "--own", help="Resolve the session owner's profile."),
    output: Optional[Path] = typer.Option(None, dir_okay=False, help="Output JSON path (stdout if omitted)."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Fetch a profile over the Voyager API and resolve it."""
    if not own and not public_id:
        raise typer.BadParameter("Provide a public identifier or --own", param_name="public_id")

    configure_logging(log_level)
    container = _build_container(config)

    try:
        profile = asyncio.run(_fetch(container, public_id, own=own))
    except ProfileResolutionError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if profile is None:
        typer.echo("No profile identity found for this session.", err=True)
        raise typer.Exit(code=1)
    _emit(profile.model_dump(mode="json"), output)


async def _fetch(container: ResolverContainer, public_id: Optional[str], *, own: bool):
    resolver = container.resolver()
    transport = container.transport()
    try:
        if own:
            return await resolver.resolve_own_profile()
        return await resolver.get_profile(public_id)
    finally:
        close = getattr(transport, "close", None)
        if close is not None:
            await close()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
