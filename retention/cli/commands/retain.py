"""Retain command - show which releases to keep per project and environment."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from retention.cli.commands._helpers import unwrap_or_exit
from retention.cli.context import CLIContext, build_context
from retention.output.console import Style
from retention.services.retention.loader import DatasetFiles, load_dataset
from retention.services.retention.model import ReleaseRetentionResolution
from retention.services.retention.reasons import ConsoleReasonSink


def retain(
    keep: int | None = typer.Option(
        None,
        "--keep",
        "-n",
        help="Number of releases to keep per project/environment (default from config)",
        show_default=False,
    ),
    project: str | None = typer.Option(None, "--project", help="Only this project id"),
    environment: str | None = typer.Option(
        None, "--environment", help="Only this environment id"
    ),
    data_dir: Path | None = typer.Option(
        None,
        "--data-dir",
        help="Directory holding Projects/Releases/Deployments/Environments JSON",
        show_default=False,
    ),
    config: Path | None = typer.Option(
        None, "--config", help="Path to retention.toml", show_default=False
    ),
    as_json: bool = typer.Option(False, "--json", help="Print resolutions as JSON"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not print why releases are kept"),
) -> None:
    """Resolve the releases to keep."""
    ctx = build_context(config)

    files = DatasetFiles(
        projects=ctx.config.data.projects,
        releases=ctx.config.data.releases,
        deployments=ctx.config.data.deployments,
        environments=ctx.config.data.environments,
    )
    directory = data_dir.expanduser() if data_dir is not None else ctx.data_dir
    dataset = unwrap_or_exit(load_dataset(directory, files), ctx)

    # JSON goes to stdout unmixed with reason lines.
    reasons = None if quiet or as_json else ConsoleReasonSink(ctx.console)
    service = dataset.service(reasons=reasons)

    number_of_releases = keep if keep is not None else ctx.config.retention.keep
    resolutions = unwrap_or_exit(
        service.retain_releases(number_of_releases, project or None, environment or None),
        ctx,
    )

    if as_json:
        typer.echo(json.dumps(resolutions_to_json(resolutions), indent=2))
        return

    _print_resolutions(ctx, resolutions)


def resolutions_to_json(resolutions: list[ReleaseRetentionResolution]) -> list[dict[str, object]]:
    return [
        {
            "projectId": r.project_id,
            "environmentId": r.environment_id,
            "releasesToKeep": [
                {"id": rel.id, "version": rel.version, "projectId": rel.project_id}
                for rel in r.releases_to_keep
            ],
        }
        for r in resolutions
    ]


def _print_resolutions(ctx: CLIContext, resolutions: list[ReleaseRetentionResolution]) -> None:
    console = ctx.console
    for r in resolutions:
        console.header(f"{r.project_id} / {r.environment_id}")
        if not r.releases_to_keep:
            console.print("nothing deployed", Style.DIM)
            continue
        for rank, release in enumerate(r.releases_to_keep, start=1):
            console.bullet(f"{rank}. {release.id} ({release.version})", Style.SUCCESS)
