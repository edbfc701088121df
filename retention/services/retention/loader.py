"""Load the four retention collections from JSON files.

Each file holds a JSON array of objects. Field names are matched without
regard to case (``DeployedAt``, ``deployedAt`` and ``deployedat`` are the same
field). Entries that are not objects or lack a required field are skipped.
References between collections are not checked here; the service drops
dangling ones when resolving.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from retention.core.result import Err, Ok, Result
from retention.core.structured import StrDict, as_obj_list, as_str_dict, fold_keys, get_raw_str
from retention.services.retention.errors import DatasetError
from retention.services.retention.model import (
    Deployment,
    DeploymentEnvironment,
    Project,
    Release,
    naive_utc,
)
from retention.services.retention.reasons import ReasonSinkProtocol
from retention.services.retention.service import ReleaseRetentionService

__all__ = [
    "Dataset",
    "DatasetFiles",
    "load_dataset",
    "parse_timestamp",
]


@dataclass(frozen=True, slots=True)
class DatasetFiles:
    projects: str = "Projects.json"
    releases: str = "Releases.json"
    deployments: str = "Deployments.json"
    environments: str = "Environments.json"


@dataclass(frozen=True, slots=True)
class Dataset:
    projects: tuple[Project, ...]
    releases: tuple[Release, ...]
    deployments: tuple[Deployment, ...]
    environments: tuple[DeploymentEnvironment, ...]

    def service(self, *, reasons: ReasonSinkProtocol | None = None) -> ReleaseRetentionService:
        return ReleaseRetentionService(
            self.projects,
            self.releases,
            self.deployments,
            self.environments,
            reasons=reasons,
        )


def load_dataset(directory: Path, files: DatasetFiles | None = None) -> Result[Dataset, DatasetError]:
    """Read Projects/Releases/Deployments/Environments JSON from ``directory``."""
    files = files or DatasetFiles()

    projects = _load_entries(directory / files.projects, _project)
    if isinstance(projects, Err):
        return projects
    releases = _load_entries(directory / files.releases, _release)
    if isinstance(releases, Err):
        return releases
    deployments = _load_entries(directory / files.deployments, _deployment)
    if isinstance(deployments, Err):
        return deployments
    environments = _load_entries(directory / files.environments, _environment)
    if isinstance(environments, Err):
        return environments

    return Ok(
        Dataset(
            projects=projects.value,
            releases=releases.value,
            deployments=deployments.value,
            environments=environments.value,
        )
    )


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO-8601 timestamp into naive UTC.

    Offsets are converted to UTC and dropped so that every deployment time
    compares with every other. Returns None if ``value`` does not parse.
    """
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    return naive_utc(parsed)


class _InvalidTimestamp(Exception):
    def __init__(self, entry_id: str, value: str) -> None:
        super().__init__(f"{entry_id}: {value!r}")
        self.entry_id = entry_id
        self.value = value


def _load_entries[T](
    path: Path,
    build: Callable[[StrDict], T | None],
) -> Result[tuple[T, ...], DatasetError]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Err(
            DatasetError(
                kind="file_not_found",
                message=f"dataset file not found: {path}",
                hint="pass --data-dir or set [data] dir in retention.toml",
            )
        )
    except (OSError, UnicodeDecodeError) as e:
        return Err(DatasetError(kind="unreadable", message=f"failed to read {path}: {e}"))

    try:
        obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(DatasetError(kind="invalid_json", message=f"invalid JSON in {path}: {e}"))

    items = as_obj_list(obj)
    if items is None:
        return Err(
            DatasetError(
                kind="invalid_json",
                message=f"{path.name} root must be a JSON array",
                hint=str(path),
            )
        )

    out: list[T] = []
    for item in items:
        d = as_str_dict(item)
        if d is None:
            continue
        try:
            entry = build(fold_keys(d))
        except _InvalidTimestamp as e:
            return Err(
                DatasetError(
                    kind="invalid_timestamp",
                    message=f"invalid DeployedAt for deployment {e.entry_id}: {e.value!r}",
                    hint=str(path),
                )
            )
        if entry is not None:
            out.append(entry)
    return Ok(tuple(out))


# Builders receive keys already folded to lower case.


def _project(d: StrDict) -> Project | None:
    id_ = get_raw_str(d, "id")
    if id_ is None:
        return None
    return Project(id=id_, name=get_raw_str(d, "name") or "")


def _environment(d: StrDict) -> DeploymentEnvironment | None:
    id_ = get_raw_str(d, "id")
    if id_ is None:
        return None
    return DeploymentEnvironment(id=id_, name=get_raw_str(d, "name") or "")


def _release(d: StrDict) -> Release | None:
    id_ = get_raw_str(d, "id")
    project_id = get_raw_str(d, "projectid")
    if id_ is None or project_id is None:
        return None
    return Release(id=id_, version=get_raw_str(d, "version") or "", project_id=project_id)


def _deployment(d: StrDict) -> Deployment | None:
    id_ = get_raw_str(d, "id")
    release_id = get_raw_str(d, "releaseid")
    environment_id = get_raw_str(d, "environmentid")
    raw = get_raw_str(d, "deployedat")
    if id_ is None or release_id is None or environment_id is None or raw is None:
        return None
    deployed_at = parse_timestamp(raw)
    if deployed_at is None:
        raise _InvalidTimestamp(id_, raw)
    return Deployment(
        id=id_,
        release_id=release_id,
        environment_id=environment_id,
        deployed_at=deployed_at,
    )
