from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime


@dataclass(frozen=True, slots=True)
class Project:
    id: str
    name: str


@dataclass(frozen=True, slots=True)
class Release:
    id: str
    version: str
    # May name a project that is not in the project collection.
    project_id: str


@dataclass(frozen=True, slots=True)
class DeploymentEnvironment:
    id: str
    name: str


@dataclass(frozen=True, slots=True)
class Deployment:
    id: str
    release_id: str
    # May name an environment that is not in the environment collection.
    environment_id: str
    # Naive values are read as UTC; aware ones are converted with naive_utc.
    deployed_at: datetime


def naive_utc(value: datetime) -> datetime:
    """Return ``value`` as naive UTC so deployment times always compare."""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


@dataclass(frozen=True, slots=True)
class DeploymentMap:
    """Most recent deployment of one release to one environment."""

    project: Project
    release: Release
    environment: DeploymentEnvironment
    deployed_at: datetime


@dataclass(frozen=True, slots=True)
class ReleaseRetentionResolution:
    project_id: str
    environment_id: str
    # Most recently deployed first.
    releases_to_keep: tuple[Release, ...]

    @property
    def release_ids(self) -> tuple[str, ...]:
        return tuple(r.id for r in self.releases_to_keep)
