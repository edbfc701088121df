from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from retention.core.result import Err, Ok, Result
from retention.services.retention.errors import InvalidArgument
from retention.services.retention.model import (
    Deployment,
    DeploymentEnvironment,
    DeploymentMap,
    Project,
    Release,
    ReleaseRetentionResolution,
    naive_utc,
)
from retention.services.retention.reasons import ReasonSinkProtocol, RetentionReason

__all__ = ["ReleaseRetentionService"]

type _MapKey = tuple[str, str, str]  # (project id, release id, environment id)
type _GroupKey = tuple[str, str]  # (project id, environment id)


class ReleaseRetentionService:
    """Decide which releases to keep per project and environment.

    The four collections are captured at construction and never mutated.
    Dangling references (a release pointing at an unknown project, a
    deployment pointing at an unknown release or environment) are dropped
    silently when resolving; they are never an error.
    """

    def __init__(
        self,
        projects: Iterable[Project],
        releases: Iterable[Release],
        deployments: Iterable[Deployment],
        environments: Iterable[DeploymentEnvironment],
        *,
        reasons: ReasonSinkProtocol | None = None,
    ) -> None:
        self._projects = tuple(projects)
        self._releases = tuple(releases)
        self._deployments = tuple(deployments)
        self._environments = tuple(environments)
        self._reasons = reasons

    def retain_releases(
        self,
        number_of_releases: int,
        project_id: str | None = None,
        environment_id: str | None = None,
    ) -> Result[list[ReleaseRetentionResolution], InvalidArgument]:
        """Return the releases to keep for every project/environment pair.

        Args:
            number_of_releases: How many releases to keep per pair (>= 1).
            project_id: Only resolve this project. Empty means all projects.
            environment_id: Only resolve this environment. Empty means all.

        Returns:
            Ok with one resolution per (project, environment) pair, in
            project-major order, including pairs with nothing to keep.
            Err(InvalidArgument) if an argument is invalid; nothing is
            resolved and no reasons are recorded in that case.
        """
        invalid = self._validate(number_of_releases, project_id, environment_id)
        if invalid is not None:
            return Err(invalid)

        projects = [p for p in self._projects if not project_id or p.id == project_id]
        environments = [e for e in self._environments if not environment_id or e.id == environment_id]

        groups = _group_maps(self._deployment_maps(projects, environments))

        resolutions: list[ReleaseRetentionResolution] = []
        for project, environment in _combinations(projects, environments):
            ranked = _rank(groups.get((project.id, environment.id), []))
            kept = tuple(m.release for m in ranked[:number_of_releases])
            self._record_reasons(project, environment, kept)
            resolutions.append(
                ReleaseRetentionResolution(
                    project_id=project.id,
                    environment_id=environment.id,
                    releases_to_keep=kept,
                )
            )

        return Ok(resolutions)

    def _validate(
        self,
        number_of_releases: int,
        project_id: str | None,
        environment_id: str | None,
    ) -> InvalidArgument | None:
        if number_of_releases <= 0:
            return InvalidArgument(
                argument="numberOfReleases",
                message="number of releases should be greater than zero",
                hint=f"got {number_of_releases}",
            )

        if project_id and not any(p.id == project_id for p in self._projects):
            return InvalidArgument(
                argument="projectId",
                message=f"project id is not in the project list: {project_id}",
                hint=_known(p.id for p in self._projects),
            )

        if environment_id and not any(e.id == environment_id for e in self._environments):
            return InvalidArgument(
                argument="environmentId",
                message=f"environment id is not in the environment list: {environment_id}",
                hint=_known(e.id for e in self._environments),
            )

        return None

    def _deployment_maps(
        self,
        projects: list[Project],
        environments: list[DeploymentEnvironment],
    ) -> list[DeploymentMap]:
        """Join deployments to their release, project and environment.

        Only ``projects`` and ``environments`` are joinable, which applies the
        scope filters. Redeploys collapse to their latest timestamp.
        """
        project_by_id = _index(projects)
        environment_by_id = _index(environments)
        release_by_id = _index(self._releases)

        latest: dict[_MapKey, datetime] = {}
        for deployment in self._deployments:
            release = release_by_id.get(deployment.release_id)
            if release is None:
                continue
            if release.project_id not in project_by_id:
                continue
            if deployment.environment_id not in environment_by_id:
                continue

            key = (release.project_id, release.id, deployment.environment_id)
            deployed_at = naive_utc(deployment.deployed_at)
            seen = latest.get(key)
            if seen is None or deployed_at > seen:
                latest[key] = deployed_at

        return [
            DeploymentMap(
                project=project_by_id[p_id],
                release=release_by_id[r_id],
                environment=environment_by_id[e_id],
                deployed_at=deployed_at,
            )
            for (p_id, r_id, e_id), deployed_at in latest.items()
        ]

    def _record_reasons(
        self,
        project: Project,
        environment: DeploymentEnvironment,
        kept: tuple[Release, ...],
    ) -> None:
        if self._reasons is None:
            return
        for rank, release in enumerate(kept, start=1):
            self._reasons.record(
                RetentionReason(
                    release_id=release.id,
                    release_version=release.version,
                    project_name=project.name,
                    project_id=project.id,
                    rank=rank,
                    environment_name=environment.name,
                    environment_id=environment.id,
                )
            )


def _index[T: (Project, Release, DeploymentEnvironment)](items: Iterable[T]) -> dict[str, T]:
    # First occurrence wins on duplicate ids.
    out: dict[str, T] = {}
    for item in items:
        out.setdefault(item.id, item)
    return out


def _group_maps(maps: list[DeploymentMap]) -> dict[_GroupKey, list[DeploymentMap]]:
    groups: dict[_GroupKey, list[DeploymentMap]] = {}
    for m in maps:
        groups.setdefault((m.project.id, m.environment.id), []).append(m)
    return groups


def _combinations(
    projects: list[Project],
    environments: list[DeploymentEnvironment],
) -> list[tuple[Project, DeploymentEnvironment]]:
    """Every (project, environment) pair, deduplicated by id, project-major."""
    seen: set[_GroupKey] = set()
    out: list[tuple[Project, DeploymentEnvironment]] = []
    for project in projects:
        for environment in environments:
            key = (project.id, environment.id)
            if key in seen:
                continue
            seen.add(key)
            out.append((project, environment))
    return out


def _rank(maps: list[DeploymentMap]) -> list[DeploymentMap]:
    """Most recent first; equal timestamps fall back to release id order."""
    by_id = sorted(maps, key=lambda m: m.release.id)
    return sorted(by_id, key=lambda m: m.deployed_at, reverse=True)


def _known(ids: Iterable[str]) -> str:
    known = sorted(set(ids))
    if not known:
        return "no entries loaded"
    return f"known: {', '.join(known)}"
