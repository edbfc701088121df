"""Why a release was kept.

The service records one RetentionReason per kept release per call on an
injected sink. The message template is a stable constant so callers and tests
can match on it without parsing rendered text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from retention.output.console import ConsoleProtocol, Style

__all__ = [
    "REASON_TEMPLATE",
    "RetentionReason",
    "ReasonSinkProtocol",
    "ConsoleReasonSink",
    "MockReasonSink",
]

REASON_TEMPLATE = (
    "{release_id} (version: {release_version}) kept for {project_name} ({project_id}) "
    "because it was top {rank} deployed to {environment_name} ({environment_id})"
)


@dataclass(frozen=True, slots=True)
class RetentionReason:
    release_id: str
    release_version: str
    project_name: str
    project_id: str
    rank: int  # 1 = most recently deployed
    environment_name: str
    environment_id: str

    @property
    def template(self) -> str:
        return REASON_TEMPLATE

    def render(self) -> str:
        return REASON_TEMPLATE.format(
            release_id=self.release_id,
            release_version=self.release_version,
            project_name=self.project_name,
            project_id=self.project_id,
            rank=self.rank,
            environment_name=self.environment_name,
            environment_id=self.environment_id,
        )


class ReasonSinkProtocol(Protocol):
    def record(self, reason: RetentionReason) -> None: ...


class ConsoleReasonSink:
    """Render each reason as a dimmed console line."""

    def __init__(self, console: ConsoleProtocol) -> None:
        self._console = console

    def record(self, reason: RetentionReason) -> None:
        self._console.print(reason.render(), Style.DIM)


def _empty_reasons() -> list[RetentionReason]:
    return []


@dataclass
class MockReasonSink:
    """Sink that captures reasons for testing."""

    reasons: list[RetentionReason] = field(default_factory=_empty_reasons)

    def record(self, reason: RetentionReason) -> None:
        self.reasons.append(reason)

    def clear(self) -> None:
        self.reasons.clear()

    @property
    def messages(self) -> list[str]:
        return [r.render() for r in self.reasons]

    def for_environment(self, environment_id: str) -> list[RetentionReason]:
        return [r for r in self.reasons if r.environment_id == environment_id]
