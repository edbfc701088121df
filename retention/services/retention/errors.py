from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class InvalidArgument:
    """A retention request argument failed validation.

    ``argument`` names the offending parameter as callers know it.
    """

    argument: Literal["numberOfReleases", "projectId", "environmentId"]
    message: str
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class DatasetError:
    kind: Literal[
        "file_not_found",
        "unreadable",
        "invalid_json",
        "invalid_timestamp",
    ]
    message: str
    hint: str | None = None


RetentionError = InvalidArgument | DatasetError
