"""Result type for explicit error handling.

Fallible operations (loading a dataset, parsing config, resolving retention)
return a Result instead of raising, so callers decide how a failure is shown.

Usage:
    match service.retain_releases(3, project_id="Project-1"):
        case Ok(resolutions):
            for r in resolutions:
                print(r.environment_id, [rel.id for rel in r.releases_to_keep])
        case Err(error):
            print(f"invalid {error.argument}: {error.message}")
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result.

    Attributes:
        error: The error value.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
