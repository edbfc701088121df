"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer

from retention.core.result import Err, Result
from retention.output.errors import (
    PresentableError,
    print_retention_error,
    retention_error_exit_code,
)

if TYPE_CHECKING:
    from retention.cli.context import CLIContext


def unwrap_or_exit[T, E: PresentableError](result: Result[T, E], ctx: CLIContext) -> T:
    """Return the Ok value, or print the error and exit with its code.

    Replaces the common pattern:
        match result:
            case Err(e):
                print_retention_error(e, ctx.console)
                raise typer.Exit(code=retention_error_exit_code(e))
            case Ok(value):
                ...
    """
    if isinstance(result, Err):
        print_retention_error(result.error, ctx.console)
        raise typer.Exit(code=retention_error_exit_code(result.error))
    return result.value
