from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from retention.core.config import CONFIG_FILE_NAME, Config, load_config_or_default
from retention.core.errors import ErrorCode
from retention.core.result import Err
from retention.output.console import ConsoleProtocol, RichConsole
from retention.output.errors import print_retention_error, retention_error_exit_code


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    # Relative paths in the config resolve against this directory.
    base_dir: Path
    console: ConsoleProtocol

    @property
    def data_dir(self) -> Path:
        return (self.base_dir / self.config.data.dir).resolve()


def build_context(config_path: Path | None = None) -> CLIContext:
    """Load retention.toml (explicit path, or the one in cwd if present)."""
    console = RichConsole()
    path = config_path if config_path is not None else Path.cwd() / CONFIG_FILE_NAME

    # An explicit --config must exist; the implicit one is optional.
    if config_path is not None and not path.exists():
        console.error(f"config file not found: {path}")
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))

    config_result = load_config_or_default(path)
    if isinstance(config_result, Err):
        print_retention_error(config_result.error, console)
        raise typer.Exit(code=retention_error_exit_code(config_result.error))

    return CLIContext(
        config=config_result.value,
        base_dir=path.parent,
        console=console,
    )
