from __future__ import annotations

from pathlib import Path

from retention.core.config import ConfigError
from retention.core.errors import ErrorCode
from retention.output.console import MockConsole, Style
from retention.output.errors import print_retention_error, retention_error_exit_code
from retention.services.retention.errors import DatasetError, InvalidArgument


def test_invalid_argument_names_the_argument() -> None:
    console = MockConsole()
    error = InvalidArgument(argument="projectId", message="unknown", hint="known: Project-1")

    print_retention_error(error, console)

    assert console.messages == ["error: invalid projectId: unknown", "hint: known: Project-1"]
    assert console.outputs[1].style == Style.DIM
    assert retention_error_exit_code(error) == int(ErrorCode.USER_ERROR)


def test_dataset_error_exit_codes() -> None:
    missing = DatasetError(kind="file_not_found", message="gone")
    broken = DatasetError(kind="invalid_json", message="bad")

    assert retention_error_exit_code(missing) == int(ErrorCode.IO_ERROR)
    assert retention_error_exit_code(broken) == int(ErrorCode.DATA_ERROR)


def test_config_error() -> None:
    console = MockConsole()
    error = ConfigError("Invalid TOML syntax", path=Path("retention.toml"))

    print_retention_error(error, console)

    assert console.messages == ["error: Invalid TOML syntax"]
    assert retention_error_exit_code(error) == int(ErrorCode.DATA_ERROR)
