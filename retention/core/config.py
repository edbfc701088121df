"""Typed configuration loading and access.

Dataclasses for the retention.toml structure:

    [retention]
    keep = 3

    [data]
    dir = "data"
    projects = "Projects.json"
    releases = "Releases.json"
    deployments = "Deployments.json"
    environments = "Environments.json"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_int, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "DataConfig",
    "RetentionConfig",
    "load_config",
    "load_config_or_default",
    "CONFIG_FILE_NAME",
    "DEFAULT_KEEP",
]

CONFIG_FILE_NAME = "retention.toml"

DEFAULT_KEEP = 3
DEFAULT_DATA_DIR = "data"
DEFAULT_PROJECTS_FILE = "Projects.json"
DEFAULT_RELEASES_FILE = "Releases.json"
DEFAULT_DEPLOYMENTS_FILE = "Deployments.json"
DEFAULT_ENVIRONMENTS_FILE = "Environments.json"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class RetentionConfig:
    """How many releases to keep when the command line does not say."""

    keep: int = DEFAULT_KEEP


@dataclass(frozen=True, slots=True)
class DataConfig:
    """Where the dataset lives. ``dir`` is relative to the config file."""

    dir: str = DEFAULT_DATA_DIR
    projects: str = DEFAULT_PROJECTS_FILE
    releases: str = DEFAULT_RELEASES_FILE
    deployments: str = DEFAULT_DEPLOYMENTS_FILE
    environments: str = DEFAULT_ENVIRONMENTS_FILE


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    retention: RetentionConfig = field(default_factory=RetentionConfig)
    data: DataConfig = field(default_factory=DataConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If ``retention.keep`` is present but below 1.
        """
        retention: StrDict = get_table(data, "retention") or {}
        data_table: StrDict = get_table(data, "data") or {}

        keep = get_int(retention, "keep")
        if keep is not None and keep < 1:
            raise ValueError(f"retention.keep must be >= 1, got {keep}")

        return cls(
            retention=RetentionConfig(keep=keep if keep is not None else DEFAULT_KEEP),
            data=DataConfig(
                dir=get_str(data_table, "dir") or DEFAULT_DATA_DIR,
                projects=get_str(data_table, "projects") or DEFAULT_PROJECTS_FILE,
                releases=get_str(data_table, "releases") or DEFAULT_RELEASES_FILE,
                deployments=get_str(data_table, "deployments") or DEFAULT_DEPLOYMENTS_FILE,
                environments=get_str(data_table, "environments") or DEFAULT_ENVIRONMENTS_FILE,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to retention.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Load config from file, or return the default config if there is none.

    A file that exists but is broken is still reported as an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
