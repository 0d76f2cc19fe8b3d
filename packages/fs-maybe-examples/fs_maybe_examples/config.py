"""Configuration models and loader for fs-maybe-examples."""

import tomllib
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from returns.result import Failure, Result, Success, safe
from xdg_base_dirs import xdg_config_home

from fs_maybe import from_nullable, match

DEFAULT_NUMBERS = [1, 2, 3, 4, 56, 7, 8, 9, 12]


class ExamplesConfig(BaseModel):
    """Inputs for the example lookups."""

    numbers: list[int] = Field(default_factory=lambda: list(DEFAULT_NUMBERS))
    target: int = 12
    offset: int = 32
    decrement: int = 2
    default: int = 0


class ConfigLoadError(Exception):
    """Raised when configuration loading fails."""


def get_default_config_path() -> Path:
    """Return `$XDG_CONFIG_HOME/fs-maybe/config.toml`."""
    return xdg_config_home() / 'fs-maybe' / 'config.toml'


def get_config_path(path: Optional[Path]) -> Path:
    """Returns the `path` passed in the argument or the default config path.

    - If the argument is None, return `$XDG_CONFIG_HOME/fs-maybe/config.toml`
    - If the argument is not None, return the value of the argument
    """
    return match(from_nullable(path), lambda p: p, get_default_config_path)


def _ensure_config_file_exists(config_path: Path) -> Result[Path, ConfigLoadError]:
    if not config_path.exists():
        return Failure(ConfigLoadError(f'Config file not found: {config_path}'))
    return Success(config_path)


@safe
def _read_file(path: Path) -> bytes:
    """Read file bytes from path.

    Raises:
        OSError: If the file cannot be read.
    """
    return path.read_bytes()


@safe
def _parse_toml(raw: bytes) -> dict:
    """Parse TOML bytes to a dictionary.

    Raises:
        tomllib.TOMLDecodeError: If the TOML syntax is invalid.
    """
    return tomllib.loads(raw.decode())


@safe
def _validate_config(data: dict) -> ExamplesConfig:
    """Validate raw config dict against ExamplesConfig schema.

    Raises:
        Exception: If Pydantic validation fails.
    """
    return ExamplesConfig(**data)


def load_config(config_path: Path) -> Result[ExamplesConfig, ConfigLoadError]:
    """Load and validate a TOML configuration file.

    Args:
        config_path: Path to the TOML configuration file.

    Returns:
        Success containing a validated ExamplesConfig instance.
        Failure containing ConfigLoadError if the file is not found,
        cannot be read, contains invalid TOML, or fails Pydantic validation.
    """
    return (
        _ensure_config_file_exists(config_path)
        .bind(lambda p: _read_file(p).alt(lambda e: ConfigLoadError(f'Failed to read config file: {e}')))
        .bind(lambda raw: _parse_toml(raw).alt(lambda e: ConfigLoadError(f'Failed to parse TOML config: {e}')))
        .bind(lambda data: _validate_config(data).alt(lambda e: ConfigLoadError(f'Config validation failed: {e}')))
    )


def resolve_config(path: Optional[Path]) -> Result[ExamplesConfig, ConfigLoadError]:
    """Load the config given on the command line, or the default one.

    An explicit `path` must exist. When no path is given and the default file
    is missing, the built-in defaults are used.
    """
    config_path = get_config_path(path)
    if path is None and not config_path.exists():
        return Success(ExamplesConfig())
    return load_config(config_path)
