"""Shared fixtures for fs-maybe-examples tests."""

from pathlib import Path
from unittest.mock import patch

import pytest

# ---------------------------------------------------------------------------
# TOML string constants
# ---------------------------------------------------------------------------

VALID_TOML = """\
numbers = [10, 20, 30, 0]
target = 20
offset = 10
decrement = 5
default = -1
"""

MINIMAL_TOML = """\
"""

INVALID_TOML_SYNTAX = """\
numbers = /invalid  # missing brackets
"""

INVALID_FIELD_TOML = """\
numbers = ["a", "b"]
"""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def numbers() -> list[int]:
    return [1, 2, 3, 4, 56, 7, 8, 9, 12]


@pytest.fixture
def valid_config_file(tmp_path: Path) -> Path:
    config_file = tmp_path / 'config.toml'
    config_file.write_text(VALID_TOML)
    return config_file


@pytest.fixture
def minimal_config_file(tmp_path: Path) -> Path:
    config_file = tmp_path / 'config.toml'
    config_file.write_text(MINIMAL_TOML)
    return config_file


@pytest.fixture
def invalid_syntax_config_file(tmp_path: Path) -> Path:
    config_file = tmp_path / 'config.toml'
    config_file.write_text(INVALID_TOML_SYNTAX)
    return config_file


@pytest.fixture
def invalid_field_config_file(tmp_path: Path) -> Path:
    config_file = tmp_path / 'config.toml'
    config_file.write_text(INVALID_FIELD_TOML)
    return config_file


@pytest.fixture
def empty_xdg_home(tmp_path: Path):
    """Point the XDG config home at an empty directory."""
    xdg_home = tmp_path / 'xdg'
    with patch('fs_maybe_examples.config.xdg_config_home', return_value=xdg_home):
        yield xdg_home
