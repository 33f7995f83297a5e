"""Shared fixtures.

Every test gets its own config location so nothing reads or writes
~/.config/jointe.
"""

from pathlib import Path

import pytest

from jointe.config import CONFIG_ENV


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config layer at a file under tmp_path (not created)."""
    path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv(CONFIG_ENV, str(path))
    return path


@pytest.fixture
def write_config(isolated_config: Path):
    """Write raw TOML to the isolated config file."""

    def _write(text: str) -> Path:
        isolated_config.parent.mkdir(parents=True, exist_ok=True)
        isolated_config.write_text(text)
        return isolated_config

    return _write
