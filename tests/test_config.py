"""Tests for attachment defaults and the config CLI.

The autouse isolated_config fixture (conftest.py) points JOINTE_CONFIG
at a file under tmp_path for every test.
"""

import tomllib
from pathlib import Path

import pytest
from typer.testing import CliRunner

from jointe.cli.main import app
from jointe.config import (
    BUILTIN_DEFAULTS,
    CONFIG_ENV,
    ConfigError,
    config_path,
    init_config,
    load_defaults,
    read_defaults,
    set_default,
)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestConfigPath:
    """Tests for config_path()."""

    def test_env_override(self, isolated_config: Path):
        assert config_path() == isolated_config

    def test_home_default(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.delenv(CONFIG_ENV)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert config_path() == tmp_path / ".config" / "jointe" / "config.toml"


class TestReadDefaults:
    """Tests for read_defaults() and load_defaults()."""

    def test_missing_file(self):
        assert read_defaults() == {}
        assert load_defaults() == BUILTIN_DEFAULTS

    def test_file_values_override_builtin(self, write_config):
        write_config('[defaults]\ninline = true\ncharset = "latin-1"\n')

        defaults = load_defaults()
        assert defaults["inline"] is True
        assert defaults["charset"] == "latin-1"
        assert defaults["mime"] == "application/octet-stream"

    def test_does_not_mutate_builtin(self, write_config):
        write_config('[defaults]\ncharset = "latin-1"\n')
        load_defaults()
        assert BUILTIN_DEFAULTS["charset"] == "utf-8"

    def test_missing_table(self, write_config):
        write_config("# nothing yet\n")
        assert read_defaults() == {}

    @pytest.mark.parametrize(
        "toml,message",
        [
            ('[defaults]\ninline = "yes"\n', "defaults.inline must be a bool, got str 'yes'"),
            ("[defaults]\nmime = 42\n", "defaults.mime must be a str, got int 42"),
            ("[defaults]\nalternative = 1\n", "defaults.alternative must be a bool"),
            ('[defaults]\nencoding = "b"\n', "unknown key defaults.encoding"),
            ('defaults = "flat"\n', "[defaults] must be a table"),
            ("[defaults\n", "config.toml"),
        ],
    )
    def test_rejects_bad_file(self, write_config, toml: str, message: str):
        write_config(toml)

        with pytest.raises(ConfigError) as excinfo:
            load_defaults()
        assert message in str(excinfo.value)


class TestInitConfig:
    """Tests for init_config()."""

    def test_template_matches_builtin(self, isolated_config: Path):
        assert init_config() is True

        with open(isolated_config, "rb") as f:
            assert tomllib.load(f)["defaults"] == BUILTIN_DEFAULTS

    def test_keeps_existing(self, write_config):
        path = write_config("# mine\n")

        assert init_config() is False
        assert path.read_text() == "# mine\n"

    def test_overwrite(self, write_config):
        path = write_config("# mine\n")

        assert init_config(overwrite=True) is True
        assert "[defaults]" in path.read_text()


class TestSetDefault:
    """Tests for set_default()."""

    def test_creates_file(self, isolated_config: Path):
        assert set_default("defaults.mime", "application/pdf") == "application/pdf"
        assert read_defaults() == {"mime": "application/pdf"}

    def test_short_key(self):
        set_default("charset", "latin-1")
        assert read_defaults() == {"charset": "latin-1"}

    @pytest.mark.parametrize(
        "raw,expected",
        [("true", True), ("YES", True), ("1", True), ("false", False), ("no", False), ("0", False)],
    )
    def test_converts_booleans(self, raw: str, expected: bool):
        assert set_default("defaults.inline", raw) is expected
        assert read_defaults()["inline"] is expected

    def test_keeps_other_values(self):
        set_default("defaults.mime", "text/csv")
        set_default("defaults.alternative", "no")

        assert read_defaults() == {"mime": "text/csv", "alternative": False}

    def test_rejects_bad_boolean(self):
        with pytest.raises(ConfigError, match="alternative must be true or false"):
            set_default("defaults.alternative", "maybe")

    @pytest.mark.parametrize("key", ["defaults.encoding", "accounts.work.client_id", "defaults"])
    def test_rejects_unknown_key(self, key: str, isolated_config: Path):
        with pytest.raises(ConfigError, match="Unknown key"):
            set_default(key, "x")
        assert not isolated_config.exists()


class TestConfigCommand:
    """Tests for `jointe config`."""

    def test_init(self, runner: CliRunner, isolated_config: Path):
        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        assert f"Wrote {isolated_config}" in result.output
        assert isolated_config.exists()

    def test_init_existing(self, runner: CliRunner):
        runner.invoke(app, ["config", "init"])
        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        assert "pass --force to replace it" in result.output

    def test_show_builtin(self, runner: CliRunner):
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "(missing)" in result.output
        assert "mime = application/octet-stream  (built-in)" in result.output
        assert "alternative = true  (built-in)" in result.output

    def test_set_then_show(self, runner: CliRunner):
        result = runner.invoke(app, ["config", "set", "defaults.inline", "yes"])
        assert result.exit_code == 0
        assert "defaults.inline = true" in result.output

        result = runner.invoke(app, ["config", "show"])
        assert "inline = true  (file)" in result.output
        assert "charset = utf-8  (built-in)" in result.output

    def test_set_invalid(self, runner: CliRunner):
        result = runner.invoke(app, ["config", "set", "defaults.inline", "sometimes"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_show_bad_file(self, runner: CliRunner, write_config):
        write_config("[defaults]\nmime = 1\n")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 1
        assert "defaults.mime must be a str" in result.output
