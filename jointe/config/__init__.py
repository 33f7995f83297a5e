"""Attachment defaults stored in a TOML file.

The file lives at ~/.config/jointe/config.toml unless JOINTE_CONFIG
points elsewhere. Only the [defaults] table is read; every key in it
must be one of the DefaultsConfig fields with the matching TOML type.

Usage:
    from jointe.config import load_defaults

    defaults = load_defaults()
    Attachment.from_file(path, defaults["mime"], inline=defaults["inline"])
"""

import logging
import os
import tomllib
from pathlib import Path

import tomli_w

from jointe.attachment.models import DEFAULT_CHARSET, DEFAULT_MIME
from jointe.errors import ConfigError

from .schema import DEFAULTS_SCHEMA, DefaultsConfig, JointeConfig
from .template import CONFIG_TEMPLATE

__all__ = [
    "BUILTIN_DEFAULTS",
    "CONFIG_ENV",
    "ConfigError",
    "config_path",
    "init_config",
    "load_defaults",
    "read_defaults",
    "set_default",
]

logger = logging.getLogger(__name__)

CONFIG_ENV = "JOINTE_CONFIG"

BUILTIN_DEFAULTS: DefaultsConfig = {
    "mime": DEFAULT_MIME,
    "charset": DEFAULT_CHARSET,
    "inline": False,
    "alternative": True,
}

_TRUE = ("true", "yes", "1")
_FALSE = ("false", "no", "0")


def config_path() -> Path:
    """Location of the config file, honouring JOINTE_CONFIG."""
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "jointe" / "config.toml"


def read_defaults() -> DefaultsConfig:
    """Read the [defaults] table from the config file.

    Returns:
        Only the values set in the file; empty if there is no file.

    Raises:
        ConfigError: If the file is not valid TOML, or [defaults] holds an
            unknown key or a value of the wrong type.
    """
    path = config_path()
    if not path.exists():
        logger.debug("No config file at %s", path)
        return {}

    try:
        with open(path, "rb") as f:
            document: JointeConfig = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e

    table = document.get("defaults", {})
    if not isinstance(table, dict):
        raise ConfigError(f"{path}: [defaults] must be a table")

    for key, value in table.items():
        _check_type(key, value, source=str(path))
    return table


def load_defaults() -> DefaultsConfig:
    """Built-in defaults overlaid with the values from the config file."""
    defaults: DefaultsConfig = dict(BUILTIN_DEFAULTS)
    defaults.update(read_defaults())
    return defaults


def init_config(*, overwrite: bool = False) -> bool:
    """Write the commented template to the config location.

    Returns:
        True if the file was written, False if one already existed.
    """
    path = config_path()
    if path.exists() and not overwrite:
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(CONFIG_TEMPLATE)
    return True


def set_default(key: str, value: str) -> str | bool:
    """Store one default given as text from the command line.

    The key may be written as "defaults.inline" or just "inline".
    Rewriting the file drops any comments from the template.

    Returns:
        The stored value after conversion.

    Raises:
        ConfigError: If the key is unknown or the value does not convert.
    """
    field = key.removeprefix("defaults.")
    if field not in DEFAULTS_SCHEMA:
        known = ", ".join(f"defaults.{name}" for name in DEFAULTS_SCHEMA)
        raise ConfigError(f"Unknown key {key!r}; expected one of {known}")

    converted = _convert(field, value)

    defaults = read_defaults()
    defaults[field] = converted

    path = config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        tomli_w.dump({"defaults": defaults}, f)

    logger.debug("Set defaults.%s = %r in %s", field, converted, path)
    return converted


def _convert(field: str, value: str) -> str | bool:
    if DEFAULTS_SCHEMA[field] is bool:
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ConfigError(f"{field} must be true or false, got {value!r}")
    return value


def _check_type(key: str, value: object, *, source: str) -> None:
    expected = DEFAULTS_SCHEMA.get(key)
    if expected is None:
        raise ConfigError(f"{source}: unknown key defaults.{key}")
    if type(value) is not expected:
        raise ConfigError(
            f"{source}: defaults.{key} must be a {expected.__name__}, "
            f"got {type(value).__name__} {value!r}"
        )
