"""Configuration schema definitions.

These types match the structure of config.toml. DEFAULTS_SCHEMA is
derived from DefaultsConfig and drives validation when the file is read
and when a value is set from the CLI.
"""

from typing import TypedDict, get_type_hints


class DefaultsConfig(TypedDict, total=False):
    """Defaults applied when building attachments from the CLI.

    Attributes:
        mime: MIME type for file attachments when --mime is not given.
        charset: Character set for HTML attachments.
        inline: Whether file and data attachments are inline.
        alternative: Whether HTML attachments are alternatives to plain text.
    """

    mime: str
    charset: str
    inline: bool
    alternative: bool


class JointeConfig(TypedDict, total=False):
    """Root configuration structure.

    Attributes:
        defaults: Attachment defaults.
    """

    defaults: DefaultsConfig


# Field name -> expected Python type, e.g. {"inline": bool}
DEFAULTS_SCHEMA: dict[str, type] = get_type_hints(DefaultsConfig)
