"""Exceptions raised by jointe.

The attachment model and header renderer never raise; these cover input
handed to the package from the outside: command-line header strings
and the config file.
"""


class JointeError(Exception):
    """Base error for jointe."""

    pass


class HeaderFormatError(JointeError, ValueError):
    """A "Name: value" string could not be split into a header pair."""

    pass


class ConfigError(JointeError, ValueError):
    """The config file or a value written to it does not fit the schema."""

    pass
