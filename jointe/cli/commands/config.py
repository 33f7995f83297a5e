"""Config command implementation.

Manages the attachment defaults file.
"""

import typer
from typing_extensions import Annotated

from jointe.config import (
    BUILTIN_DEFAULTS,
    CONFIG_ENV,
    ConfigError,
    config_path,
    init_config,
    read_defaults,
    set_default,
)

app = typer.Typer(help="Manage attachment defaults")


@app.command()
def init(
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite existing config")
    ] = False,
):
    """Write a commented config file with the built-in defaults."""
    path = config_path()
    if not init_config(overwrite=force):
        typer.echo(f"{path} exists; pass --force to replace it.")
        return
    typer.echo(f"Wrote {path}")


@app.command()
def show():
    """Show each default and where its value comes from."""
    path = config_path()
    try:
        from_file = read_defaults()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"# {path}" + ("" if path.exists() else " (missing)"))
    if not path.exists():
        typer.echo(f"# set {CONFIG_ENV} or run 'jointe config init' to create it")

    typer.echo("[defaults]")
    for key, builtin in BUILTIN_DEFAULTS.items():
        value = from_file.get(key, builtin)
        if isinstance(value, bool):
            value = str(value).lower()
        origin = "file" if key in from_file else "built-in"
        typer.echo(f"  {key} = {value}  ({origin})")


@app.command("set")
def set_value(
    key: Annotated[
        str, typer.Argument(help="Default to change, e.g. 'defaults.mime' or 'inline'")
    ],
    value: Annotated[str, typer.Argument(help="New value")],
):
    """Change one attachment default.

    Examples:
        jointe config set defaults.mime application/pdf
        jointe config set inline true
    """
    try:
        stored = set_default(key, value)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if isinstance(stored, bool):
        stored = str(stored).lower()
    typer.echo(f"defaults.{key.removeprefix('defaults.')} = {stored}")
