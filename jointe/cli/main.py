"""Main CLI entry point for jointe."""

import logging

import typer
from typing_extensions import Annotated

from jointe import __version__
from jointe.cli import commands

app = typer.Typer(
    name="jointe",
    help="Render MIME headers for email attachments",
    no_args_is_help=True,
)

# Register command groups
app.add_typer(commands.headers.app, name="headers")
app.add_typer(commands.config.app, name="config")


@app.callback()
def root(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
):
    """Render MIME headers for email attachments."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def version():
    """Show version information."""
    typer.echo(f"jointe version {__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
