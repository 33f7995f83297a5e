"""Headers command implementation.

Renders the MIME header block for a single attachment. Defaults for
options that are not given come from the [defaults] config section.
"""

import json
from pathlib import Path

import typer
from typing_extensions import Annotated

from jointe.attachment import Attachment, Header
from jointe.config import load_defaults
from jointe.errors import ConfigError, HeaderFormatError

app = typer.Typer(help="Render MIME headers for an attachment")

HeaderOption = Annotated[
    list[str] | None,
    typer.Option("--header", "-H", help="Additional header, e.g. 'Content-ID: <logo>'"),
]
FormatOption = Annotated[
    str, typer.Option("--format", help="Output format: text, json")
]


@app.command("file")
def file_headers(
    path: Annotated[str, typer.Argument(help="Path to the file (not read)")],
    mime: Annotated[str | None, typer.Option("--mime", help="MIME type")] = None,
    name: Annotated[
        str | None, typer.Option("--name", help="File name shown in the mail")
    ] = None,
    inline: Annotated[
        bool | None, typer.Option("--inline/--no-inline", help="Embed in the mail content")
    ] = None,
    header: HeaderOption = None,
    format: FormatOption = "text",
):
    """Render headers for an attachment backed by a local file."""
    defaults = _defaults_or_exit()
    additional = _parse_or_exit(header)

    attachment = Attachment.from_file(
        path,
        mime or defaults["mime"],
        name,
        inline=defaults["inline"] if inline is None else inline,
        additional_headers=additional,
    )
    _output(attachment, format)


@app.command("data")
def data_headers(
    name: Annotated[str, typer.Argument(help="File name shown in the mail")],
    mime: Annotated[str, typer.Option("--mime", help="MIME type of the data")],
    inline: Annotated[
        bool | None, typer.Option("--inline/--no-inline", help="Embed in the mail content")
    ] = None,
    header: HeaderOption = None,
    format: FormatOption = "text",
):
    """Render headers for data read from stdin."""
    defaults = _defaults_or_exit()
    additional = _parse_or_exit(header)

    data = typer.get_binary_stream("stdin").read()

    attachment = Attachment.from_data(
        data,
        mime,
        name,
        inline=defaults["inline"] if inline is None else inline,
        additional_headers=additional,
    )
    _output(attachment, format)


@app.command("html")
def html_headers(
    path: Annotated[Path, typer.Argument(help="HTML document to attach")],
    charset: Annotated[
        str | None, typer.Option("--charset", help="Character set of the document")
    ] = None,
    alternative: Annotated[
        bool | None,
        typer.Option(
            "--alternative/--no-alternative",
            help="Mark as alternative to the plain text body",
        ),
    ] = None,
    header: HeaderOption = None,
    format: FormatOption = "text",
):
    """Render headers for an HTML document."""
    defaults = _defaults_or_exit()
    additional = _parse_or_exit(header)
    charset = charset or defaults["charset"]

    try:
        content = path.read_text(encoding=charset)
    except (OSError, LookupError, UnicodeDecodeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    attachment = Attachment.from_html(
        content,
        charset,
        alternative=defaults["alternative"] if alternative is None else alternative,
        additional_headers=additional,
    )
    _output(attachment, format)


def parse_header(text: str) -> Header:
    """Split a "Name: value" string into a header pair.

    Only the first colon separates name from value, so values may
    contain colons. Surrounding whitespace is stripped.

    Raises:
        HeaderFormatError: If there is no colon or the name is empty.
    """
    name, sep, value = text.partition(":")
    name = name.strip()
    if not sep or not name:
        raise HeaderFormatError(f"Expected 'Name: value', got {text!r}")
    return (name, value.strip())


def _defaults_or_exit():
    try:
        return load_defaults()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def _parse_or_exit(headers: list[str] | None) -> list[Header]:
    try:
        return [parse_header(h) for h in headers or []]
    except HeaderFormatError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def _output(attachment: Attachment, format: str) -> None:
    if format == "json":
        result = attachment.to_dict()
        result["has_related"] = attachment.has_related
        result["is_alternative"] = attachment.is_alternative
        typer.echo(json.dumps(result, indent=2))
    elif format == "text":
        typer.echo(attachment.headers_string)
    else:
        typer.echo(f"Unknown format: {format}", err=True)
        raise typer.Exit(1)
