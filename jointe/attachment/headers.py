"""MIME header rendering for attachments.

Produces the header block that precedes an attachment's body inside a
multipart mail:

    CONTENT-TYPE: <mime>[; charset=<charset>]
    CONTENT-DISPOSITION: inline|attachment[; filename="<name>"]
    CONTENT-TRANSFER-ENCODING: BASE64
    <additional headers, in order>

The body itself is base64-encoded by whoever assembles the mail.
"""

import logging
from collections.abc import Callable

from typing_extensions import assert_never

from jointe.encoding import mime_encode

from .models import Attachment, DataVariant, FileVariant, Header, HtmlVariant

logger = logging.getLogger(__name__)

CRLF = "\r\n"

# Type for a filename encoder: returns None when no filename should be emitted
Encoder = Callable[[str], str | None]


def render_headers(attachment: Attachment, encoder: Encoder = mime_encode) -> list[Header]:
    """Build the ordered header pairs for an attachment.

    Args:
        attachment: The attachment to describe.
        encoder: Encodes the display name for the filename parameter.

    Returns:
        Content-Type, Content-Disposition and Content-Transfer-Encoding,
        followed by the attachment's additional headers unchanged.
    """
    headers: list[Header] = []

    variant = attachment.variant
    match variant:
        case DataVariant() | FileVariant():
            headers.append(("CONTENT-TYPE", variant.mime))
            disposition = "inline" if variant.inline else "attachment"
            filename = encoder(variant.name)
            if filename is not None:
                disposition += f'; filename="{filename}"'
            headers.append(("CONTENT-DISPOSITION", disposition))
        case HtmlVariant():
            headers.append(("CONTENT-TYPE", f"text/html; charset={variant.character_set}"))
            headers.append(("CONTENT-DISPOSITION", "inline"))
        case _:
            assert_never(variant)

    headers.append(("CONTENT-TRANSFER-ENCODING", "BASE64"))
    headers.extend(attachment.additional_headers)

    logger.debug("Rendered %d headers for %s", len(headers), type(variant).__name__)
    return headers


def headers_string(attachment: Attachment, encoder: Encoder = mime_encode) -> str:
    """Render the header block as "Name: Value" lines joined with CRLF."""
    return CRLF.join(
        f"{name}: {value}" for name, value in render_headers(attachment, encoder)
    )
