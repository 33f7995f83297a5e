"""Attachment model and MIME header rendering.

Usage:
    from jointe.attachment import Attachment

    attachment = Attachment.from_file("/tmp/report.pdf", mime="application/pdf")
    attachment.headers_string
"""

from .headers import CRLF, headers_string, render_headers
from .models import (
    Attachment,
    AttachmentVariant,
    DataVariant,
    FileVariant,
    Header,
    HtmlVariant,
)

__all__ = [
    "Attachment",
    "AttachmentVariant",
    "DataVariant",
    "FileVariant",
    "HtmlVariant",
    "Header",
    "CRLF",
    "render_headers",
    "headers_string",
]
