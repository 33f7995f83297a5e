"""Data models for email attachments.

An Attachment wraps exactly one variant (raw data, a local file, or an
HTML document) together with extra headers and any related attachments
that belong inside the same multipart/related container.

All models are frozen. Sequences are stored as tuples so an Attachment
can be shared between threads and rendered any number of times.
"""

import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Union

from typing_extensions import assert_never

from jointe.encoding import basename

logger = logging.getLogger(__name__)

# (name, value) pair, e.g. ("Content-ID", "<logo@example.com>")
Header = tuple[str, str]

DEFAULT_MIME = "application/octet-stream"
DEFAULT_CHARSET = "utf-8"


@dataclass(frozen=True)
class DataVariant:
    """Raw bytes held in memory."""

    data: bytes = field(repr=False)
    mime: str
    name: str  # Filename presented in the mail
    inline: bool = False


@dataclass(frozen=True)
class FileVariant:
    """A file on local disk, read later by whoever sends the mail."""

    path: str
    mime: str
    name: str
    inline: bool = False


@dataclass(frozen=True)
class HtmlVariant:
    """An HTML document, usually the rich version of the message body."""

    content: str = field(repr=False)
    character_set: str = DEFAULT_CHARSET
    alternative: bool = True  # Alternative to the plain text body


AttachmentVariant = Union[DataVariant, FileVariant, HtmlVariant]


@dataclass(frozen=True)
class Attachment:
    """A single attachment of a mail.

    Build one with from_data(), from_file() or from_html() rather than
    calling the constructor directly.

    Example:
        logo = Attachment.from_file(
            "/srv/assets/logo.png",
            mime="image/png",
            inline=True,
            additional_headers=[("Content-ID", "<logo>")],
        )
        page = Attachment.from_html(
            '<img src="cid:logo">', related_attachments=[logo]
        )
        print(page.headers_string)
    """

    variant: AttachmentVariant
    additional_headers: tuple[Header, ...] = ()
    related_attachments: tuple["Attachment", ...] = ()

    def __post_init__(self):
        # Accept any iterable but always store tuples
        object.__setattr__(
            self, "additional_headers", tuple(tuple(h) for h in self.additional_headers)
        )
        object.__setattr__(
            self, "related_attachments", tuple(self.related_attachments)
        )

    @classmethod
    def from_data(
        cls,
        data: bytes,
        mime: str,
        name: str,
        *,
        inline: bool = False,
        additional_headers: Iterable[Header] = (),
        related_attachments: Iterable["Attachment"] = (),
    ) -> "Attachment":
        """Create an attachment from raw data.

        Args:
            data: Raw data to send. Kept as given, not copied.
            mime: MIME type of the data.
            name: File name presented in the mail.
            inline: True to embed in the mail content, False to send as
                a standalone attachment.
            additional_headers: Extra headers, emitted in order.
            related_attachments: Attachments related to this one.
        """
        logger.debug("Data attachment %r (%s, %d bytes)", name, mime, len(data))
        return cls(
            DataVariant(data=data, mime=mime, name=name, inline=inline),
            additional_headers,
            related_attachments,
        )

    @classmethod
    def from_file(
        cls,
        path: str | os.PathLike,
        mime: str = DEFAULT_MIME,
        name: str | None = None,
        *,
        inline: bool = False,
        additional_headers: Iterable[Header] = (),
        related_attachments: Iterable["Attachment"] = (),
    ) -> "Attachment":
        """Create an attachment from a local file.

        The file is not opened here and does not need to exist yet.

        Args:
            path: Path to the local file.
            mime: MIME type of the file.
            name: File name presented in the mail. Defaults to the last
                component of path.
            inline: True to embed in the mail content.
            additional_headers: Extra headers, emitted in order.
            related_attachments: Attachments related to this one.
        """
        path = os.fspath(path)
        if name is None:
            name = basename(path)
        logger.debug("File attachment %r (%s) from %s", name, mime, path)
        return cls(
            FileVariant(path=path, mime=mime, name=name, inline=inline),
            additional_headers,
            related_attachments,
        )

    @classmethod
    def from_html(
        cls,
        content: str,
        character_set: str = DEFAULT_CHARSET,
        *,
        alternative: bool = True,
        additional_headers: Iterable[Header] = (),
        related_attachments: Iterable["Attachment"] = (),
    ) -> "Attachment":
        """Create an HTML attachment.

        Args:
            content: HTML source.
            character_set: Character encoding of content.
            alternative: Whether the HTML is an alternative for the plain
                text body.
            additional_headers: Extra headers, emitted in order.
            related_attachments: Attachments related to this one, e.g.
                images referenced by cid.
        """
        logger.debug("HTML attachment (%s, alternative=%s)", character_set, alternative)
        return cls(
            HtmlVariant(
                content=content, character_set=character_set, alternative=alternative
            ),
            additional_headers,
            related_attachments,
        )

    @property
    def has_related(self) -> bool:
        """True if any attachments are nested under this one."""
        return len(self.related_attachments) > 0

    @property
    def is_alternative(self) -> bool:
        """True for HTML meant as an alternative to the plain text body."""
        return isinstance(self.variant, HtmlVariant) and self.variant.alternative

    @property
    def headers(self) -> list[Header]:
        """Ordered MIME headers for this attachment."""
        from jointe.attachment.headers import render_headers

        return render_headers(self)

    @property
    def headers_string(self) -> str:
        """MIME headers joined with CRLF."""
        from jointe.attachment.headers import headers_string

        return headers_string(self)

    def walk(self) -> Iterator["Attachment"]:
        """Yield this attachment and all related ones, depth first."""
        yield self
        for related in self.related_attachments:
            yield from related.walk()

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization.

        Payloads are summarized by size; the bytes are never included.
        """
        variant = self.variant
        match variant:
            case DataVariant():
                summary = {
                    "kind": "data",
                    "mime": variant.mime,
                    "name": variant.name,
                    "inline": variant.inline,
                    "size": len(variant.data),
                }
            case FileVariant():
                summary = {
                    "kind": "file",
                    "mime": variant.mime,
                    "name": variant.name,
                    "inline": variant.inline,
                    "path": variant.path,
                }
            case HtmlVariant():
                summary = {
                    "kind": "html",
                    "charset": variant.character_set,
                    "alternative": variant.alternative,
                    "length": len(variant.content),
                }
            case _:
                assert_never(variant)

        summary["headers"] = [list(h) for h in self.headers]
        summary["related"] = [a.to_dict() for a in self.related_attachments]
        return summary
