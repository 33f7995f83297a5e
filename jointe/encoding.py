"""String helpers used when building attachment headers.

Both helpers are pure string operations. Nothing here touches the
file system, so a path to a file that does not exist is handled the
same as one that does.
"""

import logging
import os
import posixpath
from email.charset import Charset

logger = logging.getLogger(__name__)

# Characters that cannot appear unescaped inside a quoted-string parameter
_UNSAFE_IN_QUOTES = frozenset('"\\\r\n')

_UTF8 = Charset("utf-8")


def mime_encode(text: str) -> str | None:
    """Encode text for use as a quoted filename parameter.

    Plain printable ASCII is returned unchanged. Anything else becomes a
    single RFC 2047 encoded word in UTF-8 (base64 or quoted-printable,
    whichever is shorter).

    Args:
        text: Display name to encode.

    Returns:
        The encoded name, or None if the name is empty or cannot be
        encoded as UTF-8.
    """
    if not text:
        return None

    if text.isascii() and text.isprintable() and not _UNSAFE_IN_QUOTES.intersection(text):
        return text

    try:
        encoded = _UTF8.header_encode(text)
    except UnicodeEncodeError:
        logger.debug("Cannot encode %r, omitting filename", text)
        return None

    logger.debug("Encoded %r as %s", text, encoded)
    return encoded


def basename(path: str | os.PathLike) -> str:
    """Return the last component of a path.

    Trailing separators are ignored, so "/tmp/dir/" gives "dir". Dot
    segments are not resolved: "/srv/files/.." gives "..".
    """
    stripped = os.fspath(path).rstrip("/")
    return posixpath.basename(stripped) if stripped else ""
