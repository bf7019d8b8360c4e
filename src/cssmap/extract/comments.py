"""Comment and license banner scraping on raw stylesheet text."""

from __future__ import annotations

import re

__all__ = ["comments", "licenses", "strip_comments"]

# /* ... */ with no nesting; the body may contain lone "*" and "/".
_COMMENT_RE = re.compile(r"/\*[^*]*\*+(?:[^/*][^*]*\*+)*/")
# License banners are comments that open with "/*!".
_LICENSE_RE = re.compile(r"/\*![^*]*\*+(?:[^/*][^*]*\*+)*/")


def _text(data: bytes | str, encoding: str = "utf-8") -> str:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode(encoding)
    return data


def comments(data: bytes | str, encoding: str = "utf-8") -> list[str]:
    """Return every ``/* ... */`` comment in source order."""
    return _COMMENT_RE.findall(_text(data, encoding))


def licenses(data: bytes | str, encoding: str = "utf-8") -> list[str]:
    """Return every ``/*! ... */`` license banner in source order."""
    return _LICENSE_RE.findall(_text(data, encoding))


def strip_comments(data: bytes | str, encoding: str = "utf-8") -> str:
    """Remove all comments, keeping their line breaks so line numbers stay put.

    A single-line comment becomes one space so it still separates the
    tokens around it.
    """
    return _COMMENT_RE.sub(
        lambda m: "\n" * m.group(0).count("\n") or " ", _text(data, encoding)
    )
