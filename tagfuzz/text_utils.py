"""Small text helpers used by the tag suggestion front end."""

from __future__ import annotations

import sys
from pathlib import Path

_TRIM_CHARS = " \t"
_ESCAPED_CHARS = "()"


def utf8_to_unicode(data: bytes) -> str:
    """Decode UTF-8 bytes; invalid sequences become U+FFFD."""
    if not data:
        return ""
    return bytes(data).decode("utf-8", errors="replace")


def unicode_to_utf8(text: str) -> bytes:
    """Encode text as UTF-8; unpaired surrogates become U+FFFD."""
    if not text:
        return b""
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        # Pair up surrogates where possible and replace the stray ones.
        repaired = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
        return repaired.encode("utf-8")


def _program_dir() -> Path:
    script = sys.argv[0] if sys.argv else ""
    if script:
        return Path(script).resolve().parent
    return Path(sys.executable).resolve().parent


def fullpath(filename: str) -> str:
    """Return ``filename`` resolved against the directory of the running program."""
    return str(_program_dir() / filename)


def booru_to_image_tag(booru_tag: str) -> str:
    """Turn a booru tag into an image-generation tag.

    Underscores become spaces and parentheses are escaped with a backslash.
    """
    if not booru_tag:
        return ""
    spaced = booru_tag.replace("_", " ")
    return "".join("\\" + ch if ch in _ESCAPED_CHARS else ch for ch in spaced)


def utf8_has_multibyte(data: bytes | str) -> bool:
    """Tell whether the text contains any character outside ASCII."""
    if isinstance(data, str):
        return any(ord(ch) >= 0x80 for ch in data)
    return any(byte >= 0x80 for byte in data)


def get_span_at_cursor(text: str, pos: int) -> tuple[int, int]:
    """Return ``(start, end)`` of the comma-separated item around ``pos``."""
    search_to = pos - 1 if pos > 0 else 0
    comma_before = text.rfind(",", 0, search_to + 1)
    comma_after = text.find(",", pos) if pos >= 0 else -1

    start = 0 if comma_before == -1 else comma_before + 1
    end = len(text) if comma_after == -1 else comma_after
    return start, max(start, end)


def trim(text: str) -> str:
    """Strip spaces and tabs from both ends."""
    return text.strip(_TRIM_CHARS)