"""Entity encoding helpers shared by the serializer and the builders."""

from __future__ import annotations

import html
import random
import re
from html.entities import codepoint2name

# An ampersand that already starts a character reference.
_ENTITY_RE = re.compile(r"&(?:[A-Za-z][A-Za-z0-9]*|#[0-9]+|#[xX][0-9A-Fa-f]+);")


def escape_text(value: str) -> str:
    """Encode ``& < > " '`` for use in text content or attribute values."""

    return html.escape(value, quote=True)


def decode(value: str) -> str:
    return html.unescape(value)


def entities(value: str, *, double_encode: bool = False) -> str:
    """Convert a string to HTML entities.

    Reserved characters are always encoded. Characters outside ASCII that have
    a named entity are encoded by name. Unless ``double_encode`` is set,
    existing character references are left untouched.
    """

    parts: list[str] = []
    pos = 0
    if not double_encode:
        for match in _ENTITY_RE.finditer(value):
            parts.append(_encode_chunk(value[pos : match.start()]))
            parts.append(match.group(0))
            pos = match.end()
    parts.append(_encode_chunk(value[pos:]))
    return "".join(parts)


def _encode_chunk(chunk: str) -> str:
    out: list[str] = []
    for char in escape_text(chunk):
        code = ord(char)
        if code > 127 and code in codepoint2name:
            out.append(f"&{codepoint2name[code]};")
        else:
            out.append(char)
    return "".join(out)


def obfuscate(value: str, rng: random.Random | None = None) -> str:
    """Randomly encode ASCII characters as decimal or hex references.

    Browsers decode the result back to ``value``; naive scrapers do not.
    """

    rng = rng or random.Random()
    out: list[str] = []
    for char in value:
        code = ord(char)
        if code > 127:
            out.append(char)
            continue
        choice = rng.randint(1, 3)
        if choice == 1:
            out.append(f"&#{code};")
        elif choice == 2:
            out.append(f"&#x{code:x};")
        else:
            out.append(char)
    return "".join(out)


__all__ = ["decode", "entities", "escape_text", "obfuscate"]
