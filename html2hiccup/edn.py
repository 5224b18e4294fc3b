"""String literal and keyword rendering for the Hiccup notation."""

from __future__ import annotations

import string
from typing import Dict

_SHORT_ESCAPES: Dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\b": "\\b",
    "\f": "\\f",
}

_SHORT_UNESCAPES: Dict[str, str] = {value[1]: key for key, value in _SHORT_ESCAPES.items()}
_HEX_DIGITS = frozenset(string.hexdigits)


def _is_control(ch: str) -> bool:
    code = ord(ch)
    return code < 0x20 or code == 0x7F


def escape_string(value: str) -> str:
    """Escape backslash, double quote and control characters."""
    parts = []
    for ch in value:
        if ch in _SHORT_ESCAPES:
            parts.append(_SHORT_ESCAPES[ch])
        elif _is_control(ch):
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(ch)
    return "".join(parts)


def unescape_string(value: str) -> str:
    """Inverse of :func:`escape_string`.

    Raises ``ValueError`` on a trailing backslash or an unknown escape.
    """
    parts = []
    index = 0
    length = len(value)
    while index < length:
        ch = value[index]
        if ch != "\\":
            parts.append(ch)
            index += 1
            continue
        if index + 1 >= length:
            raise ValueError(f"dangling backslash at offset {index}")
        marker = value[index + 1]
        if marker in _SHORT_UNESCAPES:
            parts.append(_SHORT_UNESCAPES[marker])
            index += 2
        elif marker == "u":
            digits = value[index + 2 : index + 6]
            if len(digits) != 4 or any(c not in _HEX_DIGITS for c in digits):
                raise ValueError(f"invalid \\u escape {digits!r} at offset {index}")
            parts.append(chr(int(digits, 16)))
            index += 6
        else:
            raise ValueError(f"unknown escape \\{marker} at offset {index}")
    return "".join(parts)


def quote_string(value: str) -> str:
    return f'"{escape_string(value)}"'


def keyword(name: str) -> str:
    return f":{name}"


__all__ = ["escape_string", "unescape_string", "quote_string", "keyword"]
