"""String functions with clamped indices and -1 for missing substrings."""

from __future__ import annotations

_C_SPACE = " \t\n\v\f\r"
_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_strings(message: str, *values: object) -> None:
    if not all(isinstance(value, str) for value in values):
        raise TypeError(message)


def length(text: str) -> int:
    _require_strings("length requires a string argument", text)
    return len(text)


def substring(text: str, start: int, end: int) -> str:
    """Characters from ``start`` up to ``end``; out-of-range bounds are clamped."""
    if not (isinstance(text, str) and _is_number(start) and _is_number(end)):
        raise TypeError("substring requires string, start, and end arguments")
    first = max(int(start), 0)
    last = min(int(end), len(text))
    if first >= last:
        return ""
    return text[first:last]


def index_of(text: str, sub: str) -> int:
    """Position of the first occurrence of ``sub``, or -1."""
    _require_strings("indexOf requires string and substring arguments", text, sub)
    return text.find(sub)


def last_index_of(text: str, sub: str) -> int:
    """Position of the last occurrence of ``sub``, or -1."""
    _require_strings("lastIndexOf requires string and substring arguments", text, sub)
    return text.rfind(sub)


def replace_all(text: str, search: str, replacement: str) -> str:
    """Replace every occurrence of ``search``, scanning on after each replacement."""
    _require_strings(
        "replace requires string, search, and replacement arguments", text, search, replacement
    )
    if not search:
        raise ValueError("replace requires a non-empty search string")
    return text.replace(search, replacement)


def split(text: str, delimiter: str) -> list[str]:
    """Split on ``delimiter``; an empty delimiter splits into single characters."""
    _require_strings("split requires string and delimiter arguments", text, delimiter)
    if not delimiter:
        return list(text)
    return text.split(delimiter)


def to_upper(text: str) -> str:
    """Upper-case ASCII letters; other characters are unchanged."""
    _require_strings("toUpperCase requires a string argument", text)
    return text.translate(_UPPER)


def to_lower(text: str) -> str:
    """Lower-case ASCII letters; other characters are unchanged."""
    _require_strings("toLowerCase requires a string argument", text)
    return text.translate(_LOWER)


def trim(text: str) -> str:
    """Remove leading and trailing ASCII whitespace."""
    _require_strings("trim requires a string argument", text)
    return text.strip(_C_SPACE)