"""String helpers."""

from __future__ import annotations

from collections.abc import Iterable


def contains_all(text: str, parts: Iterable[str]) -> bool:
    """Return whether every string in `parts` occurs in `text`."""
    return all(part in text for part in parts)


def contains_any(text: str, parts: Iterable[str]) -> bool:
    """Return whether any string in `parts` occurs in `text`."""
    return any(part in text for part in parts)


def to_title_case(text: str) -> str:
    """Return `text` with its first character upper-cased."""
    if not text:
        return ""
    return text[0].upper() + text[1:]