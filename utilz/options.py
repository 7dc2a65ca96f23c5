"""Helpers for values that may be None."""

from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T")


def or_default_with(value: T | None, fallback: T) -> T:
    """Return `value` unless it is None, in which case return `fallback`."""
    return fallback if value is None else value


def if_some(value: T | None, f: Callable[[T], object]) -> T | None:
    """Call `f(value)` if `value` is not None; return `value` unchanged."""
    if value is not None:
        f(value)
    return value


def if_none(value: object, f: Callable[[], object]) -> None:
    """Call `f()` if `value` is None."""
    if value is None:
        f()