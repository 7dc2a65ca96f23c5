"""Conditional helpers built on truth values, equality and ordering."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")
X = TypeVar("X")


def then_val(flag: bool, val: T) -> T | None:
    """Return `val` if `flag` is true, else None."""
    return val if flag else None


def if_true(flag: bool, f: Callable[[], X]) -> X | None:
    """Call `f` and return its result if `flag` is true, else None."""
    return f() if flag else None


def if_false(flag: bool, f: Callable[[], X]) -> X | None:
    """Call `f` and return its result if `flag` is false, else None."""
    return None if flag else f()


def eq_to(value: Any, other: Any) -> bool:
    """Return whether `value == other`."""
    return value == other


def not_eq_to(value: Any, other: Any) -> bool:
    """Return whether `value != other`."""
    return value != other


def if_eq(value: Any, other: Any, f: Callable[[], X]) -> X | None:
    """Call `f` if `value == other`."""
    return f() if value == other else None


def if_not_eq(value: Any, other: Any, f: Callable[[], X]) -> X | None:
    """Call `f` if `value != other`."""
    return f() if value != other else None


def if_gt(value: Any, other: Any, f: Callable[[], X]) -> X | None:
    """Call `f` if `value > other`."""
    return f() if value > other else None


def if_lt(value: Any, other: Any, f: Callable[[], X]) -> X | None:
    """Call `f` if `value < other`."""
    return f() if value < other else None


def if_gte(value: Any, other: Any, f: Callable[[], X]) -> X | None:
    """Call `f` if `value >= other`."""
    return f() if value >= other else None


def if_lte(value: Any, other: Any, f: Callable[[], X]) -> X | None:
    """Call `f` if `value <= other`."""
    return f() if value <= other else None


def if_between(value: Any, low: Any, high: Any, f: Callable[[], X]) -> X | None:
    """Call `f` if `low < value < high`."""
    return f() if value > low and value < high else None


def if_between_inclusive(value: Any, low: Any, high: Any, f: Callable[[], X]) -> X | None:
    """Call `f` if `low <= value <= high`."""
    return f() if value >= low and value <= high else None