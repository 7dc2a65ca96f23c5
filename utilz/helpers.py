"""General helpers: reflection, conversion, collections, durations and numbers."""

from __future__ import annotations

import builtins
import sys
from collections.abc import Callable, Iterable, Mapping, MutableMapping
from datetime import timedelta
from typing import Any, TypeVar

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")
V = TypeVar("V")

_CONVERSION_ERRORS = (TypeError, ValueError, OverflowError, ArithmeticError)


def type_name(value: object) -> str:
    """Return the qualified type name of `value`."""
    cls = type(value)
    if cls.__module__ == builtins.__name__:
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def mem_size(value: object) -> int:
    """Return the size of `value` in bytes, as reported by the interpreter."""
    return sys.getsizeof(value)


def view(value: object) -> None:
    """Print the type name and memory size of `value`."""
    print(f"[view] Type: {type_name(value)}, Size: {mem_size(value)} bytes")


def to(value: Any, target: Callable[[Any], U]) -> U | None:
    """Convert `value` with `target`, or return None if the conversion fails."""
    try:
        return target(value)
    except _CONVERSION_ERRORS:
        return None


def to_or(value: Any, target: Callable[[Any], U], fallback: U) -> U:
    """Convert `value` with `target`, or return `fallback` if it fails."""
    converted = to(value, target)
    return fallback if converted is None else converted


def to_result(value: Any, target: Callable[[Any], U]) -> U:
    """Convert `value` with `target`, letting any conversion error propagate."""
    return target(value)


def push_if(items: list[T], value: T, cond: bool) -> None:
    """Append `value` to `items` if `cond` is true."""
    if cond:
        items.append(value)


def push_if_with(items: list[T], cond: bool, f: Callable[[], T]) -> None:
    """Append the result of `f()` to `items` if `cond` is true; `f` runs only then."""
    if cond:
        items.append(f())


def get_or(mapping: Mapping[K, V], key: K, fallback: V) -> V:
    """Return `mapping[key]` if the key is present, else `fallback`."""
    return mapping[key] if key in mapping else fallback


def insert_if(mapping: MutableMapping[K, V], key: K, value: V, cond: bool) -> None:
    """Set `mapping[key] = value` if `cond` is true."""
    if cond:
        mapping[key] = value


def pretty_duration(duration: timedelta | float) -> str:
    """Format a duration (timedelta or seconds) as ``"<h>h <m>m <s>s"``."""
    seconds = duration.total_seconds() if isinstance(duration, timedelta) else duration
    if seconds < 0:
        raise ValueError("duration must not be negative")
    total = int(seconds)
    hours, rest = divmod(total, 3600)
    mins, secs = divmod(rest, 60)
    return f"{hours}h {mins}m {secs}s"


def find_map_or(iterable: Iterable[T], f: Callable[[T], U | None], fallback: U) -> U:
    """Return the first non-None `f(item)`, or `fallback` if there is none."""
    for item in iterable:
        mapped = f(item)
        if mapped is not None:
            return mapped
    return fallback


def tap(value: T, f: Callable[[T], object]) -> T:
    """Call `f(value)` and return `value` unchanged."""
    f(value)
    return value


def unwrap_or_exit(value: T | BaseException | None, msg: str) -> T:
    """Return `value`, or report `msg` on stderr and exit with status 1.

    The program exits when `value` is None or an exception instance.
    """
    if value is None or isinstance(value, BaseException):
        print(f"[FATAL]: {msg}", file=sys.stderr)
        raise SystemExit(1)
    return value


def clamp_to(value: T, low: T, high: T) -> T:
    """Raise `value` to at least `low`, then lower it to at most `high`."""
    return min(max(value, low), high)


def is_even(value: int) -> bool:
    """Return whether `value` is divisible by two."""
    return value % 2 == 0


def is_odd(value: int) -> bool:
    """Return whether `value` is not divisible by two."""
    return value % 2 != 0


def xor(a: int, b: int) -> int:
    """Return the bitwise exclusive or of `a` and `b`."""
    return a ^ b