# utilz

Small, dependency-free helpers that make everyday Python code a little
shorter. They cover conditional evaluation, values that may be `None`,
string checks and collection helpers. The package also has a simple
in-memory logger.

## Installation

```
pip install utilz
```

## Modules

- `utilz.conditions` runs a callable only when a condition holds.
  - `if_true` and `if_false` call `f()` and return its result. They return
    `None` when the condition does not hold.
  - `then_val` returns the value or `None`.
  - The comparisons are `if_eq`, `if_not_eq`, `if_gt`, `if_lt`, `if_gte` and
    `if_lte`.
  - `if_between` is exclusive. `if_between_inclusive` includes both ends.
  - `eq_to` and `not_eq_to` are plain equality checks.
- `utilz.options` works with values that may be `None`.
  - `or_default_with` returns a fallback in place of `None`.
  - `if_some` calls `f(value)` when the value is not `None` and returns the
    value unchanged.
  - `if_none` calls `f()` when the value is `None`.
- `utilz.strings`
  - `contains_all` and `contains_any` test for substrings.
  - `to_title_case` upper-cases the first character only.
- `utilz.helpers`
  - Collections:
    - `push_if` and `push_if_with` append to a list. `push_if_with` runs its
      callable only when the condition is true.
    - `get_or` reads a mapping and returns a fallback when the key is missing.
    - `insert_if` sets a mapping key when the condition is true.
  - Iteration:
    - `find_map_or` returns the first non-`None` result of `f(item)`, or the
      fallback.
    - `tap` calls `f(value)` and returns the value.
  - Conversion:
    - `to(value, target)` calls `target(value)`. It returns `None` if that
      raises `TypeError`, `ValueError`, `OverflowError` or `ArithmeticError`.
    - `to_or` returns a fallback in that case.
    - `to_result` lets the error propagate.
  - Numbers:
    - `clamp_to(value, low, high)`
    - `is_even` and `is_odd`
    - `xor` for bitwise exclusive or.
  - `pretty_duration` formats a `timedelta` or a number of seconds as
    `"<h>h <m>m <s>s"`. It raises `ValueError` for negative durations.
  - Reflection:
    - `type_name` gives the type's qualified name, with no module prefix for
      built-in types.
    - `mem_size` gives `sys.getsizeof`.
    - `view` prints both.
  - `unwrap_or_exit(value, msg)` returns the value. If the value is `None` or
    an exception instance, it prints `[FATAL]: <msg>` to stderr and raises
    `SystemExit(1)`.
- `utilz.logger` provides `Log` and `LogLevel`, a process-wide, thread-safe
  in-memory log store.

## Examples

```python
from datetime import timedelta

from utilz.conditions import if_between, if_true
from utilz.helpers import clamp_to, pretty_duration, push_if, to
from utilz.options import if_some, or_default_with
from utilz.strings import contains_all, to_title_case

if_true(True, lambda: "ran")            # "ran"
if_between(5, 1, 10, lambda: "inside")  # "inside"

or_default_with(None, 3)                # 3
if_some("hi", print)                    # prints "hi", returns "hi"

contains_all("hello world", ["hello", "world"])  # True
to_title_case("hello")                  # "Hello"

items = []
push_if(items, 1, True)
push_if(items, 2, False)                # items == [1]

to("42", int)                           # 42
to("x", int)                            # None
clamp_to(15, 0, 10)                     # 10
pretty_duration(timedelta(seconds=3666))  # "1h 1m 6s"
pretty_duration(59)                       # "0h 0m 59s"
```

### Logging

```python
from utilz.logger import Log, LogLevel

Log.set_up_logger(LogLevel.WARN)
Log.log_error("disk full")   # kept
Log.log_info("started")      # dropped: less severe than Warn
Log.get_logs()               # ["[Error] @ <unix seconds>s → disk full"]
Log.print_logs()             # prints each line
Log.clear()
```

The levels run from most to least severe: Error, Warn, Info, Debug. A message
is kept only when its level is at least as severe as the configured level.

The default level is Debug, so every message is kept until a stricter level
is set. `Log.log(message)` logs at the configured level.

`set_up_logger` and `log_with_level` accept a `LogLevel` or its value, such as
`"Warn"`.

### Limits

The logger keeps records in memory only. It does not write them to files or
hand them to the standard `logging` module. Records last until
`Log.clear()` is called or the process ends.

## Running the tests

```
pip install -e .[test]
pytest
```