from utilz.options import if_none, if_some, or_default_with


def test_or_default_with_present():
    assert or_default_with(4, 9) == 4


def test_or_default_with_none():
    assert or_default_with(None, 9) == 9


def test_or_default_with_keeps_falsy_values():
    assert or_default_with(0, 9) == 0
    assert or_default_with("", "x") == ""


def test_if_some_calls_and_returns_value():
    seen = []
    assert if_some("hi", seen.append) == "hi"
    assert seen == ["hi"]


def test_if_some_skips_none():
    seen = []
    assert if_some(None, seen.append) is None
    assert seen == []


def test_if_none_calls_only_for_none():
    calls = []
    assert if_none(None, lambda: calls.append(1)) is None
    if_none(0, lambda: calls.append(2))
    assert calls == [1]