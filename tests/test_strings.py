from utilz.strings import contains_all, contains_any, to_title_case


def test_contains_all_true():
    assert contains_all("hello world", ["hello", "world"]) is True


def test_contains_all_false_when_one_missing():
    assert contains_all("hello world", ["hello", "mars"]) is False


def test_contains_all_empty_parts():
    assert contains_all("anything", []) is True


def test_contains_any():
    assert contains_any("hello world", ["mars", "world"]) is True
    assert contains_any("hello world", ["mars", "venus"]) is False
    assert contains_any("anything", []) is False


def test_contains_accepts_generator():
    assert contains_all("abc", (ch for ch in "cba")) is True


def test_to_title_case_first_letter_only():
    assert to_title_case("hello world") == "Hello world"


def test_to_title_case_empty():
    assert to_title_case("") == ""


def test_to_title_case_preserves_rest():
    text = "aBCdef"
    result = to_title_case(text)
    assert result[0] == "A"
    assert result[1:] == text[1:]


def test_to_title_case_expanding_upper():
    assert to_title_case("\u00dfa") == "SSa"