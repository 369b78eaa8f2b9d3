"""Indexing and inspection: at, charAt, charCodeAt, codePointAt, length."""

from textvalue import TextValue

GRIN = "\N{GRINNING FACE}"


def test_at_positive() -> None:
    """at() with in-range and past-the-end indices."""
    s = TextValue("abc")
    assert s.at(0) == "a"
    assert s.at(2) == "c"
    assert s.at(3) is None


def test_at_negative() -> None:
    """Negative indices count back from the end."""
    s = TextValue("abc")
    assert s.at(-1) == "c"
    assert s.at(-3) == "a"
    assert s.at(-4) is None


def test_at_agrees_with_char_at_and_iteration(sample: str) -> None:
    s = TextValue(sample)
    chars = list(s)
    for i in range(s.length):
        assert s.at(i) == s.charAt(i) == chars[i]


def test_negative_indices(sample: str) -> None:
    s = TextValue(sample)
    n = s.length
    for i in range(-n - 2, 0):
        expected = s.at(n + i) if n + i >= 0 else None
        assert s.at(i) == expected
        assert s.charAt(i) == ""


def test_char_at_out_of_range() -> None:
    s = TextValue("abc")
    assert s.charAt(3) == ""
    assert s.charAt(100) == ""
    assert TextValue("").charAt(0) == ""


def test_char_code_at() -> None:
    """Non-BMP characters report their full code point."""
    s = TextValue("A" + GRIN)
    assert s.charCodeAt(0) == 65
    assert s.charCodeAt(1) == 0x1F600
    assert s.charCodeAt(2) is None
    assert s.charCodeAt(-1) is None


def test_code_point_at() -> None:
    s = TextValue("A" + GRIN)
    assert s.codePointAt(0) == 65
    assert s.codePointAt(-1) == 0x1F600
    assert s.codePointAt(-3) is None
    assert s.codePointAt(5) is None


def test_length_counts_code_points() -> None:
    assert TextValue("na\N{LATIN SMALL LETTER I WITH DIAERESIS}ve").length == 5
    assert TextValue(GRIN * 2).length == 2
    assert TextValue("caf\N{LATIN SMALL LETTER E WITH ACUTE}".encode()).length == 4


def test_length_tracks_mutation() -> None:
    s = TextValue("ab")
    assert s.length == 2
    s.concat("cd")
    assert s.length == 4
    s.slice(1)
    assert s.length == 3


def test_empty_value() -> None:
    s = TextValue()
    assert s.length == 0
    assert s.at(0) is None
    assert s.at(-1) is None
    assert s.codePointAt(0) is None
