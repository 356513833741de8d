import pytest

from cppjson.naming import (
    format_field_name,
    is_separator,
    sanitize_identifier,
    soft_camel,
    title_words,
)


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("quest_id", "questID"),
        ("quest_url", "questURL"),
        ("QUEST_Url", "qUESTURL"),
        ("FloorCount", "floorCount"),
        ("questId", "questId"),
        ("name", "name"),
        ("created_at", "createdAt"),
        ("a__b", "aB"),
    ],
)
def test_format_field_name_golden(key: str, expected: str) -> None:
    assert format_field_name(key) == expected


def test_lone_abbreviation_keeps_uppercase_tail() -> None:
    # The leading rune is lowered after the fixup, leaving the rest upper-case.
    assert format_field_name("id") == "iD"
    assert format_field_name("url") == "uRL"


def test_invalid_runes_become_underscores() -> None:
    assert format_field_name("foo bar") == "foo_Bar"
    assert format_field_name("user-name") == "user_Name"
    assert format_field_name("9lives") == "_lives"
    assert format_field_name("$$") == "__"


def test_empty_key_is_still_an_identifier() -> None:
    assert format_field_name("") == "_"
    assert format_field_name("_") == "_"


def test_unicode_letters_survive() -> None:
    assert format_field_name("größe_id") == "größeID"
    assert format_field_name("café—bar") == "café_Bar"
    assert format_field_name("a、b") == "a_B"


def test_is_separator_classification() -> None:
    assert is_separator(" ")
    assert is_separator("-")
    assert is_separator("、")
    assert not is_separator("_")
    assert not is_separator("a")
    assert not is_separator("7")
    assert not is_separator("é")
    assert not is_separator("٣")
    assert not is_separator("€")


def test_sanitize_identifier_first_rune_must_be_letter() -> None:
    assert sanitize_identifier("1a2") == "_a2"
    assert sanitize_identifier("a-2") == "a_2"
    assert sanitize_identifier("") == ""


def test_word_start_passes() -> None:
    assert title_words("foo bar-baz") == "Foo Bar-Baz"
    assert soft_camel("Foo_Bar") == "foo_Bar"
    assert soft_camel("ÉCOLE") == "éCOLE"
