import pytest

from astralib import string_lib


def test_length_is_additive():
    a, b = "hello", "world!"
    assert string_lib.length(a + b) == string_lib.length(a) + string_lib.length(b)


def test_length_of_empty_is_zero():
    assert string_lib.length("") == 0


def test_substring_inside_range():
    text = "abcdefgh"
    assert string_lib.substring(text, 2, 5) == text[2:5]


def test_substring_clamps_bounds():
    text = "abcdefgh"
    assert string_lib.substring(text, -10, 1000) == text


def test_substring_empty_when_start_not_before_end():
    text = "abcdefgh"
    assert string_lib.substring(text, 5, 5) == ""
    assert string_lib.substring(text, 6, 2) == ""
    assert string_lib.substring(text, 50, 60) == ""


def test_substring_requires_numbers():
    with pytest.raises(TypeError, match="substring requires string, start, and end arguments"):
        string_lib.substring("abc", "0", 1)


def test_index_of_finds_first_occurrence():
    prefix = "abc"
    text = prefix + "xyz" + "xyz"
    assert string_lib.index_of(text, "xyz") == len(prefix)


def test_index_of_missing_is_minus_one():
    assert string_lib.index_of("abc", "zz") == -1
    assert string_lib.last_index_of("abc", "zz") == -1


def test_last_index_of_finds_last_occurrence():
    text = "ab" * 3
    assert string_lib.last_index_of(text, "ab") == len(text) - len("ab")


def test_replace_all_removes_every_occurrence():
    result = string_lib.replace_all("a.b.c.d", ".", "-")
    assert "." not in result
    assert result.count("-") == 3


def test_replace_all_does_not_rescan_replacement():
    assert string_lib.replace_all("aa", "a", "aa") == "aaaa"


def test_replace_all_empty_search_rejected():
    with pytest.raises(ValueError):
        string_lib.replace_all("abc", "", "x")


def test_split_round_trip_with_join():
    text = "one,,two,three,"
    parts = string_lib.split(text, ",")
    assert ",".join(parts) == text
    assert len(parts) == text.count(",") + 1


def test_split_empty_delimiter_gives_characters():
    assert string_lib.split("abc", "") == ["a", "b", "c"]


def test_split_multi_character_delimiter():
    text = "x::y::z"
    assert "::".join(string_lib.split(text, "::")) == text


def test_case_conversion_round_trip_on_ascii():
    text = "Hello World 123"
    assert string_lib.to_lower(string_lib.to_upper(text)) == string_lib.to_lower(text)
    assert string_lib.to_upper(text).isupper()


def test_case_conversion_leaves_non_ascii_unchanged():
    assert string_lib.to_upper("é") == "é"
    assert string_lib.to_lower("É") == "É"


def test_trim_strips_c_whitespace():
    assert string_lib.trim(" \t\n x y \r\v\f") == "x y"


def test_trim_is_idempotent():
    once = string_lib.trim("  padded  ")
    assert string_lib.trim(once) == once


def test_type_errors_carry_messages():
    with pytest.raises(TypeError, match="length requires a string argument"):
        string_lib.length(5)
    with pytest.raises(TypeError, match="split requires string and delimiter arguments"):
        string_lib.split("a", None)
    with pytest.raises(TypeError, match="trim requires a string argument"):
        string_lib.trim(["a"])