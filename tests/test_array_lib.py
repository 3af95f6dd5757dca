import pytest

from astralib import array_lib
from astralib.string_lib import split


def test_length_matches_number_of_elements():
    items = [1, "two", 3.0, None]
    assert array_lib.length(items) == len(items)
    assert array_lib.length([]) == 0


def test_length_requires_array():
    with pytest.raises(TypeError):
        array_lib.length("abc")


def test_push_appends_in_place_and_returns_new_length():
    items = [1]
    size = array_lib.push(items, 2, 3)
    assert size == len(items)
    assert items[-2:] == [2, 3]


def test_push_without_values_keeps_array():
    items = ["x"]
    assert array_lib.push(items) == 1
    assert items == ["x"]


def test_push_requires_array():
    with pytest.raises(TypeError):
        array_lib.push(None, 1)


def test_pop_returns_last_pushed_value():
    items = ["a"]
    array_lib.push(items, "b")
    assert array_lib.pop(items) == "b"
    assert items == ["a"]


def test_pop_empty_gives_none():
    items = []
    assert array_lib.pop(items) is None
    assert items == []


def test_pop_requires_array():
    with pytest.raises(TypeError):
        array_lib.pop(5)


def test_join_default_delimiter_is_comma():
    assert array_lib.join(["a", "b", "c"]) == "a,b,c"


@pytest.mark.parametrize("delimiter", [",", " - ", "|"])
def test_join_split_round_trip(delimiter):
    items = ["alpha", "beta", "gamma"]
    assert split(array_lib.join(items, delimiter), delimiter) == items


def test_join_displays_non_string_values():
    joined = array_lib.join([None, True], ";")
    assert split(joined, ";") == ["null", "true"]


def test_join_empty_array_is_empty_string():
    assert array_lib.join([], "/") == ""


def test_join_requires_array():
    with pytest.raises(TypeError):
        array_lib.join("abc")


def test_index_of_finds_first_occurrence():
    items = ["x", "y", "x"]
    position = array_lib.index_of(items, "x")
    assert items[position] == "x"
    assert position == items.index("x")


def test_index_of_missing_is_minus_one():
    assert array_lib.index_of([1, 2, 3], 9) == -1


def test_index_of_keeps_booleans_apart_from_numbers():
    assert array_lib.index_of([1, 0], True) == -1
    assert array_lib.index_of([1, True], True) == 1


def test_index_of_requires_array():
    with pytest.raises(TypeError):
        array_lib.index_of({}, 1)


def test_slice_range_inside_bounds():
    items = [10, 20, 30, 40]
    assert array_lib.slice_range(items, 1, 3) == items[1:3]


def test_slice_range_clamps_bounds():
    items = [1, 2, 3]
    assert array_lib.slice_range(items, -5, 100) == items


def test_slice_range_empty_when_start_not_before_end():
    assert array_lib.slice_range([1, 2, 3], 2, 2) == []
    assert array_lib.slice_range([1, 2, 3], 3, 1) == []


def test_slice_range_returns_new_list():
    items = [1, 2]
    result = array_lib.slice_range(items, 0, 2)
    result.append(3)
    assert items == [1, 2]


def test_slice_range_requires_numbers():
    with pytest.raises(TypeError):
        array_lib.slice_range([1, 2], "0", 1)


def test_concat_flattens_lists_one_level_and_appends_others():
    first = [1, 2]
    second = [3, [4]]
    result = array_lib.concat(first, second, "z")
    assert result[: len(first)] == first
    assert result[len(first) : len(first) + len(second)] == second
    assert result[-1] == "z"
    assert len(result) == len(first) + len(second) + 1


def test_concat_does_not_modify_input():
    items = [1]
    array_lib.concat(items, [2])
    assert items == [1]


def test_concat_requires_array():
    with pytest.raises(TypeError):
        array_lib.concat("abc", [1])