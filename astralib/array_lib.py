"""Array functions on Python lists with clamped ranges and -1 for missing values."""

from __future__ import annotations

from astralib.io_lib import to_display


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_array(array: object, message: str) -> list:
    if not isinstance(array, list):
        raise TypeError(message)
    return array


def _same(left: object, right: object) -> bool:
    """Equality that keeps booleans apart from numbers."""
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return left == right


def length(array: list) -> int:
    """Number of elements in the array."""
    return len(_require_array(array, "length requires an array argument"))


def push(array: list, *args: object) -> int:
    """Append every value to the array in place; return its new length."""
    items = _require_array(array, "push requires an array argument")
    items.extend(args)
    return len(items)


def pop(array: list) -> object:
    """Remove and return the last element, or ``None`` when the array is empty."""
    items = _require_array(array, "pop requires an array argument")
    if not items:
        return None
    return items.pop()


def join(array: list, delimiter: object = ",") -> str:
    """Displayed elements joined by the displayed delimiter."""
    items = _require_array(array, "join requires an array argument")
    separator = to_display(delimiter)
    return separator.join(to_display(item) for item in items)


def index_of(array: list, value: object) -> int:
    """Position of the first element equal to ``value``, or -1."""
    items = _require_array(array, "indexOf requires array and value arguments")
    return next((position for position, item in enumerate(items) if _same(item, value)), -1)


def slice_range(array: list, start: int, end: int) -> list:
    """A new list of elements from ``start`` up to ``end``; bounds are clamped."""
    if not (isinstance(array, list) and _is_number(start) and _is_number(end)):
        raise TypeError("slice requires array, start, and end arguments")
    first = max(int(start), 0)
    last = min(int(end), len(array))
    if first >= last:
        return []
    return array[first:last]


def concat(array: list, *args: object) -> list:
    """A new list: the array, then each argument's elements if it is a list, else the argument."""
    items = _require_array(array, "concat requires an array argument")
    result = list(items)
    for arg in args:
        if isinstance(arg, list):
            result.extend(arg)
        else:
            result.append(arg)
    return result