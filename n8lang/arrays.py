"""Array functions of the N8 standard library.

N8 arrays are Python lists. Numbers are ``int`` or ``float`` (never
``bool``), ``nil`` is ``None``, and regular expressions are compiled
``re.Pattern`` objects. Script-level misuse raises
:class:`~n8lang.errors.ThrowSignal`.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from n8lang.errors import ThrowSignal


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_function(value: Any) -> bool:
    return callable(value) and not isinstance(value, (type, re.Pattern))


def _kind(value: Any) -> str:
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "bool"
    if _is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, re.Pattern):
        return "regex"
    if _is_function(value):
        return "function"
    return type(value).__name__


def _same(left: Any, right: Any) -> bool:
    """Compare two values, treating values of different kinds as unequal."""
    return _kind(left) == _kind(right) and left == right


def _to_string(value: Any) -> str:
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, list):
        return "[" + ", ".join(_to_string(item) for item in value) + "]"
    if isinstance(value, re.Pattern):
        return value.pattern
    return str(value)


def _require_array(value: Any) -> list:
    if not isinstance(value, list):
        raise ThrowSignal(f"Expecting an array argument, got {_kind(value)}")
    return value


def _require_index(value: Any, message: str) -> int:
    if not _is_number(value):
        raise ThrowSignal(f"{message}, got {_kind(value)}")
    index = int(value)
    if index < 0:
        raise IndexError(f"Index out of range: {index}")
    return index


def _range(array: list, start: Any, end: Any) -> tuple[int, int]:
    if not _is_number(start) or not _is_number(end):
        raise ThrowSignal(
            "Expecting number type arguments for range parameters, got "
            f"{_kind(start)} and {_kind(end)}"
        )
    if int(start) > int(end):
        raise ThrowSignal("Range end should be greater than range start.")
    if int(start) < 0:
        raise IndexError(f"Index out of range: {int(start)}")
    return int(start), int(end)


def create(*args: Any) -> list:
    """Return a new array holding the arguments."""
    return list(args)


def clear(*args: Any) -> None:
    """Empty every array given."""
    if not args:
        raise ThrowSignal("Expecting more than or equal 1 argument")
    for value in args:
        _require_array(value).clear()


def length(array: Any) -> int:
    """Return the number of items in the array."""
    return len(_require_array(array))


def reverse(array: Any) -> list:
    """Reverse the array in place and return it."""
    items = _require_array(array)
    items.reverse()
    return items


def first(array: Any) -> Any:
    """Return the first item, or nil for an empty array."""
    items = _require_array(array)
    return items[0] if items else None


def last(array: Any) -> Any:
    """Return the last item, or nil for an empty array."""
    items = _require_array(array)
    return items[-1] if items else None


def add(array: Any, *args: Any) -> list:
    """Append one or more items to the array and return it."""
    if not args:
        raise ThrowSignal(f"Expecting greater than 1 argument, got {1 + len(args)}")
    items = _require_array(array)
    items.extend(args)
    return items


def push_back(array: Any, item: Any) -> list:
    """Append an item to the end of the array and return it."""
    items = _require_array(array)
    items.append(item)
    return items


def push_front(array: Any, item: Any) -> list:
    """Insert an item at the start of the array and return it."""
    items = _require_array(array)
    items.insert(0, item)
    return items


def assign(array: Any, index: Any, item: Any) -> list:
    """Replace the item at an index and return the array."""
    items = _require_array(array)
    position = _require_index(index, "Expecting a number as index argument")
    if position >= len(items):
        raise IndexError(f"Index out of range: {position}")
    items[position] = item
    return items


def slice_range(array: Any, start: Any, end: Any) -> list:
    """Return a new array of the items from ``start`` to ``end``, both included."""
    items = _require_array(array)
    low, high = _range(items, start, end)
    if high >= len(items):
        raise IndexError(f"Index out of range: {high}")
    return items[low:high + 1]


def remove(array: Any, item: Any) -> list:
    """Remove the first item equal to ``item`` and return the array."""
    items = _require_array(array)
    position = next((i for i, value in enumerate(items) if _same(value, item)), None)
    if position is not None:
        del items[position]
    return items


def remove_at(array: Any, index: Any) -> list:
    """Set the item at an index to nil and return the array."""
    items = _require_array(array)
    position = _require_index(index, "Expecting a number as index argument")
    if position >= len(items):
        raise IndexError(f"Index out of range: {position}")
    items[position] = None
    return items


def remove_all(array: Any, item: Any) -> list:
    """Remove every item equal to ``item`` and return the array."""
    items = _require_array(array)
    items[:] = [value for value in items if not _same(value, item)]
    return items


def remove_slice(array: Any, start: Any, end: Any) -> list:
    """Remove the items from ``start`` up to, not including, ``end``."""
    items = _require_array(array)
    low, high = _range(items, start, end)
    if high > len(items):
        raise IndexError(f"Index out of range: {high}")
    del items[low:high]
    return items


def contains(array: Any, item: Any) -> bool:
    """Return whether the array holds an item equal to ``item``."""
    return any(_same(value, item) for value in _require_array(array))


def find(array: Any, item: Any) -> int:
    """Return the index of the first equal item, or the array's length if absent."""
    items = _require_array(array)
    return next(
        (i for i, value in enumerate(items) if _same(value, item)), len(items)
    )


def at(array: Any, index: Any) -> Any:
    """Return the item at an index."""
    items = _require_array(array)
    position = _require_index(index, "Expecting a number argument")
    if position >= len(items):
        raise IndexError(f"Index out of range: {position}")
    return items[position]


def join(array: Any, bridge: Any) -> str:
    """Join the text of every item with the text of ``bridge`` between them."""
    items = _require_array(array)
    return _to_string(bridge).join(_to_string(value) for value in items)


def _all(array: Any, check: Callable[[Any], bool]) -> bool:
    return all(check(value) for value in _require_array(array))


def are_all_string(array: Any) -> bool:
    """Return whether every item is a string."""
    return _all(array, lambda value: isinstance(value, str))


def are_all_number(array: Any) -> bool:
    """Return whether every item is a number."""
    return _all(array, _is_number)


def are_all_function(array: Any) -> bool:
    """Return whether every item is a function."""
    return _all(array, lambda value: _kind(value) == "function")


def are_all_bool(array: Any) -> bool:
    """Return whether every item is a boolean."""
    return _all(array, lambda value: isinstance(value, bool))


def are_all_regex(array: Any) -> bool:
    """Return whether every item is a regular expression."""
    return _all(array, lambda value: isinstance(value, re.Pattern))


def are_all_array(array: Any) -> bool:
    """Return whether every item is an array."""
    return _all(array, lambda value: isinstance(value, list))


def are_all_nil(array: Any) -> bool:
    """Return whether every item is nil."""
    return _all(array, lambda value: value is None)