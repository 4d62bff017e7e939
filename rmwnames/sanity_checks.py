"""Checks that a string array is still in its zero-initialized state."""

from __future__ import annotations

from typing import Any

from rmwnames.errors import RmwError


def check_zero_string_array(array: Any) -> None:
    """Raise RmwError unless ``array`` is an empty, zero-initialized string array.

    ``array`` is either an object with ``size`` and ``data`` attributes, which
    is zeroed when ``size`` is 0 and ``data`` is None, or a plain sequence,
    which is zeroed when it is empty.
    """
    if array is None:
        raise RmwError("array is None")

    if hasattr(array, "size") and hasattr(array, "data"):
        if array.size != 0:
            raise RmwError(f"array size is not zero: {array.size}")
        if array.data is not None:
            raise RmwError("array data is not None")
        return

    try:
        length = len(array)
    except TypeError:
        raise RmwError(f"not a string array: {type(array).__name__}") from None
    if length != 0:
        raise RmwError(f"array size is not zero: {length}")