"""Sequence combinators."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Sequence
from typing import Any

_TEXT_TYPES = (str, bytes, bytearray)


def flatten(arrays: Iterable[Any]) -> list[Any]:
    """Flatten one level of nesting.

    Example usage::

        flatten([[1, 2, 3], [2, 3, 4], [3, 4, 5]])  # [1, 2, 3, 2, 3, 4, 3, 4, 5]

    Sequence elements such as lists and tuples are spliced in.  Anything
    else, strings and mappings included, is kept as a single item.
    """
    flat: list[Any] = []
    for element in arrays:
        if isinstance(element, Sequence) and not isinstance(element, _TEXT_TYPES):
            flat.extend(element)
        else:
            flat.append(element)
    return flat


def product(*sets: Iterable[Any]) -> list[tuple[Any, ...]]:
    """Return the cartesian product of *sets*, last set varying fastest.

    Example usage::

        product([1, 2], ["a", "b"])  # [(1, "a"), (1, "b"), (2, "a"), (2, "b")]

    ``product()`` is ``[()]`` and any empty set makes the result empty.
    """
    return list(itertools.product(*sets))
