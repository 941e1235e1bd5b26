"""Reducers that fold a sequence into a keyed mapping.

Each factory returns a step function with the signature
``reducer(acc, item, *rest) -> acc``.  It works with
``functools.reduce(reducer, items, {})`` as well as with :func:`fold`,
which additionally passes the item index and the whole sequence.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping
from typing import Any

from pycollate._types import Key, KeyGenerator, PairGenerator, Reducer, T, U, V


def index_by(fn: KeyGenerator[T]) -> Reducer[MutableMapping[Key, T]]:
    """Index items by the key returned by *fn*.

    Example usage::

        people = [{"name": "Bob", "age": 1}, {"name": "Bill", "age": 2}]
        reduce(index_by(lambda p: p["name"]), people, {})

        {"Bob": {"name": "Bob", "age": 1}, "Bill": {"name": "Bill", "age": 2}}

    Duplicate keys are overridden by the last item.
    """

    def reducer(acc: MutableMapping[Key, T], item: T, *_: Any) -> MutableMapping[Key, T]:
        acc[fn(item)] = item
        return acc

    return reducer


def group_by(fn: KeyGenerator[T]) -> Reducer[MutableMapping[Key, list[T]]]:
    """Group items into lists keyed by *fn*, keeping arrival order.

    Example usage::

        people = [{"name": "Bob", "age": 1}, {"name": "Bill", "age": 2}, {"name": "Bob", "age": 3}]
        reduce(group_by(lambda p: p["name"]), people, {})

        {
            "Bob": [{"name": "Bob", "age": 1}, {"name": "Bob", "age": 3}],
            "Bill": [{"name": "Bill", "age": 2}],
        }
    """

    def reducer(acc: MutableMapping[Key, list[T]], item: T, *_: Any) -> MutableMapping[Key, list[T]]:
        acc.setdefault(fn(item), []).append(item)
        return acc

    return reducer


def key_value(fn: PairGenerator[T, V]) -> Reducer[MutableMapping[Key, V]]:
    """Build a ``key -> value`` mapping from the pair returned by *fn*.

    Example usage::

        people = [{"name": "Bob", "age": 1}, {"name": "Bill", "age": 2}, {"name": "Bob", "age": 3}]
        reduce(key_value(lambda p: (p["name"], p["age"])), people, {})

        {"Bob": 3, "Bill": 2}

    Duplicate keys are overridden by the last pair.
    """

    def reducer(acc: MutableMapping[Key, V], item: T, *_: Any) -> MutableMapping[Key, V]:
        key, value = fn(item)
        acc[key] = value
        return acc

    return reducer


def fold(reducer: Reducer[U], items: Iterable[T], initial: U) -> U:
    """Reduce *items* into *initial*, passing ``(acc, item, index, items)``."""
    sequence = list(items)
    acc = initial
    for index, item in enumerate(sequence):
        acc = reducer(acc, item, index, sequence)
    return acc
