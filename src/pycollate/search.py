"""Preferential key search over flat and nested mappings.

The nested searches walk a tree one key per level.  At every level the
requested key is tried first and the shared *fallback key* second, so a
table such as::

    discounts = {
        "ALL": {"ALL": "10%", "StationA": "15%", "StationB": "20%", "StationC": "25%"},
        "StationA": {"ALL": "30%", "StationB": "40%"},
        "StationB": {"ALL": "50%", "StationA": "60%"},
    }

can be asked for the most specific entry available:

* ``list(nested_object_search(discounts, "ALL", "StationA", "StationB"))``
  gives ``["40%", "30%", "20%", "10%"]``
* ``nested_object_find(discounts, "ALL", "StationA", "StationB")`` gives
  ``"40%"``
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from pycollate._types import Key
from pycollate.access import is_present, lookup
from pycollate.config import CollateConfig, resolve
from pycollate.exceptions import EmptyPathError

_logger = logging.getLogger(__name__)


def preferential_key_search(obj: Any, *keys: Key, config: CollateConfig | None = None) -> list[Any]:
    """Return the values stored at *keys*, in the order the keys were given.

    Example usage::

        animals = {"cat": {"name": "Kitty"}, "cow": {"name": "MooMoo"}, "fish": {"name": "Bloop"}}
        preferential_key_search(animals, "aardvark", "fish", "cow")

        [{"name": "Bloop"}, {"name": "MooMoo"}]

    Keys whose value fails the presence test are skipped; with the default
    policy that includes stored falsy scalars such as ``0`` or ``""``.
    """
    presence = resolve(config).presence
    values: list[Any] = []

    for key in keys:
        value = lookup(obj, key)
        if is_present(value, presence):
            values.append(value)

    return values


def _search(obj: Any, fallback_key: Key, keys: tuple[Key, ...], config: CollateConfig) -> Iterator[Any]:
    values = preferential_key_search(obj, keys[0], fallback_key, config=config)
    if not values:
        _logger.debug("No match for %r or fallback %r with %d key(s) left", keys[0], fallback_key, len(keys))

    for value in values:
        if len(keys) == 1:
            yield value
        else:
            yield from _search(value, fallback_key, keys[1:], config)


def nested_object_search(
    obj: Any,
    fallback_key: Key,
    *keys: Key,
    config: CollateConfig | None = None,
) -> Iterator[Any]:
    """Lazily yield every value reachable through *keys*, best match first.

    A level is passed through either via the requested key or via
    *fallback_key*.  The tree is walked depth first and the requested key's
    subtree is exhausted before the fallback subtree at the same level.

    The returned iterator is single use.  The two lookups at a level are
    independent, so when a key equals *fallback_key* its subtree is visited
    twice.

    Raises
    ------
    EmptyPathError
        If no keys are given and the config does not allow empty paths.
    """
    cfg = resolve(config)
    if not keys:
        if cfg.allow_empty_path:
            return iter(())
        raise EmptyPathError("nested_object_search")
    return _search(obj, fallback_key, keys, cfg)


def nested_object_find(
    obj: Any,
    fallback_key: Key,
    *keys: Key,
    config: CollateConfig | None = None,
) -> Any | None:
    """Return a single value found through *keys*, or ``None``.

    Only the best candidate at each level is followed: the requested key when
    present, the fallback key otherwise.  If that branch dead-ends deeper down
    the search stops there and does not retry the fallback branch, so the
    result can be ``None`` even when :func:`nested_object_search` would yield
    something.
    """
    cfg = resolve(config)
    if not keys:
        if cfg.allow_empty_path:
            return None
        raise EmptyPathError("nested_object_find")

    current = obj
    for depth, key in enumerate(keys):
        values = preferential_key_search(current, key, fallback_key, config=cfg)
        if not values:
            _logger.debug("Find stopped at depth %d: no %r or fallback %r", depth, key, fallback_key)
            return None
        current = values[0]

    return current
