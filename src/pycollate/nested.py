"""Builders for tree-shaped indexes.

Both helpers mutate *root* in place and return it, so they can be used as
the step of a fold::

    index: dict = {}
    for person in people:
        set_nested(person, index, person["country"], person["city"])

    {
        "UK": {"London": {"name": "Bob", "country": "UK", "city": "London"}},
        "AU": {"Perth": {"name": "John", "country": "AU", "city": "Perth"}},
    }
"""

from __future__ import annotations

import logging
from collections.abc import MutableSequence
from typing import Any, TypeVar

from pycollate._types import Key
from pycollate.access import is_container, is_present, lookup
from pycollate.config import CollateConfig, resolve
from pycollate.exceptions import EmptyPathError

_logger = logging.getLogger(__name__)

TRoot = TypeVar("TRoot")


def _assign(container: Any, key: Key, value: Any) -> None:
    """Set ``container[key]``, padding a list with ``None`` up to an index past its end."""
    if (
        isinstance(container, MutableSequence)
        and isinstance(key, int)
        and not isinstance(key, bool)
        and key >= len(container)
    ):
        container.extend([None] * (key - len(container) + 1))
    container[key] = value


def _walk(root: Any, keys: tuple[Key, ...], config: CollateConfig) -> Any:
    """Return the container that holds the last key, creating dicts on the way."""
    base = root
    for depth, key in enumerate(keys[:-1]):
        child = lookup(base, key)
        if not is_container(child) and not is_present(child, config.presence):
            _logger.debug("Creating intermediate mapping for key %r at depth %d", key, depth)
            child = {}
            _assign(base, key, child)
        base = child
    return base


def set_nested(value: Any, root: TRoot, *keys: Key, config: CollateConfig | None = None) -> TRoot:
    """Create the nested path *keys* inside *root* and set *value* at the end.

    Existing intermediate containers are reused, so repeated calls with
    overlapping prefixes merge into the same sub-mappings.  Integer keys
    into a list past its end grow the list, padding with ``None``.
    """
    if not keys:
        raise EmptyPathError("set_nested")
    cfg = resolve(config)

    base = _walk(root, keys, cfg)
    _assign(base, keys[-1], value)

    return root


def push_nested(value: Any, root: TRoot, *keys: Key, config: CollateConfig | None = None) -> TRoot:
    """Create the nested path *keys* inside *root* and append *value* to the list at the end.

    Example usage::

        index: dict = {}
        push_nested(bob, index, "UK", "London")
        push_nested(john, index, "UK", "London")

        {"UK": {"London": [bob, john]}}

    A terminal slot that fails the presence test (missing, ``None`` or, by
    default, a falsy scalar) is replaced with a fresh list.
    """
    if not keys:
        raise EmptyPathError("push_nested")
    cfg = resolve(config)

    base = _walk(root, keys, cfg)
    last_key = keys[-1]
    values = lookup(base, last_key)
    if not is_container(values) and not is_present(values, cfg.presence):
        values = []
        _assign(base, last_key, values)
    values.append(value)

    return root
