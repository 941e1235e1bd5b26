"""Dynamic value access.

Every traversal in pycollate goes through :func:`lookup`, which knows how
to address the container shapes callers hand us:

* mappings, by key
* sequences (but not strings), by non-negative integer index
* pydantic models, by field name or alias, then by extra field

Anything else is a leaf and cannot be addressed.  Misses are reported with
the private :data:`MISSING` sentinel so that a stored ``None`` can still be
told apart from an absent key.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from numbers import Number
from typing import Any, Final

from pydantic import BaseModel

from pycollate._types import Key
from pycollate.config import CollateConfig, Presence, resolve
from pycollate.exceptions import EmptyPathError


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()

_TEXT_TYPES = (str, bytes, bytearray)


def is_container(value: Any) -> bool:
    """Return ``True`` when *value* can be addressed by :func:`lookup`."""
    if isinstance(value, (Mapping, BaseModel)):
        return True
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def _model_lookup(model: BaseModel, key: Key) -> Any:
    if not isinstance(key, str):
        return MISSING
    fields = type(model).model_fields
    if key in fields:
        return getattr(model, key)
    for name, field in fields.items():
        if field.alias == key:
            return getattr(model, name)
    extra = model.model_extra
    if extra and key in extra:
        return extra[key]
    return MISSING


def lookup(container: Any, key: Key) -> Any:
    """Return ``container[key]`` or :data:`MISSING` without raising."""
    if isinstance(container, Mapping):
        return container[key] if key in container else MISSING
    if isinstance(container, BaseModel):
        return _model_lookup(container, key)
    if isinstance(container, Sequence) and not isinstance(container, _TEXT_TYPES):
        if isinstance(key, bool) or not isinstance(key, int) or key < 0:
            return MISSING
        return container[key] if key < len(container) else MISSING
    return MISSING


def is_present(value: Any, presence: Presence = Presence.TRUTHY) -> bool:
    """Decide whether a looked-up value counts as found.

    Under :attr:`Presence.TRUTHY` the falsy scalars (``False``, numeric
    zero, NaN, empty strings) are treated like a missing key.  Containers
    are present even when empty.
    """
    if value is MISSING or value is None:
        return False
    if presence == Presence.STRICT:
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    if isinstance(value, (Number, *_TEXT_TYPES)):
        return bool(value)
    return True


def safe_get(
    obj: Any,
    *props: Key,
    default: Any = None,
    config: CollateConfig | None = None,
) -> Any:
    """Safely retrieve a nested value.

    Example usage::

        obj = {"type": {"name": {"value": 6}}}

        safe_get(obj, "type", "name", "value")  # 6
        safe_get(obj, "type", "nam_", "value")  # None

    Every intermediate value has to pass the configured presence test.  The
    final value is returned as stored, so a ``0`` at the end of the path is
    returned while a ``0`` halfway down is not walked through.
    """
    cfg = resolve(config)
    if not props:
        if cfg.allow_empty_path:
            return default
        raise EmptyPathError("safe_get")

    current = obj
    for prop in props[:-1]:
        current = lookup(current, prop)
        if not is_present(current, cfg.presence):
            return default

    value = lookup(current, props[-1])
    if value is MISSING or value is None:
        return default
    return value
