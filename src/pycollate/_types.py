"""Shared type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias, TypeVar

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

Key: TypeAlias = str | int
"""Valid types for a mapping key."""

KeyGenerator: TypeAlias = Callable[[T], Key]
"""Function that derives a key from an item."""

PairGenerator: TypeAlias = Callable[[T], tuple[Key, V]]
"""Function that derives a ``(key, value)`` pair from an item."""

Reducer: TypeAlias = Callable[..., U]
"""Fold step called as ``reducer(acc, item[, index, items])``."""
