"""Custom exception hierarchy for pycollate."""

from __future__ import annotations


class CollateError(Exception):
    """Base exception for all pycollate errors."""


class CollateConfigError(CollateError):
    """Invalid or unparseable configuration."""


class EmptyPathError(CollateError, ValueError):
    """A path-driven helper was called without any keys.

    Raised by :func:`~pycollate.nested.set_nested`,
    :func:`~pycollate.nested.push_nested`, the nested searches and
    :func:`~pycollate.access.safe_get`.  Searches and reads can be told to
    return their empty result instead through
    ``CollateConfig(allow_empty_path=True)``.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() requires at least one key")
