"""Behaviour configuration for pycollate."""

from __future__ import annotations

import dataclasses
import os
from enum import StrEnum
from typing import Any

from pycollate.exceptions import CollateConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


class Presence(StrEnum):
    """How a looked-up value is judged to be "there"."""

    TRUTHY = "truthy"
    """``None``, ``False``, zero, NaN and empty strings count as absent."""

    STRICT = "strict"
    """Only a missing key or a stored ``None`` count as absent."""


@dataclasses.dataclass(frozen=True)
class CollateConfig:
    """Library configuration.

    Parameters
    ----------
    presence : Presence
        Presence test applied by the searches, the nested builders and
        ``safe_get``.  The default treats falsy scalars as not found, so a
        stored ``0`` or ``""`` is skipped just like a missing key.
    allow_empty_path : bool
        When ``False`` a path-driven call without keys raises
        :class:`~pycollate.exceptions.EmptyPathError`.  When ``True``
        searches and reads return their empty result instead.  The nested
        builders always raise.
    """

    presence: Presence = Presence.TRUTHY
    allow_empty_path: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> CollateConfig:
        """Create configuration from environment variables.

        Reads ``COLLATE_PRESENCE`` (``truthy`` or ``strict``) and
        ``COLLATE_ALLOW_EMPTY_PATH``.  Explicit keyword arguments override
        environment values.

        Raises
        ------
        CollateConfigError
            If ``COLLATE_PRESENCE`` names an unknown policy.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        presence_env = env.get("COLLATE_PRESENCE")
        if presence_env is not None and "presence" not in overrides:
            try:
                config_kwargs["presence"] = Presence(presence_env.strip().lower())
            except ValueError as exc:
                raise CollateConfigError(f"Unknown presence policy: {presence_env!r}") from exc

        if "allow_empty_path" not in overrides:
            config_kwargs["allow_empty_path"] = _env_bool(env.get("COLLATE_ALLOW_EMPTY_PATH"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)


DEFAULT_CONFIG = CollateConfig()


def resolve(config: CollateConfig | None) -> CollateConfig:
    return DEFAULT_CONFIG if config is None else config
