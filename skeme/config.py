from __future__ import annotations
import logging
import os
from enum import Enum


class Scoping(str, Enum):
    """Which frame a user procedure's call frame is parented to."""
    DYNAMIC = 'dynamic'  # the caller's environment
    LEXICAL = 'lexical'  # the environment the lambda was created in


# Defaults
_DEFAULT_SCOPING = Scoping.DYNAMIC
_DEFAULT_LOG_LEVEL = logging.WARNING


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return raw.strip()


def get_scoping(override: Scoping | str | None = None) -> Scoping:
    if override is not None:
        return Scoping(override.lower() if isinstance(override, str) else override)
    raw = value_from_env('SKEME_SCOPING', _DEFAULT_SCOPING.value)
    try:
        return Scoping(raw.lower())
    except ValueError:
        raise ValueError(
            f"SKEME_SCOPING must be one of {[s.value for s in Scoping]}, got {raw!r}"
        ) from None


def get_log_level(override: str | int | None = None) -> int:
    if isinstance(override, int):
        return override
    raw = override or value_from_env('SKEME_LOG_LEVEL', '')
    level = getattr(logging, raw.upper(), None) if raw else None
    # logging also exposes non-level names; only accept real levels
    return level if isinstance(level, int) else _DEFAULT_LOG_LEVEL


def configure_logging(level: str | int | None = None) -> int:
    """Configure root logging for embedding applications and return the level used."""
    resolved = get_log_level(level)
    logging.basicConfig(
        level=resolved,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(resolved)
    return resolved
