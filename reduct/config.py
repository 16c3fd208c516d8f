from __future__ import annotations
import logging
import os

from reduct.errors import ReductConfigError


# Defaults
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_PROMPT = '> '


def parse_positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError:
        raise ReductConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ReductConfigError(f"{name} must be positive, got {value}")
    return value


def parse_log_level(name: str, raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ReductConfigError(f"{name} is not a logging level: {raw!r}")
    return level


def int_from_env(var: str) -> int | None:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return None
    return parse_positive_int(var, raw)


def get_max_steps() -> int | None:
    """Step cap for the interactive loop; None means reduce without a bound."""
    return int_from_env('REDUCT_MAX_STEPS')


def get_log_level() -> int:
    return parse_log_level('REDUCT_LOG_LEVEL', os.environ.get('REDUCT_LOG_LEVEL', _DEFAULT_LOG_LEVEL))


def get_prompt() -> str:
    return os.environ.get('REDUCT_PROMPT', _DEFAULT_PROMPT)
