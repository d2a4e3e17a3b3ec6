from __future__ import annotations
import os

_TRUE_VALUES = {"1", "true", "yes", "on"}

# Defaults
_DEFAULT_TRACE = False


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


def trace_enabled() -> bool:
    """Whether the evaluator should emit a DEBUG record per evaluated node."""
    return flag_from_env('MINILISP_TRACE', _DEFAULT_TRACE)
