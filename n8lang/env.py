"""Environment variable access for N8 scripts."""

from __future__ import annotations

import os
from typing import Any


def _text(value: Any) -> str:
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def get(name: Any) -> str:
    """Return the value of an environment variable.

    Raises KeyError if the variable is not set.
    """
    key = _text(name)
    try:
        return os.environ[key]
    except KeyError:
        raise KeyError(f"Environment variable not set: {key}") from None


def set_value(name: Any, value: Any) -> bool:
    """Set an environment variable; return True if it could not be set."""
    try:
        os.environ[_text(name)] = _text(value)
    except (OSError, ValueError):
        return True
    return False