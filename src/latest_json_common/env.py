"""Typed readers for environment variables."""

from __future__ import annotations

import os

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


def read_str(name: str, default: str | None = None) -> str | None:
    """Read a string environment variable.

    Empty values are treated as unset.

    Parameters
    ----------
    name : str
        Environment variable name
    default : str | None
        Value returned when the variable is unset or empty

    Returns
    -------
    str | None
        The variable value or ``default``
    """
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return default
    return value


def read_bool(name: str, default: bool = False) -> bool:
    """Read a boolean environment variable.

    Accepts ``1/true/yes/on`` and ``0/false/no/off`` (case-insensitive).
    Unrecognized values fall back to ``default``.
    """
    value = os.environ.get(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    return default
