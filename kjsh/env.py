"""Access to the process environment."""

from __future__ import annotations

import os


def get_environment_variable(name: str) -> str | None:
    """Return the value of ``name``, or ``None`` when it is not set."""
    return os.environ.get(name)


def set_environment_variable(name: str, value: str) -> None:
    """Set ``name`` to ``value``, overwriting any previous value.

    Raises ``ValueError`` for an empty name or one containing ``=``.
    """
    if not name or "=" in name:
        raise ValueError(f"invalid environment variable name: {name!r}")
    os.environ[name] = value