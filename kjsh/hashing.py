"""Positional character hash used to recognise builtin command names."""

from __future__ import annotations

from enum import IntEnum


class BuiltinHash(IntEnum):
    """Hash values of the builtin command names."""

    HELP = 1078
    CLEAR = 1576
    EXPORT = 2387
    SAY = 672
    CD = 299
    RUN = 678
    EXIT = 1120
    EMPTY_LINE = 0


def hash_string(text: str | None) -> int:
    """Sum every byte times its 1-based position, ignoring newlines.

    Bytes are treated as signed, so non-ASCII input contributes
    negative terms. ``None`` hashes to 0.
    """
    if text is None:
        return 0
    newline = ord("\n")
    return sum(
        (byte - 256 if byte > 127 else byte) * position
        for position, byte in enumerate(text.encode("utf-8"), start=1)
        if byte != newline
    )