"""Builtin commands. Each takes the argument vector and returns a status."""

from __future__ import annotations

import contextlib
import os
import sys

from kjsh.env import set_environment_variable

MESSAGE_SPLASH = "kjsh"
MESSAGE_HELP = (
    "Built in commands:\n"
    "    help\n"
    "    clear\n"
    "    export\n"
    "    say\n"
    "    cd\n"
    "    run\n"
    "    exit\n"
)


def _help_text() -> str:
    """The full text that ``help`` writes."""
    return "".join(f"{part}\n" for part in (MESSAGE_SPLASH, MESSAGE_HELP))


def builtin_cd(argv: list[str]) -> int:
    """``cd DIR``: change the working directory; failures are ignored."""
    if len(argv) < 2:
        return -1
    with contextlib.suppress(OSError):
        os.chdir(argv[1])
    return 0


def builtin_exit(argv: list[str]) -> int:
    """``exit``: flush pending output and leave the shell with status 0."""
    sys.stdout.flush()
    sys.stderr.flush()
    sys.exit(0)


def builtin_export(argv: list[str]) -> int:
    """``export NAME VALUE``: set an environment variable."""
    if len(argv) < 3:
        return -1
    try:
        set_environment_variable(argv[1], argv[2])
    except ValueError:
        return -1
    return 0


def builtin_help(argv: list[str]) -> int:
    """``help``: list the builtin commands."""
    text = _help_text()
    sys.stdout.write(text)
    return 0


def builtin_say(argv: list[str]) -> int:
    """``say TEXT``: print the first argument."""
    if len(argv) < 2:
        return -1
    print(argv[1])
    return 0