"""Running tokenized command lines, external programs and scripts."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

from kjsh.builtins import builtin_cd, builtin_exit, builtin_export, builtin_help, builtin_say
from kjsh.env import set_environment_variable
from kjsh.hashing import BuiltinHash, hash_string
from kjsh.lexer import Token, detokenize_line, tokenize_line

INIT_PATH = ".kjinit"

Builtin = Callable[[list[str]], int]


def get_builtin(command: str | None) -> Builtin | None:
    """Return the builtin whose name hashes like ``command``, if any."""
    return _BUILTINS.get(hash_string(command))


def run_external(argv: list[str]) -> int:
    """Run a program found on ``$PATH`` and return its exit status.

    A program that cannot be started gives 127; one killed by a
    signal gives -1.
    """
    try:
        completed = subprocess.run(argv)
    except OSError:
        return 127
    return completed.returncode if completed.returncode >= 0 else -1


def execute(tokens: list[Token]) -> int:
    """Run one command line and record its status in ``KJ_RET``.

    An empty line does nothing and returns 0.
    """
    if not tokens:
        return 0
    argv = detokenize_line(tokens)
    command = get_builtin(argv[0])
    status = command(argv) if command is not None else run_external(argv)
    set_environment_variable("KJ_RET", str(status))
    return status


def run_script(name: str | os.PathLike[str]) -> int:
    """Execute every line of the file ``name``, creating it if missing.

    Always returns -1, as scripts carry no status of their own.
    """
    with open(name, "a+", encoding="utf-8") as script:
        script.seek(0)
        for line in script:
            execute(tokenize_line(line.split("\n", 1)[0]))
    return -1


def run_init() -> int:
    """Run the start-up script in the user's home directory."""
    home = os.environ.get("HOME") or os.path.expanduser("~")
    return run_script(Path(home) / INIT_PATH)


def builtin_run(argv: list[str]) -> int:
    """``run SCRIPT``: execute a script file."""
    if len(argv) < 2:
        return -1
    try:
        return run_script(argv[1])
    except OSError as error:
        print(f"run: {error}", file=sys.stderr)
        return -1


_BUILTINS: dict[int, Builtin] = {
    BuiltinHash.HELP: builtin_help,
    BuiltinHash.EXPORT: builtin_export,
    BuiltinHash.SAY: builtin_say,
    BuiltinHash.CD: builtin_cd,
    BuiltinHash.RUN: builtin_run,
    BuiltinHash.EXIT: builtin_exit,
}