"""Interactive read-eval loop."""

from __future__ import annotations

import contextlib
import sys

from kjsh.execute import execute, run_init
from kjsh.history import History, open_history
from kjsh.lexer import tokenize_line

PROMPT = "$ "


def main(argv: list[str] | None = None) -> int:
    """Run the shell on standard input until ``exit`` or end of input."""
    with contextlib.ExitStack() as stack:
        history: History | None
        try:
            history = stack.enter_context(open_history())
        except OSError as error:
            print(f"Failed to initialize history: {error}", file=sys.stderr)
            history = None

        try:
            run_init()
        except OSError as error:
            print(f"Failed to run init script: {error}", file=sys.stderr)
        except SystemExit as done:
            return done.code if isinstance(done.code, int) else 0

        while True:
            print(PROMPT, end="", flush=True)
            line = sys.stdin.readline()
            if not line:
                return 0
            if history is not None:
                history.add(line)
            try:
                execute(tokenize_line(line.split("\n", 1)[0]))
            except SystemExit as done:
                return done.code if isinstance(done.code, int) else 0


if __name__ == "__main__":
    sys.exit(main())