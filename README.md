# kjsh

A small interactive command shell. It reads one line at a time, expands
`$NAME` words from the environment, runs a handful of builtins itself and
starts any other command as an external program.

## Installing

```
pip install .
```

## Running

```
kjsh
```

The shell prints a `$ ` prompt and reads commands from standard input until
`exit` or the end of input. Every line read is appended to `~/.kjhist`. At
start-up the commands in `~/.kjinit` are run first, one per line; the file
is created empty if it does not exist.

## Command lines

Words are separated by spaces; runs of spaces count as one separator and an
empty line does nothing. The first word is the command. A word that starts
with `$` is replaced by the value of the environment variable it names, or
by an empty word when that variable is not set:

```
$ export GREETING hello
$ say $GREETING
hello
```

After every command the environment variable `KJ_RET` holds its status.

## Builtins

| Command              | What it does                                                 |
|----------------------|--------------------------------------------------------------|
| `help`               | Lists the builtin commands                                   |
| `export NAME VALUE`  | Sets an environment variable                                 |
| `say TEXT`           | Prints its first argument                                    |
| `cd DIRECTORY`       | Changes the working directory; a failure is ignored          |
| `run SCRIPT`         | Runs each line of a script file (creating it if missing)     |
| `exit`               | Leaves the shell with status 0                               |

A builtin called with too few arguments returns -1. `clear` appears in the
help text but is not a builtin: like any other command it is looked up on
`$PATH` and run as a separate process. An external program that cannot be
started gives status 127; one killed by a signal gives -1.

## Using it from Python

```python
from kjsh.lexer import tokenize_line
from kjsh.execute import execute

status = execute(tokenize_line("say hi"))
```

- `kjsh.lexer`: `tokenize_line`, `detokenize_line`, `Token`, `TokenType`.
- `kjsh.execute`: `execute`, `get_builtin`, `run_external`, `run_script`,
  `run_init`, `builtin_run`.
- `kjsh.builtins`: `builtin_cd`, `builtin_exit`, `builtin_export`,
  `builtin_help`, `builtin_say`; each takes the argument vector and returns
  a status.
- `kjsh.hashing`: `hash_string`, the position-weighted character sum used to
  recognise builtin names, and `BuiltinHash`, the values it gives for them.
- `kjsh.env`: `get_environment_variable`, `set_environment_variable`.
- `kjsh.history`: `History`, an append-only history file (`add`, `get` by
  0-based index, `close`, usable as a context manager); `open_history` and
  `default_history_path`.
- `kjsh.shell`: `main`, the interactive loop.

## What it does not do

There are no pipes, redirections, quoting, globbing, job control or line
editing. History is recorded to the file but cannot be recalled from the
prompt.

## Tests

```
pip install .[test]
pytest
```