"""Splitting a command line into tokens, with ``$NAME`` expansion."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from kjsh.env import get_environment_variable
from kjsh.hashing import BuiltinHash, hash_string


class TokenType(Enum):
    BUILTIN = auto()
    EXTERN = auto()
    ARGUMENT = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    data: str


_COMMAND_BUILTINS = {BuiltinHash.HELP, BuiltinHash.CLEAR, BuiltinHash.EXIT}


def _expand(word: str) -> str | None:
    if word.startswith("$"):
        return get_environment_variable(word[1:])
    return word


def _command_token(word: str) -> Token:
    expanded = _expand(word)
    kind = TokenType.BUILTIN if hash_string(expanded) in _COMMAND_BUILTINS else TokenType.EXTERN
    return Token(kind, "" if expanded is None else expanded)


def _argument_token(word: str) -> Token:
    expanded = _expand(word)
    return Token(TokenType.ARGUMENT, "" if expanded is None else expanded)


def tokenize_line(line: str) -> list[Token]:
    """Split ``line`` on spaces; the first word is the command.

    Words starting with ``$`` are replaced by the environment variable
    they name, or by an empty string when it is unset.
    """
    words = [word for word in line.split(" ") if word]
    if not words:
        return []
    command, *arguments = words
    return [_command_token(command), *map(_argument_token, arguments)]


def detokenize_line(tokens: list[Token]) -> list[str]:
    """Return the argument vector held by ``tokens``."""
    return [token.data for token in tokens]