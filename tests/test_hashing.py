import pytest

from kjsh.hashing import BuiltinHash, hash_string


@pytest.mark.parametrize(
    "name, expected",
    [
        ("help", BuiltinHash.HELP),
        ("clear", BuiltinHash.CLEAR),
        ("export", BuiltinHash.EXPORT),
        ("say", BuiltinHash.SAY),
        ("cd", BuiltinHash.CD),
        ("run", BuiltinHash.RUN),
        ("exit", BuiltinHash.EXIT),
    ],
)
def test_builtin_names_hash_to_their_constants(name, expected):
    assert hash_string(name) == expected


def test_none_and_empty_hash_to_empty_line():
    assert hash_string(None) == BuiltinHash.EMPTY_LINE
    assert hash_string("") == BuiltinHash.EMPTY_LINE


def test_trailing_newline_is_ignored():
    assert hash_string("cd\n") == hash_string("cd") == BuiltinHash.CD