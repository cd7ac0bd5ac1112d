from kjsh.lexer import Token, TokenType, detokenize_line, tokenize_line


def test_command_and_arguments():
    tokens = tokenize_line("echo hi there")
    assert [t.type for t in tokens] == [TokenType.EXTERN, TokenType.ARGUMENT, TokenType.ARGUMENT]
    assert [t.data for t in tokens] == ["echo", "hi", "there"]


def test_builtin_command_types():
    assert tokenize_line("help")[0].type is TokenType.BUILTIN
    assert tokenize_line("clear")[0].type is TokenType.BUILTIN
    assert tokenize_line("exit")[0].type is TokenType.BUILTIN
    assert tokenize_line("say x")[0].type is TokenType.EXTERN


def test_repeated_spaces_collapse():
    assert detokenize_line(tokenize_line("  ls   -l  ")) == ["ls", "-l"]


def test_empty_line():
    assert tokenize_line("") == []
    assert tokenize_line("   ") == []


def test_variable_expansion(monkeypatch):
    monkeypatch.setenv("KJSH_CMD", "help")
    monkeypatch.setenv("KJSH_ARG", "world")
    tokens = tokenize_line("$KJSH_CMD $KJSH_ARG")
    assert tokens == [Token(TokenType.BUILTIN, "help"), Token(TokenType.ARGUMENT, "world")]


def test_unset_variable_expands_to_empty(monkeypatch):
    monkeypatch.delenv("KJSH_UNSET", raising=False)
    tokens = tokenize_line("$KJSH_UNSET $KJSH_UNSET")
    assert tokens == [Token(TokenType.EXTERN, ""), Token(TokenType.ARGUMENT, "")]


def test_detokenize_round_trip():
    line = "cat a b c"
    assert " ".join(detokenize_line(tokenize_line(line))) == line