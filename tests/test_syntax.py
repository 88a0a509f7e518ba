import pytest

from minishell.syntax import (
    ShellSyntaxError,
    Token,
    TokenType,
    check_syntax,
    has_trailing_backslash,
    has_unclosed_quotes,
)

MULTILINE = "minishell: syntax error multiple line not allowed"


def word(value):
    return Token(TokenType.WORD, value)


PIPE = Token(TokenType.PIPE, "|")
SEMI = Token(TokenType.SEMI, ";")
GREAT = Token(TokenType.GREAT, ">")
NEWLINE = Token(TokenType.NEWLINE, "newline")


@pytest.mark.parametrize(
    "text, expected",
    [
        ('"abc', True),
        ("'abc", True),
        ('"abc"', False),
        ("'abc'", False),
        ('\\"abc', False),
        ('a"b\\"c"', False),
        ('a"b\\"c', True),
        ("'a\\'", False),
        ('\\\\"abc', True),
        ("plain", False),
        ("", False),
    ],
)
def test_has_unclosed_quotes(text, expected):
    assert has_unclosed_quotes(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("abc\\", True), ("abc\\\\", False), ("abc\\\\\\", True), ("abc", False), ("", False)],
)
def test_has_trailing_backslash(text, expected):
    assert has_trailing_backslash(text) is expected


def test_simple_line_is_valid():
    assert check_syntax([word("echo"), word("hi"), NEWLINE]) is True


def test_framing_tokens_are_optional():
    framed = [Token(TokenType.NONE, ""), word("ls"), NEWLINE]
    assert check_syntax(framed) == check_syntax([word("ls")])


def test_empty_line_is_not_runnable():
    assert check_syntax([]) is False
    assert check_syntax([NEWLINE]) is False


def test_leading_pipe_is_rejected():
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax([PIPE, word("ls")])
    assert info.value.message == "minishell: syntax error near unexpected token `|'"
    assert info.value.status == 258


def test_redirection_without_target_names_next_token():
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax([word("ls"), GREAT, NEWLINE])
    assert str(info.value).endswith("`newline'")
    assert info.value.status == 258


def test_redirection_into_pipe_is_rejected():
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax([word("ls"), GREAT, PIPE, word("x")])
    assert info.value.message == "minishell: syntax error near unexpected token `|'"


def test_trailing_pipe_is_multiline():
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax([word("ls"), PIPE])
    assert info.value.message == MULTILINE


def test_double_semicolon_is_rejected():
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax([word("ls"), SEMI, SEMI])
    assert info.value.message == "minishell: syntax error near unexpected token `;'"


def test_trailing_semicolon_is_fine():
    assert check_syntax([word("ls"), SEMI]) is True


def test_unclosed_quote_in_middle_word():
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax([word('"a'), word("b")])
    assert info.value.message == MULTILINE


def test_trailing_backslash_only_matters_on_last_word():
    assert check_syntax([word("a\\"), PIPE, word("b")]) is True
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax([word("a"), word("b\\")])
    assert info.value.message == MULTILINE