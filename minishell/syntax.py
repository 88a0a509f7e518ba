"""Token types and the syntax check run on a token list before it is parsed."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

SYNTAX_ERROR_STATUS = 258
_MULTILINE = "minishell: syntax error multiple line not allowed"
_BACKSLASH = "\\"


class TokenType(enum.Enum):
    """Kinds of token produced by the lexer."""

    NONE = enum.auto()
    WORD = enum.auto()
    PIPE = enum.auto()
    SEMI = enum.auto()
    GREAT = enum.auto()
    DOUBLE_GREAT = enum.auto()
    LESS = enum.auto()
    NEWLINE = enum.auto()


REDIRECTION_TOKENS = frozenset({TokenType.GREAT, TokenType.DOUBLE_GREAT, TokenType.LESS})


@dataclass(frozen=True)
class Token:
    """One lexical token: its type and the text it came from."""

    type: TokenType
    value: str = ""


class ShellSyntaxError(Exception):
    """A command line that cannot be parsed; carries the exit status to report."""

    def __init__(self, message: str, status: int = SYNTAX_ERROR_STATUS) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


def _unexpected(token: Token) -> ShellSyntaxError:
    return ShellSyntaxError(
        f"minishell: syntax error near unexpected token `{token.value}'"
    )


def _normalize(tokens: Iterable[Token]) -> list[Token]:
    """Frame the tokens with a leading NONE token and a closing NEWLINE token."""
    framed = list(tokens)
    if not framed or framed[0].type is not TokenType.NONE:
        framed.insert(0, Token(TokenType.NONE, ""))
    if framed[-1].type is not TokenType.NEWLINE:
        framed.append(Token(TokenType.NEWLINE, "newline"))
    return framed


def has_unclosed_quotes(word: str) -> bool:
    """True when a quote opened in ``word`` is never closed.

    A double quote preceded by an odd run of backslashes is escaped; inside
    single quotes nothing is escaped.
    """
    quote = 0
    back_slash = 0
    i = 0
    length = len(word)
    while i < length:
        while i < length and word[i] == _BACKSLASH:
            back_slash += 1
            i += 1
        if i >= length:
            break
        char = word[i]
        escaped = i > 0 and word[i - 1] == _BACKSLASH and back_slash % 2 != 0
        if quote == 0 and char == '"':
            if not escaped:
                quote = 2
            i += 1
            back_slash = 0
        elif quote == 0 and char == "'":
            if not escaped:
                quote = 1
            i += 1
            back_slash = 0
        elif quote == 2 and char == '"':
            if not escaped:
                quote = 0
            i += 1
            back_slash = 0
        elif quote == 1 and char == "'":
            quote = 0
            i += 1
            back_slash = 0
        else:
            i += 1
            back_slash = 0
    return quote != 0


def has_trailing_backslash(word: str) -> bool:
    """True when ``word`` ends in an odd number of backslashes."""
    count = len(word) - len(word.rstrip(_BACKSLASH))
    return count % 2 != 0


def _check_token(token: Token, following: Token) -> bool:
    """Check one token against the next; False when the line is empty."""
    kind = token.type
    if kind is TokenType.NONE:
        if following.type in (TokenType.PIPE, TokenType.SEMI):
            raise _unexpected(following)
        if following.type is TokenType.NEWLINE:
            return False
    elif kind in REDIRECTION_TOKENS:
        if following.type is not TokenType.WORD:
            raise _unexpected(following)
    elif kind is TokenType.PIPE:
        if following.type in (TokenType.PIPE, TokenType.SEMI):
            raise _unexpected(following)
        if following.type is TokenType.NEWLINE:
            raise ShellSyntaxError(_MULTILINE)
    elif kind is TokenType.SEMI:
        if following.type in (TokenType.PIPE, TokenType.SEMI):
            raise _unexpected(following)
    elif kind is TokenType.WORD:
        if following.type is TokenType.NEWLINE and has_trailing_backslash(token.value):
            raise ShellSyntaxError(_MULTILINE)
        if has_unclosed_quotes(token.value):
            raise ShellSyntaxError(_MULTILINE)
    return True


def check_syntax(tokens: Iterable[Token]) -> bool:
    """Validate a token list.

    Returns True when there is something to run and False for an empty line.
    Raises ShellSyntaxError, with status 258, for a malformed line. A leading
    NONE token and a closing NEWLINE token are added when missing.
    """
    framed = _normalize(tokens)
    for token, following in zip(framed, framed[1:]):
        if token.type is TokenType.NEWLINE:
            break
        if not _check_token(token, following):
            return False
    return True