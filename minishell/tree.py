"""Command tree built from a checked token list: command lists, pipelines, commands."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field

from minishell.syntax import (
    REDIRECTION_TOKENS,
    ShellSyntaxError,
    Token,
    TokenType,
    _normalize,
    check_syntax,
)


class RedirectionType(enum.Enum):
    """Kinds of redirection: ``>``, ``>>`` and ``<``."""

    GREAT = enum.auto()
    DOUBLE_GREAT = enum.auto()
    LESS = enum.auto()


_REDIRECTION_OF = {
    TokenType.GREAT: RedirectionType.GREAT,
    TokenType.DOUBLE_GREAT: RedirectionType.DOUBLE_GREAT,
    TokenType.LESS: RedirectionType.LESS,
}


@dataclass
class Redirection:
    """A redirection of a command, numbered in the order it appeared."""

    type: RedirectionType
    file_name: str
    index: int


@dataclass
class SimpleCommand:
    """A command name, its arguments and its redirections."""

    command: str | None = None
    args: list[str] = field(default_factory=list)
    redirections: list[Redirection] = field(default_factory=list)
    inside_quotes: int = 0

    def is_empty(self) -> bool:
        """True when the command has no name, arguments or redirections."""
        return (
            self.command is None
            and self.inside_quotes == 0
            and not self.args
            and not self.redirections
        )

    def _has_name(self) -> bool:
        return self.inside_quotes != 0 or self.command is not None

    def _add_word(self, word: str) -> None:
        if self.command is None:
            self.command = word
        else:
            self.args.append(word)


@dataclass
class Pipeline:
    """Simple commands joined by pipes."""

    commands: list[SimpleCommand] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.commands)


@dataclass
class CommandList:
    """Pipelines separated by semicolons."""

    pipelines: list[Pipeline] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.pipelines)


_COMMAND_END = (TokenType.PIPE, TokenType.SEMI, TokenType.NEWLINE)


def _build_simple_command(tokens: list[Token], pos: int) -> tuple[SimpleCommand, int]:
    cmd = SimpleCommand()
    while tokens[pos].type not in _COMMAND_END:
        token = tokens[pos]
        if token.type in REDIRECTION_TOKENS:
            target = tokens[pos + 1]
            if target.type is TokenType.NEWLINE:
                raise ShellSyntaxError(
                    f"minishell: syntax error near unexpected token `{target.value}'"
                )
            cmd.redirections.append(
                Redirection(_REDIRECTION_OF[token.type], target.value, len(cmd.redirections))
            )
            pos += 2
        else:
            if token.type is TokenType.WORD:
                cmd._add_word(token.value)
            pos += 1
    return cmd, pos


def _build_pipeline(tokens: list[Token], pos: int) -> tuple[Pipeline, int]:
    cmd, pos = _build_simple_command(tokens, pos)
    pipeline = Pipeline([cmd])
    while tokens[pos].type is TokenType.PIPE:
        cmd, pos = _build_simple_command(tokens, pos + 1)
        pipeline.commands.append(cmd)
    return pipeline, pos


def build_command_list(tokens: Iterable[Token]) -> CommandList:
    """Build the command tree from tokens that have passed the syntax check."""
    framed = _normalize(tokens)
    result = CommandList()
    pos = 0
    if framed[pos].type is not TokenType.NEWLINE:
        pipeline, pos = _build_pipeline(framed, pos)
        result.pipelines.append(pipeline)
    while framed[pos].type is not TokenType.NEWLINE:
        if framed[pos].type is TokenType.SEMI:
            pos += 1
            if framed[pos].type not in (TokenType.NEWLINE, TokenType.SEMI):
                pipeline, pos = _build_pipeline(framed, pos)
                result.pipelines.append(pipeline)
        else:
            pos += 1
    return result


def parse(tokens: Iterable[Token]) -> CommandList | None:
    """Check and parse a token list; None for an empty line.

    Raises ShellSyntaxError for a malformed line.
    """
    framed = _normalize(tokens)
    if not check_syntax(framed):
        return None
    return build_command_list(framed)


def drop_empty_commands(pipeline: Pipeline) -> list[SimpleCommand]:
    """Remove commands left empty after expansion and return what remains.

    Leading commands that are empty altogether are dropped. After the first
    command that has a name, any later command without a name is dropped too.
    """
    commands = list(pipeline.commands)
    while commands and commands[0].is_empty():
        commands.pop(0)
    kept: list[SimpleCommand] = []
    seen_named = False
    for cmd in commands:
        if cmd._has_name():
            seen_named = True
            kept.append(cmd)
        elif not seen_named:
            kept.append(cmd)
    pipeline.commands = kept
    return kept