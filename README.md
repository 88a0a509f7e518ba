# minishell

The core of a small interactive shell as a plain Python package with no
third-party dependencies. It checks and parses token streams into a command
tree, and reads edited lines from a terminal with a history of earlier lines.

## Modules

- `minishell.strutil` – string helpers with the exact semantics the shell
  relies on. `atoi` accepts leading whitespace and one sign and stops at the
  first non-digit; on 64-bit overflow it gives `-1` for a positive number and
  `0` for a negative one. `parse_unsigned` reads leading digits only (`-1` on
  overflow). Also `int_size`, `itoa`, `is_print`, `is_digit`, `split` (drops
  empty pieces), `split_assignment` (splits `NAME=value` at the first `=`,
  value `None` when there is no `=`), `strtrim`, `substr`, `strnstr`,
  `strncmp`, `strcmp` and `strjoin`.
- `minishell.syntax` – the token model (`TokenType`, `Token`) and the syntax
  checker. `check_syntax` returns `True` when there is something to run and
  `False` for an empty line, and raises `ShellSyntaxError` for a misplaced
  pipe or semicolon, a redirection not followed by a word, a pipe at the end
  of the line, an unclosed quote or a trailing backslash. The error has a
  `message` and a `status` of 258. `has_unclosed_quotes` and
  `has_trailing_backslash` check a single word. A leading `NONE` token and a
  closing `NEWLINE` token are added to a token list when missing.
- `minishell.tree` – the command tree. `parse` checks a token list and builds
  a `CommandList` of `Pipeline`s, each holding `SimpleCommand`s with a
  `command`, `args` and `Redirection`s (`RedirectionType.GREAT`,
  `DOUBLE_GREAT`, `LESS`, numbered by `index`); it returns `None` for an empty
  line. `build_command_list` builds the tree without checking.
  `SimpleCommand.is_empty` and `drop_empty_commands` deal with commands that
  were left empty.
- `minishell.history` – `History` holds `HistoryEntry` items, newest first,
  plus the line being typed: `start_line`, `type_char`, `backspace`, `up`,
  `down`, `submit`, `cancel`, `current_text` and `lines`. Edits made to an
  older entry while browsing are undone when the line is submitted or
  cancelled.
- `minishell.terminal` – the interactive side. `RawMode` turns off echo,
  canonical input and signal keys on a terminal for the length of a `with`
  block. `decode_key` turns one read into a `Key` (up, down, enter,
  backspace, Ctrl-C, Ctrl-D), a printable character or `None`.
  `parse_cursor_report` reads a `ESC [ row ; col R` reply. `prompt` returns
  the coloured `minishell$ ` prompt. `LineReader.read_line` reads one line
  from the terminal; `LineReader.feed` handles one read and can be driven
  directly. Ctrl-C ends the line with `None` and sets `status` to 1; Ctrl-D
  on an empty line writes `exit`, sets `status` to 127 and raises `EOFError`.

## Examples

```python
from minishell import strutil

strutil.atoi("  -42abc")           # -42
strutil.itoa(0)                    # "0"
strutil.split("  a  b ", " ")      # ["a", "b"]
strutil.split_assignment("A=1")    # ("A", "1")
```

```python
from minishell.syntax import ShellSyntaxError, Token, TokenType
from minishell.tree import parse

tokens = [
    Token(TokenType.WORD, "echo"),
    Token(TokenType.WORD, "hi"),
    Token(TokenType.GREAT, ">"),
    Token(TokenType.WORD, "out.txt"),
]
commands = parse(tokens)
cmd = commands.pipelines[0].commands[0]
cmd.command          # "echo"
cmd.args             # ["hi"]
cmd.redirections[0]  # Redirection(type=RedirectionType.GREAT, file_name='out.txt', index=0)

try:
    parse([Token(TokenType.PIPE, "|")])
except ShellSyntaxError as err:
    err.message      # "minishell: syntax error near unexpected token `|'"
    err.status       # 258
```

```python
from minishell.history import History

history = History()
history.start_line()
history.type_char("l")
history.type_char("s")
history.submit()     # "ls"
history.lines()      # ["ls"]
```

## What it does not do

The package has no lexer: token lists are built by the caller. It does not
expand variables or quotes, run commands, apply redirections or provide
builtins, and it installs no command to start a shell. `minishell.terminal`
needs a POSIX system and, for `read_line`, a real terminal.

## Requirements

Python 3.10 or later.