"""String helpers used by the shell: number conversion, splitting and comparison."""

from __future__ import annotations

from itertools import zip_longest

_WHITESPACE = "\n\r \t\v\f"
_INT64_SPAN = 1 << 64
_INT64_HALF = 1 << 63


def _wrap64(value: int) -> int:
    """Wrap an integer into the signed 64-bit range."""
    return (value + _INT64_HALF) % _INT64_SPAN - _INT64_HALF


def _code(char: str | int) -> int:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        return ord(char)
    return char


def _leading_digits(text: str) -> str:
    end = 0
    for char in text:
        if not "0" <= char <= "9":
            break
        end += 1
    return text[:end]


def _accumulate(digits: str) -> int | None:
    """Accumulate digits in 64-bit arithmetic; None once the value has wrapped."""
    result = 0
    for char in digits:
        if result < 0:
            return None
        result = _wrap64(result * 10 + ord(char) - ord("0"))
    return result


def atoi(text: str) -> int:
    """Parse a signed integer the way the shell does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. On 64-bit overflow a positive number gives -1 and a negative
    number gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest.startswith("-"):
        sign = -1
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    result = _accumulate(_leading_digits(rest))
    if result is None:
        return 0 if sign == -1 else -1
    return _wrap64(sign * result)


def parse_unsigned(text: str) -> int:
    """Parse the leading digits of ``text``; -1 on 64-bit overflow."""
    result = _accumulate(_leading_digits(text))
    return -1 if result is None else result


def int_size(n: int) -> int:
    """Number of decimal digits in ``n``; zero has none."""
    return len(str(abs(n))) if n else 0


def itoa(n: int) -> str:
    """Decimal representation of ``n``."""
    return str(n)


def is_print(char: str | int) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return ord(" ") <= _code(char) <= ord("~")


def is_digit(char: str | int) -> bool:
    """True for the ASCII digits."""
    return ord("0") <= _code(char) <= ord("9")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def split_assignment(text: str) -> tuple[str, str | None]:
    """Split ``NAME=value`` at the first ``=``.

    The value is None when there is no ``=`` at all, and an empty string when
    the ``=`` is the last character.
    """
    name, equals, value = text.partition("=")
    return (name, value) if equals else (name, None)


def strtrim(text: str, chars: str) -> str:
    """Remove every character of ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the rest of ``haystack`` from the match, or None.
    """
    if not needle:
        return haystack
    index = haystack[:length].find(needle)
    return None if index < 0 else haystack[index:]


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the difference at the first mismatch."""
    for a, b in zip_longest(first[:n], second[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strcmp(first: str, second: str) -> int:
    """Compare two strings; the difference at the first mismatch, else 0."""
    for a, b in zip_longest(first, second, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strjoin(first: str | None, second: str | None) -> str | None:
    """Concatenate two strings, treating a missing one as absent."""
    if first is None:
        return second
    if second is None:
        return first
    return first + second