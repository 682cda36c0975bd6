"""Splitting of command input into tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

_QUOTES = frozenset("\"'")


class InferType(Enum):
    """What kind of argument a token was inferred to refer to."""

    MESSAGE = auto()
    SYSTEM_MESSAGE = auto()


@dataclass
class Token:
    """A single argument taken from command input.

    ``position`` counts characters from the start of the input, ``length`` is
    the size of ``raw`` in UTF-8 bytes and ``iteration`` is the token's index.
    """

    raw: str = ""
    position: int = 0
    length: int = 0
    iteration: int = 0
    quoted: bool = False
    contents: Any = None
    inferred: InferType | None = None


def _make_token(raw: str, position: int, iteration: int, quoted: bool) -> Token:
    return Token(
        raw=raw,
        position=position,
        length=len(raw.encode("utf-8")),
        iteration=iteration,
        quoted=quoted,
    )


def lex(text: str) -> list[Token]:
    """Split ``text`` on whitespace, honouring quotes and backslash escapes."""
    tokens: list[Token] = []
    chars = iter(enumerate(text))
    quote_char: str | None = None
    was_quoted = False
    token_start = 0
    current: list[str] = []

    for index, ch in chars:
        if ch == "\\":
            escaped = next(chars, None)
            if escaped is not None:
                current.append(escaped[1])
            continue

        if quote_char is not None:
            if ch == quote_char:
                quote_char = None
            else:
                current.append(ch)
            continue

        if ch.isspace():
            if current:
                tokens.append(
                    _make_token("".join(current), token_start, len(tokens), was_quoted)
                )
                current = []
                was_quoted = False
            continue

        if ch in _QUOTES:
            if current:
                current.append(ch)
            else:
                quote_char = ch
                token_start = index + 1
                was_quoted = True
            continue

        if not current:
            token_start = index
        current.append(ch)

    if current:
        tokens.append(_make_token("".join(current), token_start, len(tokens), was_quoted))

    return tokens