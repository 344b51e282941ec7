"""Scanner: single left-to-right pass over a KeyValues payload.

Whitespace (spaces, tabs, newlines) only carries layout in this format, so
it is consumed without producing tokens. Everything else is classified as
one of the token types below; text the format does not know about is kept
verbatim as ``OTHER`` so the strict parse downstream can reject it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator


class TokenType(Enum):
    STRING = auto()   # "..."  (value holds the raw text between the quotes)
    OPEN = auto()     # {
    CLOSE = auto()    # }
    COLON = auto()    # :
    COMMA = auto()    # ,
    OTHER = auto()    # anything else, including an unterminated string


@dataclass(slots=True)
class Token:
    type: TokenType
    value: str
    pos: int


_WHITESPACE = frozenset(" \t\r\n\f\v")

_PUNCT: dict[str, TokenType] = {
    "{": TokenType.OPEN,
    "}": TokenType.CLOSE,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
}

_STOP = _WHITESPACE | frozenset(_PUNCT) | {'"'}


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of *text* in order."""
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if ch in _WHITESPACE:
            i += 1
            continue

        if ch in _PUNCT:
            yield Token(_PUNCT[ch], ch, i)
            i += 1
            continue

        if ch == '"':
            end = _string_end(text, i + 1)
            if end < 0:
                yield Token(TokenType.OTHER, text[i:], i)
                return
            yield Token(TokenType.STRING, text[i + 1:end], i)
            i = end + 1
            continue

        start = i
        while i < n and text[i] not in _STOP:
            i += 1
        yield Token(TokenType.OTHER, text[start:i], start)


def _string_end(text: str, i: int) -> int:
    """Index of the closing quote of a string whose body starts at *i*, or -1."""
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == '"':
            return i
        i += 1
    return -1
