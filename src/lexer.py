"""Tokenization for tysh.

A line is scanned once, left to right, with a single pending buffer. Operators
(``>``, ``|``, ``;``) always stand alone, quoted text becomes a STRING token,
and bare words are classified by their text once they are flushed.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

OPERATORS = {">", "|", ";"}
QUOTES = {"'", '"'}

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INTEGER_RE = re.compile(r"-?(0|[1-9][0-9]*)")
_FLOAT_RE = re.compile(r"-?(0|[1-9][0-9]*)\.[0-9]+")


class ShellSyntaxError(ValueError):
    """Raised for input that cannot be tokenized or parsed."""


class TokenKind(Enum):
    WORD = "word"
    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    GREATER_THAN = "greater_than"
    PIPE = "pipe"
    SEMICOLON = "semicolon"


LITERAL_KINDS = {
    TokenKind.WORD,
    TokenKind.STRING,
    TokenKind.BOOLEAN,
    TokenKind.INTEGER,
    TokenKind.FLOAT,
}


@dataclass(frozen=True)
class Token:
    value: str
    kind: TokenKind

    def __repr__(self) -> str:
        return f"Token({self.value!r}, {self.kind.name})"


def _is_integer(text: str) -> bool:
    if not _INTEGER_RE.fullmatch(text) or text == "-0":
        return False
    return INT64_MIN <= int(text) <= INT64_MAX


def _is_float(text: str) -> bool:
    # Only canonical spellings count, so rendering the value gives back the text.
    return bool(_FLOAT_RE.fullmatch(text)) and repr(float(text)) == text


def classify(text: str) -> Token:
    """Build the token for a flushed bare buffer."""
    if text == ">":
        return Token(text, TokenKind.GREATER_THAN)
    if text == "|":
        return Token(text, TokenKind.PIPE)
    if text == ";":
        return Token(text, TokenKind.SEMICOLON)
    if text in ("true", "false"):
        return Token(text, TokenKind.BOOLEAN)
    if _is_integer(text):
        return Token(text, TokenKind.INTEGER)
    if _is_float(text):
        return Token(text, TokenKind.FLOAT)
    return Token(text, TokenKind.WORD)


# --- Tokenization ---

def lex(line: str) -> list[Token]:
    """Split ``line`` into tokens.

    Raises ShellSyntaxError when a quoted string is not closed.
    """
    tokens: list[Token] = []
    buf: list[str] = []
    quote: str | None = None

    def flush_buf() -> None:
        if buf:
            tokens.append(classify("".join(buf)))
            buf.clear()

    for ch in line:
        if quote is not None:
            if ch == quote:
                tokens.append(Token("".join(buf), TokenKind.STRING))
                buf.clear()
                quote = None
            else:
                buf.append(ch)
            continue
        if ch in QUOTES:
            flush_buf()
            quote = ch
        elif ch in OPERATORS:
            flush_buf()
            tokens.append(classify(ch))
        elif ch.isspace():
            flush_buf()
        else:
            buf.append(ch)

    if quote is not None:
        raise ShellSyntaxError("Syntax Error: Unterminated string")
    flush_buf()
    return tokens

