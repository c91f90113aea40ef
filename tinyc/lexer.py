"""tinyc Lexer — single-pass tokenizer for s-expression source.

Produces an ordered list of tokens. Whitespace is skipped, parentheses are
emitted one at a time, and balancing them is left to the parser.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from tinyc.errors import CompileError, invalid_character, unexpected_eof

logger = logging.getLogger(__name__)


class TokenType(Enum):
    PAREN = "paren"
    NAME = "name"
    NUMBER = "number"
    STRING = "string"


ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "value": self.value}

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"


def _is_whitespace(ch: str) -> bool:
    # str.isspace also accepts the \x1c-\x1f separators; those are invalid here.
    return ch.isspace() and ch not in "\x1c\x1d\x1e\x1f"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """Tokenizer for tinyc source code."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def _peek(self) -> Optional[str]:
        if self.pos < len(self.source):
            return self.source[self.pos]
        return None

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        return ch

    def _read_name(self) -> Token:
        start = self.pos
        while self.pos < len(self.source):
            ch = self.source[self.pos]
            if not (ch.isalpha() or ch == "_"):
                break
            self.pos += 1
        return Token(TokenType.NAME, self.source[start:self.pos])

    def _read_number(self) -> Token:
        # "1.2.3" is kept verbatim; numbers are opaque text.
        start = self.pos
        while self.pos < len(self.source):
            ch = self.source[self.pos]
            if not (_is_digit(ch) or ch == "."):
                break
            self.pos += 1
        return Token(TokenType.NUMBER, self.source[start:self.pos])

    def _read_string(self) -> Token:
        self._advance()  # opening quote
        value = ""
        while self.pos < len(self.source):
            ch = self._advance()
            if ch == '"':
                return Token(TokenType.STRING, value)
            if ch == "\\":
                if self.pos >= len(self.source):
                    break
                next_ch = self._advance()
                value += ESCAPES.get(next_ch, "\\" + next_ch)
            else:
                value += ch
        raise CompileError(unexpected_eof())

    def tokenize(self) -> list[Token]:
        tokens: list[Token] = []
        while self.pos < len(self.source):
            ch = self._peek()

            if _is_whitespace(ch):
                self._advance()
            elif ch in ("(", ")"):
                self._advance()
                tokens.append(Token(TokenType.PAREN, ch))
            elif ch.isalpha():
                tokens.append(self._read_name())
            elif _is_digit(ch):
                tokens.append(self._read_number())
            elif ch == '"':
                tokens.append(self._read_string())
            else:
                raise CompileError(invalid_character(ch, self.pos))

        logger.debug("tokenized %d characters into %d tokens", len(self.source), len(tokens))
        return tokens


def tokenize(source: str) -> list[Token]:
    """Convenience function to tokenize tinyc source code."""
    return Lexer(source).tokenize()
