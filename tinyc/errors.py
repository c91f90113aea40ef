"""Structured error objects for the tinyc compiler.

Every failure is a typed record with a kind, a human-readable message and the
details needed to act on it (offending character, token, position). Stages
raise a CompileError wrapping the record; the first failure aborts the
pipeline.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorKind(Enum):
    TOKENIZER_ERROR = "tokenizer_error"
    PARSER_ERROR = "parser_error"
    TRANSFORMER_ERROR = "transformer_error"
    CODEGEN_ERROR = "codegen_error"
    UNEXPECTED_TOKEN = "unexpected_token"
    UNEXPECTED_EOF = "unexpected_eof"
    INVALID_CHARACTER = "invalid_character"


@dataclass
class CompilerError:
    kind: ErrorKind
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "kind": self.kind.value,
            "message": self.message,
        }
        if self.details:
            d["details"] = self.details
        return d

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def __str__(self) -> str:
        return self.message


def invalid_character(character: str, position: int) -> CompilerError:
    return CompilerError(
        kind=ErrorKind.INVALID_CHARACTER,
        message=f"Invalid character: '{character}' at position {position}",
        details={"character": character, "position": position},
    )


def unexpected_token(token: str, position: int) -> CompilerError:
    return CompilerError(
        kind=ErrorKind.UNEXPECTED_TOKEN,
        message=f"Unexpected token: {token} at position {position}",
        details={"token": token, "position": position},
    )


def unexpected_eof() -> CompilerError:
    return CompilerError(
        kind=ErrorKind.UNEXPECTED_EOF,
        message="Unexpected end of input",
    )


def tokenizer_error(message: str) -> CompilerError:
    return CompilerError(
        kind=ErrorKind.TOKENIZER_ERROR,
        message=f"Tokenizer error: {message}",
    )


def parser_error(message: str) -> CompilerError:
    return CompilerError(
        kind=ErrorKind.PARSER_ERROR,
        message=f"Parser error: {message}",
    )


def transformer_error(message: str) -> CompilerError:
    return CompilerError(
        kind=ErrorKind.TRANSFORMER_ERROR,
        message=f"Transformer error: {message}",
    )


def codegen_error(message: str) -> CompilerError:
    return CompilerError(
        kind=ErrorKind.CODEGEN_ERROR,
        message=f"Code generation error: {message}",
    )


class CompileError(Exception):
    """Exception carrying the CompilerError that stopped the pipeline."""

    def __init__(self, error: CompilerError):
        self.error = error
        super().__init__(str(error))

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    def to_dict(self) -> dict[str, Any]:
        return self.error.to_dict()

    def to_json(self, indent: int = 2) -> str:
        return self.error.to_json(indent=indent)
