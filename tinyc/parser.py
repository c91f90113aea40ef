"""tinyc Parser — predictive parser over the token list.

Consumes the token list with a single forward-only cursor and builds the
source AST. Open calls are held on an explicit stack, so nesting depth is
bounded by input size only. Error positions are token indices, not
character offsets.
"""

from __future__ import annotations

import logging

from tinyc.ast_nodes import (
    Program, ChildNode, NumberLiteral, StringLiteral, CallExpression,
)
from tinyc.errors import CompileError, unexpected_eof, unexpected_token
from tinyc.lexer import Token, TokenType

logger = logging.getLogger(__name__)


class Parser:
    """Predictive parser for tinyc."""

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.pos = 0

    def _at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def _current(self) -> Token:
        if self._at_end():
            raise CompileError(unexpected_eof())
        return self.tokens[self.pos]

    def _advance(self) -> Token:
        tok = self._current()
        self.pos += 1
        return tok

    def _is_paren(self, tok: Token, text: str) -> bool:
        return tok.type == TokenType.PAREN and tok.value == text

    # -------------------------------------------------------------------
    # Top-level
    # -------------------------------------------------------------------

    def parse(self) -> Program:
        program = Program()
        # Calls opened but not yet closed, innermost last.
        open_calls: list[CallExpression] = []

        while not self._at_end():
            tok = self._current()
            if tok.type == TokenType.NUMBER:
                self._advance()
                node: ChildNode = NumberLiteral(value=tok.value)
            elif tok.type == TokenType.STRING:
                self._advance()
                node = StringLiteral(value=tok.value)
            elif self._is_paren(tok, "("):
                open_calls.append(self._open_call())
                continue
            elif self._is_paren(tok, ")") and open_calls:
                self._advance()
                node = open_calls.pop()
            else:
                raise CompileError(unexpected_token(tok.value, self.pos))

            if open_calls:
                open_calls[-1].params.append(node)
            else:
                program.body.append(node)

        if open_calls:
            raise CompileError(unexpected_eof())

        logger.debug("parsed %d top-level nodes", len(program.body))
        return program

    # -------------------------------------------------------------------
    # (name param ...)
    # -------------------------------------------------------------------

    def _open_call(self) -> CallExpression:
        self._advance()  # (
        name_tok = self._current()
        if name_tok.type != TokenType.NAME:
            raise CompileError(unexpected_token(name_tok.value, self.pos))
        self._advance()
        return CallExpression(name=name_tok.value)


def parse(tokens: list[Token]) -> Program:
    """Convenience function to parse a token list into a Program."""
    return Parser(tokens).parse()
