"""Indented text rendering of the source AST."""

from __future__ import annotations

import json
from typing import Any, Optional

from tinyc.ast_nodes import Program, NumberLiteral, StringLiteral, CallExpression
from tinyc.traverser import ParentNode, Visitor, VisitorOption, traverse


class ASTPrinter:
    """Collects one line per node, two spaces of indent per nesting level."""

    def __init__(self, indent: str = "  "):
        self.indent = indent
        self.depth = 0
        self.lines: list[str] = []

    def _println(self, text: str) -> None:
        self.lines.append(self.indent * self.depth + text)

    def _enter(self, node: Any, parent: Optional[ParentNode]) -> None:
        if isinstance(node, Program):
            self._println("Program")
        elif isinstance(node, CallExpression):
            self._println(f"CallExpression: {node.name}")
        elif isinstance(node, NumberLiteral):
            self._println(f"NumberLiteral: {node.value}")
        elif isinstance(node, StringLiteral):
            self._println(f"StringLiteral: {json.dumps(node.value, ensure_ascii=False)}")
        self.depth += 1

    def _exit(self, node: Any, parent: Optional[ParentNode]) -> None:
        self.depth -= 1

    def visitor(self) -> Visitor:
        option = VisitorOption(enter=self._enter, exit=self._exit)
        return Visitor(
            program=option,
            number_literal=option,
            string_literal=option,
            call_expression=option,
        )

    def print(self, program: Program) -> str:
        self.depth = 0
        self.lines = []
        traverse(program, self.visitor())
        return "\n".join(self.lines)


def format_ast(program: Program) -> str:
    return ASTPrinter().print(program)
