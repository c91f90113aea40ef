"""tinyc target AST — the call-syntax shaped tree the generator consumes.

Every element of Program.body is an ExpressionStatement. Call arguments are
never wrapped.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class Identifier:
    name: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"type": "Identifier", "name": self.name}


@dataclass
class NumberLiteral:
    value: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"type": "NumberLiteral", "value": self.value}


@dataclass
class StringLiteral:
    value: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"type": "StringLiteral", "value": self.value}


@dataclass
class CallExpression:
    callee: Identifier = field(default_factory=Identifier)
    arguments: list[TransformedNode] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "CallExpression",
            "callee": self.callee.to_dict(),
            "arguments": [a.to_dict() for a in self.arguments],
        }


@dataclass
class ExpressionStatement:
    expression: TransformedNode = field(default_factory=NumberLiteral)

    def to_dict(self) -> dict[str, Any]:
        return {"type": "ExpressionStatement", "expression": self.expression.to_dict()}


@dataclass
class Program:
    body: list[TransformedNode] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "Program",
            "body": [s.to_dict() for s in self.body],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


TransformedNode = Union[
    Program, ExpressionStatement, CallExpression, NumberLiteral, StringLiteral,
]
