"""tinyc source AST node definitions.

A Program holds a body of child nodes. Child nodes are number literals,
string literals and call expressions; a Program never appears as a child.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Union


# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------

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


# ---------------------------------------------------------------------------
# Calls
# ---------------------------------------------------------------------------

@dataclass
class CallExpression:
    """(name param ...) — params keep their source order."""
    name: str = ""
    params: list[ChildNode] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "CallExpression",
            "name": self.name,
            "params": [p.to_dict() for p in self.params],
        }


ChildNode = Union[NumberLiteral, StringLiteral, CallExpression]

CHILD_NODE_TYPES = (NumberLiteral, StringLiteral, CallExpression)


# ---------------------------------------------------------------------------
# Program
# ---------------------------------------------------------------------------

@dataclass
class Program:
    body: list[ChildNode] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "Program",
            "body": [n.to_dict() for n in self.body],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
