"""Generic depth-first traversal over the source AST.

A Visitor holds optional enter/exit callbacks per node kind. Each callback
receives the node and its immediate parent (None for the Program root).
Enter runs before the node's children are visited, in source order, and exit
runs after them. Traversal is read-only; parents are context, not handles
for mutation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union

from tinyc.ast_nodes import (
    Program, ChildNode, NumberLiteral, StringLiteral, CallExpression,
)


class ParentKind(Enum):
    PROGRAM = "program"
    CALL_EXPRESSION = "call_expression"


@dataclass(frozen=True)
class ParentNode:
    """The node whose body/params list holds the node being visited."""
    kind: ParentKind
    node: Union[Program, CallExpression]


Callback = Callable[[Any, Optional[ParentNode]], None]


@dataclass
class VisitorOption:
    enter: Optional[Callback] = None
    exit: Optional[Callback] = None


@dataclass
class Visitor:
    program: Optional[VisitorOption] = None
    number_literal: Optional[VisitorOption] = None
    string_literal: Optional[VisitorOption] = None
    call_expression: Optional[VisitorOption] = None


def _enter(option: Optional[VisitorOption], node: Any, parent: Optional[ParentNode]) -> None:
    if option is not None and option.enter is not None:
        option.enter(node, parent)


def _exit(option: Optional[VisitorOption], node: Any, parent: Optional[ParentNode]) -> None:
    if option is not None and option.exit is not None:
        option.exit(node, parent)


def _option_for(visitor: Visitor, node: Any, parent: Optional[ParentNode]) -> Optional[VisitorOption]:
    if isinstance(node, Program) and parent is None:
        return visitor.program
    if isinstance(node, CallExpression):
        return visitor.call_expression
    if isinstance(node, NumberLiteral):
        return visitor.number_literal
    if isinstance(node, StringLiteral):
        return visitor.string_literal
    raise TypeError(f"traverse: {type(node).__name__} cannot appear as a child node")


def _children(node: Any) -> tuple[list[ChildNode], Optional[ParentNode]]:
    if isinstance(node, Program):
        return node.body, ParentNode(ParentKind.PROGRAM, node)
    if isinstance(node, CallExpression):
        return node.params, ParentNode(ParentKind.CALL_EXPRESSION, node)
    return [], None


def traverse(root: Program, visitor: Visitor) -> None:
    """Walk root depth-first, calling the visitor's hooks for each node."""
    # (node, parent, leaving)
    work: list[tuple[Any, Optional[ParentNode], bool]] = [(root, None, False)]

    while work:
        node, parent, leaving = work.pop()
        option = _option_for(visitor, node, parent)
        if leaving:
            _exit(option, node, parent)
            continue

        _enter(option, node, parent)
        work.append((node, parent, True))
        children, context = _children(node)
        work.extend((child, context, False) for child in reversed(children))
