"""tinyc Transformer — source AST to target AST.

A 1:1 node mapping. Calls take an Identifier callee and their params become
arguments. Top-level nodes are wrapped in ExpressionStatement; nested
arguments are not. Nodes are processed from a work-list rather than by
recursion, so arbitrarily deep trees are handled.
"""

from __future__ import annotations

import logging

from tinyc import ast_nodes as src
from tinyc import target_nodes as tgt
from tinyc.errors import CompileError, transformer_error

logger = logging.getLogger(__name__)


class Transformer:
    """Rewrites a source Program into a target Program."""

    def transform_program(self, program: src.Program) -> tgt.Program:
        body: list[tgt.TransformedNode] = []
        # (source node, is_nested, list the converted node is appended to)
        work = [(node, False, body) for node in reversed(program.body)]

        while work:
            node, is_nested, out = work.pop()
            result = self._convert(node)
            if isinstance(node, src.CallExpression):
                work.extend((p, True, result.arguments) for p in reversed(node.params))
            out.append(result if is_nested else tgt.ExpressionStatement(expression=result))

        logger.debug("transformed %d top-level statements", len(body))
        return tgt.Program(body=body)

    def _convert(self, node: src.ChildNode) -> tgt.TransformedNode:
        """Convert one node; call arguments are filled in by the caller."""
        if isinstance(node, src.NumberLiteral):
            return tgt.NumberLiteral(value=node.value)
        if isinstance(node, src.StringLiteral):
            return tgt.StringLiteral(value=node.value)
        if isinstance(node, src.CallExpression):
            return tgt.CallExpression(callee=tgt.Identifier(name=node.name))
        raise CompileError(transformer_error(
            f"Unsupported node type '{type(node).__name__}'"
        ))


def transform(program: src.Program) -> tgt.Program:
    """Convenience function to transform a source Program."""
    return Transformer().transform_program(program)
