"""tinyc code generator — target AST to call-syntax text.

Pure concatenation: statements are joined with nothing, call arguments with
", ". Number values are emitted verbatim and string contents are quoted but
not re-escaped.
"""

from __future__ import annotations

import logging
from typing import Union

from tinyc import target_nodes as tgt
from tinyc.errors import CompileError, codegen_error

logger = logging.getLogger(__name__)


class CodeGenerator:
    """Renders target AST nodes to source text."""

    def generate(self, node: tgt.TransformedNode) -> str:
        parts: list[str] = []
        # Plain strings on the work-list are punctuation to emit as-is.
        work: list[Union[str, tgt.TransformedNode]] = [node]

        while work:
            item = work.pop()
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, tgt.Program):
                work.extend(reversed(item.body))
            elif isinstance(item, tgt.ExpressionStatement):
                work.append(";")
                work.append(item.expression)
            elif isinstance(item, tgt.CallExpression):
                seq: list[Union[str, tgt.TransformedNode]] = [f"{item.callee.name}("]
                for i, arg in enumerate(item.arguments):
                    if i:
                        seq.append(", ")
                    seq.append(arg)
                seq.append(")")
                work.extend(reversed(seq))
            elif isinstance(item, tgt.NumberLiteral):
                parts.append(item.value)
            elif isinstance(item, tgt.StringLiteral):
                parts.append(f'"{item.value}"')
            else:
                raise CompileError(codegen_error(
                    f"Cannot generate code for '{type(item).__name__}'"
                ))

        return "".join(parts)


def codegen(node: tgt.TransformedNode) -> str:
    """Convenience function to generate code for a target node."""
    output = CodeGenerator().generate(node)
    if isinstance(node, tgt.Program):
        logger.debug("generated %d characters of output", len(output))
    return output
