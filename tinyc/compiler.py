"""tinyc pipeline — tokenize, parse, transform, generate.

compile() raises CompileError on the first failure and produces no partial
output. compile_result() returns the same outcome as a CompileResult value.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from tinyc.codegen import codegen
from tinyc.errors import CompileError, CompilerError
from tinyc.lexer import tokenize
from tinyc.parser import parse
from tinyc.transformer import transform

logger = logging.getLogger(__name__)


def compile(source: str) -> str:
    """Compile s-expression source into call-syntax text."""
    tokens = tokenize(source)
    program = parse(tokens)
    target = transform(program)
    output = codegen(target)
    logger.debug("compiled %d top-level statements", len(target.body))
    return output


@dataclass
class CompileResult:
    source: str
    output: Optional[str] = None
    error: Optional[CompilerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"input": self.source, "ok": self.ok}
        if self.output is not None:
            d["output"] = self.output
        if self.error is not None:
            d["error"] = self.error.to_dict()
        return d

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


def compile_result(source: str) -> CompileResult:
    """Compile source, returning the output or the error as a value."""
    try:
        return CompileResult(source=source, output=compile(source))
    except CompileError as e:
        return CompileResult(source=source, error=e.error)
