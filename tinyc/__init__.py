"""tinyc — s-expression to call-syntax compiler."""

__version__ = "0.1.0"

from tinyc.compiler import compile, compile_result, CompileResult
from tinyc.errors import CompileError, CompilerError, ErrorKind
from tinyc.lexer import Token, TokenType, tokenize
from tinyc.parser import parse
from tinyc.transformer import transform
from tinyc.codegen import codegen
from tinyc.traverser import traverse, Visitor, VisitorOption, ParentNode, ParentKind
from tinyc.printer import format_ast

__all__ = [
    "compile", "compile_result", "CompileResult",
    "CompileError", "CompilerError", "ErrorKind",
    "Token", "TokenType", "tokenize",
    "parse", "transform", "codegen",
    "traverse", "Visitor", "VisitorOption", "ParentNode", "ParentKind",
    "format_ast",
]
