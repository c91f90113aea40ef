"""Traverser tests — hook order and parent context."""

import pytest

from tinyc.ast_nodes import Program, NumberLiteral, StringLiteral, CallExpression
from tinyc.lexer import tokenize
from tinyc.parser import parse
from tinyc.traverser import ParentKind, Visitor, VisitorOption, traverse


class Recorder:
    """Accumulates (event, label, parent kind) triples."""

    def __init__(self):
        self.events = []

    def hook(self, event):
        def record(node, parent):
            label = getattr(node, "name", None) or getattr(node, "value", None) or "program"
            self.events.append((event, label, parent.kind if parent else None))
        return record

    def option(self, kind):
        return VisitorOption(enter=self.hook(f"{kind}_enter"), exit=self.hook(f"{kind}_exit"))

    def visitor(self):
        return Visitor(
            program=self.option("program"),
            number_literal=self.option("number"),
            string_literal=self.option("string"),
            call_expression=self.option("call"),
        )


class TestTraversalOrder:

    def test_simple_program(self):
        """Enter/exit wrap each node."""
        rec = Recorder()
        traverse(Program(body=[NumberLiteral("42")]), rec.visitor())
        assert [e[0] for e in rec.events] == [
            "program_enter", "number_enter", "number_exit", "program_exit",
        ]

    def test_depth_first_in_param_order(self):
        rec = Recorder()
        traverse(parse(tokenize('(add 1 (neg 2) "x")')), rec.visitor())
        assert [(e[0], e[1]) for e in rec.events] == [
            ("program_enter", "program"),
            ("call_enter", "add"),
            ("number_enter", "1"),
            ("number_exit", "1"),
            ("call_enter", "neg"),
            ("number_enter", "2"),
            ("number_exit", "2"),
            ("call_exit", "neg"),
            ("string_enter", "x"),
            ("string_exit", "x"),
            ("call_exit", "add"),
            ("program_exit", "program"),
        ]

    def test_missing_hooks_are_skipped(self):
        """Only configured kinds are reported; children are still visited."""
        seen = []
        visitor = Visitor(number_literal=VisitorOption(enter=lambda node, parent: seen.append(node.value)))
        traverse(parse(tokenize("(add 1 (mul 2 3))")), visitor)
        assert seen == ["1", "2", "3"]

    def test_empty_visitor(self):
        traverse(parse(tokenize("(add 1 2)")), Visitor())


class TestParentContext:

    def test_parent_kinds(self):
        rec = Recorder()
        traverse(parse(tokenize("(add 1) 2")), rec.visitor())
        enters = {(e[0], e[1]): e[2] for e in rec.events if e[0].endswith("_enter")}
        assert enters[("program_enter", "program")] is None
        assert enters[("call_enter", "add")] == ParentKind.PROGRAM
        assert enters[("number_enter", "1")] == ParentKind.CALL_EXPRESSION
        assert enters[("number_enter", "2")] == ParentKind.PROGRAM

    def test_parent_node_is_the_containing_call(self):
        parents = []
        visitor = Visitor(string_literal=VisitorOption(enter=lambda node, parent: parents.append(parent.node)))
        program = parse(tokenize('(outer (inner "s"))'))
        traverse(program, visitor)
        assert parents == [program.body[0].params[0]]
        assert parents[0].name == "inner"

    def test_program_as_child_is_rejected(self):
        with pytest.raises(TypeError):
            traverse(Program(body=[Program()]), Visitor())

    def test_deeply_nested_calls(self):
        """Hooks fire for every level without exhausting the call stack."""
        depth = 2000
        program = parse(tokenize("(f " * depth + "1" + ")" * depth))
        entered = []
        exited = []
        traverse(program, Visitor(call_expression=VisitorOption(
            enter=lambda node, parent: entered.append(parent.kind),
            exit=lambda node, parent: exited.append(node.name),
        )))
        assert len(entered) == depth
        assert entered[0] == ParentKind.PROGRAM
        assert set(entered[1:]) == {ParentKind.CALL_EXPRESSION}
        assert len(exited) == depth
