"""Property-based tests for the tinyc pipeline.

Random source trees are rendered to text with random whitespace between
tokens, then compiled. The properties checked:

  1. Call shape: (f a1 ... an) with numeric args compiles to f(a1, ..., an);
  2. Whitespace between tokens never changes the output
  3. One ";"-terminated statement per top-level node
  4. Paren nesting depth is the same in input and output
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tinyc import compile
from tinyc.ast_nodes import CallExpression, NumberLiteral, StringLiteral


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

names = st.from_regex(r"[A-Za-z][A-Za-z_]{0,7}", fullmatch=True)
numbers = st.from_regex(r"[0-9]{1,6}(\.[0-9]{1,3})?", fullmatch=True)
# No quotes, backslashes, parens or semicolons, so output text can be scanned.
string_bodies = st.text(alphabet="abcxyz019 ,.!", max_size=8)
whitespace = st.text(alphabet=" \t\n\r", min_size=1, max_size=3)

leaves = st.one_of(numbers.map(NumberLiteral), string_bodies.map(StringLiteral))
nodes = st.recursive(
    leaves,
    lambda children: st.builds(CallExpression, names, st.lists(children, max_size=4)),
    max_leaves=20,
)
programs = st.lists(nodes, max_size=5)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def render(node, gap) -> str:
    if isinstance(node, NumberLiteral):
        return node.value
    if isinstance(node, StringLiteral):
        return f'"{node.value}"'
    parts = [node.name] + [render(p, gap) for p in node.params]
    inner = parts[0]
    for part in parts[1:]:
        inner += gap() + part
    return "(" + inner + ")"


def render_program(body, gap) -> str:
    return "".join(gap() + render(node, gap) for node in body)


def depth(node) -> int:
    if isinstance(node, CallExpression):
        return 1 + max((depth(p) for p in node.params), default=0)
    return 0


def paren_depth(text: str) -> int:
    level = deepest = 0
    for ch in text:
        if ch == "(":
            level += 1
            deepest = max(deepest, level)
        elif ch == ")":
            level -= 1
    return deepest


def single_space():
    return " "


# ===========================================================================
# Properties
# ===========================================================================

class TestPipelineLaws:

    @given(names, st.lists(numbers, max_size=10))
    @settings(max_examples=200)
    def test_call_shape(self, name: str, args: list[str]):
        """(f a1 ... an) compiles to f(a1, ..., an);"""
        source = "(" + " ".join([name] + args) + ")"
        assert compile(source) == f"{name}({', '.join(args)});"

    @given(programs, st.data())
    @settings(max_examples=200)
    def test_whitespace_insensitive(self, body, data):
        """Inserting whitespace runs between tokens does not change output."""
        spaced = render_program(body, lambda: data.draw(whitespace))
        assert compile(spaced) == compile(render_program(body, single_space))

    @given(programs)
    @settings(max_examples=200)
    def test_statement_count(self, body):
        """Each top-level node becomes exactly one statement."""
        output = compile(render_program(body, single_space))
        assert output.count(";") == len(body)
        assert output == "" or output.endswith(";")

    @given(programs)
    @settings(max_examples=200)
    def test_nesting_depth(self, body):
        """Output paren depth equals input call depth."""
        source = render_program(body, single_space)
        output = compile(source)
        assert paren_depth(output) == paren_depth(source)
        assert paren_depth(output) == max((depth(n) for n in body), default=0)


@pytest.mark.parametrize("source", ["", " ", "\n\t\r "])
def test_blank_input_compiles_to_nothing(source):
    assert compile(source) == ""
