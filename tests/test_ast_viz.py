"""Tests for ast_viz: ensure a Digraph is produced and contains node labels."""

from ast_viz import render_ast_dot
from tests.utils import parse_text


def test_ast_viz_dot_source():
    dot = render_ast_dot(parse_text("BEGIN x := 1; y := x * 2 END."))
    src = dot.source
    assert "Compound" in src
    assert "Assign" in src
    assert "BinaryOp" in src
    assert "stmt[1]" in src
    # 2 statements, 2 children per assignment, 2 operands of the product
    assert src.count("->") == 8


def test_ast_viz_single_number():
    src = render_ast_dot(parse_text("42")).source
    assert "42" in src
    assert "->" not in src
