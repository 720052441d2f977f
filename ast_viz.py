"""Graphviz visualization helpers for ASTs.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). `write_and_render` writes the file to disk, which requires
the Graphviz `dot` binary to be installed.

Layout: every AST node becomes a box labelled with its kind and payload
(number, variable name or operator). Edges run from parent to child and are
labelled with the child's role (`left`, `right`, `operand`, `stmt[i]`).
"""

from typing import Iterator, Tuple
from graphviz import Digraph
from ast_nodes import *


def _label(node: ASTNode) -> str:
    match node:
        case NumNode(value=v):
            return f"Num\n{v}"
        case VarNode(name=n):
            return f"Var\n{n}"
        case UnaryOpNode() | BinaryOpNode() | AssignNode():
            kind = {
                NodeType.UNARY_OP: "UnaryOp",
                NodeType.BINARY_OP: "BinaryOp",
                NodeType.ASSIGN: "Assign",
            }[node.type]
            return f"{kind}\n{node.operator}"
        case CompoundNode():
            return "Compound"
        case NoOpNode():
            return "NoOp"
        case _:
            return str(node.type)


def _children(node: ASTNode) -> Iterator[Tuple[str, ASTNode]]:
    match node:
        case UnaryOpNode(operand=operand):
            yield "operand", operand
        case BinaryOpNode(left=l, right=r) | AssignNode(left=l, right=r):
            yield "left", l
            yield "right", r
        case CompoundNode(children=children):
            for i, child in enumerate(children):
                yield f"stmt[{i}]", child


def render_ast_dot(root: ASTNode) -> Digraph:
    """Return a graphviz.Digraph for the tree rooted at `root`.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    dot.attr("node", shape="box", fontname="monospace")

    # Nodes are numbered in pre-order; the tree has no sharing so every node
    # gets exactly one id.
    counter = 0
    stack = [(None, "", root)]
    while stack:
        parent_id, role, node = stack.pop()
        node_id = f"n{counter}"
        counter += 1
        style = "filled" if isinstance(node, (CompoundNode, AssignNode)) else ""
        dot.node(node_id, label=_label(node), style=style, fillcolor="#eef3ff")
        if parent_id is not None:
            dot.edge(parent_id, node_id, label=role)
        # Reverse so children are numbered (and drawn) left to right.
        for child_role, child in reversed(list(_children(node))):
            stack.append((node_id, child_role, child))

    return dot


def write_and_render(root: ASTNode, out_path: str, fmt: str = "svg") -> str:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(tree, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz). Returns the path of the rendered file."""
    dot = render_ast_dot(root)
    dot.format = fmt
    # render appends the extension automatically
    return dot.render(out_path, cleanup=True)
