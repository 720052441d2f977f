"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node. It encodes the node type
and key fields only; token positions are kept as `line`/`column`.
"""

from typing import Any, Dict, Optional
from ast_nodes import *


def _position(node: ASTNode) -> Dict[str, int]:
    return {"line": node.line, "column": node.column}


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    t = node.type
    if t == NodeType.NUM and isinstance(node, NumNode):
        return {"node_type": "Num", "value": node.value, **_position(node)}
    if t == NodeType.VAR and isinstance(node, VarNode):
        return {"node_type": "Var", "name": node.name, **_position(node)}
    if t == NodeType.UNARY_OP and isinstance(node, UnaryOpNode):
        return {
            "node_type": "UnaryOp",
            "operator": node.operator,
            "operand": ast_to_json(node.operand),
            **_position(node),
        }
    if t == NodeType.BINARY_OP and isinstance(node, BinaryOpNode):
        return {
            "node_type": "BinaryOp",
            "operator": node.operator,
            "left": ast_to_json(node.left),
            "right": ast_to_json(node.right),
            **_position(node),
        }
    if t == NodeType.ASSIGN and isinstance(node, AssignNode):
        return {
            "node_type": "Assign",
            "left": ast_to_json(node.left),
            "right": ast_to_json(node.right),
            **_position(node),
        }
    if t == NodeType.COMPOUND and isinstance(node, CompoundNode):
        return {
            "node_type": "Compound",
            "children": [ast_to_json(c) for c in node.children],
            **_position(node),
        }
    if t == NodeType.NO_OP and isinstance(node, NoOpNode):
        return {"node_type": "NoOp", **_position(node)}

    raise TypeError(f"Cannot serialize AST node: {node!r}")
