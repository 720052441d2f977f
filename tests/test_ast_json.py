import json

import pytest

from ast_json import ast_to_json
from ast_nodes import ASTNode, NodeType
from tests.utils import parse_text


def test_ast_json_program_shape():
    data = ast_to_json(parse_text("BEGIN a := -1 + 2 END."))
    assert data["node_type"] == "Compound"
    assign = data["children"][0]
    assert assign["node_type"] == "Assign"
    assert assign["left"] == {"node_type": "Var", "name": "a", "line": 1, "column": 7}
    expr = assign["right"]
    assert expr["node_type"] == "BinaryOp"
    assert expr["operator"] == "+"
    assert expr["left"]["node_type"] == "UnaryOp"
    assert expr["left"]["operand"]["value"] == 1


def test_ast_json_is_serializable():
    data = ast_to_json(parse_text("BEGIN ; x := (1) * 3 END."))
    text = json.dumps(data)
    assert '"NoOp"' in text


def test_ast_json_none():
    assert ast_to_json(None) is None


def test_ast_json_rejects_unknown_node():
    with pytest.raises(TypeError):
        ast_to_json(ASTNode(type=NodeType.NUM))
