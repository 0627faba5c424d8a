import pytest
from pydantic import TypeAdapter, ValidationError

from contracts import BinOpNode, ExprAST, LiteralNode

_AST = TypeAdapter(ExprAST)


def test_expr_ast_dispatches_on_node_type():
    ast = _AST.validate_python({
        "node_type": "binop",
        "op": "+",
        "left": {"node_type": "literal", "value": 1},
        "right": {
            "node_type": "binop",
            "op": "*",
            "left": {"node_type": "literal", "value": 2},
            "right": {"node_type": "literal", "value": 3},
        },
    })

    assert isinstance(ast, BinOpNode)
    assert ast.left == LiteralNode(value=1)
    assert isinstance(ast.right, BinOpNode)
    assert ast.right.op == "*"


def test_expr_ast_rejects_unknown_node_type():
    with pytest.raises(ValidationError):
        _AST.validate_python({"node_type": "variable", "name": "x"})


def test_expr_ast_round_trips_through_json():
    ast = BinOpNode(op="-", left=LiteralNode(value=7), right=LiteralNode(value=3))

    assert _AST.validate_json(_AST.dump_json(ast)) == ast
