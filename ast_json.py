"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node. It encodes the node type,
the key fields and the source position of each node.
"""

from typing import Any, Optional
from ast_nodes import *


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    t = node.type
    pos = {"line": node.line, "column": node.column}
    # expressions
    if t == NodeType.NUMBER_LITERAL and isinstance(node, NumberLiteralNode):
        return {"node_type": "NumberLiteral", "text": node.text, **pos}
    if t == NodeType.VARIABLE_REF and isinstance(node, VariableReferenceNode):
        return {"node_type": "VariableReference", "name": node.name, **pos}
    if t == NodeType.BINARY_ADD and isinstance(node, BinaryAddNode):
        return {
            "node_type": "BinaryAdd",
            "left": ast_to_json(node.left),
            "right": ast_to_json(node.right),
            **pos,
        }
    # statements and the program
    if t == NodeType.VAR_DECL and isinstance(node, VariableDeclarationNode):
        return {
            "node_type": "VarDecl",
            "var_name": node.var_name,
            "init_value": ast_to_json(node.init_value),
            **pos,
        }
    if t == NodeType.PRINT_STMT and isinstance(node, PrintStatementNode):
        return {"node_type": "Print", "expression": ast_to_json(node.expression), **pos}
    if t == NodeType.PROGRAM and isinstance(node, ProgramNode):
        return {
            "node_type": "Program",
            "statements": [ast_to_json(s) for s in node.statements],
        }

    raise TypeError(f"Cannot convert node to JSON: {node!r}")
