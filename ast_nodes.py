"""AST node definitions for the straight-line toy language.

This module defines the AST node dataclasses built by the parser and walked
by the interpreter and the inspection tools. The `NodeType` enum identifies
node kinds so the rest of the toolchain can dispatch on `node.type` or
pattern-match on the dataclasses directly.

Conventions:
- All AST node dataclasses inherit from `ASTNode`, which records the node
    kind (`NodeType`) and the source `line`/`column` of the node's first token.
- Every non-leaf node owns its children; trees are never shared.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List


class NodeType(Enum):
    NUMBER_LITERAL = auto()
    VARIABLE_REF = auto()
    BINARY_ADD = auto()
    VAR_DECL = auto()
    PRINT_STMT = auto()
    PROGRAM = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType
    line: int = 0
    column: int = 0


# Expression Nodes
@dataclass
class NumberLiteralNode(ASTNode):
    type: NodeType = NodeType.NUMBER_LITERAL
    text: str = "0"


@dataclass
class VariableReferenceNode(ASTNode):
    type: NodeType = NodeType.VARIABLE_REF
    name: str = ""


@dataclass
class BinaryAddNode(ASTNode):
    type: NodeType = NodeType.BINARY_ADD
    left: ASTNode = field(default_factory=lambda: NumberLiteralNode())
    right: ASTNode = field(default_factory=lambda: NumberLiteralNode())


# Statement Nodes
@dataclass
class VariableDeclarationNode(ASTNode):
    type: NodeType = NodeType.VAR_DECL
    var_name: str = ""
    init_value: ASTNode = field(default_factory=lambda: NumberLiteralNode())


@dataclass
class PrintStatementNode(ASTNode):
    type: NodeType = NodeType.PRINT_STMT
    expression: ASTNode = field(default_factory=lambda: NumberLiteralNode())


# Program Node
@dataclass
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    statements: List[ASTNode] = field(default_factory=list)
