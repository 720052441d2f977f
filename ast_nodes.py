"""AST node definitions for the toy Pascal-like language.

This module defines the concrete AST node dataclasses built by the parser and
walked by the interpreter and the diagnostic printers. Each node is a
dataclass carrying its children and, for operator nodes, the operator token
it was parsed from. The `NodeType` enum identifies node kinds.

Conventions:
- All AST node dataclasses inherit from `ASTNode` which records the node
    kind (`NodeType`) and the source `line`/`column` of the token that
    started it.
- Operator nodes keep the whole `Token` in `op`; evaluation dispatches on
    `op.type` while printers use `operator` (the token's text).
- Children are owned by exactly one parent; the tree has no shared nodes.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List
from tokens import Token, TokenType


class NodeType(Enum):
    NUM = auto()
    VAR = auto()
    UNARY_OP = auto()
    BINARY_OP = auto()
    ASSIGN = auto()
    COMPOUND = auto()
    NO_OP = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType
    # Positions are diagnostics only; two trees with the same shape compare equal.
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


# Expression Nodes
@dataclass
class NumNode(ASTNode):
    type: NodeType = NodeType.NUM
    token: Token = field(default_factory=lambda: Token(TokenType.INTEGER, 0))
    value: int = 0


@dataclass
class VarNode(ASTNode):
    type: NodeType = NodeType.VAR
    token: Token = field(default_factory=lambda: Token(TokenType.ID, ""))
    name: str = ""


@dataclass
class UnaryOpNode(ASTNode):
    type: NodeType = NodeType.UNARY_OP
    op: Token = field(default_factory=lambda: Token(TokenType.MINUS, "-"))
    operand: ASTNode = field(default_factory=lambda: NumNode())

    @property
    def operator(self) -> str:
        return self.op.lexeme


@dataclass
class BinaryOpNode(ASTNode):
    type: NodeType = NodeType.BINARY_OP
    left: ASTNode = field(default_factory=lambda: NumNode())
    op: Token = field(default_factory=lambda: Token(TokenType.PLUS, "+"))
    right: ASTNode = field(default_factory=lambda: NumNode())

    @property
    def operator(self) -> str:
        return self.op.lexeme


# Statement Nodes
@dataclass
class AssignNode(ASTNode):
    type: NodeType = NodeType.ASSIGN
    left: VarNode = field(default_factory=lambda: VarNode())
    op: Token = field(default_factory=lambda: Token(TokenType.ASSIGN, ":="))
    right: ASTNode = field(default_factory=lambda: NumNode())

    @property
    def operator(self) -> str:
        return self.op.lexeme


@dataclass
class CompoundNode(ASTNode):
    type: NodeType = NodeType.COMPOUND
    children: List[ASTNode] = field(default_factory=list)


@dataclass
class NoOpNode(ASTNode):
    type: NodeType = NodeType.NO_OP
