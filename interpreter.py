"""Tree-walking interpreter for the toy Pascal-like language.

`Interpreter` pulls an AST out of its `Parser` and evaluates it with a single
recursive `visit()` that pattern-matches on the node classes from
`ast_nodes.py`. Expressions evaluate to integers; statements (assignments,
compounds and empty statements) evaluate to 0 and act only through the
variable store `global_scope`.

The store may be supplied by the caller so that several interpreters (one
per input line) share it across a session; otherwise each interpreter gets a
fresh one.
"""

from typing import Dict, Optional
from ast_nodes import *
from errors import EvalError
from parser import Parser
from tokens import TokenType


def _divide(lv: int, rv: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(lv) // abs(rv)
    return -quotient if (lv < 0) != (rv < 0) else quotient


class Interpreter:
    def __init__(self, parser: Parser, global_scope: Optional[Dict[str, int]] = None):
        self.parser = parser
        self.global_scope: Dict[str, int] = (
            global_scope if global_scope is not None else {}
        )

    def visit(self, node: ASTNode) -> int:
        match node:
            case NumNode(value=v):
                return v

            case VarNode(name=n):
                if n not in self.global_scope:
                    raise EvalError(
                        f"Undefined variable '{n}' at line {node.line}, column {node.column}"
                    )
                return self.global_scope[n]

            case UnaryOpNode(op=op, operand=operand):
                val = self.visit(operand)
                match op.type:
                    case TokenType.PLUS:
                        return +val
                    case TokenType.MINUS:
                        return -val
                    case _:
                        raise EvalError(f"Unsupported unary operator: {op.lexeme}")

            case BinaryOpNode(left=l, op=op, right=r):
                lv = self.visit(l)
                rv = self.visit(r)
                match op.type:
                    case TokenType.PLUS:
                        return lv + rv
                    case TokenType.MINUS:
                        return lv - rv
                    case TokenType.MUL:
                        return lv * rv
                    case TokenType.DIV:
                        if rv == 0:
                            raise EvalError(
                                f"Division by zero at line {node.line}, column {node.column}"
                            )
                        return _divide(lv, rv)
                    case _:
                        raise EvalError(f"Unsupported binary operator: {op.lexeme}")

            case AssignNode(left=VarNode(name=n), right=right):
                self.global_scope[n] = self.visit(right)
                return 0

            case CompoundNode(children=children):
                for child in children:
                    self.visit(child)
                return 0

            case NoOpNode():
                return 0

            case _:
                raise EvalError(f"Unhandled node type: {node}")

    def evaluate(self, tree: ASTNode) -> int:
        """Evaluate a whole tree, committing assignments only if it succeeds.

        Statements run against a copy of `global_scope`; if any of them
        fails, the store is left exactly as it was before the call.
        """
        committed = self.global_scope
        working = dict(committed)
        self.global_scope = working
        try:
            result = self.visit(tree)
            committed.update(working)
        except RecursionError:
            raise EvalError("Expression nested too deeply") from None
        finally:
            self.global_scope = committed
        return result

    def interpret(self) -> int:
        """Parse the input and evaluate it.

        Returns the value of a bare expression, or 0 for a program; a
        program's effect is left in `global_scope`.
        """
        tree = self.parser.parse()
        return self.evaluate(tree)
