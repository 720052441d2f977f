"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line string, and `PrettyPrinter.print_surface(node)`
which renders it back as one line of source-like text. The printer is
intended for debugging, tests and development rather than for producing
final source code.

Examples:
    PrettyPrinter.print_ast(program_node)
    PrettyPrinter.print_surface(expr_node)  # "(2 + 3) * 4"
"""

from __future__ import annotations
from ast_nodes import *
from tokens import TokenType

# Binding strength used to decide where print_surface needs parentheses.
_PRECEDENCE = {
    TokenType.PLUS: 1,
    TokenType.MINUS: 1,
    TokenType.MUL: 2,
    TokenType.DIV: 2,
}


class PrettyPrinter:
    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case NumNode(value=v):
                lines.append(f"{indent_str}{prefix}Num({v})")

            case VarNode(name=n):
                lines.append(f"{indent_str}{prefix}Var({n})")

            case UnaryOpNode(operand=operand):
                lines.append(f"{indent_str}{prefix}UnaryOp({node.operator})")
                lines.append(PrettyPrinter.print_ast(operand, indent + 2))

            case BinaryOpNode(left=left, right=right):
                lines.append(f"{indent_str}{prefix}BinaryOp({node.operator})")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case AssignNode(left=left, right=right):
                lines.append(f"{indent_str}{prefix}Assign")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case CompoundNode(children=children):
                lines.append(f"{indent_str}{prefix}Compound")
                for i, child in enumerate(children):
                    lines.append(PrettyPrinter.print_ast(child, indent + 4, f"stmt[{i}]: "))

            case NoOpNode():
                lines.append(f"{indent_str}{prefix}NoOp")

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return a compact, source-like one-line representation of an AST node.

        Parentheses are only emitted where the tree shape differs from what
        precedence and left-associativity would produce on their own.
        """
        if node is None:
            return ""

        def _p(n: ASTNode, min_prec: int = 0) -> str:
            text = PrettyPrinter.print_surface(n)
            if isinstance(n, BinaryOpNode) and _PRECEDENCE[n.op.type] < min_prec:
                return f"({text})"
            return text

        match node:
            case NumNode(value=v):
                return str(v)
            case VarNode(name=n):
                return n
            case UnaryOpNode(operand=operand):
                # Leave a gap so `- -5` does not print as `--5`.
                inner = _p(operand, 3)
                sep = " " if inner[:1] in ("+", "-") else ""
                return f"{node.operator}{sep}{inner}"
            case BinaryOpNode(left=l, right=r):
                prec = _PRECEDENCE[node.op.type]
                return f"{_p(l, prec)} {node.operator} {_p(r, prec + 1)}"
            case AssignNode(left=left, right=right):
                return f"{_p(left)} := {_p(right)}"
            case CompoundNode(children=children):
                body = "; ".join(_p(c) for c in children).strip()
                return f"BEGIN {body} END" if body else "BEGIN END"
            case NoOpNode():
                return ""
            case _:
                s = PrettyPrinter.print_ast(node)
                return " ".join(line.strip() for line in s.splitlines())
