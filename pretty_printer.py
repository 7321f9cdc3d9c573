"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line string, and `PrettyPrinter.print_surface(node)`
which renders a node back into one line of source syntax. Both are meant for
debugging, tests and the `--print-ast` CLI flag.

Examples:
    PrettyPrinter.print_ast(program_node)
    PrettyPrinter.print_surface(decl_node)  # 'variable a = 10;'
"""

from __future__ import annotations
from ast_nodes import *


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
            case NumberLiteralNode(text=t):
                lines.append(f"{indent_str}{prefix}NumberLiteral({t})")

            case VariableReferenceNode(name=n):
                lines.append(f"{indent_str}{prefix}VariableReference({n})")

            case BinaryAddNode(left=left, right=right):
                lines.append(f"{indent_str}{prefix}BinaryAdd")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case VariableDeclarationNode(var_name=vname, init_value=init):
                lines.append(f"{indent_str}{prefix}VarDecl({vname})")
                lines.append(PrettyPrinter.print_ast(init, indent + 2, "init: "))

            case PrintStatementNode(expression=expr):
                lines.append(f"{indent_str}{prefix}Print")
                lines.append(PrettyPrinter.print_ast(expr, indent + 2, "expr: "))

            case ProgramNode(statements=stmts):
                lines.append(f"{indent_str}{prefix}Program")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return a one-line source-syntax representation of an AST node."""
        if node is None:
            return ""

        def _p(n: ASTNode) -> str:
            return PrettyPrinter.print_surface(n) if isinstance(n, ASTNode) else str(n)

        match node:
            case NumberLiteralNode(text=t):
                return t
            case VariableReferenceNode(name=n):
                return n
            case BinaryAddNode(left=l, right=r):
                return f"{_p(l)} + {_p(r)}"
            case VariableDeclarationNode(var_name=vn, init_value=init):
                return f"variable {vn} = {_p(init)};"
            case PrintStatementNode(expression=expr):
                return f"print({_p(expr)});"
            case ProgramNode(statements=stmts):
                return " ".join(_p(s) for s in stmts)
            case _:
                s = PrettyPrinter.print_ast(node)
                return " ".join(line.strip() for line in s.splitlines())
