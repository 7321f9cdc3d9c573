"""Tree-walking interpreter for the straight-line toy language.

`evaluate(node, env, out)` visits one AST node: expressions return their
integer value, declarations bind a name in the `Environment` and return the
bound value, and print statements write the decimal value followed by a
newline to `out` and return `None`. Operands are always evaluated left to
right. Reading an unbound name raises `UndefinedVariableError`; a literal or
printed value longer than Python's integer string-conversion limit raises
`NumberTooLargeError`.
"""

import sys
from typing import Optional, TextIO
from ast_nodes import *
from environment import Environment


class NumberTooLargeError(RuntimeError):
    def __init__(self, digits: int):
        super().__init__(
            f"Number too large: {digits} digits exceeds the limit of "
            f"{sys.get_int_max_str_digits()} digits"
        )
        self.digits = digits


def _decimal(value: int) -> str:
    try:
        return str(value)
    except ValueError:
        # log10(2) ~ 0.30103; enough to name the size in the message.
        raise NumberTooLargeError(int(value.bit_length() * 0.30103) + 1) from None


def evaluate(node: ASTNode, env: Environment, out: Optional[TextIO] = None) -> Optional[int]:
    match node:
        case NumberLiteralNode(text=t):
            try:
                return int(t)
            except ValueError:
                raise NumberTooLargeError(len(t)) from None
        case VariableReferenceNode(name=n):
            return env.get(n)
        case BinaryAddNode(left=l, right=r):
            lv = evaluate(l, env, out)
            rv = evaluate(r, env, out)
            return lv + rv
        case VariableDeclarationNode(var_name=name, init_value=init):
            val = evaluate(init, env, out)
            env.set(name, val)
            return val
        case PrintStatementNode(expression=expr):
            val = evaluate(expr, env, out)
            print(_decimal(val), file=out if out is not None else sys.stdout)
            return None
        case ProgramNode(statements=stmts):
            for s in stmts:
                evaluate(s, env, out)
            return None
        case _:
            raise RuntimeError(f"Unhandled node type: {node}")


def interpret_program(
    prog: ProgramNode, env: Optional[Environment] = None, out: Optional[TextIO] = None
) -> Environment:
    """Interpret an already parsed ProgramNode and return its environment."""
    if env is None:
        env = Environment()
    evaluate(prog, env, out)
    return env
