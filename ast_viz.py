"""Graphviz visualization helpers for parsed programs.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object (not
rendered). `write_and_render` can write the file to disk.

Layout: every top-level statement of a program is drawn inside its own
cluster, labelled with the statement's surface syntax. Statement nodes are
boxes, expression nodes are ellipses, and edges are labelled with the child's role (`left`, `right`, `init`,
`expr`).
"""

import itertools
from typing import Iterator
from ast_nodes import *
from graphviz import Digraph
from pretty_printer import PrettyPrinter


def _node_label(node: ASTNode) -> str:
    match node:
        case NumberLiteralNode(text=t):
            return t
        case VariableReferenceNode(name=n):
            return n
        case BinaryAddNode():
            return "+"
        case VariableDeclarationNode(var_name=vn):
            return f"variable {vn}"
        case PrintStatementNode():
            return "print"
        case _:
            return str(node.type)


def _children(node: ASTNode) -> list:
    match node:
        case BinaryAddNode(left=l, right=r):
            return [("left", l), ("right", r)]
        case VariableDeclarationNode(init_value=init):
            return [("init", init)]
        case PrintStatementNode(expression=expr):
            return [("expr", expr)]
        case _:
            return []


def _add_tree(graph: Digraph, node: ASTNode, ids: Iterator[int]) -> str:
    node_id = f"n{next(ids)}"
    shape = "box" if node.type in (NodeType.VAR_DECL, NodeType.PRINT_STMT) else "ellipse"
    graph.node(node_id, label=_node_label(node), shape=shape)
    for role, child in _children(node):
        child_id = _add_tree(graph, child, ids)
        graph.edge(node_id, child_id, label=role)
    return node_id


def render_ast_dot(node: ASTNode) -> Digraph:
    """Return a graphviz.Digraph for a program or a single AST node.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    ids = itertools.count()

    if not isinstance(node, ProgramNode):
        _add_tree(dot, node, ids)
        return dot

    for i, stmt in enumerate(node.statements):
        with dot.subgraph(name=f"cluster_stmt_{i}") as c:
            c.attr(label=PrettyPrinter.print_surface(stmt))
            c.attr(style="rounded")
            _add_tree(c, stmt, ids)

    return dot


def write_and_render(node: ASTNode, out_path: str, fmt: str = "svg") -> str:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(program, 'out/ast', fmt='png') will create
    out/ast.png (requires Graphviz). Returns the path of the rendered file."""
    dot = render_ast_dot(node)
    dot.format = fmt
    # Note: render will append extension automatically
    return dot.render(out_path, cleanup=True)
