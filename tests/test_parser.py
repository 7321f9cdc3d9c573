import io
import re

import pytest

from ast_nodes import *
from lexer import Lexer
from parser import Parser
from tests.utils import lex, parse_text, parse_tokens


def test_parser_parses_declaration_and_print(reference_program):
    ast = parse_text(reference_program)
    assert ast.type == NodeType.PROGRAM
    decl, stmt = ast.statements

    assert isinstance(decl, VariableDeclarationNode)
    assert decl.var_name == "a"
    assert decl.init_value == NumberLiteralNode(text="10", line=1, column=14)

    assert isinstance(stmt, PrintStatementNode)
    add = stmt.expression
    assert isinstance(add, BinaryAddNode)
    assert isinstance(add.left, VariableReferenceNode) and add.left.name == "a"
    assert isinstance(add.right, NumberLiteralNode) and add.right.text == "5"


def test_addition_chains_fold_to_the_left():
    decl = parse_text("variable b = 1 + 2 + 3;").statements[0]
    outer = decl.init_value
    assert isinstance(outer, BinaryAddNode)
    assert isinstance(outer.left, BinaryAddNode)
    assert outer.right.text == "3"
    assert outer.left.left.text == "1"
    assert outer.left.right.text == "2"


def test_parse_tokens_from_a_list():
    ast = parse_tokens(lex("print(7);"))
    assert len(ast.statements) == 1
    assert ast.statements[0].expression.text == "7"


def test_nodes_record_source_position():
    ast = parse_text("variable a = 1;\nprint(a);")
    assert (ast.statements[0].line, ast.statements[0].column) == (1, 1)
    stmt = ast.statements[1]
    assert (stmt.line, stmt.column) == (2, 1)
    assert (stmt.expression.line, stmt.expression.column) == (2, 7)


def test_empty_program_has_no_statements():
    assert parse_text("   ").statements == []


@pytest.mark.parametrize(
    "src, message",
    [
        ("variable = 1;", "Expected variable name"),
        ("variable a 1;", "Expected '=' after variable name"),
        ("variable a = 1", "Expected ';' at the end of statement"),
        ("variable a = ;", "Expected a number or identifier"),
        ("variable a = 1 + ;", "Expected a number or identifier"),
        ("print a;", "Expected '(' after 'print'"),
        ("print(a;", "Expected ')' in print statement"),
        ("print(a)", "Expected ';' at the end of print statement"),
        ("a = 1;", "Expected 'print'"),
        ("print();", "Expected a number or identifier"),
    ],
)
def test_missing_tokens_raise_syntax_error(src, message):
    with pytest.raises(SyntaxError, match=re.escape(message)):
        parse_text(src)


def test_syntax_error_reports_location():
    with pytest.raises(SyntaxError, match="at line 2, column 12"):
        parse_text("print(1);\nvariable x 5;")


def test_statements_are_pulled_one_at_a_time():
    lexer = Lexer("print(1); print(2); print(3);", err=io.StringIO())
    parser = Parser(lexer)
    stmts = parser.statements()

    first = next(stmts)
    assert first.expression.text == "1"
    # Only the lookahead token of the second statement has been scanned.
    assert lexer.pos == len("print(1); print")

    assert [s.expression.text for s in stmts] == ["2", "3"]
