"""
Parser for the straight-line toy language.

Overview and approach:
- This parser is a small hand-written recursive-descent parser with a single
    token of lookahead held in `self.current`. `advance()` consumes the current
    token and pulls the next one from the lexer; nothing else is buffered.

Grammar:
    program     := statement* EOF
    statement   := declaration | print
    declaration := 'variable' IDENTIFIER '=' expression ';'
    print       := 'print' '(' expression ')' ';'
    expression  := primary ('+' primary)*
    primary     := NUMBER | IDENTIFIER

Key points:
- Every statement form is decided by its first token (the grammar is LL(1)).
    A statement that does not start with `variable` is parsed as a print
    statement, so a stray token is reported against print's expectations.
- `+` is the only operator; chains are folded to the left, so `1 + 2 + 3`
    becomes `(1 + 2) + 3`.
- `statements()` yields statements one at a time. The driver evaluates each
    statement before the next one is parsed, so a later syntax error does not
    prevent earlier output.
- Syntax errors raise `SyntaxError` naming the missing token, followed by
    the source location when the parser reads from a `Lexer`.
"""

from __future__ import annotations
from typing import Callable, Iterator, List, Optional, Union
from tokens import Token, TokenType
from lexer import Lexer
from ast_nodes import *


class Parser:
    def __init__(self, source: Union[Lexer, List[Token]]):
        self.lexer: Optional[Lexer] = None
        if isinstance(source, Lexer):
            self.lexer = source
            self._fetch: Callable[[], Token] = source.get_next_token
        else:
            remaining = iter(source)
            self._fetch = lambda: next(remaining, Token(TokenType.EOF, None))
        self.current = self._fetch()

    def advance(self) -> Token:
        """Consume the current token and fetch the next one."""
        if self.current.type != TokenType.EOF:
            self.current = self._fetch()
        return self.current

    def error(self, message: str, token: Optional[Token] = None) -> SyntaxError:
        token = token or self.current
        if self.lexer is None:
            return SyntaxError(message)
        line, column = self.lexer.location(token.pos)
        return SyntaxError(f"{message} at line {line}, column {column}")

    def expect(self, expected_type: TokenType, message: str) -> Token:
        """Expect and consume token of given type."""
        if self.current.type == expected_type:
            token = self.current
            self.advance()
            return token
        raise self.error(message)

    def _position(self, token: Token) -> dict:
        if self.lexer is None:
            return {}
        line, column = self.lexer.location(token.pos)
        return {"line": line, "column": column}

    def parse_primary(self) -> ASTNode:
        """Parse a number literal or a variable reference."""
        token = self.current

        match token.type:
            case TokenType.NUMBER:
                self.advance()
                return NumberLiteralNode(text=token.value, **self._position(token))

            case TokenType.IDENTIFIER:
                self.advance()
                return VariableReferenceNode(name=token.value, **self._position(token))

            case _:
                raise self.error("Expected a number or identifier")

    def parse_expression(self) -> ASTNode:
        """Parse `primary ('+' primary)*` into left-nested additions."""
        start = self.current
        left = self.parse_primary()
        while self.current.type == TokenType.PLUS:
            self.advance()
            right = self.parse_primary()
            left = BinaryAddNode(left=left, right=right, **self._position(start))
        return left

    def parse_variable_declaration(self) -> VariableDeclarationNode:
        """Parse variable declaration: variable identifier = expression ;"""
        start = self.expect(TokenType.VARIABLE, "Expected 'variable'")
        name_token = self.expect(TokenType.IDENTIFIER, "Expected variable name")
        self.expect(TokenType.ASSIGN, "Expected '=' after variable name")
        init_value = self.parse_expression()
        self.expect(TokenType.SEMICOLON, "Expected ';' at the end of statement")
        return VariableDeclarationNode(
            var_name=name_token.value, init_value=init_value, **self._position(start)
        )

    def parse_print_statement(self) -> PrintStatementNode:
        """Parse print statement: print ( expression ) ;"""
        start = self.expect(TokenType.PRINT, "Expected 'print'")
        self.expect(TokenType.LPAREN, "Expected '(' after 'print'")
        expr = self.parse_expression()
        self.expect(TokenType.RPAREN, "Expected ')' in print statement")
        self.expect(TokenType.SEMICOLON, "Expected ';' at the end of print statement")
        return PrintStatementNode(expression=expr, **self._position(start))

    def parse_statement(self) -> ASTNode:
        """Parse a statement."""
        if self.current.type == TokenType.VARIABLE:
            return self.parse_variable_declaration()
        return self.parse_print_statement()

    def statements(self) -> Iterator[ASTNode]:
        """Yield statements one by one until the end of input."""
        while self.current.type != TokenType.EOF:
            yield self.parse_statement()

    def parse_program(self) -> ProgramNode:
        """Parse a complete program (sequence of statements)."""
        return ProgramNode(statements=list(self.statements()))

    def parse(self) -> ProgramNode:
        return self.parse_program()
