"""
Lexer for the straight-line toy language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a stream of `Token` objects defined
    in `tokens.py`.
- It recognizes the keywords `variable` and `print`, identifiers, integer
    literals and the single-character tokens `+`, `=`, `;`, `(` and `)`.
    Whitespace is skipped.

Examples:
    Input:  "variable a = 10; print(a + 5);"
    Tokens: [VARIABLE, IDENTIFIER('a'), ASSIGN, NUMBER('10'), SEMICOLON,
             PRINT, LPAREN, IDENTIFIER('a'), PLUS, NUMBER('5'), RPAREN,
             SEMICOLON, EOF]

Implementation notes:
- `next_token(text, pos)` is a pure function of the input and the current
    offset; it returns the next token together with the offset just past it.
    The `Lexer` class wraps it and owns the cursor, so the parser can pull one
    token at a time without any buffering.
- Words are scanned in full and only then mapped to keywords, so `variance`
    or `printer` stay identifiers.
- Number literals keep their source text; conversion to `int` happens at
    evaluation time.
- An unrecognized character is not fatal: it is reported through the `warn`
    callback and skipped.
"""

from __future__ import annotations
import sys
from typing import Callable, List, Optional, TextIO, Tuple
from tokens import Token, TokenType


KEYWORDS = {
    "variable": TokenType.VARIABLE,
    "print": TokenType.PRINT,
}


def _is_digit(c: str) -> bool:
    return c.isascii() and c.isdigit()


def _is_letter(c: str) -> bool:
    return c.isascii() and c.isalpha()


def next_token(
    text: str, pos: int, warn: Optional[Callable[[str], None]] = None
) -> Tuple[Token, int]:
    """Return the token starting at or after `pos` and the offset after it."""
    while pos < len(text):
        c = text[pos]

        if c.isspace():
            pos += 1
            continue

        match c:
            case "+":
                return Token(TokenType.PLUS, "+", pos), pos + 1
            case "=":
                return Token(TokenType.ASSIGN, "=", pos), pos + 1
            case ";":
                return Token(TokenType.SEMICOLON, ";", pos), pos + 1
            case "(":
                return Token(TokenType.LPAREN, "(", pos), pos + 1
            case ")":
                return Token(TokenType.RPAREN, ")", pos), pos + 1

        # Numbers: a maximal run of digits, text kept verbatim.
        if _is_digit(c):
            start = pos
            while pos < len(text) and _is_digit(text[pos]):
                pos += 1
            return Token(TokenType.NUMBER, text[start:pos], start), pos

        # Words: scan the whole word, then check it against the keywords.
        if _is_letter(c):
            start = pos
            while pos < len(text) and (_is_letter(text[pos]) or _is_digit(text[pos])):
                pos += 1
            word = text[start:pos]
            token_type = KEYWORDS.get(word, TokenType.IDENTIFIER)
            return Token(token_type, word, start), pos

        if warn is not None:
            warn(f"Unknown token: {c}")
        pos += 1

    return Token(TokenType.EOF, None, len(text)), len(text)


class Lexer:
    def __init__(self, text: str, err: Optional[TextIO] = None):
        self.text = text
        self.pos = 0
        self.err = err
        self.warnings: List[str] = []

    def warn(self, message: str) -> None:
        """Record a lexical diagnostic and report it on the error stream."""
        self.warnings.append(message)
        print(message, file=self.err if self.err is not None else sys.stderr)

    def location(self, pos: int) -> Tuple[int, int]:
        """Return the 1-based (line, column) of offset `pos`."""
        line = self.text.count("\n", 0, pos) + 1
        column = pos - (self.text.rfind("\n", 0, pos) + 1) + 1
        return line, column

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        token, self.pos = next_token(self.text, self.pos, self.warn)
        return token

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string."""
        tokens = []
        while True:
            token = self.get_next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens
