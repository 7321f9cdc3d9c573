import io

from lexer import Lexer
from parser import Parser
from main import run_program


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text, err=io.StringIO()).tokenize()


def parse_tokens(tokens):
    """Parse a list of tokens into an AST node."""
    return Parser(tokens).parse()


def parse_text(text: str):
    """Convenience: lex+parse a source text into an AST."""
    return Parser(Lexer(text, err=io.StringIO())).parse()


def run_src(text: str, env=None):
    """Run a program and return (environment, stdout text, stderr text)."""
    out, err = io.StringIO(), io.StringIO()
    env = run_program(text, env=env, out=out, err=err)
    return env, out.getvalue(), err.getvalue()
