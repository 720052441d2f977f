from lexer import Lexer
from parser import Parser
from interpreter import Interpreter


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def parse_text(text: str):
    """Convenience: lex+parse a source text into an AST."""
    return Parser(Lexer(text)).parse()


def interpret_text(text: str, scope=None):
    """Run the whole pipeline; return (result, variable store)."""
    interpreter = Interpreter(Parser(Lexer(text)), scope)
    result = interpreter.interpret()
    return result, interpreter.global_scope
