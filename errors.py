"""Error kinds raised by the interpreter pipeline.

Each stage raises its own exception type so a host can tell a bad character
from a grammar violation from a runtime failure:

- `LexError` is raised by the lexer.
- `ParseError` is raised by the parser.
- `EvalError` is raised by the interpreter.

The first two derive from the built-in `SyntaxError` so callers that only
care about "the input was malformed" can catch that.
"""


class LexError(SyntaxError):
    """Unrecognized character, or a `:` that does not start `:=`."""


class ParseError(SyntaxError):
    """Token stream does not match the grammar."""


class EvalError(RuntimeError):
    """Division by zero, undefined variable or an unknown node."""
