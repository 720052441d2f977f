"""
Lexer for the toy Pascal-like language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    turns a line of source text into `Token` objects defined in `tokens.py`,
    one token per call to `get_next_token()`.
- It recognizes the reserved keywords `BEGIN` and `END` (case-sensitive),
    identifiers, integer literals, the assignment operator `:=`, the
    arithmetic operators `+ - * /`, parentheses and the `;` and `.`
    punctuation. Whitespace is skipped.

Examples:
    Input:  "BEGIN a := 2 * (3 + 4) END."
    Tokens: [BEGIN, ID('a'), ASSIGN, INTEGER(2), MUL, LPAREN, INTEGER(3), ...]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and `self.current_char`.
- `peek()` looks one character ahead and is only needed to tell `:=` apart
    from a lone `:`, which is an error.
- Identifiers are scanned and then mapped to keywords using
    `RESERVED_KEYWORDS`.
- Integer literals are parsed by consuming consecutive digits.
"""

from __future__ import annotations
from typing import Optional, List
from tokens import Token, TokenType, RESERVED_KEYWORDS
from errors import LexError


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None

    def error(self, message: str = "") -> LexError:
        msg = f"Lexical error at line {self.line}, column {self.column}: {message}"
        return LexError(msg)

    def advance(self) -> None:
        """Advance to next character."""
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def peek(self) -> Optional[str]:
        """Look at next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def skip_whitespace(self) -> None:
        """Skip whitespace characters."""
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def integer(self) -> int:
        """Parse a multi-digit integer."""
        result = []

        while self.current_char is not None and self.current_char.isdecimal():
            result.append(self.current_char)
            self.advance()

        if not result:
            raise self.error("Expected integer")

        return int("".join(result))

    def identifier(self) -> Token:
        """Parse an identifier or a reserved keyword."""
        line, column = self.line, self.column
        result = []

        while self.current_char is not None and self.current_char.isalnum():
            result.append(self.current_char)
            self.advance()

        if not result:
            raise self.error("Expected identifier")

        text = "".join(result)
        token_type = RESERVED_KEYWORDS.get(text, TokenType.ID)
        return Token(token_type, text, line, column)

    def _single(self, token_type: TokenType) -> Token:
        token = Token(token_type, self.current_char, self.line, self.column)
        self.advance()
        return token

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        while self.current_char is not None:
            if self.current_char.isspace():
                self.skip_whitespace()
                continue

            if self.current_char.isdecimal():
                line, column = self.line, self.column
                return Token(TokenType.INTEGER, self.integer(), line, column)

            if self.current_char.isalpha():
                return self.identifier()

            match self.current_char:
                case "+":
                    return self._single(TokenType.PLUS)
                case "-":
                    return self._single(TokenType.MINUS)
                case "*":
                    return self._single(TokenType.MUL)
                case "/":
                    return self._single(TokenType.DIV)
                case "(":
                    return self._single(TokenType.LPAREN)
                case ")":
                    return self._single(TokenType.RPAREN)
                case ".":
                    return self._single(TokenType.DOT)
                case ";":
                    return self._single(TokenType.SEMI)
                case ":":
                    if self.peek() != "=":
                        raise self.error("Expected '=' after ':'")
                    line, column = self.line, self.column
                    self.advance()
                    self.advance()
                    return Token(TokenType.ASSIGN, ":=", line, column)

            raise self.error(f"Unexpected character '{self.current_char}'")

        return Token(TokenType.EOF, None, self.line, self.column)

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string."""
        tokens = []
        while True:
            token = self.get_next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens
