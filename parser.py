"""
Parser for the toy Pascal-like language.

Overview and approach:
- This parser is a hand-written recursive-descent parser. Each grammar rule
    below is one method; the active rule on the call stack is the parser's
    only state.

        program    : compound_statement DOT
        compound   : BEGIN statement_list END
        stmt_list  : statement (SEMI statement)*
        statement  : compound_statement | assignment | empty
        assignment : variable ASSIGN expr
        variable   : ID
        expr       : term ((PLUS | MINUS) term)*
        term       : factor ((MUL | DIV) factor)*
        factor     : INTEGER | LPAREN expr RPAREN
                   | (PLUS | MINUS) factor | variable

- `expr` and `term` loop instead of recursing on the right so binary
    operators come out left-associative; precedence follows from `term`
    sitting below `expr`.
- Tokens are pulled from the lexer one at a time. `current_token` is the
    single token of lookahead and `eat()` is the only place it is refilled.

Entry points:
- `parse_program()` parses `BEGIN ... END.` and requires EOF afterwards.
- `parse_expression()` parses a bare expression (calculator mode), e.g.
    `2 + 3 * 4`, and requires EOF afterwards.
- `parse()` picks between the two by looking at the first token.
"""

from __future__ import annotations
from typing import List, Optional
from tokens import Token, TokenType
from ast_nodes import *
from errors import ParseError
from lexer import Lexer


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.current_token: Optional[Token] = None

    def _prime(self) -> Token:
        if self.current_token is None:
            self.current_token = self.lexer.get_next_token()
        return self.current_token

    def error(self, message: str) -> ParseError:
        token = self.current_token
        if token is not None and token.line:
            message = f"{message} at line {token.line}, column {token.column}"
        return ParseError(message)

    def eat(self, token_type: TokenType) -> Token:
        """Consume the current token if it has the expected type.

        Returns the consumed token and loads the next one from the lexer.
        """
        token = self._prime()
        if token.type != token_type:
            raise self.error(f"Expected {token_type}, got {token.type}")
        self.current_token = self.lexer.get_next_token()
        return token

    def program(self) -> CompoundNode:
        """program : compound_statement DOT"""
        node = self.compound_statement()
        self.eat(TokenType.DOT)
        return node

    def compound_statement(self) -> CompoundNode:
        """compound_statement : BEGIN statement_list END"""
        begin = self.eat(TokenType.BEGIN)
        children = self.statement_list()
        self.eat(TokenType.END)
        return CompoundNode(children=children, line=begin.line, column=begin.column)

    def statement_list(self) -> List[ASTNode]:
        """statement_list : statement (SEMI statement)*"""
        results = [self.statement()]

        while self.current_token.type == TokenType.SEMI:
            self.eat(TokenType.SEMI)
            results.append(self.statement())

        # An identifier here means two statements without a separator.
        if self.current_token.type == TokenType.ID:
            raise self.error(f"Expected {TokenType.SEMI}, got {TokenType.ID}")

        return results

    def statement(self) -> ASTNode:
        """statement : compound_statement | assignment_statement | empty"""
        match self._prime().type:
            case TokenType.BEGIN:
                return self.compound_statement()
            case TokenType.ID:
                return self.assignment_statement()
            case _:
                return self.empty()

    def assignment_statement(self) -> AssignNode:
        """assignment_statement : variable ASSIGN expr"""
        left = self.variable()
        op = self.eat(TokenType.ASSIGN)
        right = self.expr()
        return AssignNode(
            left=left, op=op, right=right, line=left.line, column=left.column
        )

    def variable(self) -> VarNode:
        """variable : ID"""
        token = self.eat(TokenType.ID)
        return VarNode(
            token=token, name=token.value, line=token.line, column=token.column
        )

    def empty(self) -> NoOpNode:
        """An empty production."""
        token = self._prime()
        return NoOpNode(line=token.line, column=token.column)

    def factor(self) -> ASTNode:
        """factor : INTEGER | LPAREN expr RPAREN | (PLUS | MINUS) factor | variable"""
        token = self._prime()

        match token.type:
            case TokenType.INTEGER:
                self.eat(TokenType.INTEGER)
                return NumNode(
                    token=token, value=token.value, line=token.line, column=token.column
                )

            case TokenType.LPAREN:
                self.eat(TokenType.LPAREN)
                node = self.expr()
                self.eat(TokenType.RPAREN)
                return node

            case TokenType.PLUS | TokenType.MINUS:
                self.eat(token.type)
                return UnaryOpNode(
                    op=token, operand=self.factor(), line=token.line, column=token.column
                )

            case _:
                return self.variable()

    def term(self) -> ASTNode:
        """term : factor ((MUL | DIV) factor)*"""
        node = self.factor()

        while self.current_token.type in (TokenType.MUL, TokenType.DIV):
            token = self.eat(self.current_token.type)
            node = BinaryOpNode(
                left=node,
                op=token,
                right=self.factor(),
                line=token.line,
                column=token.column,
            )

        return node

    def expr(self) -> ASTNode:
        """expr : term ((PLUS | MINUS) term)*"""
        node = self.term()

        while self.current_token.type in (TokenType.PLUS, TokenType.MINUS):
            token = self.eat(self.current_token.type)
            node = BinaryOpNode(
                left=node,
                op=token,
                right=self.term(),
                line=token.line,
                column=token.column,
            )

        return node

    def _expect_eof(self) -> None:
        if self.current_token.type != TokenType.EOF:
            raise self.error(f"Unexpected tokens at end: {self.current_token}")

    def parse_program(self) -> CompoundNode:
        """Parse a complete `BEGIN ... END.` program."""
        self._prime()
        node = self.program()
        self._expect_eof()
        return node

    def parse_expression(self) -> ASTNode:
        """Parse a single arithmetic expression."""
        self._prime()
        node = self.expr()
        self._expect_eof()
        return node

    def parse(self) -> ASTNode:
        """Parse a program, or a bare expression when input does not start with BEGIN."""
        try:
            if self._prime().type == TokenType.BEGIN:
                return self.parse_program()
            return self.parse_expression()
        except RecursionError:
            raise ParseError("Expression nested too deeply") from None
