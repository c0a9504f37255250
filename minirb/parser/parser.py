"""
Main parser entry point for minirb.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`minirb.parser.expressions` and `minirb.parser.statements`.

The parser looks at exactly one token at a time and never backtracks: the
cursor only moves forward, through :meth:`Parser.eat`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from minirb.lexer import KEYWORDS, Token
from minirb.nodes import Assign, Expr, If, Node, Print, Statement

from . import expressions as _expr
from . import statements as _stmt


# Token type -> literal text, used to describe the expected token in errors.
TOKEN_LITERALS = {
    **{token_type: word for word, token_type in KEYWORDS.items()},
    'ASSIGN': '=',
    'PLUS': '+',
    'MINUS': '-',
    'MUL': '*',
    'DIV': '/',
    'LPAREN': '(',
    'RPAREN': ')',
    'LT': '<',
    'GT': '>',
}


class Parser:
    """minirb parser."""

    def __init__(self, tokens: list[Token], file: str):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with EOF.
            file (str): The name of the script.
        """
        self.tokens = tokens
        self.position = 0
        self.curr_token = self.tokens[self.position]
        self.source_file = file

    def eat(self, token_type: str) -> None:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.

        Raises:
            SyntaxError: If the token does not match the expected type.
        """
        if self.curr_token.type == token_type:
            if token_type != 'EOF':
                self.position += 1
                self.curr_token = self.tokens[self.position]
        else:
            expd_value = TOKEN_LITERALS.get(token_type, token_type)
            raise SyntaxError(
                f"Expected token '{expd_value}' of type {token_type}, "
                f"but got value '{self.curr_token.value}' of type {self.curr_token.type} "
                f"in {self.source_file}"
            )

    # Expression wrappers
    def factor(self) -> Expr:
        """
        Parse a factor: a number literal or a variable reference.
        """
        return _expr.parse_factor(self)

    def expr(self) -> Expr:
        """
        Parse a left-associative arithmetic expression.
        """
        return _expr.parse_expr(self)

    # Statement wrappers
    def block(self) -> list[Statement]:
        """
        Parse statements up to EOF, ``else`` or ``end``.
        """
        return _stmt.parse_block(self)

    def statement(self) -> Statement:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_if(self) -> If:
        """
        Parse an ``if`` conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_print(self) -> Print:
        """
        Parse a ``print`` statement used for output.
        """
        return _stmt.parse_print(self)

    def parse_assignment(self) -> Assign:
        """
        Parse a variable assignment statement.
        """
        return _stmt.parse_assignment(self)

    def parse(self) -> list[Statement]:
        """
        Parse the full input into a list of statements.
        """
        statements = self.block()
        self.eat('EOF')
        return statements

    def parse_line(self) -> Node:
        """
        Parse a single statement or bare expression, as typed at the REPL.
        """
        return _stmt.parse_line(self)
