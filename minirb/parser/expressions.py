"""Expression parsing utilities for minirb.

These functions operate on a `minirb.parser.parser.Parser` instance and
implement the recursive descent logic for expressions. All four arithmetic
operators share a single precedence level and fold left to right.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from minirb.nodes import BinaryOp, Expr, Number, Variable
from minirb.operations import TOKEN_OPS

if TYPE_CHECKING:
    from minirb.parser import Parser


def parse_factor(parser: 'Parser') -> Expr:
    """
    Parse a factor: a number literal or a variable reference.

    Syntax:
        <number> | <identifier>

    Args:
        parser: The parser instance.

    Returns:
        Expr: a Number or Variable node.
    """
    tok = parser.curr_token
    if tok.type == 'NUMBER':
        parser.eat('NUMBER')
        return Number(int(tok.value))

    if tok.type == 'ID':
        parser.eat('ID')
        return Variable(tok.value)

    raise SyntaxError(
        f"Unexpected token '{tok.value}' of type {tok.type} "
        f"in {parser.source_file}"
    )


def parse_expr(parser: 'Parser') -> Expr:
    """
    Parse an arithmetic expression.

    Syntax:
        <factor> ( ('+' | '-' | '*' | '/') <factor> )*

    Args:
        parser: The parser instance.

    Returns:
        Expr: the left-associative chain of BinaryOp nodes, or a single factor.
    """
    result = parser.factor()
    while parser.curr_token.type in TOKEN_OPS:
        op_tok = parser.curr_token
        parser.eat(op_tok.type)
        result = BinaryOp(result, TOKEN_OPS[op_tok.type], parser.factor())
    return result
