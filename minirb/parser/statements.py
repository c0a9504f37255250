"""Statement parsing utilities for minirb.

These functions operate on a `minirb.parser.parser.Parser` instance and
handle the statement forms of the language: assignment, ``print`` and
``if``/``else``/``end`` conditionals.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from minirb.nodes import Assign, If, Node, Print, Statement, Variable

if TYPE_CHECKING:
    from minirb.parser import Parser


# Tokens that close a statement sequence.
BLOCK_TERMINATORS = ('EOF', 'ELSE', 'END')


def parse_block(parser: 'Parser') -> list[Statement]:
    """
    Parse statements until the end of input or a block terminator.

    Syntax:
        <statement>*

    Args:
        parser: The parser instance.

    Returns:
        list: the parsed statements, in source order.
    """
    statements = []
    while parser.curr_token.type not in BLOCK_TERMINATORS:
        statements.append(parser.statement())
    return statements


def parse_statement(parser: 'Parser') -> Statement:
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        Statement: the AST node for the statement.
    """
    tok = parser.curr_token
    if tok.type == 'IF':
        return parser.parse_if()
    if tok.type == 'PRINT':
        return parser.parse_print()
    return parser.parse_assignment()


def parse_if(parser: 'Parser') -> If:
    """
    Parse a conditional with an optional else branch.

    Syntax:
        if <expression> <statement>* [else <statement>*] end

    Args:
        parser: The parser instance.

    Returns:
        If: the conditional node.
    """
    parser.eat('IF')
    condition = parser.expr()
    then_branch = parser.block()

    else_branch = []
    if parser.curr_token.type == 'ELSE':
        parser.eat('ELSE')
        else_branch = parser.block()

    parser.eat('END')
    return If(condition, tuple(then_branch), tuple(else_branch))


def parse_print(parser: 'Parser') -> Print:
    """
    Parse a ``print`` statement.

    Syntax:
        print <expression>

    Args:
        parser: The parser instance.

    Returns:
        Print: the print node.
    """
    parser.eat('PRINT')
    return Print(parser.expr())


def parse_assignment(parser: 'Parser') -> Assign:
    """
    Parse an assignment.

    Syntax:
        <identifier> = <expression>

    Args:
        parser: The parser instance.

    Returns:
        Assign: the assignment node.
    """
    id_tok = parser.curr_token
    parser.eat('ID')
    parser.eat('ASSIGN')
    return Assign(id_tok.value, parser.expr())


def parse_line(parser: 'Parser') -> Node:
    """
    Parse exactly one statement or bare expression with no block structure.

    Syntax:
        print <expression> | <identifier> = <expression> | <expression>

    Args:
        parser: The parser instance.

    Returns:
        Node: a Print or Assign statement, or an expression node.

    Raises:
        SyntaxError: If anything follows the statement.
    """
    if parser.curr_token.type == 'PRINT':
        node = parser.parse_print()
    else:
        node = parser.expr()
        if isinstance(node, Variable) and parser.curr_token.type == 'ASSIGN':
            parser.eat('ASSIGN')
            node = Assign(node.name, parser.expr())
    parser.eat('EOF')
    return node
