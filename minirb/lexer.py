"""Lexer for minirb.

The lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type and the literal source text it was built from.

Whitespace, newlines included, is skipped. Alphabetic runs that exactly match
a reserved word (``print``, ``if``, ``else``, ``end``) become keyword tokens;
every other run is an identifier. Characters the language does not know are
emitted as ``UNKNOWN`` tokens instead of failing, so the parser decides
whether they are an error.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import re
from typing import NamedTuple


KEYWORDS = {
    'print': 'PRINT',
    'if': 'IF',
    'else': 'ELSE',
    'end': 'END',
}

# EQ is reserved; '=' always lexes as ASSIGN.
TOKEN_TYPES = (
    'NUMBER', 'ID', 'ASSIGN', 'PLUS', 'MINUS', 'MUL', 'DIV', 'LPAREN',
    'RPAREN', 'PRINT', 'IF', 'ELSE', 'END', 'LT', 'GT', 'EQ', 'EOF', 'UNKNOWN',
)


class Token(NamedTuple):
    """
    Represents a lexical token with a type and the source text it matched.
    """
    type: str
    value: str

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r})"


token_specification: list[tuple[str, str]] = [
    # Literals
    ('NUMBER',    r'\d+'),

    # Words (keywords are resolved after matching)
    ('WORD',      r'[^\W\d_]+'),

    # Assignment
    ('ASSIGN',    r'='),

    # Delimiters
    ('LPAREN',    r'\('),
    ('RPAREN',    r'\)'),

    # Arithmetic operators
    ('PLUS',      r'\+'),
    ('MINUS',     r'-'),
    ('MUL',       r'\*'),
    ('DIV',       r'/'),

    # Comparison operators
    ('GT',        r'>'),
    ('LT',        r'<'),

    # Miscellaneous
    ('SKIP',      r'\s+'),
    ('UNKNOWN',   r'.'),
]

tok_regex = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification),
    re.DOTALL,
)


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances ending with a single EOF token.
    """
    tokens = []

    for match_obj in tok_regex.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()

        if kind == 'SKIP':
            continue
        if kind == 'WORD':
            tokens.append(Token(KEYWORDS.get(value, 'ID'), value))
        else:
            tokens.append(Token(kind, value))

    tokens.append(Token('EOF', ''))
    return tokens
