"""Shared definitions for AST operation identifiers.

This module centralizes the operator labels used by the parser and
interpreter for binary arithmetic nodes. Keeping them in one place prevents
the two components from drifting apart when an operator is added or renamed.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported binary operators.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the operator symbol for nicer debug output.
        """
        return self.value


# Token type -> operator for every token the expression grammar folds.
TOKEN_OPS = {
    'PLUS': Op.ADD,
    'MINUS': Op.SUB,
    'MUL': Op.MUL,
    'DIV': Op.DIV,
}


__all__ = ["Op", "TOKEN_OPS"]
