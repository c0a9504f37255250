"""AST node definitions for minirb.

The parser builds trees out of the frozen dataclasses below and the
interpreter consumes them with structural pattern matching. The set of node
types is closed: ``Expr`` and ``Statement`` list every variant.

Expressions:
    Number(value)               -- integer literal
    Variable(name)              -- variable reference
    BinaryOp(left, op, right)   -- arithmetic on two expressions

Statements:
    Assign(name, value)         -- name = expr
    Print(value)                -- print expr
    If(condition, then_branch, else_branch)


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from minirb.operations import Op


@dataclass(frozen=True)
class Number:
    """Integer literal."""

    value: int


@dataclass(frozen=True)
class Variable:
    """Reference to a variable by name."""

    name: str


@dataclass(frozen=True)
class BinaryOp:
    """Arithmetic operation on two sub-expressions."""

    left: Expr
    op: Op
    right: Expr


@dataclass(frozen=True)
class Assign:
    """Bind the value of an expression to a name."""

    name: str
    value: Expr


@dataclass(frozen=True)
class Print:
    """Write the value of an expression to the output."""

    value: Expr


@dataclass(frozen=True)
class If:
    """Conditional with an optional (possibly empty) else branch."""

    condition: Expr
    then_branch: tuple[Statement, ...]
    else_branch: tuple[Statement, ...] = ()


Expr = Union[Number, Variable, BinaryOp]
Statement = Union[Assign, Print, If]
Node = Union[Expr, Statement]


__all__ = [
    "Number",
    "Variable",
    "BinaryOp",
    "Assign",
    "Print",
    "If",
    "Expr",
    "Statement",
    "Node",
]
