"""Errors.

Syntax errors are reported with the builtin :class:`SyntaxError` and division
by zero with :class:`ZeroDivisionError`; the types below cover the remaining
interpreter failures.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class UnknownOpException(Exception):
    """
    Error for unknown operations.
    """
    def __init__(self, op, file=None):
        self.op = op
        message = f"Unknown operation '{op}'"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class UnknownNodeException(TypeError):
    """
    Error for AST nodes the interpreter cannot execute or evaluate.
    """
    def __init__(self, node, file=None):
        self.node = node
        message = f"Unknown node type: {type(node).__name__}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)
