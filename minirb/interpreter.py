"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
integer arithmetic, variables, conditionals and output statements.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) in a top-down, recursive manner.
Statements are executed via the `execute()` method, and expressions are evaluated using
`eval_expr()`. Both methods dispatch on the node dataclasses from `minirb.nodes` with
structural pattern matching. Side effects happen immediately and in program order.

2. Environment
The interpreter owns an `Environment` mapping variable names to integers. It starts empty
unless one is handed in, and only assignments modify it. Conditionals do not open a new
scope. Reading a name that was never assigned yields 0.

3. Expression Evaluation
Operands are evaluated left before right. Division truncates toward zero, and dividing by
zero raises `ZeroDivisionError`, aborting the run with earlier output already written.

4. Error Handling
Nodes or operators the interpreter does not know are surfaced as `UnknownNodeException` and
`UnknownOpException` with file context.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from collections.abc import Iterable

from minirb.exceptions import UnknownNodeException, UnknownOpException
from minirb.nodes import Assign, BinaryOp, Expr, If, Node, Number, Print, Statement, Variable
from minirb.operations import Op


class Environment(dict):
    """Variable bindings for one run. Unbound names read as 0."""

    def __missing__(self, name: str) -> int:
        return 0


def _truncating_div(lhs: int, rhs: int) -> int:
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


class Interpreter:
    """Tree-walk interpreter for minirb."""

    def __init__(self, file: str, env: Environment | None = None):
        """Initialize the interpreter."""
        self.vars = env if env is not None else Environment()
        self.file = file

    @staticmethod
    def _left_spine(node: BinaryOp) -> tuple[Expr, list[BinaryOp]]:
        """
        Split a left-leaning BinaryOp chain into its innermost left operand and
        the chain of operations, innermost first.
        """
        chain = []
        while isinstance(node, BinaryOp):
            chain.append(node)
            node = node.left
        chain.reverse()
        return node, chain

    def _format_expr(self, node: Expr) -> str:
        """
        Convert an expression back to a readable string for error messages.

        Args:
            node: An expression node.

        Returns:
            str: A string representation of the expression.
        """
        match node:
            case Number(value=value):
                return str(value)
            case Variable(name=name):
                return name
            case BinaryOp():
                base, chain = self._left_spine(node)
                text = self._format_expr(base)
                for step in chain:
                    text = f"({text} {step.op} {self._format_expr(step.right)})"
                return text
            case _:
                return f"<expr {type(node).__name__}>"

    def _apply(self, node: BinaryOp, lhs: int, rhs: int) -> int:
        """
        Apply the operator of ``node`` to already evaluated operands.
        """
        match node.op:
            case Op.ADD:
                return lhs + rhs
            case Op.SUB:
                return lhs - rhs
            case Op.MUL:
                return lhs * rhs
            case Op.DIV:
                if rhs == 0:
                    raise ZeroDivisionError(
                        f"Division by zero!\n"
                        f"{self._format_expr(node)}\n"
                        f"in {self.file}"
                    )
                return _truncating_div(lhs, rhs)
            case _:
                raise UnknownOpException(node.op, self.file)

    def eval_expr(self, node: Expr) -> int:
        """
        Evaluate an expression node and return its computed value.

        The left spine of a BinaryOp chain is folded in a loop, so long
        operator chains do not grow the Python stack.

        Parameters:
            node: A Number, Variable or BinaryOp node.

        Returns:
            int: The evaluated result of the expression.

        Raises:
            ZeroDivisionError: If the right operand of a division is 0.
            UnknownOpException: If an unrecognized binary operator is encountered.
            UnknownNodeException: If the node is not an expression.
        """
        match node:
            case Number(value=value):
                return value

            case Variable(name=name):
                return self.vars[name]

            case BinaryOp():
                base, chain = self._left_spine(node)
                result = self.eval_expr(base)
                for step in chain:
                    result = self._apply(step, result, self.eval_expr(step.right))
                return result

        raise UnknownNodeException(node, self.file)

    def execute(self, statements: Iterable[Statement]) -> None:
        """
        Executes a sequence of statements in order.

        Parameters:
            statements: Assign, Print and If nodes.

        Raises:
            UnknownNodeException: For unknown statement types.
        """
        for stmt in statements:
            match stmt:
                case Assign(name=name, value=expr_node):
                    self.vars[name] = self.eval_expr(expr_node)

                case Print(value=expr_node):
                    print(self.eval_expr(expr_node))

                case If(condition=cond_node, then_branch=then_branch, else_branch=else_branch):
                    if self.eval_expr(cond_node) != 0:
                        self.execute(then_branch)
                    else:
                        self.execute(else_branch)

                case _:
                    raise UnknownNodeException(stmt, self.file)

    def run_line(self, node: Node) -> int | None:
        """
        Run a node produced by `Parser.parse_line`.

        Statements are executed; a bare expression is evaluated and its value
        returned so the caller can echo it.
        """
        match node:
            case Assign() | Print() | If():
                self.execute([node])
                return None
            case _:
                return self.eval_expr(node)
