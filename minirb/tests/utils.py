"""
Utility functions shared across minirb tests.
"""
from minirb.lexer import tokenize
from minirb.parser import Parser
from minirb.interpreter import Interpreter


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    parser = Parser(tokenize(source), "<test>")
    return parser.parse()


def run_source(source: str) -> Interpreter:
    """
    Parse and run source code, returning the interpreter after execution.
    """
    interpreter = Interpreter("<test>")
    interpreter.execute(parse_source(source))
    return interpreter
