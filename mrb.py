"""
minirb Language Interpreter

This is the main entry point for the minirb language interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

Set MRBDEBUG to any non-empty value to print the tokens and AST before execution.
"""
import os
import sys

from minirb.lexer import tokenize
from minirb.parser import Parser
from minirb.interpreter import Interpreter


def print_usage():
    """
    Print usage.
    """
    print()
    print("minirb Language Interpreter")
    print()
    print("Usage:")
    print("    mrb <script.mrb>")
    print()
    print("Arguments:")
    print("    <script.mrb>")
    print("        Path to a minirb source file to execute.")
    print()
    print("Example:")
    print("    mrb hello.mrb")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    MRBDEBUG")
    print("        When set, print the tokens and AST before running the script.")


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    print(ast)
    print(" ")


def run_script(script_name: str) -> int:
    """
    Run a minirb script, returning 0 on success and 1 on failure.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()

        tokens = tokenize(code)
        parser = Parser(tokens, script_name)
        ast = parser.parse()

        if os.environ.get('MRBDEBUG'):
            debug_print_tokens_ast(tokens, ast)

        Interpreter(script_name).execute(ast)
    except (OSError, ValueError, SyntaxError, ArithmeticError, TypeError, RecursionError) as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    return 0


def run_repl():
    """
    Run the interactive REPL
    """
    print("minirb Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>")
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if line.strip() in {"exit", "quit"}:
                break
            if not buffer and not line.strip():
                continue
            buffer.append(line)
            source = "\n".join(buffer)
            tokens = tokenize(source)
            is_block = tokens[0].type == 'IF'
            try:
                parser = Parser(tokens, "<stdin>")
                if is_block:
                    interpreter.execute(parser.parse())
                else:
                    value = interpreter.run_line(parser.parse_line())
                    if value is not None:
                        print(value)
                buffer.clear()
            except SyntaxError as e:
                # An if block that reached EOF is still being typed
                if is_block and "'' of type EOF" in str(e):
                    continue
                print(f"{type(e).__name__}: {e}")
                buffer.clear()
            except (ArithmeticError, TypeError, RecursionError) as e:
                print(f"{type(e).__name__}: {e}")
                buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


def cli() -> None:
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
