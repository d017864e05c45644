"""
tinypas Interpreter

This is the main entry point for the tinypas interpreter.

Workflow:
1. The source program is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.
5. With PASDEBUG set, the tokens, the AST and the final global state are printed.
"""
import os
import sys

from tinypas import parse
from tinypas.exceptions import PascalError
from tinypas.interpreter import DEFAULT_MAX_CALL_DEPTH, Interpreter
from tinypas.lexer import Lexer


def print_usage():
    """
    Print usage.
    """
    print()
    print("tinypas Interpreter")
    print()
    print("Usage:")
    print("    pas <program.pas>")
    print()
    print("Arguments:")
    print("    <program.pas>")
    print("        Path to a Pascal source file starting with PROGRAM and ending")
    print("        with 'END.'.")
    print()
    print("Example:")
    print("    pas factorial.pas")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    PASDEBUG      Print tokens, AST and final global state.")
    print("    PASMAXDEPTH   Maximum call depth (default "
          f"{DEFAULT_MAX_CALL_DEPTH}).")


def max_call_depth() -> int:
    """
    Read the call depth limit from the environment.
    """
    return int(os.environ.get('PASMAXDEPTH', DEFAULT_MAX_CALL_DEPTH))


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(list(tokens))
    print("\nAST:\n")
    print(ast)
    print(" ")


def debug_print_state(result):
    """
    Print the final global state of a run
    """
    print("\nState:\n")
    for bucket in ('integers', 'reals', 'booleans', 'strings'):
        print(f"{bucket}: {dict(getattr(result, bucket))}")
    print(" ")


def execute(source: str, file: str):
    """
    Parse and run a complete program.
    """
    program = parse(source, file)
    if os.environ.get('PASDEBUG'):
        debug_print_tokens_ast(Lexer(source, file), program)
    result = Interpreter(program, file, max_call_depth=max_call_depth()).interpret()
    if os.environ.get('PASDEBUG'):
        debug_print_state(result)
    return result


def run_script(script_name: str) -> int:
    """
    Run a Pascal program file
    """
    with open(script_name, "r", encoding="utf-8") as f:
        code = f.read()

    try:
        execute(code, script_name)
    except PascalError as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    return 0


def run_repl():
    """
    Run the interactive REPL
    """
    print("tinypas Interpreter - REPL")
    print("Enter a whole program; it runs once 'END.' completes it.")
    print("Type `exit` or `quit` to leave.")
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            try:
                execute("\n".join(buffer), "<stdin>")
                buffer.clear()
            except PascalError as e:
                # A program cut short by the end of input is incomplete, not wrong
                if getattr(e, 'actual', None) == 'EOF':
                    continue
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
    - One argument that is not an option: treat it as the path to a program and run it.
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


def cli():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
