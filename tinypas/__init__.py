"""tinypas: an interpreter for a small Pascal subset.

The package exposes the two entry operations: :func:`parse` turns source
text into a :class:`~tinypas.nodes.Program` and :func:`run` executes one,
returning the global variables as a :class:`~tinypas.interpreter.RunResult`.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TextIO

from tinypas.interpreter import DEFAULT_MAX_CALL_DEPTH, Interpreter, RunResult
from tinypas.lexer import Lexer
from tinypas.nodes import Program
from tinypas.parser import Parser


def parse(source: str, file: str = "<string>") -> Program:
    """
    Parse a complete program.

    Raises:
        LexicalError: If a character cannot start a token.
        PascalSyntaxError: On the first token that does not fit the grammar.
        NestingLimitError: If the program nests too deeply to parse.
    """
    return Parser(Lexer(source, file), file).parse()


def run(
    program: Program,
    output: TextIO | None = None,
    max_call_depth: int = DEFAULT_MAX_CALL_DEPTH,
    file: str = "<string>",
) -> RunResult:
    """
    Run a parsed program and return its final global state.

    ``writeln`` output goes to ``output`` (standard output by default).

    Raises:
        InterpreterError: On the first runtime error. Calls nested deeper than
            ``max_call_depth`` raise RecursionLimitError.
    """
    return Interpreter(program, file, output, max_call_depth).interpret()


__all__ = ["parse", "run", "Interpreter", "RunResult", "DEFAULT_MAX_CALL_DEPTH"]
