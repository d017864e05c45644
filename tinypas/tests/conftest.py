"""
Shared pytest fixtures for tinypas tests.

The repository root is put on the import path so the `pas` driver module can
be imported by the CLI tests without installing the project.
"""
import io
from pathlib import Path
import sys

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


FACTORIAL_PROGRAM = (
    "program Main;\n"
    "var result: integer;\n"
    "function Factorial(number: Integer): Integer;\n"
    "begin\n"
    "if number > 1 then\n"
    "    Factorial := number * Factorial(number-1)\n"
    "else\n"
    "    Factorial := 1\n"
    "end;\n"
    "begin { Main }\n"
    "result := Factorial(6);\n"
    "writeln(result);\n"
    "end.  { Main }\n"
)


@pytest.fixture
def output():
    """
    An in-memory sink for builtin output.
    """
    return io.StringIO()


@pytest.fixture
def factorial_file(tmp_path):
    """
    A program file that prints the factorial of 6.
    """
    path = tmp_path / "factorial.pas"
    path.write_text(FACTORIAL_PROGRAM, encoding="utf-8")
    return path
