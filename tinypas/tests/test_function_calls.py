"""
Tests for procedure and function calls in tinypas.
"""
import sys

import pytest

from tinypas import interpreter
from tinypas.exceptions import (
    ArityMismatchError,
    DuplicateDeclarationError,
    RecursionLimitError,
    TypeMismatchError,
    UndefinedProcedureError,
)

from tinypas.tests.utils import run_source


FACTORIAL = (
    "function Factorial(number: Integer): Integer;\n"
    "begin\n"
    "if number > 1 then\n"
    "    Factorial := number * Factorial(number-1)\n"
    "else\n"
    "    Factorial := 1\n"
    "end;\n"
)

FOREVER = (
    "program Main;\n"
    "procedure Forever;\n"
    "begin Forever() end;\n"
    "begin Forever() end."
)


def test_procedure_call_without_parameters():
    """
    Test that a procedure updates globals and its locals are not exposed.
    """
    result = run_source(
        "program Main;\n"
        "var x, y: real;\n"
        "\n"
        "procedure Alpha();\n"
        "var a: integer;\n"
        "begin\n"
        "a := 2;\n"
        "x := y + a;\n"
        "end;\n"
        "\n"
        "begin { Main }\n"
        "y := 5;\n"
        "Alpha();\n"
        "end.  { Main }\n"
    )
    assert result.integers == {}
    assert result.reals == {'x': 7, 'y': 5}


def test_procedure_call_with_parameters():
    result = run_source(
        "program Main;\n"
        "var x, y: real;\n"
        "\n"
        "procedure Alpha(a: Integer);\n"
        "begin\n"
        "x := y + a;\n"
        "end;\n"
        "\n"
        "begin { Main }\n"
        "y := 3;\n"
        "Alpha(2);\n"
        "end.  { Main }\n"
    )
    assert result.integers == {}
    assert result.reals == {'x': 5, 'y': 3}


def test_recursive_function():
    result = run_source(
        "program Main;\n"
        "var result: integer;\n"
        + FACTORIAL +
        "begin { Main }\n"
        "result := Factorial(6);\n"
        "end.  { Main }\n"
    )
    assert result.reals == {}
    assert result.integers == {'result': 720}


def test_parameter_shadows_global_of_same_name():
    """
    Test that a parameter named like a global leaves the global untouched.
    """
    result = run_source(
        "program Main;\n"
        "var number, result: integer;\n"
        + FACTORIAL +
        "begin { Main }\n"
        "number := 6;\n"
        "result := Factorial(number);\n"
        "end.  { Main }\n"
    )
    assert result.integers == {'number': 6, 'result': 720}


def test_arguments_evaluated_in_caller_scope():
    result = run_source(
        "program Main;\n"
        "var a, r: integer;\n"
        "function Twice(a: integer): integer;\n"
        "begin Twice := a + a end;\n"
        "begin a := 4; r := Twice(a + 1) + a end."
    )
    assert result.integers == {'a': 4, 'r': 14}


def test_multiple_parameters_and_promotion():
    result = run_source(
        "program Main;\n"
        "var r: real;\n"
        "function Mix(a, b: integer; c: real): real;\n"
        "begin Mix := a * b + c end;\n"
        "begin r := Mix(2, 3, 1) end."
    )
    assert result.reals == {'r': 7.0}
    assert isinstance(result.reals['r'], float)


def test_real_argument_for_integer_parameter():
    with pytest.raises(TypeMismatchError):
        run_source(
            "program Main;\n"
            "procedure P(n: integer); begin end;\n"
            "begin P(1.5) end."
        )


def test_lexical_not_dynamic_scoping():
    """
    Test that a routine sees the variables where it was declared, not where it was called.
    """
    result = run_source(
        "program Main;\n"
        "var x, r: integer;\n"
        "procedure Show;\n"
        "begin r := x end;\n"
        "procedure Caller;\n"
        "var x: integer;\n"
        "begin x := 99; Show() end;\n"
        "begin x := 1; Caller() end."
    )
    assert result.integers == {'x': 1, 'r': 1}


def test_nested_procedure_updates_enclosing_local():
    result = run_source(
        "program Main;\n"
        "var x, seen: integer;\n"
        "procedure Outer;\n"
        "var x: integer;\n"
        "    procedure Inner;\n"
        "    begin x := 5 end;\n"
        "begin\n"
        "    x := 1;\n"
        "    Inner();\n"
        "    seen := x\n"
        "end;\n"
        "begin x := 100; Outer() end."
    )
    assert result.integers == {'x': 100, 'seen': 5}


def test_nested_procedure_not_visible_outside():
    with pytest.raises(UndefinedProcedureError):
        run_source(
            "program Main;\n"
            "procedure Outer;\n"
            "    procedure Inner; begin end;\n"
            "begin end;\n"
            "begin Inner() end."
        )


def test_function_called_as_statement():
    result = run_source(
        "program Main;\n"
        "var counter: integer;\n"
        "function Tick: integer;\n"
        "begin counter := counter + 1; Tick := counter end;\n"
        "begin Tick(); Tick() end."
    )
    assert result.integers == {'counter': 2}


def test_unassigned_function_result_is_zero():
    result = run_source(
        "program Main;\n"
        "var i: integer; r: real;\n"
        "function Zi: integer; begin end;\n"
        "function Zr: real; begin end;\n"
        "begin i := Zi() + 3; r := Zr() end."
    )
    assert result.integers == {'i': 3}
    assert result.reals == {'r': 0.0}


def test_undefined_procedure():
    with pytest.raises(UndefinedProcedureError) as exc_info:
        run_source("program Main;\nbegin\n  Missing()\nend.")
    assert exc_info.value.name == 'Missing'
    assert exc_info.value.line == 3


def test_arity_mismatch():
    with pytest.raises(ArityMismatchError) as exc_info:
        run_source(
            "program Main;\n"
            "procedure P(a: integer); begin end;\n"
            "begin P() end."
        )
    err = exc_info.value
    assert (err.name, err.expected, err.actual) == ('P', 1, 0)


def test_procedure_has_no_value():
    with pytest.raises(TypeMismatchError):
        run_source(
            "program Main;\n"
            "var x: integer;\n"
            "procedure P; begin end;\n"
            "begin x := P() end."
        )


def test_parameter_clashes_with_local():
    with pytest.raises(DuplicateDeclarationError):
        run_source(
            "program Main;\n"
            "procedure P(a: integer);\n"
            "var a: integer;\n"
            "begin end;\n"
            "begin P(1) end."
        )


def test_recursion_limit():
    """
    Test that runaway recursion stops at the configured depth.
    """
    with pytest.raises(RecursionLimitError) as exc_info:
        run_source(FOREVER, max_call_depth=10)
    assert exc_info.value.depth == 10

    with pytest.raises(RecursionLimitError):
        run_source(FOREVER)


def test_recursion_within_limit():
    source = (
        "program Main;\n"
        "var result: integer;\n"
        + FACTORIAL +
        "begin result := Factorial(6) end."
    )
    assert run_source(source, max_call_depth=6).integers == {'result': 720}
    with pytest.raises(RecursionLimitError):
        run_source(source, max_call_depth=5)


def test_recursive_output_order(output):
    run_source(
        "program Main;\n"
        "procedure Count(n: integer);\n"
        "begin\n"
        "  if n > 0 then\n"
        "  begin\n"
        "    Count(n - 1);\n"
        "    writeln(n)\n"
        "  end\n"
        "end;\n"
        "begin Count(3) end.",
        output=output,
    )
    assert output.getvalue().splitlines() == ['1', '2', '3']


def test_deep_recursion_limit():
    """
    Test that a large call depth limit is reached before the host stack runs out.
    """
    host_limit = sys.getrecursionlimit()
    with pytest.raises(RecursionLimitError) as exc_info:
        run_source(FOREVER, max_call_depth=5000)
    assert exc_info.value.depth == 5000
    assert sys.getrecursionlimit() == host_limit


def test_deep_recursion_within_limit():
    result = run_source(
        "program Main;\n"
        "var total: integer;\n"
        "function Sum(n: integer): integer;\n"
        "begin\n"
        "  if n > 0 then Sum := n + Sum(n - 1) else Sum := 0\n"
        "end;\n"
        "begin total := Sum(3000) end.",
        max_call_depth=3001,
    )
    assert result.integers == {'total': 4501500}


def test_host_stack_exhaustion_is_a_recursion_error(monkeypatch):
    """
    Test that running out of host stack before `max_call_depth` still gives a typed error.
    """
    monkeypatch.setattr(interpreter, 'CALL_FRAME_BUDGET', 0)
    host_limit = sys.getrecursionlimit()
    with pytest.raises(RecursionLimitError) as exc_info:
        run_source(FOREVER, max_call_depth=100000)
    err = exc_info.value
    assert isinstance(err.__cause__, RecursionError)
    assert 0 < err.depth < 100000
    assert err.file == "<test>"
    assert sys.getrecursionlimit() == host_limit
