"""
Utility functions shared across tinypas tests.
"""
from tinypas import parse, run
from tinypas.interpreter import RunResult


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    return parse(source, "<test>")


def run_source(source: str, output=None, **kwargs) -> RunResult:
    """
    Parse and run source code and return the final global state.
    """
    return run(parse_source(source), output=output, file="<test>", **kwargs)
