"""Shared definitions for operators and declared types.

This module centralizes the names used by the parser and interpreter to label
operators and variable types in the abstract syntax tree. Keeping them in one
place prevents the two components from drifting apart.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported operators.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    INTEGER_DIV = "DIV"
    FLOAT_DIV = "/"

    # Relational
    GT = ">"
    LT = "<"
    EQ = "="

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the source spelling of the operator.
        """
        return self.value


class VarType(str, Enum):
    """
    Declarable variable types.
    """

    INTEGER = "INTEGER"
    REAL = "REAL"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


# Token type -> operator
TOKEN_OPS: dict[str, Op] = {
    'PLUS': Op.ADD,
    'MINUS': Op.SUB,
    'MUL': Op.MUL,
    'INTEGER_DIV': Op.INTEGER_DIV,
    'FLOAT_DIV': Op.FLOAT_DIV,
    'GT': Op.GT,
    'LT': Op.LT,
    'EQ': Op.EQ,
}


__all__ = ["Op", "VarType", "TOKEN_OPS"]
