"""Syntax tree for tinypas.

The tree is a closed set of frozen dataclasses, one per construct. The
parser builds it once; the interpreter only reads it. Every node records
the source ``line`` it started on, which is left out of equality so two
trees parsed from differently formatted sources compare equal.

Sequences are stored as tuples so a built tree cannot be mutated.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from tinypas.operations import Op, VarType


# ---- Expressions ----

@dataclass(frozen=True)
class NumberLiteral:
    value: int | float
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Variable:
    name: str
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class UnaryOp:
    op: Op
    operand: Expression
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class BinaryOp:
    op: Op
    left: Expression
    right: Expression
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class RelationalOp:
    op: Op
    left: Expression
    right: Expression
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Call:
    """Call of a procedure, function or builtin; also usable as a statement."""
    name: str
    args: tuple[Expression, ...]
    line: int = field(default=0, compare=False)


# ---- Statements ----

@dataclass(frozen=True)
class Compound:
    statements: tuple[Statement, ...]
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Assignment:
    target: Variable
    value: Expression
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class NoOp:
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class If:
    condition: RelationalOp
    then_branch: Statement
    else_branch: Statement | None
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class RepeatUntil:
    """Loop whose body always runs once before the condition is checked."""
    body: Compound
    condition: RelationalOp
    line: int = field(default=0, compare=False)


# ---- Declarations ----

@dataclass(frozen=True)
class VariableDeclaration:
    name: str
    type: VarType
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Param:
    name: str
    type: VarType
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Procedure:
    name: str
    params: tuple[Param, ...]
    block: Block
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Function:
    """
    Function declaration.

    The result is whatever the body last assigned to the variable named
    after the function, which is declared with ``return_type``.
    """
    name: str
    params: tuple[Param, ...]
    block: Block
    return_type: VarType
    line: int = field(default=0, compare=False)


# ---- Program structure ----

@dataclass(frozen=True)
class Block:
    declarations: tuple[Declaration, ...]
    compound: Compound
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Program:
    name: str
    block: Block
    line: int = field(default=0, compare=False)


Expression = Union[NumberLiteral, Variable, UnaryOp, BinaryOp, Call]
Statement = Union[Compound, Assignment, Call, If, RepeatUntil, NoOp]
Declaration = Union[VariableDeclaration, Procedure, Function]
Routine = Union[Procedure, Function]

Node = Union[
    Program, Block, VariableDeclaration, Procedure, Function, Param,
    Compound, Assignment, Variable, NoOp, UnaryOp, BinaryOp, RelationalOp,
    If, RepeatUntil, Call, NumberLiteral,
]
