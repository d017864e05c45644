"""Activation records for tinypas.

A :class:`Scope` holds the typed variables and the routines declared in one
block, plus a link to the lexically enclosing scope. Variables and routines
share a namespace for duplicate detection but are resolved separately:
:meth:`Scope.resolve` finds variables, :meth:`Scope.lookup_routine` finds
procedures and functions.

A routine is stored together with the scope it was declared in
(:class:`Routine`), so every call chains its new scope to the declaration
site rather than to the caller.


File: scope.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass

from tinypas.exceptions import DuplicateDeclarationError
from tinypas.nodes import Routine as RoutineNode
from tinypas.operations import VarType


ZERO_VALUES: dict[VarType, int | float] = {
    VarType.INTEGER: 0,
    VarType.REAL: 0.0,
}


@dataclass(frozen=True)
class Routine:
    """A declared procedure or function and the scope it was declared in."""
    decl: RoutineNode
    scope: Scope


class Scope:
    """
    Name to typed value mapping with an optional enclosing scope.
    """

    def __init__(self, name: str, enclosing: Scope | None = None):
        self.name = name
        self.enclosing = enclosing
        self.types: dict[str, VarType] = {}
        self.values: dict[str, int | float] = {}
        self.routines: dict[str, Routine] = {}

    def __repr__(self) -> str:
        return f"Scope({self.name!r}, values={self.values})"

    def __contains__(self, name: str) -> bool:
        return name in self.types or name in self.routines

    def declare(self, name: str, var_type: VarType, line=None, file=None) -> None:
        """
        Declare a variable bound to the zero value of its type.

        Raises:
            DuplicateDeclarationError: If the name is already declared here.
        """
        if name in self:
            raise DuplicateDeclarationError(name, line, file)
        self.types[name] = var_type
        self.values[name] = ZERO_VALUES[var_type]

    def define_routine(self, decl: RoutineNode, file=None) -> None:
        """
        Declare a procedure or function, capturing this scope as its home.

        Raises:
            DuplicateDeclarationError: If the name is already declared here.
        """
        if decl.name in self:
            raise DuplicateDeclarationError(decl.name, decl.line, file)
        self.routines[decl.name] = Routine(decl, self)

    def resolve(self, name: str) -> Scope | None:
        """
        Return the nearest scope declaring variable ``name``, if any.
        """
        scope = self
        while scope is not None:
            if name in scope.types:
                return scope
            scope = scope.enclosing
        return None

    def lookup_routine(self, name: str) -> Routine | None:
        """
        Return the nearest routine called ``name``, if any.
        """
        scope = self
        while scope is not None:
            if name in scope.routines:
                return scope.routines[name]
            scope = scope.enclosing
        return None
