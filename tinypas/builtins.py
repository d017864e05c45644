"""Builtin procedures for tinypas.

Builtins are host callables invoked by name like procedures. They receive the
running :class:`~tinypas.interpreter.Interpreter` and the already evaluated
arguments. Names are stored lower-case and matched case-insensitively.


File: builtins.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from tinypas.interpreter import Interpreter


@dataclass(frozen=True)
class Builtin:
    name: str
    arity: int
    func: Callable[['Interpreter', list], None]


def format_value(value) -> str:
    """
    Return the textual form of a runtime value.
    """
    if isinstance(value, bool):
        return 'TRUE' if value else 'FALSE'
    return str(value)


def _writeln(interpreter: 'Interpreter', args: list) -> None:
    interpreter.output.write(format_value(args[0]) + '\n')


BUILTINS: dict[str, Builtin] = {
    'writeln': Builtin('writeln', 1, _writeln),
}

