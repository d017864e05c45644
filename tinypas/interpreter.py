"""Interpreter.

This is a tree-walk interpreter for evaluating the syntax tree produced by the
parser. It supports typed variables, arithmetic, conditionals, REPEAT loops,
procedures, functions (including recursion) and builtin output.

1. Execution Model
The interpreter evaluates the tree top-down and recursively. Statements are
executed via `execute()` and expressions are evaluated using `eval_expr()`;
both dispatch on the node class with a `match` statement.

2. Environment
Each run owns a call stack of `Scope` objects. The global scope sits at the
bottom; every procedure or function call pushes a fresh scope whose enclosing
scope is the scope the routine was declared in, and pops it on return. The
call depth is bounded by `max_call_depth`. For the length of a run the host
recursion limit is raised far enough to reach that depth, and a host stack
overflow that still happens is reported as a `RecursionLimitError`.

3. Types
Values are Python ints (INTEGER) and floats (REAL). Mixed arithmetic yields a
real, `/` always yields a real and `DIV` accepts integers only and truncates
toward zero. Integers are promoted when stored into REAL variables or
parameters; storing a real into an INTEGER is a type mismatch.

4. Output
The `writeln` builtin writes to the `output` stream given to the
interpreter, which defaults to standard output.

5. Error Handling
Runtime errors such as undeclared variables, bad calls and type mismatches
are raised as typed exceptions with line numbers and file context. The first
error aborts the run.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import sys
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, TextIO

from tinypas.builtins import BUILTINS
from tinypas.exceptions import (
    ArityMismatchError,
    DivisionByZeroError,
    RecursionLimitError,
    TypeMismatchError,
    UndeclaredVariableError,
    UndefinedProcedureError,
)
from tinypas.nodes import (
    Assignment,
    BinaryOp,
    Block,
    Call,
    Compound,
    Function,
    If,
    NoOp,
    NumberLiteral,
    Procedure,
    Program,
    RelationalOp,
    RepeatUntil,
    UnaryOp,
    Variable,
    VariableDeclaration,
)
from tinypas.operations import Op, VarType
from tinypas.scope import Scope


DEFAULT_MAX_CALL_DEPTH = 64

# Host frames one Pascal call can use: call, execute_block, execute, eval_expr...
CALL_FRAME_BUDGET = 24


@dataclass(frozen=True)
class RunResult:
    """Read-only snapshot of the global variables after a run, by kind."""
    integers: Mapping[str, int]
    reals: Mapping[str, float]
    booleans: Mapping[str, bool]
    strings: Mapping[str, str]


def kind_of(value) -> str:
    """
    Return the runtime kind name of a value.
    """
    if isinstance(value, bool):
        return 'BOOLEAN'
    if isinstance(value, int):
        return VarType.INTEGER.value
    if isinstance(value, float):
        return VarType.REAL.value
    if isinstance(value, str):
        return 'STRING'
    raise TypeError(f"Unsupported runtime value {value!r}")


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Interpreter:
    """
    Tree-walk interpreter for tinypas.

    One instance performs one run of one program and owns all of that run's
    state: the call stack, the builtin table and the output stream.
    """
    def __init__(
        self,
        program: Program,
        file: str = "<string>",
        output: TextIO | None = None,
        max_call_depth: int = DEFAULT_MAX_CALL_DEPTH,
    ):
        """
        Initialize the interpreter.

        Parameters:
            program (Program): The syntax tree to run.
            file (str): The name of the source, used in error messages.
            output (TextIO): Stream receiving builtin output.
            max_call_depth (int): Maximum number of nested calls.
        """
        self.program = program
        self.file = file
        self.output = output if output is not None else sys.stdout
        self.max_call_depth = max_call_depth
        self.builtins = dict(BUILTINS)
        self.call_stack: list[Scope] = []
        self.global_scope: Scope | None = None
        self.deepest_call = 0

    @property
    def current_scope(self) -> Scope:
        return self.call_stack[-1]

    def interpret(self) -> RunResult:
        """
        Run the program to completion and return the global state.

        Raises:
            RecursionLimitError: If calls nest deeper than `max_call_depth`, or
                deep enough to exhaust the host stack first.
        """
        self.global_scope = Scope(self.program.name)
        self.call_stack = [self.global_scope]
        self.deepest_call = 0

        host_limit = sys.getrecursionlimit()
        sys.setrecursionlimit(max(host_limit, host_limit + self.max_call_depth * CALL_FRAME_BUDGET))
        try:
            self.execute_block(self.program.block, self.global_scope)
        except RecursionError as exc:
            raise RecursionLimitError(self.deepest_call, file=self.file) from exc
        finally:
            sys.setrecursionlimit(host_limit)
            self.call_stack = [self.global_scope]
        return self.snapshot()

    def snapshot(self) -> RunResult:
        """
        Return the global variables partitioned by runtime kind.

        Raises:
            RuntimeError: If the program has not been run yet.
        """
        if self.global_scope is None:
            raise RuntimeError(f"Program has not been run in {self.file}")
        buckets = {'INTEGER': {}, 'REAL': {}, 'BOOLEAN': {}, 'STRING': {}}
        for name, value in self.global_scope.values.items():
            buckets[kind_of(value)][name] = value
        return RunResult(
            integers=MappingProxyType(buckets['INTEGER']),
            reals=MappingProxyType(buckets['REAL']),
            booleans=MappingProxyType(buckets['BOOLEAN']),
            strings=MappingProxyType(buckets['STRING']),
        )

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def execute_block(self, block: Block, scope: Scope) -> None:
        """
        Bind a block's declarations in ``scope`` and run its body.
        """
        for decl in block.declarations:
            match decl:
                case VariableDeclaration(name=name, type=var_type):
                    scope.declare(name, var_type, decl.line, self.file)
                case Procedure() | Function():
                    scope.define_routine(decl, self.file)
                case _:
                    raise TypeError(
                        f"Unknown declaration type: {type(decl).__name__} "
                        f"On line {decl.line} in {self.file}"
                    )
        self.execute(block.compound)

    def execute(self, stmt) -> None:
        """
        Execute a single statement.

        Raises:
            TypeError: For unknown statement types.
        """
        match stmt:
            case Compound(statements=statements):
                for child in statements:
                    self.execute(child)

            case Assignment(target=target, value=expr_node):
                value = self.eval_expr(expr_node)
                self.assign(target.name, value, stmt.line)

            case Call():
                self.call(stmt, want_result=False)

            case If(condition=cond_node, then_branch=then_branch, else_branch=else_branch):
                if self.eval_condition(cond_node):
                    self.execute(then_branch)
                elif else_branch is not None:
                    self.execute(else_branch)

            case RepeatUntil(body=body, condition=cond_node):
                self.execute(body)
                while not self.eval_condition(cond_node):
                    self.execute(body)

            case NoOp():
                pass

            case _:
                raise TypeError(
                    f"Unknown statement type: {type(stmt).__name__} "
                    f"in {self.file}"
                )

    def assign(self, name: str, value, line=None) -> None:
        """
        Store ``value`` into the nearest variable called ``name``.

        Raises:
            UndeclaredVariableError: If no enclosing scope declares the name.
            TypeMismatchError: If the value cannot be stored in the declared type.
        """
        scope = self.current_scope.resolve(name)
        if scope is None:
            raise UndeclaredVariableError(name, line, self.file)
        scope.values[name] = self.coerce(value, scope.types[name], f"assignment to '{name}'", line)

    def coerce(self, value, var_type: VarType, operation: str, line=None):
        """
        Convert ``value`` for storage in a variable of ``var_type``.
        """
        kind = kind_of(value)
        if var_type == VarType.INTEGER and kind == 'INTEGER':
            return value
        if var_type == VarType.REAL and kind in ('INTEGER', 'REAL'):
            return float(value)
        raise TypeMismatchError(operation, (kind, var_type.value), line, self.file)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def eval_expr(self, node):
        """
        Recursively evaluate an expression node and return its value.

        Raises:
            UndeclaredVariableError: If a variable is referenced that has not been declared.
            TypeMismatchError: If an operator gets operands of the wrong kind.
            TypeError: If the node is not an expression.
        """
        match node:
            case NumberLiteral(value=value):
                return value

            case Variable(name=name):
                scope = self.current_scope.resolve(name)
                if scope is None:
                    raise UndeclaredVariableError(name, node.line, self.file)
                return scope.values[name]

            case UnaryOp(op=op, operand=operand_node):
                operand = self.eval_expr(operand_node)
                if not _is_number(operand):
                    raise TypeMismatchError(f"unary {op}", (kind_of(operand),), node.line, self.file)
                return -operand if op == Op.SUB else +operand

            case BinaryOp(op=op, left=left, right=right):
                return self.eval_binary(op, self.eval_expr(left), self.eval_expr(right), node.line)

            case RelationalOp():
                return self.eval_condition(node)

            case Call():
                return self.call(node, want_result=True)

            case _:
                raise TypeError(f"Invalid expression node: {node!r} in {self.file}")

    def eval_binary(self, op: Op, lhs, rhs, line=None):
        """
        Apply an arithmetic operator to two evaluated operands.
        """
        if not (_is_number(lhs) and _is_number(rhs)):
            raise TypeMismatchError(op, (kind_of(lhs), kind_of(rhs)), line, self.file)

        match op:
            case Op.ADD | Op.SUB | Op.MUL:
                if isinstance(lhs, float) or isinstance(rhs, float):
                    lhs, rhs = float(lhs), float(rhs)
                if op == Op.ADD:
                    return lhs + rhs
                if op == Op.SUB:
                    return lhs - rhs
                return lhs * rhs
            case Op.INTEGER_DIV:
                if isinstance(lhs, float) or isinstance(rhs, float):
                    raise TypeMismatchError(op, (kind_of(lhs), kind_of(rhs)), line, self.file)
                if rhs == 0:
                    raise DivisionByZeroError(op, line, self.file)
                quotient = abs(lhs) // abs(rhs)
                return quotient if (lhs < 0) == (rhs < 0) else -quotient
            case Op.FLOAT_DIV:
                if rhs == 0:
                    raise DivisionByZeroError(op, line, self.file)
                return float(lhs) / float(rhs)
            case _:
                raise TypeError(f"Unknown binary operator '{op}' on line {line} in {self.file}")

    def eval_condition(self, node: RelationalOp) -> bool:
        """
        Evaluate a relational comparison.
        """
        lhs = self.eval_expr(node.left)
        rhs = self.eval_expr(node.right)
        if not (_is_number(lhs) and _is_number(rhs)):
            raise TypeMismatchError(node.op, (kind_of(lhs), kind_of(rhs)), node.line, self.file)
        match node.op:
            case Op.GT:
                return lhs > rhs
            case Op.LT:
                return lhs < rhs
            case Op.EQ:
                return lhs == rhs
            case _:
                raise TypeError(
                    f"Unknown relational operator '{node.op}' on line {node.line} in {self.file}"
                )

    # ------------------------------------------------------------------
    # Calls
    # ------------------------------------------------------------------

    def call(self, node: Call, want_result: bool):
        """
        Call a user routine or builtin.

        User routines are resolved through the lexical scope chain before the
        builtin table is consulted. Arguments are evaluated left to right in
        the caller's scope.

        Parameters:
            node (Call): The call node.
            want_result (bool): True when the call appears in an expression.

        Returns:
            The function result, or None for procedures.

        Raises:
            UndefinedProcedureError: If no routine or builtin has the name.
            ArityMismatchError: If the argument count is wrong.
            TypeMismatchError: If a procedure is used as a value or an argument
                does not fit its parameter type.
            RecursionLimitError: If the call would exceed `max_call_depth`.
        """
        routine = self.current_scope.lookup_routine(node.name)
        if routine is None:
            return self.call_builtin(node, want_result)

        decl = routine.decl
        if len(node.args) != len(decl.params):
            raise ArityMismatchError(node.name, len(decl.params), len(node.args), node.line, self.file)
        if want_result and not isinstance(decl, Function):
            raise TypeMismatchError('call', ('procedure',), node.line, self.file)

        args = [self.eval_expr(arg) for arg in node.args]

        if len(self.call_stack) > self.max_call_depth:
            raise RecursionLimitError(self.max_call_depth, node.line, self.file)

        scope = Scope(decl.name, routine.scope)
        for param, value in zip(decl.params, args):
            scope.declare(param.name, param.type, param.line, self.file)
            scope.values[param.name] = self.coerce(
                value, param.type, f"argument '{param.name}' of '{decl.name}'", node.line
            )
        if isinstance(decl, Function):
            scope.declare(decl.name, decl.return_type, decl.line, self.file)

        self.call_stack.append(scope)
        self.deepest_call = max(self.deepest_call, len(self.call_stack) - 1)
        try:
            self.execute_block(decl.block, scope)
        finally:
            self.call_stack.pop()

        if isinstance(decl, Function):
            return scope.values[decl.name]
        return None

    def call_builtin(self, node: Call, want_result: bool):
        """
        Call a host-provided builtin procedure.
        """
        builtin = self.builtins.get(node.name.lower())
        if builtin is None:
            raise UndefinedProcedureError(node.name, node.line, self.file)
        if len(node.args) != builtin.arity:
            raise ArityMismatchError(node.name, builtin.arity, len(node.args), node.line, self.file)
        if want_result:
            raise TypeMismatchError('call', ('procedure',), node.line, self.file)
        builtin.func(self, [self.eval_expr(arg) for arg in node.args])
        return None
