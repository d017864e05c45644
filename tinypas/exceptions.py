"""Errors.

Parse errors are raised by the lexer and parser, interpreter errors by the
evaluator. Every error keeps its structured fields as attributes and builds a
readable message that ends with the source line and file when known.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


def _locate(message: str, line=None, file=None) -> str:
    if line is not None:
        message += f" on line {line}"
    if file is not None:
        message += f" in {file}"
    return message


class PascalError(Exception):
    """
    Base class for every error raised by tinypas.
    """
    def __init__(self, message, line=None, file=None):
        self.line = line
        self.file = file
        super().__init__(_locate(message, line, file))


class ParseError(PascalError):
    """
    Error raised while turning source text into a syntax tree.
    """


class LexicalError(ParseError):
    """
    Error for characters that cannot start any token.
    """
    def __init__(self, char, line=None, column=None, file=None):
        self.char = char
        self.column = column
        message = f"Unexpected character '{char}'"
        if column is not None:
            message += f" at column {column}"
        super().__init__(message, line, file)


class PascalSyntaxError(ParseError):
    """
    Error for a token that does not fit the grammar.
    """
    def __init__(self, expected, actual, value=None, line=None, column=None, file=None):
        self.expected = expected
        self.actual = actual
        self.value = value
        self.column = column
        message = f"Expected token of type {expected}, but got '{value}' of type {actual}"
        if column is not None:
            message += f" at column {column}"
        super().__init__(message, line, file)


class NestingLimitError(ParseError):
    """
    Error for statements, expressions or routines nested deeper than the parser allows.
    """
    def __init__(self, depth, line=None, column=None, file=None):
        self.depth = depth
        self.column = column
        message = f"Maximum nesting depth of {depth} exceeded"
        if column is not None:
            message += f" at column {column}"
        super().__init__(message, line, file)


class InterpreterError(PascalError):
    """
    Base class for errors raised while running a program.
    """


class UndeclaredVariableError(InterpreterError):
    """
    Error for reading or assigning a name that was never declared.
    """
    def __init__(self, name, line=None, file=None):
        self.name = name
        super().__init__(f"Undeclared variable '{name}'", line, file)


class DuplicateDeclarationError(InterpreterError):
    """
    Error for declaring the same name twice in one scope.
    """
    def __init__(self, name, line=None, file=None):
        self.name = name
        super().__init__(f"Duplicate declaration of '{name}'", line, file)


class UndefinedProcedureError(InterpreterError):
    """
    Error for calling a routine that is neither declared nor builtin.
    """
    def __init__(self, name, line=None, file=None):
        self.name = name
        super().__init__(f"Undefined procedure '{name}'", line, file)


class ArityMismatchError(InterpreterError):
    """
    Error for calls with the wrong number of arguments.
    """
    def __init__(self, name, expected, actual, line=None, file=None):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"'{name}' expects {expected} argument(s) but got {actual}", line, file
        )


class TypeMismatchError(InterpreterError):
    """
    Error for operands or values of the wrong kind.
    """
    def __init__(self, operation, kinds, line=None, file=None):
        self.operation = str(operation)
        self.kinds = tuple(kinds)
        super().__init__(
            f"Type mismatch in {self.operation} for ({', '.join(self.kinds)})", line, file
        )


class DivisionByZeroError(InterpreterError):
    """
    Error for DIV or / with a zero divisor.
    """
    def __init__(self, operation, line=None, file=None):
        self.operation = str(operation)
        super().__init__(f"Division by zero in {self.operation}", line, file)


class RecursionLimitError(InterpreterError):
    """
    Error for calls nested deeper than the configured limit.
    """
    def __init__(self, depth, line=None, file=None):
        self.depth = depth
        super().__init__(f"Maximum call depth of {depth} exceeded", line, file)
