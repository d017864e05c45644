"""Lexer for tinypas.

This lexer performs a single lazy pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type, value and source position.

Tokens cover literals (integer and real constants), keywords (``PROGRAM``,
``BEGIN``, ``REPEAT`` …), type names, operators and delimiters. Keywords are
matched case-insensitively against :data:`RESERVED_KEYWORDS`; every other word
is an identifier. Comment text enclosed in ``{ … }`` or ``(* … *)`` is skipped
during tokenization while line numbers stay accurate.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import re
from typing import Iterator

from tinypas.exceptions import LexicalError
from tinypas.operations import VarType


class Token:
    """
    Represents a lexical token with a type and value.
    """
    __slots__ = ('type', 'value', 'line', 'column')

    def __init__(self, type_, value, line, column=0):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (Any): The token value.
            line (int): The 1-based source line.
            column (int): The 1-based source column.
        """
        self.type = type_
        self.value = value
        self.line = line
        self.column = column

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, line={self.line}, column={self.column})"


# Upper-cased word -> (token type, token value)
RESERVED_KEYWORDS: dict[str, tuple[str, object]] = {
    'PROGRAM':   ('PROGRAM', 'PROGRAM'),
    'VAR':       ('VAR', 'VAR'),
    'BEGIN':     ('BEGIN', 'BEGIN'),
    'END':       ('END', 'END'),
    'IF':        ('IF', 'IF'),
    'THEN':      ('THEN', 'THEN'),
    'ELSE':      ('ELSE', 'ELSE'),
    'REPEAT':    ('REPEAT', 'REPEAT'),
    'UNTIL':     ('UNTIL', 'UNTIL'),
    'PROCEDURE': ('PROCEDURE', 'PROCEDURE'),
    'FUNCTION':  ('FUNCTION', 'FUNCTION'),
    'DIV':       ('INTEGER_DIV', 'DIV'),
    'INTEGER':   ('TYPE', VarType.INTEGER),
    'REAL':      ('TYPE', VarType.REAL),
}


token_specification: list[tuple[str, str]] = [
    # Comments
    ('COMMENT',       r'\{[^}]*\}'),
    ('STARCOMMENT',   r'\(\*(?:.|\n)*?\*\)'),
    ('UNTERMINATED',  r'\{|\(\*'),

    # Literals
    ('REAL_CONST',    r'\d+\.\d+'),
    ('INTEGER_CONST', r'\d+'),

    # Identifiers and keywords
    ('ID',            r'[A-Za-z_][A-Za-z0-9_]*'),

    # Assignment
    ('ASSIGN',        r':='),

    # Delimiters
    ('LPAREN',        r'\('),
    ('RPAREN',        r'\)'),
    ('SEMI',          r';'),
    ('COLON',         r':'),
    ('COMMA',         r','),
    ('DOT',           r'\.'),

    # Arithmetic operators
    ('PLUS',          r'\+'),
    ('MINUS',         r'-'),
    ('MUL',           r'\*'),
    ('FLOAT_DIV',     r'/'),

    # Relational operators
    ('GT',            r'>'),
    ('LT',            r'<'),
    ('EQ',            r'='),

    # Miscellaneous
    ('NEWLINE',       r'\n'),
    ('SKIP',          r'[ \t\r]+'),
    ('MISMATCH',      r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification)
)


def tokenize(code: str, file: str = "<string>") -> Iterator[Token]:
    """
    Lazily convert a string of source code into tokens.

    Parameters:
        code (str): The source code to tokenize.
        file (str): The name of the source, used in error messages.

    Yields:
        Token: Each token in source order, ending with an ``EOF`` token.

    Raises:
        LexicalError: If a character cannot start any token.
    """
    line_num = 1
    line_start = 0

    for match_obj in TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()
        column = match_obj.start() - line_start + 1

        if kind == 'NEWLINE':
            line_num += 1
            line_start = match_obj.end()
            continue
        if kind == 'SKIP':
            continue
        if kind in ('COMMENT', 'STARCOMMENT'):
            newlines = value.count('\n')
            if newlines:
                line_num += newlines
                line_start = match_obj.start() + value.rfind('\n') + 1
            continue
        if kind in ('UNTERMINATED', 'MISMATCH'):
            raise LexicalError(value[0], line_num, column, file)

        if kind == 'REAL_CONST':
            yield Token('REAL_CONST', float(value), line_num, column)
        elif kind == 'INTEGER_CONST':
            yield Token('INTEGER_CONST', int(value), line_num, column)
        elif kind == 'ID':
            keyword = RESERVED_KEYWORDS.get(value.upper())
            if keyword is not None:
                yield Token(keyword[0], keyword[1], line_num, column)
            else:
                yield Token('ID', value, line_num, column)
        else:
            yield Token(kind, value, line_num, column)

    yield Token('EOF', None, line_num, len(code) - line_start + 1)


class Lexer:
    """
    Restartable token source over a complete program text.

    Each iteration starts again from the beginning of the text; a single
    iterator cannot be rewound.
    """
    def __init__(self, code: str, file: str = "<string>"):
        self.code = code
        self.file = file

    def __iter__(self) -> Iterator[Token]:
        return tokenize(self.code, self.file)
