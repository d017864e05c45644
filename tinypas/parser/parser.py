"""
Main parser entry point for tinypas.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`tinypas.parser.declarations`, `tinypas.parser.statements` and
`tinypas.parser.expressions`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from typing import Iterable

from tinypas.exceptions import NestingLimitError, PascalSyntaxError
from tinypas.lexer import Token
from tinypas import nodes

from . import declarations as _decl
from . import expressions as _expr
from . import statements as _stmt


DEFAULT_MAX_NESTING = 100


class Parser:
    """tinypas parser."""

    def __init__(
        self,
        tokens: Iterable[Token],
        file: str = "<string>",
        max_nesting: int = DEFAULT_MAX_NESTING,
    ):
        """
        Initialize the parser over a token stream.

        Parameters:
            tokens (Iterable[Token]): Tokens ending with an ``EOF`` token.
            file (str): The name of the source, used in error messages.
            max_nesting (int): Maximum combined nesting of statements,
                factors and routine blocks.
        """
        self.tokens = iter(tokens)
        self.curr_token = next(self.tokens)
        self.source_file = file
        self.max_nesting = max_nesting
        self.depth = 0

    def eat(self, token_type: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.

        Returns:
            Token: The consumed token.

        Raises:
            PascalSyntaxError: If the token does not match the expected type.
        """
        tok = self.curr_token
        if tok.type != token_type:
            self.error(token_type)
        if tok.type != 'EOF':
            self.curr_token = next(self.tokens)
        return tok

    def error(self, expected: str):
        """
        Raise a syntax error for the current token.
        """
        tok = self.curr_token
        raise PascalSyntaxError(
            expected, tok.type, tok.value, tok.line, tok.column, self.source_file
        )

    def descend(self):
        """
        Enter one level of nesting at the current token.

        Raises:
            NestingLimitError: If the level would exceed `max_nesting`.
        """
        self.depth += 1
        if self.depth > self.max_nesting:
            tok = self.curr_token
            raise NestingLimitError(self.max_nesting, tok.line, tok.column, self.source_file)

    def ascend(self):
        """
        Leave the current level of nesting.
        """
        self.depth -= 1

    # Declaration wrappers
    def program(self) -> nodes.Program:
        """
        Parse a whole program.
        """
        return _decl.parse_program(self)

    def block(self) -> nodes.Block:
        """
        Parse declarations followed by a compound statement.
        """
        self.descend()
        node = _decl.parse_block(self)
        self.ascend()
        return node

    def declarations(self) -> list:
        """
        Parse the variable and routine declarations of a block.
        """
        return _decl.parse_declarations(self)

    # Statement wrappers
    def compound(self) -> nodes.Compound:
        """
        Parse a BEGIN ... END compound statement.
        """
        return _stmt.parse_compound(self)

    def statement_list(self) -> list:
        """
        Parse statements separated by semicolons.
        """
        return _stmt.parse_statement_list(self)

    def statement(self):
        """
        Parse a single statement.
        """
        self.descend()
        node = _stmt.parse_statement(self)
        self.ascend()
        return node

    # Expression wrappers
    def condition(self) -> nodes.RelationalOp:
        """
        Parse a relational comparison of two expressions.
        """
        return _expr.parse_condition(self)

    def expr(self):
        """
        Parse an addition or subtraction expression.
        """
        return _expr.parse_expr(self)

    def term(self):
        """
        Parse a multiplication or division expression.
        """
        return _expr.parse_term(self)

    def factor(self):
        """
        Parse a factor such as a literal, variable, call or parenthesized group.
        """
        self.descend()
        node = _expr.parse_factor(self)
        self.ascend()
        return node

    def arguments(self) -> tuple:
        """
        Parse a parenthesized, comma separated argument list.
        """
        return _expr.parse_arguments(self)

    def parse(self) -> nodes.Program:
        """
        Parse the full input into a program.

        Raises:
            NestingLimitError: If the input nests deeper than `max_nesting`,
                or deep enough to exhaust the host stack first.
        """
        try:
            return self.program()
        except RecursionError as exc:
            tok = self.curr_token
            raise NestingLimitError(self.depth, tok.line, tok.column, self.source_file) from exc
