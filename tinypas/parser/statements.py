"""Statement parsing utilities for tinypas.

These functions operate on a `tinypas.parser.parser.Parser` instance and
handle the statement forms of the language: compound blocks, assignments,
procedure calls, conditionals and REPEAT loops.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from tinypas.nodes import Assignment, Call, Compound, If, NoOp, RepeatUntil, Variable

if TYPE_CHECKING:
    from tinypas.parser import Parser


def parse_compound(parser: 'Parser') -> Compound:
    """
    Parse a compound statement.

    Syntax:
        BEGIN <statement> { ; <statement> } END

    Args:
        parser: The parser instance.

    Returns:
        Compound: the statements in source order.
    """
    tok = parser.eat('BEGIN')
    statements = parser.statement_list()
    parser.eat('END')
    return Compound(tuple(statements), tok.line)


def parse_statement_list(parser: 'Parser') -> list:
    """
    Parse statements separated by semicolons.

    Syntax:
        <statement> { ; <statement> }

    Args:
        parser: The parser instance.

    Returns:
        list: the parsed statements, including empty ones.
    """
    statements = [parser.statement()]
    while parser.curr_token.type == 'SEMI':
        parser.eat('SEMI')
        statements.append(parser.statement())
    return statements


def parse_statement(parser: 'Parser'):
    """
    Parse a single statement.

    An identifier starts either an assignment or a call, decided by the token
    that follows it. Any token that cannot start a statement yields an empty
    statement and is left for the caller.

    Args:
        parser: The parser instance.

    Returns:
        The statement node.
    """
    tok = parser.curr_token
    if tok.type == 'BEGIN':
        return parser.compound()
    if tok.type == 'IF':
        return parse_if(parser)
    if tok.type == 'REPEAT':
        return parse_repeat(parser)
    if tok.type == 'ID':
        parser.eat('ID')
        if parser.curr_token.type == 'LPAREN':
            return Call(tok.value, parser.arguments(), tok.line)
        parser.eat('ASSIGN')
        return Assignment(Variable(tok.value, tok.line), parser.expr(), tok.line)
    return NoOp(tok.line)


def parse_if(parser: 'Parser') -> If:
    """
    Parse a conditional statement with an optional else branch.

    Syntax:
        IF <expr> <relop> <expr> THEN <statement> [ ELSE <statement> ]

    Args:
        parser: The parser instance.

    Returns:
        If: the conditional node.
    """
    tok = parser.eat('IF')
    condition = parser.condition()
    parser.eat('THEN')
    then_branch = parser.statement()
    else_branch = None
    if parser.curr_token.type == 'ELSE':
        parser.eat('ELSE')
        else_branch = parser.statement()
    return If(condition, then_branch, else_branch, tok.line)


def parse_repeat(parser: 'Parser') -> RepeatUntil:
    """
    Parse a REPEAT loop.

    Syntax:
        REPEAT <statement> { ; <statement> } UNTIL <expr> <relop> <expr>

    Args:
        parser: The parser instance.

    Returns:
        RepeatUntil: the loop node.
    """
    tok = parser.eat('REPEAT')
    body = Compound(tuple(parser.statement_list()), tok.line)
    parser.eat('UNTIL')
    return RepeatUntil(body, parser.condition(), tok.line)
