"""
Expression parsing utilities for tinypas.

These functions operate on a `tinypas.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, maintaining
operator precedence and left associativity.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from tinypas.nodes import BinaryOp, Call, NumberLiteral, RelationalOp, UnaryOp, Variable
from tinypas.operations import TOKEN_OPS

if TYPE_CHECKING:
    from tinypas.parser import Parser


# ---- Highest precedence ----

def parse_factor(parser: 'Parser'):
    """Parse a unary sign, literal, variable, call or parenthesized expression."""
    tok = parser.curr_token

    if tok.type in ('PLUS', 'MINUS'):
        parser.eat(tok.type)
        return UnaryOp(TOKEN_OPS[tok.type], parser.factor(), tok.line)

    if tok.type in ('INTEGER_CONST', 'REAL_CONST'):
        parser.eat(tok.type)
        return NumberLiteral(tok.value, tok.line)

    if tok.type == 'LPAREN':
        parser.eat('LPAREN')
        node = parser.expr()
        parser.eat('RPAREN')
        return node

    if tok.type == 'ID':
        parser.eat('ID')
        if parser.curr_token.type == 'LPAREN':
            return Call(tok.value, parser.arguments(), tok.line)
        return Variable(tok.value, tok.line)

    parser.error('ID')


def parse_arguments(parser: 'Parser') -> tuple:
    """Parse ``( [expr {, expr}] )``."""
    parser.eat('LPAREN')
    args = []
    if parser.curr_token.type != 'RPAREN':
        args.append(parser.expr())
        while parser.curr_token.type == 'COMMA':
            parser.eat('COMMA')
            args.append(parser.expr())
    parser.eat('RPAREN')
    return tuple(args)


def parse_term(parser: 'Parser'):
    """Parse multiplication, integer division and real division."""
    result = parser.factor()
    while parser.curr_token.type in ('MUL', 'INTEGER_DIV', 'FLOAT_DIV'):
        op_tok = parser.eat(parser.curr_token.type)
        result = BinaryOp(TOKEN_OPS[op_tok.type], result, parser.factor(), op_tok.line)
    return result


def parse_expr(parser: 'Parser'):
    """Parse addition and subtraction expressions."""
    result = parser.term()
    while parser.curr_token.type in ('PLUS', 'MINUS'):
        op_tok = parser.eat(parser.curr_token.type)
        result = BinaryOp(TOKEN_OPS[op_tok.type], result, parser.term(), op_tok.line)
    return result


# ---- Lowest precedence ----

def parse_condition(parser: 'Parser') -> RelationalOp:
    """Parse ``expr (> | < | =) expr``; only IF and UNTIL accept one."""
    left = parser.expr()
    op_tok = parser.curr_token
    if op_tok.type not in ('GT', 'LT', 'EQ'):
        parser.error('GT, LT or EQ')
    parser.eat(op_tok.type)
    return RelationalOp(TOKEN_OPS[op_tok.type], left, parser.expr(), op_tok.line)
