"""Declaration parsing utilities for tinypas.

These functions operate on a `tinypas.parser.parser.Parser` instance and
handle the program header, blocks, VAR sections and procedure and function
declarations, including their formal parameter lists.


File: declarations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from tinypas.nodes import Block, Function, Param, Procedure, Program, VariableDeclaration

if TYPE_CHECKING:
    from tinypas.parser import Parser


def parse_program(parser: 'Parser') -> Program:
    """
    Parse a whole program.

    Syntax:
        PROGRAM <identifier> ; <block> .

    Args:
        parser: The parser instance.

    Returns:
        Program: the root of the syntax tree.
    """
    tok = parser.eat('PROGRAM')
    name = parser.eat('ID').value
    parser.eat('SEMI')
    block = parser.block()
    parser.eat('DOT')
    parser.eat('EOF')
    return Program(name, block, tok.line)


def parse_block(parser: 'Parser') -> Block:
    """
    Parse a block.

    Syntax:
        <declarations> <compound>

    Args:
        parser: The parser instance.

    Returns:
        Block: declarations in source order and the body.
    """
    line = parser.curr_token.line
    declarations = parser.declarations()
    return Block(tuple(declarations), parser.compound(), line)


def parse_declarations(parser: 'Parser') -> list:
    """
    Parse the declaration part of a block.

    Syntax:
        [ VAR <idlist> : <type> ; { <idlist> : <type> ; } ]
        { (<procedure> | <function>) ; }

    Args:
        parser: The parser instance.

    Returns:
        list: VariableDeclaration, Procedure and Function nodes.
    """
    declarations = []
    if parser.curr_token.type == 'VAR':
        parser.eat('VAR')
        declarations.extend(_parse_typed_names(parser, VariableDeclaration))
        parser.eat('SEMI')
        while parser.curr_token.type == 'ID':
            declarations.extend(_parse_typed_names(parser, VariableDeclaration))
            parser.eat('SEMI')

    while parser.curr_token.type in ('PROCEDURE', 'FUNCTION'):
        if parser.curr_token.type == 'PROCEDURE':
            declarations.append(parse_procedure(parser))
        else:
            declarations.append(parse_function(parser))
        parser.eat('SEMI')
    return declarations


def parse_procedure(parser: 'Parser') -> Procedure:
    """
    Parse a procedure declaration.

    Syntax:
        PROCEDURE <identifier> [ <formal parameters> ] ; <block>

    Args:
        parser: The parser instance.

    Returns:
        Procedure: the declaration node.
    """
    tok = parser.eat('PROCEDURE')
    name = parser.eat('ID').value
    params = _parse_formal_parameters(parser)
    parser.eat('SEMI')
    return Procedure(name, params, parser.block(), tok.line)


def parse_function(parser: 'Parser') -> Function:
    """
    Parse a function declaration.

    Syntax:
        FUNCTION <identifier> [ <formal parameters> ] : <type> ; <block>

    Args:
        parser: The parser instance.

    Returns:
        Function: the declaration node.
    """
    tok = parser.eat('FUNCTION')
    name = parser.eat('ID').value
    params = _parse_formal_parameters(parser)
    parser.eat('COLON')
    return_type = parser.eat('TYPE').value
    parser.eat('SEMI')
    return Function(name, params, parser.block(), return_type, tok.line)


def _parse_formal_parameters(parser: 'Parser') -> tuple:
    # ( [ <idlist> : <type> { ; <idlist> : <type> } ] ), parentheses optional
    if parser.curr_token.type != 'LPAREN':
        return ()
    parser.eat('LPAREN')
    params = []
    if parser.curr_token.type != 'RPAREN':
        params.extend(_parse_typed_names(parser, Param))
        while parser.curr_token.type == 'SEMI':
            parser.eat('SEMI')
            params.extend(_parse_typed_names(parser, Param))
    parser.eat('RPAREN')
    return tuple(params)


def _parse_typed_names(parser: 'Parser', node_type) -> list:
    # <identifier> { , <identifier> } : <type>
    names = [parser.eat('ID')]
    while parser.curr_token.type == 'COMMA':
        parser.eat('COMMA')
        names.append(parser.eat('ID'))
    parser.eat('COLON')
    var_type = parser.eat('TYPE').value
    return [node_type(tok.value, var_type, tok.line) for tok in names]
