"""
Tests for the tinypas lexer.
"""
import inspect

import pytest

from tinypas.exceptions import LexicalError
from tinypas.lexer import Lexer, tokenize
from tinypas.operations import VarType


def kinds(source: str) -> list[str]:
    """
    Return the token types produced for ``source``.
    """
    return [tok.type for tok in tokenize(source)]


def test_assignment_tokens():
    """
    Test that a simple assignment produces the expected token types.
    """
    assert kinds("a := 10 DIV 4") == [
        'ID', 'ASSIGN', 'INTEGER_CONST', 'INTEGER_DIV', 'INTEGER_CONST', 'EOF'
    ]


def test_keywords_are_case_insensitive():
    """
    Test that keywords and type names match in any case.
    """
    assert kinds("begin BEGIN Begin end") == ['BEGIN', 'BEGIN', 'BEGIN', 'END', 'EOF']
    types = [tok.value for tok in tokenize("Integer REAL real")][:3]
    assert types == [VarType.INTEGER, VarType.REAL, VarType.REAL]


def test_identifiers_keep_spelling():
    tokens = list(tokenize("Factorial beginning"))
    assert [(t.type, t.value) for t in tokens[:2]] == [('ID', 'Factorial'), ('ID', 'beginning')]


def test_numbers_and_program_end():
    """
    Test that real literals need digits after the dot, so END. is not a number.
    """
    tokens = list(tokenize("3.14 5. END."))
    assert [(t.type, t.value) for t in tokens] == [
        ('REAL_CONST', 3.14),
        ('INTEGER_CONST', 5),
        ('DOT', '.'),
        ('END', 'END'),
        ('DOT', '.'),
        ('EOF', None),
    ]


def test_operators_and_delimiters():
    assert kinds("( ) ; : , + - * / > < =") == [
        'LPAREN', 'RPAREN', 'SEMI', 'COLON', 'COMMA', 'PLUS', 'MINUS',
        'MUL', 'FLOAT_DIV', 'GT', 'LT', 'EQ', 'EOF'
    ]


def test_comments_are_skipped_and_lines_tracked():
    """
    Test that both comment styles are skipped and later positions stay exact.
    """
    source = "{ a\n b }\n(* c\n *) x"
    tokens = list(tokenize(source))
    assert tokens[0].type == 'ID'
    assert tokens[0].value == 'x'
    assert (tokens[0].line, tokens[0].column) == (4, 5)


def test_unexpected_character():
    source = "PROGRAM Main;\nBEGIN\n  a := $\nEND."
    with pytest.raises(LexicalError) as exc_info:
        list(tokenize(source, "<test>"))
    err = exc_info.value
    assert err.char == '$'
    assert (err.line, err.column) == (3, 8)
    assert "in <test>" in str(err)


def test_unterminated_comment():
    with pytest.raises(LexicalError) as exc_info:
        list(tokenize("PROGRAM Main; { oops"))
    assert exc_info.value.char == '{'
    assert exc_info.value.column == 15


def test_tokenize_is_lazy():
    """
    Test that tokens before a bad character are produced before the error.
    """
    tokens = tokenize("a $")
    assert inspect.isgenerator(tokens)
    assert next(tokens).value == 'a'
    with pytest.raises(LexicalError):
        next(tokens)


def test_lexer_restarts_from_beginning():
    lexer = Lexer("x := 1")
    first = [(t.type, t.value) for t in lexer]
    second = [(t.type, t.value) for t in lexer]
    assert first == second
    assert first[-1] == ('EOF', None)
