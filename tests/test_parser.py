import pytest

from arith.ast import (
    Program, NumberLiteral, VariableRef, BinaryOp, FunctionCall, Definition, FunctionDef,
)
from arith.errors import ParseError, RecursionLimitError
from arith.lexer import tokenize
from arith.parser import Parser, parse_program, parse_tokens


def parse_expr(source):
    program = parse_program(source)
    assert len(program.body) == 1
    return program.body[0]


def test_multiplication_binds_tighter():
    assert parse_expr('2 + 3 * 4;') == BinaryOp(
        '+', NumberLiteral(2.0), BinaryOp('*', NumberLiteral(3.0), NumberLiteral(4.0)),
    )


def test_parentheses_override_precedence():
    assert parse_expr('(2 + 3) * 4;') == BinaryOp(
        '*', BinaryOp('+', NumberLiteral(2.0), NumberLiteral(3.0)), NumberLiteral(4.0),
    )


def test_left_associative():
    assert parse_expr('8 - 4 - 2;') == BinaryOp(
        '-', BinaryOp('-', NumberLiteral(8.0), NumberLiteral(4.0)), NumberLiteral(2.0),
    )
    assert parse_expr('8 / 4 / 2;') == BinaryOp(
        '/', BinaryOp('/', NumberLiteral(8.0), NumberLiteral(4.0)), NumberLiteral(2.0),
    )


def test_definition():
    assert parse_expr('let x = y + 1;') == Definition(
        'x', BinaryOp('+', VariableRef('y'), NumberLiteral(1.0)),
    )


def test_function_definition():
    assert parse_expr('func add(a, b) = a + b;') == FunctionDef(
        'add', ['a', 'b'], BinaryOp('+', VariableRef('a'), VariableRef('b')),
    )
    assert parse_expr('func one() = 1;') == FunctionDef('one', [], NumberLiteral(1.0))


def test_call_versus_variable():
    assert parse_expr('f(1, g(x), y);') == FunctionCall(
        'f', [NumberLiteral(1.0), FunctionCall('g', [VariableRef('x')]), VariableRef('y')],
    )
    assert parse_expr('f;') == VariableRef('f')
    assert parse_expr('f();') == FunctionCall('f', [])


def test_empty_statements_are_skipped():
    assert parse_program(';;;') == Program([])
    assert parse_program('; 1; ;; 2;') == Program([NumberLiteral(1.0), NumberLiteral(2.0)])


def test_statements_in_order():
    program = parse_program('let x = 5;\nx + 1;')
    assert program.body == [
        Definition('x', NumberLiteral(5.0)),
        BinaryOp('+', VariableRef('x'), NumberLiteral(1.0)),
    ]


def test_missing_terminator_cites_statement_start():
    with pytest.raises(ParseError) as exc:
        parse_program('1;\nlet x =\n  2 +\n  3\n')
    assert exc.value.line == 2
    assert "missing ';'" in exc.value.message


def test_unmatched_paren_cites_opening_line():
    with pytest.raises(ParseError) as exc:
        parse_program('(1 +\n(2 * 3)\n+ 4;')
    assert exc.value.line == 1
    assert 'unmatched' in exc.value.message


def test_unmatched_paren_in_call():
    with pytest.raises(ParseError) as exc:
        parse_program('f(1,\n 2;')
    assert exc.value.line == 1


def test_missing_equals_in_definition():
    with pytest.raises(ParseError) as exc:
        parse_program('let x 5;')
    assert "'='" in exc.value.message


def test_let_requires_identifier():
    with pytest.raises(ParseError):
        parse_program('let 5 = 5;')


def test_malformed_parameter_list():
    with pytest.raises(ParseError):
        parse_program('func f(a b) = a;')
    with pytest.raises(ParseError):
        parse_program('func f(a,) = a;')
    with pytest.raises(ParseError):
        parse_program('func f(1) = 1;')


def test_duplicate_parameters():
    with pytest.raises(ParseError) as exc:
        parse_program('func f(a, a) = a;')
    assert 'duplicate' in exc.value.message


def test_malformed_argument_list():
    with pytest.raises(ParseError):
        parse_program('f(1 2);')
    with pytest.raises(ParseError):
        parse_program('f(1,);')


def test_dangling_operator():
    with pytest.raises(ParseError) as exc:
        parse_program('1 +;')
    assert exc.value.line == 1


def test_parser_uses_its_own_cursor():
    tokens = tokenize('1; 2;')
    first = Parser(tokens)
    second = Parser(tokens)
    assert first.parse_program() == second.parse_program()
    assert parse_tokens(tokens) == Program([NumberLiteral(1.0), NumberLiteral(2.0)])
    assert tokens[0].lexeme == '1'


def test_tokens_must_end_with_eof():
    with pytest.raises(ValueError):
        Parser(tokenize('1;')[:-1])


def test_deep_nesting_is_a_recursion_limit():
    source = '1;\n' + '(' * 5000 + '1' + ')' * 5000 + ';'
    with pytest.raises(RecursionLimitError) as exc:
        parse_program(source)
    assert exc.value.line == 2
    assert exc.value.kind == 'RecursionLimitError'


def test_moderate_nesting_parses():
    assert parse_expr('(' * 50 + '7' + ')' * 50 + ';') == NumberLiteral(7.0)
