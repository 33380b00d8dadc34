import pytest

from arith.errors import LexError
from arith.lexer import Token, tokenize


def kinds(source):
    return [t.kind for t in tokenize(source)]


def test_tokenize_definition():
    tokens = tokenize('let x = 1.5;')
    assert tokens == [
        Token('LET', 'let', 1),
        Token('IDENT', 'x', 1),
        Token('=', '=', 1),
        Token('NUMBER', '1.5', 1),
        Token(';', ';', 1),
        Token('EOF', '', 1),
    ]


def test_tokenize_function_def_and_call():
    assert kinds('func add(a, b) = a + b; add(2, 3);') == [
        'FUNC', 'IDENT', '(', 'IDENT', ',', 'IDENT', ')', '=', 'IDENT', '+', 'IDENT', ';',
        'IDENT', '(', 'NUMBER', ',', 'NUMBER', ')', ';', 'EOF',
    ]


def test_operators():
    assert kinds('1+2-3*4/5') == ['NUMBER', '+', 'NUMBER', '-', 'NUMBER', '*', 'NUMBER', '/', 'NUMBER', 'EOF']


def test_numbers_take_longest_prefix():
    tokens = tokenize('123 .25 4.0')
    assert [t.lexeme for t in tokens[:-1]] == ['123', '.25', '4.0']


def test_keywords_win_on_identifier_prefixes():
    # keyword patterns are tried before the identifier pattern
    assert kinds('letter') == ['LET', 'IDENT', 'EOF']
    tokens = tokenize('letter funcs let func')
    assert [(t.kind, t.lexeme) for t in tokens[:-1]] == [
        ('LET', 'let'), ('IDENT', 'ter'), ('FUNC', 'func'), ('IDENT', 's'),
        ('LET', 'let'), ('FUNC', 'func'),
    ]


def test_keyword_only_at_the_start_of_a_word():
    assert kinds('outlet') == ['IDENT', 'EOF']


def test_line_numbers_follow_newlines():
    tokens = tokenize('let a = 1;\n\nlet b =\n 2;')
    assert [t.line for t in tokens if t.kind == 'LET'] == [1, 3]
    assert tokens[-2] == Token(';', ';', 4)
    assert tokens[-1] == Token('EOF', '', 4)


def test_empty_source_is_only_eof():
    assert tokenize('') == [Token('EOF', '', 1)]
    assert kinds('  \n\t ') == ['EOF']


def test_unknown_character():
    with pytest.raises(LexError) as exc:
        tokenize('let a = 1;\na % 2;')
    assert exc.value.character == '%'
    assert exc.value.line == 2
    assert exc.value.kind == 'LexError'


def test_digits_are_not_identifier_characters():
    assert kinds('x1') == ['IDENT', 'NUMBER', 'EOF']


def test_underscore_is_rejected():
    with pytest.raises(LexError):
        tokenize('my_var;')


def test_relexing_is_idempotent():
    source = 'func f(a) = a * (a + 2);\nlet y = f(3);\ny / 2;'
    assert tokenize(source) == tokenize(source)


def test_tokens_are_immutable():
    token = tokenize('1')[0]
    with pytest.raises(AttributeError):
        token.kind = 'IDENT'
