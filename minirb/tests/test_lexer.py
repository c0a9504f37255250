"""
Tests for the minirb lexer.
"""
from minirb.lexer import TOKEN_TYPES, Token, tokenize


def types(source: str) -> list[str]:
    return [tok.type for tok in tokenize(source)]


def test_assignment_tokens():
    assert tokenize("x = 42") == [
        Token('ID', 'x'),
        Token('ASSIGN', '='),
        Token('NUMBER', '42'),
        Token('EOF', ''),
    ]


def test_whitespace_and_newlines_are_skipped():
    assert types("  a\n\t=\r\n 1  \n") == ['ID', 'ASSIGN', 'NUMBER', 'EOF']


def test_keywords_are_case_sensitive():
    assert types("print if else end") == ['PRINT', 'IF', 'ELSE', 'END', 'EOF']
    assert types("Print IF Else END") == ['ID', 'ID', 'ID', 'ID', 'EOF']


def test_keyword_prefix_is_an_identifier():
    tokens = tokenize("printer ending iff")
    assert [tok.type for tok in tokens] == ['ID', 'ID', 'ID', 'EOF']
    assert [tok.value for tok in tokens[:-1]] == ['printer', 'ending', 'iff']


def test_operators_and_delimiters():
    assert types("= + - * / ( ) < >") == [
        'ASSIGN', 'PLUS', 'MINUS', 'MUL', 'DIV',
        'LPAREN', 'RPAREN', 'LT', 'GT', 'EOF',
    ]


def test_double_equals_is_two_assign_tokens():
    assert types("==") == ['ASSIGN', 'ASSIGN', 'EOF']


def test_identifiers_are_letters_only():
    tokens = tokenize("abc123def")
    assert tokens[:-1] == [
        Token('ID', 'abc'),
        Token('NUMBER', '123'),
        Token('ID', 'def'),
    ]


def test_unknown_characters_do_not_stop_lexing():
    tokens = tokenize("x = 1 ; y_ = 2")
    assert Token('UNKNOWN', ';') in tokens
    assert Token('UNKNOWN', '_') in tokens
    assert tokens[-2] == Token('NUMBER', '2')


def test_exactly_one_eof():
    for source in ("", "   \n", "print 1", "$"):
        tokens = tokenize(source)
        assert tokens[-1] == Token('EOF', '')
        assert sum(tok.type == 'EOF' for tok in tokens) == 1


def test_number_keeps_literal_text():
    assert tokenize("007")[0] == Token('NUMBER', '007')


def test_token_types_are_declared():
    source = "if a print 1 else b = 2 * (3 / 4) - 5 + c < d > e end ? # "
    assert {tok.type for tok in tokenize(source)} <= set(TOKEN_TYPES)
