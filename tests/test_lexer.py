"""Unit tests for the tokenizer."""

import pytest

from scicalc.errors import MalformedNumber, UnexpectedCharacter
from scicalc.lexer import Token, TokenKind, tokenize


def kinds(text):
    return [t.kind for t in tokenize(text)]


def values(text):
    return [t.value for t in tokenize(text)]


class TestTokenize:

    def test_simple_expression(self):
        assert kinds("sin(30)+2^3") == [
            TokenKind.IDENTIFIER, TokenKind.LPAREN, TokenKind.NUMBER, TokenKind.RPAREN,
            TokenKind.OPERATOR, TokenKind.NUMBER, TokenKind.OPERATOR, TokenKind.NUMBER,
            TokenKind.END,
        ]
        assert values("sin(30)+2^3") == ["sin", "(", 30.0, ")", "+", 2.0, "^", 3.0, None]

    def test_whitespace_is_skipped_and_positions_kept(self):
        tokens = tokenize("  12 +\t3 ")
        assert [(t.value, t.position) for t in tokens] == [(12.0, 2), ("+", 5), (3.0, 7), (None, 9)]

    def test_empty_input_is_only_end(self):
        assert tokenize("") == [Token(TokenKind.END, None, 0)]
        assert kinds("   ") == [TokenKind.END]

    def test_decimal_numbers(self):
        assert values("3.25 .5 7.") == [3.25, 0.5, 7.0, None]

    def test_two_decimal_points_is_malformed(self):
        with pytest.raises(MalformedNumber) as exc:
            tokenize("1+1.2.3")
        assert exc.value.position == 2
        assert exc.value.text == "1.2.3"

    def test_lone_point_is_malformed(self):
        with pytest.raises(MalformedNumber):
            tokenize("2*.")

    def test_identifiers_are_maximal_letter_runs(self):
        assert values("asin(x)")[:3] == ["asin", "(", "x"]
        assert values("sinpi") == ["sinpi", None]

    def test_identifiers_are_case_sensitive(self):
        assert values("PI") == ["PI", None]

    def test_ui_glyph_aliases(self):
        assert values("2×3÷4") == [2.0, "*", 3.0, "/", 4.0, None]
        assert kinds("√(9)")[0] is TokenKind.IDENTIFIER
        assert values("√(9)")[0] == "sqrt"
        assert values("π")[0] == "pi"

    def test_all_operators(self):
        assert values("+-*/^%")[:-1] == ["+", "-", "*", "/", "^", "%"]

    @pytest.mark.parametrize("text,char,position", [
        ("2 $ 3", "$", 2),
        ("1,5", ",", 1),
        ("2=4", "=", 1),
        ("été", "é", 0),
        ("2²", "²", 1),
    ])
    def test_unexpected_character(self, text, char, position):
        with pytest.raises(UnexpectedCharacter) as exc:
            tokenize(text)
        assert exc.value.char == char
        assert exc.value.position == position

    def test_end_token_always_last(self):
        tokens = tokenize("(1)")
        assert tokens[-1].kind is TokenKind.END
        assert sum(1 for t in tokens if t.kind is TokenKind.END) == 1
