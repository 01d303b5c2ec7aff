"""Unit tests for the recursive-descent parser."""

import pytest

from scicalc.errors import (
    EmptyExpression, MissingArgumentList, NestingTooDeep, UnbalancedParentheses,
    UnexpectedToken, UnknownIdentifier,
)
from scicalc.lexer import TokenKind, tokenize
from scicalc.nodes import BinaryOp, Call, Constant, Literal, Percent, UnaryOp
from scicalc.parser import Parser, parse


def tree(text):
    return parse(tokenize(text))


class TestPrecedence:

    def test_multiplication_binds_tighter_than_addition(self):
        assert tree("2+3*4") == BinaryOp("+", Literal(2.0), BinaryOp("*", Literal(3.0), Literal(4.0)))

    def test_grouping_overrides_precedence(self):
        assert tree("(2+3)*4") == BinaryOp("*", BinaryOp("+", Literal(2.0), Literal(3.0)), Literal(4.0))

    def test_addition_is_left_associative(self):
        assert tree("1-2-3") == BinaryOp("-", BinaryOp("-", Literal(1.0), Literal(2.0)), Literal(3.0))

    def test_power_is_right_associative(self):
        assert tree("2^3^2") == BinaryOp("^", Literal(2.0), BinaryOp("^", Literal(3.0), Literal(2.0)))

    def test_unary_minus_is_looser_than_power(self):
        assert tree("-2^2") == UnaryOp("-", BinaryOp("^", Literal(2.0), Literal(2.0)))

    def test_negative_exponent(self):
        assert tree("2^-1") == BinaryOp("^", Literal(2.0), UnaryOp("-", Literal(1.0)))

    def test_unary_minus_inside_product(self):
        assert tree("3*-2") == BinaryOp("*", Literal(3.0), UnaryOp("-", Literal(2.0)))

    def test_double_negation(self):
        assert tree("--4") == UnaryOp("-", UnaryOp("-", Literal(4.0)))


class TestPrimaries:

    def test_constants(self):
        assert tree("pi") == Constant("pi")
        assert tree("e") == Constant("e")
        assert tree("π") == Constant("pi")

    def test_function_call(self):
        assert tree("sin(30)") == Call("sin", Literal(30.0))
        assert tree("√(9)") == Call("sqrt", Literal(9.0))

    def test_nested_call_argument(self):
        assert tree("log(10^(1+1))") == Call(
            "log", BinaryOp("^", Literal(10.0), BinaryOp("+", Literal(1.0), Literal(1.0))))

    def test_percent_is_postfix_on_primary(self):
        assert tree("50%") == Percent(Literal(50.0))
        assert tree("200*5%") == BinaryOp("*", Literal(200.0), Percent(Literal(5.0)))
        assert tree("(1+1)%") == Percent(BinaryOp("+", Literal(1.0), Literal(1.0)))

    def test_percent_under_negation(self):
        assert tree("-50%") == UnaryOp("-", Percent(Literal(50.0)))


class TestParseErrors:

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_expression(self, text):
        with pytest.raises(EmptyExpression):
            tree(text)

    def test_function_without_argument_list(self):
        with pytest.raises(MissingArgumentList) as exc:
            tree("sin")
        assert exc.value.name == "sin"
        with pytest.raises(MissingArgumentList):
            tree("sqrt 9")
        with pytest.raises(MissingArgumentList):
            tree("√9")

    @pytest.mark.parametrize("text", ["(2+3", "2+3)", "((1)", "sin(30", ")", "2*(", "sin("])
    def test_unbalanced_parentheses(self, text):
        with pytest.raises(UnbalancedParentheses):
            tree(text)

    def test_premature_end(self):
        with pytest.raises(UnexpectedToken) as exc:
            tree("2+")
        assert exc.value.token.kind is TokenKind.END
        assert exc.value.position == 2

    @pytest.mark.parametrize("text,position", [
        ("2 3", 2),
        ("pi(2)", 2),
        ("()", 1),
        ("2**3", 2),
        ("+3", 0),
        ("50%%", 3),
        ("(2 3)", 3),
    ])
    def test_unexpected_token(self, text, position):
        with pytest.raises(UnexpectedToken) as exc:
            tree(text)
        assert exc.value.position == position

    @pytest.mark.parametrize("name", ["x", "pow", "PI", "Sin", "exp"])
    def test_unknown_identifier(self, name):
        with pytest.raises(UnknownIdentifier) as exc:
            tree(f"{name}(2)")
        assert exc.value.name == name

    def test_token_stream_must_be_terminated(self):
        with pytest.raises(ValueError):
            Parser(tokenize("1+1")[:-1])


class TestNesting:

    @pytest.mark.parametrize("text,position", [
        ("-" * 1500 + "1", 64),
        ("(" * 400 + "1" + ")" * 400, 64),
        ("(" * 400 + "1", 64),
        ("sqrt(" * 100 + "4" + ")" * 100, 324),
        ("2^" * 500 + "1", 129),
    ])
    def test_too_deep(self, text, position):
        with pytest.raises(NestingTooDeep) as exc:
            tree(text)
        assert exc.value.position == position
        assert exc.value.limit == 64

    def test_at_the_limit(self):
        node = tree("-" * 64 + "1")
        for _ in range(64):
            assert isinstance(node, UnaryOp)
            node = node.operand
        assert node == Literal(1.0)
        assert tree("(" * 64 + "1" + ")" * 64) == Literal(1.0)

    def test_siblings_do_not_accumulate(self):
        text = "+".join(["(" * 40 + "1" + ")" * 40] * 10)
        assert isinstance(tree(text), BinaryOp)

    def test_long_flat_chain_is_not_nesting(self):
        node = tree("+".join(["1"] * 1000))
        assert node.op == "+" and node.right == Literal(1.0)

    def test_custom_limit(self):
        assert parse(tokenize("((1))"), max_depth=2) == Literal(1.0)
        with pytest.raises(NestingTooDeep) as exc:
            parse(tokenize("(((1)))"), max_depth=2)
        assert exc.value.position == 2
