"""
Tests for postfix evaluation and float arithmetic.
"""

import math

import pytest

from rpn_calc.converter import convert
from rpn_calc.errors import ParseError
from rpn_calc.evaluator import apply_operator, divide, evaluate, power
from rpn_calc.models import Token, TokenKind


def num(value: float) -> Token:
    return Token.number(value)


def op(char: str) -> Token:
    return Token.symbol(char)


class TestEvaluate:
    """Test evaluating token sequences directly."""

    def test_single_number(self):
        assert evaluate([num(42)]) == 42

    def test_operand_order(self):
        assert evaluate([num(2), num(3), op("-")]) == -1
        assert evaluate([num(3), num(2), op("/")]) == 1.5
        assert evaluate([num(2), num(3), op("^")]) == 8

    def test_chained_operators(self):
        # 2 3 4 * + -> 2 + 3 * 4
        assert evaluate([num(2), num(3), num(4), op("*"), op("+")]) == 14

    def test_empty_sequence_raises_error(self):
        with pytest.raises(ParseError):
            evaluate([])

    def test_operator_without_operands_raises_error(self):
        with pytest.raises(ParseError):
            evaluate([op("+")])

    def test_operator_with_one_operand_raises_error(self):
        with pytest.raises(ParseError):
            evaluate([num(2), op("+")])

    def test_parenthesis_raises_error(self):
        with pytest.raises(ParseError):
            evaluate([num(2), Token(TokenKind.OPEN_PAREN)])

    def test_leftover_values_are_discarded(self):
        # Known laxity: only the top of the stack is returned
        assert evaluate([num(1), num(2), num(3)]) == 3

    def test_accepts_any_iterable(self):
        assert evaluate(iter([num(1), num(2), op("+")])) == 3


class TestExpressionErrors:
    """Test malformed expressions that convert but fail to evaluate."""

    @pytest.mark.parametrize("infix", ["2 +", "*", "+ 2", "2 * * 3", "()"])
    def test_malformed_expression_raises_error(self, infix):
        with pytest.raises(ParseError):
            convert(infix).evaluate()

    def test_unspaced_subtraction_keeps_last_value(self):
        # "5-3" lexes as [5][-3]; the leftover 5 is dropped
        assert convert("5-3").evaluate() == -3


class TestDivision:
    """Test IEEE division semantics."""

    def test_positive_over_zero(self):
        assert divide(1.0, 0.0) == math.inf

    def test_negative_over_zero(self):
        assert divide(-1.0, 0.0) == -math.inf

    def test_positive_over_negative_zero(self):
        assert divide(1.0, -0.0) == -math.inf

    def test_zero_over_zero(self):
        assert math.isnan(divide(0.0, 0.0))

    def test_regular_division(self):
        assert divide(7.0, 2.0) == 3.5

    def test_expression_division_by_zero(self):
        assert convert("5 / 0").evaluate() == math.inf


class TestPower:
    """Test real-exponent power."""

    def test_fractional_exponent(self):
        assert power(4.0, 0.5) == 2.0

    def test_negative_exponent(self):
        assert power(2.0, -1.0) == 0.5

    def test_negative_base_fractional_exponent_is_nan(self):
        assert math.isnan(power(-8.0, 1 / 3))

    def test_zero_to_negative_power(self):
        assert power(0.0, -1.0) == math.inf

    def test_negative_zero_to_odd_negative_power(self):
        assert power(-0.0, -3.0) == -math.inf

    def test_negative_zero_to_even_negative_power(self):
        assert power(-0.0, -2.0) == math.inf

    def test_overflow(self):
        assert power(10.0, 400.0) == math.inf

    def test_negative_overflow_odd_exponent(self):
        assert power(-10.0, 401.0) == -math.inf

    def test_negative_overflow_even_exponent(self):
        assert power(-10.0, 400.0) == math.inf


class TestApplyOperator:
    """Test operator dispatch."""

    @pytest.mark.parametrize("kind,expected", [
        (TokenKind.ADD, 8),
        (TokenKind.SUB, 4),
        (TokenKind.MUL, 12),
        (TokenKind.DIV, 3),
        (TokenKind.EXP, 36),
    ])
    def test_binary_operators(self, kind, expected):
        assert apply_operator(kind, 6.0, 2.0) == expected

    def test_structural_kind_raises_error(self):
        with pytest.raises(ParseError):
            apply_operator(TokenKind.CLOSE_PAREN, 1.0, 2.0)
