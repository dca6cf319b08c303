"""Tests for texmacros.core.expression â tokenize, to_postfix, evaluate."""
import pytest

from texmacros.core.errors import InvalidExpression, MismatchedParentheses
from texmacros.core.expression import (
    UNARY_MINUS, evaluate, evaluate_postfix, to_postfix, tokenize,
)


# ---------------------------------------------------------------------------
# tokenize / unary folding
# ---------------------------------------------------------------------------

class TestTokenize:
    def test_numbers_and_operators(self):
        assert tokenize("2+3*4") == [2, "+", 3, "*", 4]

    def test_whitespace_discarded(self):
        assert tokenize(" 12 *  ( 3 ) ") == [12, "*", "(", 3, ")"]

    def test_leading_minus(self):
        assert tokenize("-3") == [UNARY_MINUS, 3]

    def test_double_minus_vanishes(self):
        assert tokenize("--3") == [3]

    def test_mixed_signs(self):
        assert tokenize("-+-3") == [3]
        assert tokenize("-+3") == [UNARY_MINUS, 3]

    def test_sign_after_operator(self):
        assert tokenize("2*-3") == [2, "*", UNARY_MINUS, 3]

    def test_sign_after_paren(self):
        assert tokenize("(-3)") == ["(", UNARY_MINUS, 3, ")"]

    def test_binary_minus_kept(self):
        assert tokenize("5-3") == [5, "-", 3]

    def test_signs_split_across_spaces(self):
        assert tokenize("3 - - 2") == [3, "-", UNARY_MINUS, 2]

    def test_decimal(self):
        assert tokenize("1.5") == [1.5]

    def test_invalid_token(self):
        with pytest.raises(InvalidExpression):
            tokenize("2+x")

    def test_non_ascii_digit(self):
        with pytest.raises(InvalidExpression):
            tokenize("2+\u00b2")
        with pytest.raises(InvalidExpression):
            tokenize("\u0663")


# ---------------------------------------------------------------------------
# to_postfix
# ---------------------------------------------------------------------------

class TestToPostfix:
    def test_precedence(self):
        assert to_postfix("2+3*4") == [2, 3, 4, "*", "+"]

    def test_left_associative(self):
        assert to_postfix("8-3-2") == [8, 3, "-", 2, "-"]

    def test_parentheses(self):
        assert to_postfix("(2+3)*4") == [2, 3, "+", 4, "*"]

    def test_unary_binds_tightest(self):
        assert to_postfix("-2*3") == [2, UNARY_MINUS, 3, "*"]

    def test_unary_right_associative(self):
        assert to_postfix("2*-(-3)") == [2, 3, UNARY_MINUS, UNARY_MINUS, "*"]

    def test_unclosed_paren(self):
        with pytest.raises(MismatchedParentheses):
            to_postfix("(2+3")

    def test_unopened_paren(self):
        with pytest.raises(MismatchedParentheses):
            to_postfix("2+3)")


# ---------------------------------------------------------------------------
# evaluate
# ---------------------------------------------------------------------------

class TestEvaluate:
    def test_precedence(self):
        assert evaluate("2+3*4") == 14

    def test_parentheses(self):
        assert evaluate("(2+3)*4") == 20

    def test_double_negation(self):
        assert evaluate("--3") == 3

    def test_unary_minus(self):
        assert evaluate("-3+5") == 2

    def test_subtract_negative(self):
        assert evaluate("3-+-2") == 5

    def test_nested(self):
        assert evaluate("2*(3+(4-1))/3") == pytest.approx(4)

    def test_true_division(self):
        assert evaluate("7/2") == pytest.approx(3.5)

    def test_round_division(self):
        assert evaluate("7/2", division="round") == 4
        assert evaluate("-7/2", division="round") == -4
        assert evaluate("7/3", division="round") == 2

    def test_single_number(self):
        assert evaluate("42") == 42

    def test_mismatched(self):
        with pytest.raises(MismatchedParentheses):
            evaluate("(2+3")

    def test_empty(self):
        with pytest.raises(InvalidExpression):
            evaluate("")

    def test_dangling_operator(self):
        with pytest.raises(InvalidExpression):
            evaluate("2+")

    def test_two_numbers(self):
        with pytest.raises(InvalidExpression):
            evaluate("(2)(3)")

    def test_division_by_zero(self):
        with pytest.raises(InvalidExpression):
            evaluate("1/0")

    def test_huge_literal_division(self):
        with pytest.raises(InvalidExpression):
            evaluate("9" * 400 + "/3")

    def test_huge_literal_times_decimal(self):
        with pytest.raises(InvalidExpression):
            evaluate("9" * 400 + "*1.5")

    def test_float_overflow_to_infinity(self):
        big = "9" * 300 + ".0"
        with pytest.raises(InvalidExpression):
            evaluate(f"{big}*{big}")

    def test_huge_decimal_literal(self):
        with pytest.raises(InvalidExpression):
            evaluate("9" * 400 + ".5")

    def test_huge_integers_stay_exact(self):
        assert evaluate("9" * 400 + "+1") == 10 ** 400


class TestEvaluatePostfix:
    def test_right_operand_popped_first(self):
        assert evaluate_postfix([10, 4, "-"]) == 6

    def test_unary(self):
        assert evaluate_postfix([5, UNARY_MINUS]) == -5

    def test_leftover_values(self):
        with pytest.raises(InvalidExpression):
            evaluate_postfix([1, 2])
