"""Tests for the wordcalc parser/evaluator.

Covers:
- Precedence and left-associativity of every tier
- Unary operators
- Floating-point edge cases (NaN, infinities, fmod semantics)
- Structural errors and their order
"""

from __future__ import annotations

import math

import pytest

from wordcalc.core.errors import (
    CalcError,
    DivByZero,
    EmptyExpr,
    InvalidExpr,
    MismatchedParen,
)
from wordcalc.core.expression_lang.parser import Parser, parse
from wordcalc.core.expression_lang.scanner import scan
from wordcalc.core.expression_lang.tokens import Token, TokenKind


def calc(source: str) -> float:
    return parse(scan(source))


# ============================================================================
# Cursor
# ============================================================================


class TestCursor:
    """Token matching and the parser position."""

    def test_failed_match_does_not_advance(self) -> None:
        parser = Parser([Token(TokenKind.NUM, 1.0)])
        assert parser.match(TokenKind.ADD) is None
        assert parser.pos == 0

    def test_match_advances_by_one(self) -> None:
        parser = Parser([Token(TokenKind.NUM, 1.0)])
        tok = parser.match(TokenKind.ADD, TokenKind.NUM)
        assert tok is not None and tok.kind == TokenKind.NUM
        assert parser.pos == 1

    def test_lookahead_past_end_is_no_token(self) -> None:
        parser = Parser([Token(TokenKind.NUM, 1.0)])
        parser.match(TokenKind.NUM)
        assert parser.current is None
        assert parser.match(TokenKind.NUM) is None
        assert parser.pos == 1

    def test_hand_built_tokens(self) -> None:
        tokens = [Token(TokenKind.NUM, 2.0), Token(TokenKind.ADD), Token(TokenKind.NUM, 3.0)]
        assert Parser(tokens).parse() == 5.0


# ============================================================================
# Arithmetic
# ============================================================================


class TestArithmetic:
    """Basic operators, symbolic and worded."""

    @pytest.mark.parametrize(
        ("symbolic", "worded", "expected"),
        [
            ("2+3", "2 plus 3", 5.0),
            ("9 - 4", "9 minus 4", 5.0),
            ("6*7", "6 mult 7", 42.0),
            ("6*7", "6 multiply 7", 42.0),
            ("9/4", "9 div 4", 2.25),
            ("9/4", "9 divide 4", 2.25),
            ("2^10", "2 pow 10", 1024.0),
            ("7%2", "7 mod 2", 1.0),
        ],
    )
    def test_symbols_and_words_agree(self, symbolic: str, worded: str, expected: float) -> None:
        assert calc(symbolic) == expected
        assert calc(worded) == expected

    def test_single_literal(self) -> None:
        assert calc("123.456") == 123.456

    def test_negative_literal(self) -> None:
        assert calc("-0.5") == -0.5

    def test_parenthesized(self) -> None:
        assert calc("(1+2)*3") == 9.0

    def test_nested_parentheses(self) -> None:
        assert calc("((2 + 3) * (4 - 1)) / 5") == 3.0


class TestPrecedence:
    def test_mul_before_add(self) -> None:
        assert calc("2 + 3 * 4") == 14.0
        assert calc("2 * 3 + 4") == 10.0

    def test_pow_before_mul(self) -> None:
        assert calc("2 * 3 ^ 2") == 18.0

    def test_mod_shares_mul_tier(self) -> None:
        assert calc("10 % 4 * 3") == 6.0
        assert calc("3 * 10 % 4") == 2.0

    def test_unary_binds_tighter_than_pow(self) -> None:
        assert calc("- 2 ^ 2") == 4.0
        assert calc("-(2 ^ 2)") == -4.0

    def test_sqrt_applies_to_next_operand_only(self) -> None:
        assert calc("sqrt 16 + 9") == 13.0
        assert calc("sqrt(16 + 9)") == 5.0


class TestAssociativity:
    """Every binary tier folds left to right."""

    def test_subtraction(self) -> None:
        assert calc("10 - 4 - 3") == 3.0

    def test_division(self) -> None:
        assert calc("8 / 2 / 2") == 2.0

    def test_power_is_left_associative(self) -> None:
        assert calc("2^3^2") == 64.0
        assert calc("2 pow 3 pow 2") == 64.0


class TestUnary:
    def test_negation(self) -> None:
        assert calc("-(3)") == -3.0

    def test_double_negation(self) -> None:
        assert calc("- -3") == 3.0

    def test_negated_sqrt(self) -> None:
        assert calc("-sqrt 4") == -2.0
        assert calc("minus sqrt 4") == -2.0

    def test_abs(self) -> None:
        assert calc("abs -3") == 3.0
        assert calc("abs(2 - 5)") == 3.0

    def test_nested_functions(self) -> None:
        assert calc("sqrt sqrt 16") == 2.0
        assert calc("abs sqrt 9") == 3.0


# ============================================================================
# Floating-point edge cases
# ============================================================================


class TestFloatingPoint:
    """NaN and infinities are results, not errors."""

    def test_sqrt_of_negative_literal(self) -> None:
        assert math.isnan(calc("sqrt-4"))

    def test_sqrt_of_negative_group(self) -> None:
        assert math.isnan(calc("sqrt(-4)"))

    def test_nan_propagates(self) -> None:
        assert math.isnan(calc("sqrt(-1) + 1"))

    def test_modulo_by_zero_is_nan(self) -> None:
        assert math.isnan(calc("5 % 0"))
        assert math.isnan(calc("5 mod 0"))

    def test_remainder_keeps_dividend_sign(self) -> None:
        assert calc("-7 % 2") == -1.0
        assert calc("7 % -2") == 1.0

    def test_fractional_power_of_negative_is_nan(self) -> None:
        assert math.isnan(calc("(-8) ^ (1 / 3)"))

    def test_negative_exponent(self) -> None:
        assert calc("2 ^ -1") == 0.5

    def test_zero_to_negative_power(self) -> None:
        assert calc("0 ^ -1") == math.inf

    def test_power_overflow(self) -> None:
        assert calc("10 ^ 400") == math.inf
        assert calc("(-10) ^ 401") == -math.inf

    def test_large_product_overflows_to_inf(self) -> None:
        assert calc("10 ^ 300 * 10 ^ 300") == math.inf


# ============================================================================
# Errors
# ============================================================================


class TestErrors:
    def test_empty(self) -> None:
        with pytest.raises(EmptyExpr, match="Empty expression"):
            parse([])

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivByZero, match="Division by zero"):
            calc("10/0")
        with pytest.raises(DivByZero):
            calc("10 div 0")

    def test_division_by_negative_zero(self) -> None:
        with pytest.raises(DivByZero):
            calc("1 / -0")

    def test_division_by_computed_zero(self) -> None:
        with pytest.raises(DivByZero) as exc_info:
            calc("1 / (2 - 2)")
        assert exc_info.value.pos == 2

    def test_zero_over_zero(self) -> None:
        with pytest.raises(DivByZero):
            calc("0/0")

    def test_unclosed_paren(self) -> None:
        with pytest.raises(MismatchedParen, match="Mismatched parentheses") as exc_info:
            calc("(1+2*3")
        assert exc_info.value.pos == 0

    def test_extra_closing_paren(self) -> None:
        with pytest.raises(MismatchedParen):
            calc("(1+2))")

    def test_dangling_operator(self) -> None:
        with pytest.raises(InvalidExpr, match="Invalid expression"):
            calc("2 +")

    def test_leading_binary_operator(self) -> None:
        with pytest.raises(InvalidExpr):
            calc("* 3")

    def test_empty_group(self) -> None:
        with pytest.raises(InvalidExpr):
            calc("()")

    def test_lone_open_paren(self) -> None:
        with pytest.raises(InvalidExpr):
            calc("(")

    def test_lone_close_paren(self) -> None:
        with pytest.raises(InvalidExpr):
            calc(")")

    def test_adjacent_numbers(self) -> None:
        with pytest.raises(InvalidExpr) as exc_info:
            calc("2 3")
        assert exc_info.value.pos == 2

    def test_double_dot_literal(self) -> None:
        with pytest.raises(InvalidExpr):
            calc("1.2.3")

    def test_unary_without_operand(self) -> None:
        with pytest.raises(InvalidExpr):
            calc("sqrt")

    def test_first_failure_wins(self) -> None:
        with pytest.raises(DivByZero):
            calc("1/0 + (")
        with pytest.raises(DivByZero):
            calc("(1/0")

    def test_all_errors_share_base(self) -> None:
        for source in ("", "1/0", "(1", "+"):
            with pytest.raises(CalcError):
                calc(source)
