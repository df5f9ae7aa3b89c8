"""
Recursive descent parser and evaluator for wordcalc expressions.

Values are folded while descending; no tree is built.

Grammar (precedence low to high):
    expr        → addition
    addition    → multiply (("+"|"-") multiply)*
    multiply    → power (("*"|"/"|"%") power)*
    power       → unary ("^" unary)*
    unary       → ("-" | "sqrt" | "abs") unary | primary
    primary     → NUM | "(" expr ")"

Every binary tier is left-associative, including "^": 2^3^2 == 64.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from wordcalc.core.errors import DivByZero, EmptyExpr, InvalidExpr, MismatchedParen
from wordcalc.core.expression_lang.tokens import Token, TokenKind


class Parser:
    """Recursive descent evaluator over a token sequence."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    @property
    def current(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    @property
    def previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def check(self, kind: TokenKind) -> bool:
        tok = self.current
        return tok is not None and tok.kind == kind

    def match(self, *kinds: TokenKind) -> Token | None:
        for kind in kinds:
            if self.check(kind):
                self.pos += 1
                return self.previous
        return None

    def parse(self) -> float:
        """Evaluate the whole token sequence.

        Raises:
            EmptyExpr: If there are no tokens.
            InvalidExpr: If an operand is missing or tokens are left over.
            MismatchedParen: If parentheses do not pair up.
            DivByZero: If a divisor is exactly zero.
        """
        if not self.tokens:
            raise EmptyExpr()

        value = self.parse_expr()

        # Ensure all tokens consumed
        tok = self.current
        if tok is not None:
            if tok.kind == TokenKind.RPAR:
                raise MismatchedParen(pos=tok.pos)
            raise InvalidExpr(pos=tok.pos)

        return value

    # -- Grammar rules --

    def parse_expr(self) -> float:
        return self.parse_addition()

    def parse_addition(self) -> float:
        """multiply (('+' | '-') multiply)*"""
        left = self.parse_multiply()
        while op := self.match(TokenKind.ADD, TokenKind.SUB):
            right = self.parse_multiply()
            if op.kind == TokenKind.ADD:
                left += right
            else:
                left -= right
        return left

    def parse_multiply(self) -> float:
        """power (('*' | '/' | '%') power)*"""
        left = self.parse_power()
        while op := self.match(TokenKind.MUL, TokenKind.DIV, TokenKind.MOD):
            right = self.parse_power()
            if op.kind == TokenKind.MUL:
                left *= right
            elif op.kind == TokenKind.DIV:
                if right == 0.0:
                    raise DivByZero(pos=op.pos)
                left /= right
            else:
                left = _remainder(left, right)
        return left

    def parse_power(self) -> float:
        """unary ('^' unary)*"""
        left = self.parse_unary()
        while self.match(TokenKind.POW):
            right = self.parse_unary()
            left = _power(left, right)
        return left

    def parse_unary(self) -> float:
        """('-' | 'sqrt' | 'abs') unary | primary"""
        if self.match(TokenKind.SUB):
            return -self.parse_unary()
        if self.match(TokenKind.SQRT):
            return _sqrt(self.parse_unary())
        if self.match(TokenKind.ABS):
            return abs(self.parse_unary())
        return self.parse_primary()

    def parse_primary(self) -> float:
        """NUM | '(' expr ')'"""
        if num := self.match(TokenKind.NUM):
            return num.value

        if lpar := self.match(TokenKind.LPAR):
            value = self.parse_expr()
            if not self.match(TokenKind.RPAR):
                raise MismatchedParen(pos=lpar.pos)
            return value

        tok = self.current
        raise InvalidExpr(pos=tok.pos if tok is not None else None)


def _remainder(left: float, right: float) -> float:
    """Remainder with the sign of the dividend; NaN instead of raising."""
    try:
        return math.fmod(left, right)
    except ValueError:
        # fmod(x, 0) and fmod(inf, y)
        return math.nan


def _power(base: float, exponent: float) -> float:
    """Real power that returns NaN or an infinity instead of raising."""
    try:
        return math.pow(base, exponent)
    except ValueError:
        if base == 0.0 and exponent < 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def _sqrt(value: float) -> float:
    if value >= 0.0:
        return math.sqrt(value)
    return math.nan


def parse(tokens: Sequence[Token]) -> float:
    """Evaluate a token sequence produced by :func:`scan`.

    Args:
        tokens: Tokens in source order.

    Returns:
        The value of the expression as a float. May be NaN or infinite.

    Raises:
        CalcError: The first structural or arithmetic failure found.
    """
    return Parser(tokens).parse()
