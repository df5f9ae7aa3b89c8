"""
Calculator: composes scanning and evaluation behind input limits.

The scanner and parser accept input of any size. Deeply nested input
can exhaust the interpreter's recursion limit, so this layer rejects
sources that are too long or too deeply nested before parsing.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from wordcalc.core.config import CalcConfig
from wordcalc.core.errors import LimitExceeded
from wordcalc.core.expression_lang import Token, TokenKind, parse, scan

logger = logging.getLogger(__name__)

_PREFIX_KINDS = frozenset({TokenKind.SUB, TokenKind.SQRT, TokenKind.ABS})
_OPERAND_END_KINDS = frozenset({TokenKind.NUM, TokenKind.RPAR})


def nesting_depth(tokens: Sequence[Token]) -> int:
    """Deepest combined nesting of parentheses and prefix operators.

    A ``-`` counts as a prefix operator unless it follows a number or a
    closing parenthesis. A chain of prefix operators ends at the operand
    it applies to.
    """
    runs = [0]  # pending prefix operators per parenthesis level
    deepest = 0
    prev: Token | None = None

    for tok in tokens:
        if tok.kind in _PREFIX_KINDS and (prev is None or prev.kind not in _OPERAND_END_KINDS):
            runs[-1] += 1
        elif tok.kind == TokenKind.LPAR:
            runs.append(0)
        elif tok.kind == TokenKind.RPAR:
            if len(runs) > 1:
                runs.pop()
            runs[-1] = 0
        elif tok.kind == TokenKind.NUM:
            runs[-1] = 0

        deepest = max(deepest, len(runs) - 1 + sum(runs))
        prev = tok

    return deepest


class Calculator:
    """Evaluates expression strings within configured limits."""

    def __init__(self, config: CalcConfig | None = None) -> None:
        self.config = config or CalcConfig()

    def tokenize(self, source: str) -> list[Token]:
        """Scan ``source`` after checking its length.

        Raises:
            LimitExceeded: If the source is longer than ``max_length``.
            UnexpectedChar: If the scanner rejects the source.
        """
        if len(source) > self.config.max_length:
            logger.warning(
                "Rejected expression of %d characters (limit %d)",
                len(source),
                self.config.max_length,
            )
            raise LimitExceeded(
                f"Expression too long: {len(source)} characters "
                f"(limit {self.config.max_length})"
            )

        tokens = scan(source)
        logger.debug("Scanned %d tokens from %r", len(tokens), source)
        return tokens

    def evaluate(self, source: str) -> float:
        """Evaluate an expression string.

        Args:
            source: Expression text (e.g., ``"(1 plus 2) mult 3"``).

        Returns:
            The result as a float. NaN and infinities are valid results.

        Raises:
            LimitExceeded: If the source breaks a configured limit.
            CalcError: If the expression cannot be scanned or evaluated.
        """
        tokens = self.tokenize(source)

        depth = nesting_depth(tokens)
        if depth > self.config.max_depth:
            logger.warning(
                "Rejected expression nested %d levels deep (limit %d)",
                depth,
                self.config.max_depth,
            )
            raise LimitExceeded(
                f"Expression nested too deeply: {depth} levels (limit {self.config.max_depth})"
            )

        try:
            result = parse(tokens)
        except RecursionError:
            logger.warning("Expression nested %d levels exhausted the recursion limit", depth)
            raise LimitExceeded(
                f"Expression nested too deeply: {depth} levels exceed the interpreter recursion limit"
            ) from None
        logger.debug("Evaluated %r = %r", source, result)
        return result


def evaluate(source: str, config: CalcConfig | None = None) -> float:
    """Evaluate ``source`` with a one-off :class:`Calculator`."""
    return Calculator(config).evaluate(source)
