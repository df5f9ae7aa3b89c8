"""
wordcalc - arithmetic expressions in symbols or English words.

Evaluates text such as ``"2 plus 3 mult 4"`` or ``"sqrt(16) ^ 2"`` to a
float, with a closed set of user-facing errors.
"""

from __future__ import annotations

from ._version import get_version
from .core.calculator import Calculator, evaluate
from .core.errors import (
    CalcError,
    ConfigError,
    DivByZero,
    EmptyExpr,
    InvalidExpr,
    LimitExceeded,
    MismatchedParen,
    UnexpectedChar,
    WordcalcError,
)
from .core.expression_lang import Token, TokenKind, parse, scan

__version__ = get_version()

__all__ = [
    "__version__",
    "Calculator",
    "evaluate",
    "parse",
    "scan",
    "Token",
    "TokenKind",
    "WordcalcError",
    "CalcError",
    "DivByZero",
    "InvalidExpr",
    "UnexpectedChar",
    "MismatchedParen",
    "EmptyExpr",
    "LimitExceeded",
    "ConfigError",
]
