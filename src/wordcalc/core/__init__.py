"""Core wordcalc functionality: scanner, evaluator, calculator, configuration."""

from .calculator import Calculator, evaluate
from .config import CalcConfig, load_config
from .errors import (
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
from .expression_lang import Parser, Scanner, Token, TokenKind, parse, scan

__all__ = [
    "Calculator",
    "evaluate",
    "CalcConfig",
    "load_config",
    "Parser",
    "Scanner",
    "Token",
    "TokenKind",
    "parse",
    "scan",
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
