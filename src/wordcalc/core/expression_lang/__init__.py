"""
wordcalc expression language.

Scanner and eager recursive-descent evaluator for arithmetic written
with symbols or English words.

Usage:
    from wordcalc.core.expression_lang import parse, scan

    tokens = scan("2 plus 3 mult 4")
    result = parse(tokens)
    # result == 14.0
"""

from wordcalc.core.expression_lang.parser import Parser, parse
from wordcalc.core.expression_lang.scanner import Scanner, scan
from wordcalc.core.expression_lang.tokens import Token, TokenKind

__all__ = ["Parser", "Scanner", "Token", "TokenKind", "parse", "scan"]
