"""
Token types shared by the scanner and the parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class TokenKind(StrEnum):
    """Token types for arithmetic expressions."""

    # Operators
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    POW = auto()
    MOD = auto()

    # Punctuation
    LPAR = auto()
    RPAR = auto()

    # Literals
    NUM = auto()

    # Unary functions
    SQRT = auto()
    ABS = auto()

    @property
    def precedence(self) -> int:
        """Binding tier of the operator, 0 for operands and parentheses."""
        return _PRECEDENCE.get(self, 0)


_PRECEDENCE: dict[TokenKind, int] = {
    TokenKind.ADD: 1,
    TokenKind.SUB: 1,
    TokenKind.MUL: 2,
    TokenKind.DIV: 2,
    TokenKind.MOD: 2,
    TokenKind.POW: 3,
    TokenKind.SQRT: 4,
    TokenKind.ABS: 4,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexical unit. ``value`` is only meaningful for NUM."""

    kind: TokenKind
    value: float = 0.0
    pos: int = 0

    def __repr__(self) -> str:
        if self.kind == TokenKind.NUM:
            return f"Token({self.kind}, {self.value!r}, pos={self.pos})"
        return f"Token({self.kind}, pos={self.pos})"


# Leading letter -> candidate words, longest first so that "multiply"
# wins over "mult" and "divide" over "div".
KEYWORDS: dict[str, tuple[tuple[str, TokenKind], ...]] = {
    "p": (("plus", TokenKind.ADD), ("pow", TokenKind.POW)),
    "m": (
        ("multiply", TokenKind.MUL),
        ("minus", TokenKind.SUB),
        ("mult", TokenKind.MUL),
        ("mod", TokenKind.MOD),
    ),
    "d": (("divide", TokenKind.DIV), ("div", TokenKind.DIV)),
    "s": (("sqrt", TokenKind.SQRT),),
    "a": (("abs", TokenKind.ABS),),
}

SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.ADD,
    "*": TokenKind.MUL,
    "/": TokenKind.DIV,
    "^": TokenKind.POW,
    "%": TokenKind.MOD,
    "(": TokenKind.LPAR,
    ")": TokenKind.RPAR,
}

WHITESPACE = " \t\n\r"
