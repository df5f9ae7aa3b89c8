"""
Scanner for wordcalc expressions.

Converts an expression string into a list of tokens in a single
left-to-right pass. Operators may be written as symbols or as English
words (``plus``, ``minus``, ``mult``/``multiply``, ``div``/``divide``,
``pow``, ``mod``, ``sqrt``, ``abs``).
"""

from __future__ import annotations

from wordcalc.core.errors import UnexpectedChar
from wordcalc.core.expression_lang.tokens import (
    KEYWORDS,
    SINGLE_CHAR,
    WHITESPACE,
    Token,
    TokenKind,
)

# Characters reported after an unmatched keyword letter
_PREVIEW_TAIL = 4


class Scanner:
    """Single-use scanner over one source string."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self.tokens: list[Token] = []

    def scan(self) -> list[Token]:
        """Scan the whole source.

        Returns:
            Tokens in source order.

        Raises:
            UnexpectedChar: On the first character or word that cannot
                be classified.
        """
        while self.pos < len(self.source):
            self._scan_token()
        return list(self.tokens)

    def _peek(self, offset: int = 0) -> str | None:
        idx = self.pos + offset
        if idx < len(self.source):
            return self.source[idx]
        return None

    def _emit(self, kind: TokenKind, start: int, value: float = 0.0) -> None:
        self.tokens.append(Token(kind, value, start))

    def _scan_token(self) -> None:
        c = self.source[self.pos]

        if c in KEYWORDS:
            self._scan_word(c)
            return

        if c in SINGLE_CHAR:
            self._emit(SINGLE_CHAR[c], self.pos)
            self.pos += 1
            return

        if c == "-":
            nxt = self._peek(1)
            if nxt is not None and nxt.isnumeric():
                self._scan_number()
            else:
                self._emit(TokenKind.SUB, self.pos)
                self.pos += 1
            return

        if c in WHITESPACE:
            self.pos += 1
            return

        if c.isnumeric() or c == ".":
            self._scan_number()
            return

        raise UnexpectedChar(c, self.pos)

    def _scan_word(self, letter: str) -> None:
        """Match the longest keyword starting with ``letter``."""
        for word, kind in KEYWORDS[letter]:
            if self.source.startswith(word, self.pos):
                self._emit(kind, self.pos)
                self.pos += len(word)
                return

        preview = self.source[self.pos : self.pos + 1 + _PREVIEW_TAIL]
        raise UnexpectedChar(preview, self.pos)

    def _scan_number(self) -> None:
        """Read an optionally negative literal with at most one '.'."""
        start = self.pos
        chars: list[str] = []
        if self.source[self.pos] == "-":
            chars.append("-")
            self.pos += 1

        seen_dot = False
        while self.pos < len(self.source):
            c = self.source[self.pos]
            if c.isnumeric():
                chars.append(c)
            elif c == "." and not seen_dot:
                seen_dot = True
                chars.append(c)
            else:
                break
            self.pos += 1

        text = "".join(chars)
        try:
            value = float(text)
        except ValueError:
            raise UnexpectedChar(text, start) from None
        self._emit(TokenKind.NUM, start, value)


def scan(source: str) -> list[Token]:
    """Tokenize an expression string.

    Args:
        source: Expression text (e.g., ``"2 plus 3 * 4"``).

    Returns:
        Tokens in source order. Empty for empty or blank input.

    Raises:
        UnexpectedChar: If the text contains something that is not a
            number, operator, keyword or whitespace.
    """
    return Scanner(source).scan()
