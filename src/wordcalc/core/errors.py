"""
Error types for wordcalc scanning, parsing, evaluation and configuration.
"""


class WordcalcError(Exception):
    """Base exception for all wordcalc errors."""

    default_message = "Calculation failed"

    def __init__(self, message: str | None = None, pos: int | None = None):
        self.message = message or self.default_message
        self.pos = pos
        super().__init__(self.message)


class CalcError(WordcalcError):
    """
    Raised when an expression cannot be evaluated.

    The subclasses form a closed set. Every one of them is meant to be
    shown to whoever typed the expression.
    """


class DivByZero(CalcError):
    """Right operand of ``/`` is exactly zero."""

    default_message = "Division by zero"


class InvalidExpr(CalcError):
    """
    Raised when the token stream does not form an expression.

    Examples:
    - Dangling operator (``2 +``)
    - Operator where an operand is expected (``* 3``)
    - Tokens left over after a complete expression (``2 3``)
    """

    default_message = "Invalid expression"


class UnexpectedChar(CalcError):
    """
    Raised when the scanner meets text it cannot classify.

    ``detail`` is the offending character, a short preview for an
    unknown word (letter plus up to four following characters), or the
    numeral text that could not be converted.
    """

    def __init__(self, detail: str, pos: int | None = None):
        self.detail = detail
        super().__init__(f"Unexpected character: {detail}", pos)


class MismatchedParen(CalcError):
    """An opening parenthesis was not closed, or a closing one was not opened."""

    default_message = "Mismatched parentheses"


class EmptyExpr(CalcError):
    """There was nothing to evaluate."""

    default_message = "Empty expression"


class LimitExceeded(WordcalcError):
    """
    Raised by the calculator when input exceeds a configured cap.

    The scanner and parser never raise this; it belongs to the layer
    that feeds them.
    """


class ConfigError(WordcalcError):
    """Raised when a configuration file cannot be read or is invalid."""
