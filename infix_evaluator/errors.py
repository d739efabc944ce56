"""
Parse Error Taxonomy

Every failure raised while turning text into an expression tree derives from
ParseError. Evaluation of a finished tree never raises.
"""

from typing import Optional


class ParseError(ValueError):
    """Base class for all parse failures"""

    def __init__(self, message: str, expression: str = "", position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.expression = expression
        self.position = position

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at index {self.position} of {self.expression!r})"


class IndexOutOfRangeError(ParseError):
    """The scanner reported a split index with no character behind it"""


class InvalidOperatorError(ParseError):
    """A character could not be mapped to a binary operator"""


class NumberFormatError(ParseError):
    """A terminal substring is not a floating-point literal"""


class ParenthesisError(ParseError):
    """A winning '(' does not open a group spanning the whole substring"""
