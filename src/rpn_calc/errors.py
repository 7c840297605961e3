"""Exceptions raised while converting and evaluating expressions."""

from rpn_calc.models import ErrorKind


class PostfixError(Exception):
    """Base exception for conversion and evaluation errors."""

    kind: ErrorKind = ErrorKind.PARSE_ERROR

    def __init__(self, message: str | None = None, expression: str | None = None):
        super().__init__(message or self.kind.value)
        self.message = message or self.kind.value
        self.expression = expression


class EmptyStringError(PostfixError):
    """Raised when the input is empty or whitespace only."""

    kind = ErrorKind.EMPTY_STRING


class ParseError(PostfixError):
    """Raised for unrecognized tokens, unbalanced parentheses and malformed expressions."""

    kind = ErrorKind.PARSE_ERROR
