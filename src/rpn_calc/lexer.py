"""
Lexer for infix expressions and rendered postfix sequences.

Infix text is scanned left to right for numeric literals and the single
characters ``+ - * / ^ ( )``. A minus sign directly followed by digits is
part of the literal, so ``-3^2`` lexes as ``[-3] ^ [2]``.
"""

import re
from collections.abc import Iterator

import structlog

from rpn_calc.errors import EmptyStringError, ParseError
from rpn_calc.models import Token

logger = structlog.get_logger()


INFIX_PATTERN = re.compile(
    r"(?P<number>-?[0-9]+(?:\.[0-9]+)?)|(?P<symbol>[-+*/^()])"
)

# Canonical rendering: bracketed numbers and bare operators, e.g. "[2][3]+"
POSTFIX_PATTERN = re.compile(
    r"\[(?P<number>-?(?:[0-9]+(?:\.[0-9]+)?|inf|NaN))\]|(?P<symbol>[-+*/^])"
)


def _scan(pattern: re.Pattern, text: str) -> Iterator[Token]:
    if not text.strip():
        raise EmptyStringError(expression=text)

    position = 0
    for match in pattern.finditer(text):
        _check_gap(text, position, match.start())
        position = match.end()

        number = match.group("number")
        if number is not None:
            try:
                yield Token.number(float(number))
            except ValueError as e:
                raise ParseError(f"Invalid number: {number}", expression=text) from e
        else:
            yield Token.symbol(match.group("symbol"))

    _check_gap(text, position, len(text))


def _check_gap(text: str, start: int, end: int) -> None:
    """Anything other than whitespace between two tokens is an error."""
    gap = text[start:end]
    if gap and not gap.isspace():
        logger.debug("Unrecognized input", text=gap.strip(), offset=start)
        raise ParseError(f"Unexpected token: {gap.strip()}", expression=text)


def tokenize(infix: str) -> list[Token]:
    """
    Split an infix expression into tokens.

    Raises EmptyStringError for blank input and ParseError when the text
    contains anything that is neither a token nor whitespace.
    """
    return list(_scan(INFIX_PATTERN, infix))


def tokenize_postfix(rendered: str) -> list[Token]:
    """Split a canonical postfix rendering (``[2][3]+``) back into tokens."""
    return list(_scan(POSTFIX_PATTERN, rendered))
