"""
Core data models for rpn-calc.

Defines the token model shared by the lexer, converter and evaluator,
the error kinds reported to callers, and the calculation result schema.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Enums
# =============================================================================

class TokenKind(str, Enum):
    """Lexical token kinds."""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EXP = "^"
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    NUMBER = "number"


class ErrorKind(str, Enum):
    """Error kinds reported by the converter and evaluator."""
    EMPTY_STRING = "EmptyString"
    PARSE_ERROR = "ParseError"


OPERATORS = frozenset({
    TokenKind.ADD,
    TokenKind.SUB,
    TokenKind.MUL,
    TokenKind.DIV,
    TokenKind.EXP,
})

STRUCTURAL = frozenset({TokenKind.OPEN_PAREN, TokenKind.CLOSE_PAREN})

# Structural tokens rank 0 so they never trigger a pop
PRECEDENCE: dict[TokenKind, int] = {
    TokenKind.ADD: 1,
    TokenKind.SUB: 1,
    TokenKind.MUL: 2,
    TokenKind.DIV: 2,
    TokenKind.EXP: 3,
}


def format_number(value: float) -> str:
    """
    Format a float in plain positional notation.

    Uses the shortest digits that round-trip, never an exponent, and drops
    a trailing ``.0``: ``2.0 -> "2"``, ``1e-07 -> "0.0000001"``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


# =============================================================================
# Tokens
# =============================================================================

@dataclass(frozen=True)
class Token:
    """A single lexical token: an operator, a parenthesis or a number."""
    kind: TokenKind
    value: float | None = None

    @classmethod
    def number(cls, value: float) -> "Token":
        return cls(TokenKind.NUMBER, float(value))

    @classmethod
    def symbol(cls, char: str) -> "Token":
        """Build an operator or parenthesis token from its character."""
        kind = TokenKind(char)
        if kind is TokenKind.NUMBER:
            raise ValueError(f"Not a symbol: {char!r}")
        return cls(kind)

    @property
    def precedence(self) -> int:
        return PRECEDENCE.get(self.kind, 0)

    @property
    def is_number(self) -> bool:
        return self.kind is TokenKind.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.kind in OPERATORS

    @property
    def is_structural(self) -> bool:
        return self.kind in STRUCTURAL

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return f"[{format_number(self.value)}]"
        return self.kind.value


# =============================================================================
# Results
# =============================================================================

class Calculation(BaseModel):
    """Outcome of a successful parse and evaluation."""

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    expression: str = Field(..., description="Input expression as given")
    postfix: str = Field(..., description="Canonical postfix rendering")
    value: float
