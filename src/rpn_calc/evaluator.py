"""
Postfix evaluator.

Walks a postfix token sequence with a value stack. Arithmetic follows
IEEE-754 float semantics: division by zero and out-of-range powers give
infinities or NaN instead of raising.
"""

import math
from collections.abc import Iterable

import structlog

from rpn_calc.errors import ParseError
from rpn_calc.models import Token, TokenKind

logger = structlog.get_logger()


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and x % 2 == 1


def divide(lhs: float, rhs: float) -> float:
    if rhs == 0:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


def power(base: float, exponent: float) -> float:
    """Real power with IEEE results where ``math.pow`` would raise."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            # Zero to a negative power
            if math.copysign(1.0, base) < 0 and _is_odd_integer(exponent):
                return -math.inf
            return math.inf
        # Negative base with a non-integer exponent
        return math.nan


def apply_operator(kind: TokenKind, lhs: float, rhs: float) -> float:
    """Compute ``lhs <op> rhs`` for a binary operator kind."""
    if kind is TokenKind.ADD:
        return lhs + rhs
    elif kind is TokenKind.SUB:
        return lhs - rhs
    elif kind is TokenKind.MUL:
        return lhs * rhs
    elif kind is TokenKind.DIV:
        return divide(lhs, rhs)
    elif kind is TokenKind.EXP:
        return power(lhs, rhs)
    else:
        raise ParseError(f"Not a binary operator: {kind.value}")


def evaluate(tokens: Iterable[Token]) -> float:
    """
    Evaluate a postfix token sequence.

    Each operator pops its right operand, then its left one. The result is
    the value on top of the stack at the end; values left beneath it are
    discarded.

    Raises ParseError when an operator runs out of operands, when a
    parenthesis reaches the evaluator, or when nothing is left to return.
    """
    stack: list[float] = []

    for token in tokens:
        if token.is_number:
            stack.append(token.value)
        elif token.is_operator:
            if len(stack) < 2:
                raise ParseError(f"Missing operand for '{token}'")
            rhs = stack.pop()
            lhs = stack.pop()
            stack.append(apply_operator(token.kind, lhs, rhs))
        else:
            raise ParseError(f"Unexpected token: {token}")

    if not stack:
        raise ParseError("Empty expression")

    result = stack.pop()
    if stack:
        logger.debug("Discarding leftover values", leftover=len(stack), result=result)
    return result
