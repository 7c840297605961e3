"""
Calculator facade.

``parse_and_evaluate`` is the single entry point callers use; it composes
the converter and the evaluator. ``describe`` produces the one-line
report printed by the CLI.
"""

import structlog

from rpn_calc.converter import convert
from rpn_calc.errors import PostfixError
from rpn_calc.models import Calculation, format_number

logger = structlog.get_logger()

__all__ = ["calculate", "describe", "format_number", "parse_and_evaluate"]


def parse_and_evaluate(text: str) -> float:
    """Convert ``text`` to postfix and evaluate it."""
    return convert(text).evaluate()


def calculate(text: str) -> Calculation:
    """Like parse_and_evaluate, but keep the postfix rendering as well."""
    postfix = convert(text)
    return Calculation(expression=text, postfix=str(postfix), value=postfix.evaluate())


def describe(text: str) -> str:
    """Return ``"<text> = <result>"`` or ``"Error: <ErrorKind>"``."""
    try:
        result = parse_and_evaluate(text)
    except PostfixError as e:
        logger.info("Expression rejected", expression=text, kind=e.kind.value, reason=e.message)
        return f"Error: {e.kind.value}"
    return f"{text} = {format_number(result)}"
