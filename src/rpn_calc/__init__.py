"""
rpn-calc - infix to postfix calculator

Converts an infix arithmetic expression (numbers, ``+ - * / ^``,
parentheses, implicit multiplication like ``2(3+4)``) to Reverse Polish
order with a shunting-yard variant, then evaluates it on a value stack.
"""

from rpn_calc.calculator import calculate, describe, parse_and_evaluate
from rpn_calc.converter import Postfix, convert
from rpn_calc.errors import EmptyStringError, ParseError, PostfixError
from rpn_calc.evaluator import evaluate
from rpn_calc.models import Calculation, ErrorKind, Token, TokenKind, format_number

__version__ = "1.0.0"

__all__ = [
    "Calculation",
    "EmptyStringError",
    "ErrorKind",
    "ParseError",
    "Postfix",
    "PostfixError",
    "Token",
    "TokenKind",
    "calculate",
    "convert",
    "describe",
    "evaluate",
    "format_number",
    "parse_and_evaluate",
]
