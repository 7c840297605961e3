"""
Infix to postfix conversion.

Implements a shunting-yard variant:

1. Numbers go straight to the output
2. ``(`` is pushed onto the operator stack; a number directly before it
   pushes an implicit ``*`` first, so ``2(3 + 4)`` means ``2 * (3 + 4)``
3. ``)`` pops operators to the output up to the matching ``(``
4. An operator pops every stacked operator of greater or equal precedence,
   which makes all operators (``^`` included) left-associative
5. At the end the remaining operators are popped to the output

An unmatched ``(`` left on the stack at the end is dropped, while an
unmatched ``)`` is a ParseError.
"""

from collections.abc import Iterable, Iterator

import structlog

from rpn_calc.errors import ParseError
from rpn_calc.evaluator import evaluate
from rpn_calc.lexer import tokenize, tokenize_postfix
from rpn_calc.models import Token, TokenKind

logger = structlog.get_logger()

IMPLICIT_MUL = Token(TokenKind.MUL)


class Postfix:
    """
    An immutable expression in Reverse Polish order.

    Holds numbers and binary operators only; parentheses are consumed
    during conversion. Rendering with ``str()`` gives the canonical form,
    e.g. ``[2][3][4]*+``.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[Token] = ()):
        tokens = tuple(tokens)
        for token in tokens:
            if token.is_structural:
                raise ParseError(f"Structural token in postfix sequence: {token}")
        self._tokens = tokens

    @classmethod
    def from_infix(cls, infix: str) -> "Postfix":
        return convert(infix)

    @classmethod
    def from_rendered(cls, rendered: str) -> "Postfix":
        """Parse the canonical rendering produced by ``str()``."""
        return cls(tokenize_postfix(rendered))

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    def evaluate(self) -> float:
        return evaluate(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Postfix):
            return NotImplemented
        return self._tokens == other._tokens

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __str__(self) -> str:
        return "".join(str(token) for token in self._tokens)

    def __repr__(self) -> str:
        return f"Postfix({str(self)!r})"


def convert(infix: str) -> Postfix:
    """
    Convert an infix expression to postfix.

    Raises EmptyStringError for blank input and ParseError for
    unrecognized tokens or an unmatched closing parenthesis.
    """
    operators: list[Token] = []
    output: list[Token] = []
    last_is_number = False

    for token in tokenize(infix):
        if token.is_number:
            output.append(token)
            last_is_number = True
            continue

        if token.kind is TokenKind.OPEN_PAREN:
            if last_is_number:
                operators.append(IMPLICIT_MUL)
            operators.append(token)
        elif token.kind is TokenKind.CLOSE_PAREN:
            _pop_to_open_paren(operators, output, infix)
        elif token.is_operator:
            while operators and operators[-1].precedence >= token.precedence:
                output.append(operators.pop())
            operators.append(token)
        else:
            raise ParseError(f"Unexpected token: {token}", expression=infix)
        last_is_number = False

    while operators:
        token = operators.pop()
        if token.kind is TokenKind.OPEN_PAREN:
            logger.debug("Dropping unmatched opening parenthesis", infix=infix)
            continue
        output.append(token)

    postfix = Postfix(output)
    logger.debug("Converted expression", infix=infix, postfix=str(postfix))
    return postfix


def _pop_to_open_paren(operators: list[Token], output: list[Token], infix: str) -> None:
    while operators:
        top = operators.pop()
        if top.kind is TokenKind.OPEN_PAREN:
            return
        output.append(top)
    raise ParseError("Missing '('", expression=infix)
