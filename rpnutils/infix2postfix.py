"""
Copyright (C) 2025 yuygfgg

This file is part of rpnutils.

rpnutils is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

rpnutils is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with rpnutils.  If not, see <https://www.gnu.org/licenses/>.
"""

import logging
from enum import StrEnum
from typing import Optional

from .errors import (
    ConversionError,
    EmptyExpressionError,
    MismatchedParenthesisError,
    UnknownTokenError,
)
from .token import (
    Token,
    is_left_associative,
    is_left_paren,
    is_number,
    is_operator,
    is_right_paren,
)
from .token_list import TokenList
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class UnclosedParenPolicy(StrEnum):
    """
    What to do with a '(' still on the operator stack at the end of input.

    Attributes:
        ERROR: Raise MismatchedParenthesisError. (default)
        DRAIN: Move it to the output like any other stacked token.
    """

    ERROR = "error"
    DRAIN = "drain"


def infix2postfix(
    infix_code: str, unclosed_paren: UnclosedParenPolicy = UnclosedParenPolicy.ERROR
) -> str:
    R"""
    Convert an infix expression to a postfix expression.

    Args:
        infix_code: Input infix expression, e.g. "(3 + 4) * 2".
        unclosed_paren: Handling of a '(' that is never closed.

    Returns:
        Space separated postfix expression, e.g. "3 4 + 2 *".

    Raises:
        TokenizeError: If infix_code contains an unknown character.
        ConversionError: If the tokens failed to convert to postfix.

    """
    return str(shunting_yard(tokenize(infix_code), unclosed_paren))


def resolve_unary_roles(infix: TokenList) -> TokenList:
    """
    Return a copy of infix with unary operators reclassified.

    An operator is unary when it comes first, or right after another operator
    or a '('. Only the original infix order is consulted.
    """
    resolved = TokenList()
    prev = None
    for token in infix:
        if is_operator(token) and (
            prev is None or is_operator(prev) or is_left_paren(prev)
        ):
            resolved.push(token.as_unary())
        else:
            resolved.push(token)
        prev = token
    return resolved


def _should_pop(top: Optional[Token], current: Token) -> bool:
    if not is_operator(top):
        return False
    if top.precedence > current.precedence:
        return True
    return top.precedence == current.precedence and is_left_associative(current)


def shunting_yard(
    infix: TokenList, unclosed_paren: UnclosedParenPolicy = UnclosedParenPolicy.ERROR
) -> TokenList:
    """
    Reorder infix tokens into postfix order.

    The input list is left untouched; roles are resolved on a copy first.

    Raises:
        EmptyExpressionError: If infix has no tokens.
        MismatchedParenthesisError: On a ')' without a matching '(' or, under
            UnclosedParenPolicy.ERROR, a '(' that is never closed.
        UnknownTokenError: If an entry is not a literal, operator or parenthesis.
        ConversionError: If infix is not a TokenList.
    """
    if not isinstance(infix, TokenList):
        raise ConversionError(f"Expected TokenList, got {type(infix).__name__}")
    unclosed_paren = UnclosedParenPolicy(unclosed_paren)
    if infix.is_empty():
        raise EmptyExpressionError()
    for i, token in enumerate(infix):
        if not isinstance(token, Token):
            raise UnknownTokenError(f"Unknown token {token!r} at index {i}")

    tokens = resolve_unary_roles(infix)
    output = TokenList()
    operators = TokenList()

    for token in tokens:
        if is_number(token):
            output.push(token)
        elif is_operator(token):
            while _should_pop(operators.peek(), token):
                output.push(operators.pop())
            operators.push(token)
        elif is_left_paren(token):
            operators.push(token)
        elif is_right_paren(token):
            while not operators.is_empty() and not is_left_paren(operators.peek()):
                output.push(operators.pop())
            if not is_left_paren(operators.peek()):
                raise MismatchedParenthesisError("Unmatched ')'", token.position)
            operators.pop()

    while not operators.is_empty():
        top = operators.pop()
        if is_left_paren(top):
            if unclosed_paren == UnclosedParenPolicy.ERROR:
                raise MismatchedParenthesisError("Unclosed '('", top.position)
            logger.warning("Draining unclosed '(' into postfix output")
        output.push(top)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Postfix tokens:\n%s", output.dump())
    return output
