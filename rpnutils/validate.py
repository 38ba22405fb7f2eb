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

from .token import (
    SIGN_OPERATORS,
    Token,
    is_binary,
    is_left_paren,
    is_number,
    is_operator,
    is_right_paren,
    is_unary,
)
from .token_list import TokenList

logger = logging.getLogger(__name__)


def _reject(reason: str, index: int) -> bool:
    logger.debug("Rejected at token %d: %s", index, reason)
    return False


def validate_infix(tokens: TokenList) -> bool:
    """
    Check that an infix token list is a single well-formed expression.

    Operators in unary position (first, after an operator, after '(') must be
    '+' or '-'. A unary '*', '/' or '%' is rejected on purpose even though
    shunting_yard would convert it. Operands must be separated by operators,
    groups must not be empty and parentheses must balance. Tokens are only
    read; no roles are assigned.
    """
    if not isinstance(tokens, TokenList) or tokens.is_empty():
        return False

    depth = 0
    prev = None
    for i, token in enumerate(tokens):
        if not isinstance(token, Token):
            return _reject(f"not a token: {token!r}", i)

        if is_operator(token):
            unary_position = prev is None or is_operator(prev) or is_left_paren(prev)
            if unary_position and token.type not in SIGN_OPERATORS:
                return _reject(f"operator '{token}' is missing its left operand", i)
        elif is_right_paren(token):
            if prev is None or is_operator(prev) or is_left_paren(prev):
                return _reject("operand expected before ')'", i)
            depth -= 1
            if depth < 0:
                return _reject("unmatched ')'", i)
        else:
            if is_number(prev) or is_right_paren(prev):
                return _reject(f"operator expected before '{token}'", i)
            if is_left_paren(token):
                depth += 1

        prev = token

    if is_operator(prev):
        return _reject(f"trailing operator '{prev}'", len(tokens) - 1)
    if depth != 0:
        return _reject(f"{depth} unclosed '('", len(tokens) - 1)
    return True


def validate_postfix(tokens: TokenList) -> bool:
    """
    Check that a postfix token list reduces to exactly one value.

    Literals push one value, unary operators need one value and leave one,
    binary operators need two and leave one. Any other token is invalid.
    """
    if not isinstance(tokens, TokenList):
        return False

    depth = 0
    for i, token in enumerate(tokens):
        if not isinstance(token, Token):
            return _reject(f"not a token: {token!r}", i)
        if is_number(token):
            depth += 1
        elif is_unary(token):
            if depth < 1:
                return _reject(f"stack underflow for unary '{token}'", i)
        elif is_binary(token):
            if depth < 2:
                return _reject(f"stack underflow for binary '{token}'", i)
            depth -= 1
        else:
            return _reject(f"unexpected token '{token}' in postfix", i)

    if depth != 1:
        return _reject(f"stack holds {depth} values at the end, expected 1", len(tokens))
    return True
