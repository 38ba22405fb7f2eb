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

from .errors import TokenizeError
from .token import create_group, create_number, create_operator
from .token_list import TokenList

logger = logging.getLogger(__name__)


def tokenize(text: str) -> TokenList:
    """
    Split an infix expression into classified tokens.

    Args:
        text: Expression source. Whitespace is ignored.

    Returns:
        Tokens in source order. Empty if text holds no tokens.

    Raises:
        TokenizeError: On the first character that starts no token.
    """
    tokens = TokenList()
    pos = 0
    n = len(text)
    while pos < n:
        char = text[pos]
        if char.isspace():
            pos += 1
            continue

        rest = text[pos:]
        token = (
            create_number(rest, pos)
            or create_operator(rest, pos)
            or create_group(rest, pos)
        )
        if token is None:
            raise TokenizeError(char, pos)

        tokens.push(token)
        pos += token.size

    logger.debug("Tokenized %r into %d tokens", text, len(tokens))
    return tokens
