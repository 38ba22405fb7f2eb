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

from typing import Iterable, Iterator, Optional

from .token import Token


class TokenList:
    """
    Ordered token container used as both output queue and operator stack.

    push() stores a clone, pop() hands the removed token over to the caller,
    peek() and peek_at() return views of stored tokens. Tokens are frozen, so
    a view cannot change what the list holds.
    """

    def __init__(self, tokens: Iterable[Token] = ()):
        self._tokens: list[Token] = []
        for token in tokens:
            self.push(token)

    def push(self, token: Token) -> None:
        if not isinstance(token, Token):
            raise TypeError(f"Expected Token, got {type(token).__name__}")
        self._tokens.append(token.clone())

    def pop(self) -> Optional[Token]:
        if not self._tokens:
            return None
        return self._tokens.pop()

    def pop_at(self, index: int) -> Optional[Token]:
        """
        Remove and return the token at index. Negative indices count from the tail.
        """
        if index < 0:
            index += len(self._tokens)
        if index < 0 or index >= len(self._tokens):
            return None
        return self._tokens.pop(index)

    def peek(self) -> Optional[Token]:
        if not self._tokens:
            return None
        return self._tokens[-1]

    def peek_at(self, index: int) -> Optional[Token]:
        if index < 0 or index >= len(self._tokens):
            return None
        return self._tokens[index]

    def is_empty(self) -> bool:
        return not self._tokens

    def clear(self) -> None:
        self._tokens.clear()

    def lexemes(self) -> list[str]:
        return [token.lexeme for token in self._tokens]

    def dump(self) -> str:
        return "\n".join(
            f"[TokenList] index={i}, {token.dump().removeprefix('[Token] ')}"
            for i, token in enumerate(self._tokens)
        )

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(tuple(self._tokens))

    def __str__(self) -> str:
        return " ".join(self.lexemes())

    def __repr__(self) -> str:
        return f"TokenList({self.lexemes()!r})"
