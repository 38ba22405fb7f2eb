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

from typing import Optional


class ExpressionError(Exception):
    """Base error with optional column information"""

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        if position is not None:
            super().__init__(f"Column {position}: {message}")
        else:
            super().__init__(message)


class TokenizeError(ExpressionError):
    """Raised when the input contains a character that starts no token."""

    def __init__(self, char: str, position: int):
        self.char = char
        super().__init__(f"Unexpected character '{char}'", position)


class ConversionError(ExpressionError):
    pass


class EmptyExpressionError(ConversionError):
    def __init__(self):
        super().__init__("Nothing to convert: expression has no tokens")


class MismatchedParenthesisError(ConversionError):
    pass


class UnknownTokenError(ConversionError):
    pass
