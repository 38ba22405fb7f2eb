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

import regex as re
from dataclasses import dataclass, field, replace
from enum import IntEnum, StrEnum
from typing import Optional


class TokenKind(StrEnum):
    """
    Lexical category of a token.

    Attributes:
        LITERAL: Numeric literal.
        OPERATOR: Arithmetic operator.
        GROUP: Parenthesis.
    """

    LITERAL = "literal"
    OPERATOR = "operator"
    GROUP = "group"


class TokenType(StrEnum):
    """Concrete token type. The kind is implied by the type."""

    INTEGER = "integer"
    FLOAT = "float"
    PLUS = "plus"
    MINUS = "minus"
    STAR = "star"
    SLASH = "slash"
    MOD = "mod"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"

    @property
    def kind(self) -> TokenKind:
        return _KIND_OF_TYPE[self]


class TokenRole(StrEnum):
    """
    Purpose of a token in the expression.

    Attributes:
        NONE: Literals and parentheses.
        UNARY: Operator applied to a single operand.
        BINARY: Operator applied to two operands. (operators start here)
    """

    NONE = "none"
    UNARY = "unary"
    BINARY = "binary"


class Associativity(StrEnum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"


class Precedence(IntEnum):
    """Binding strength. UNARY binds tighter than every binary operator."""

    NONE = 0
    ADDITIVE = 1
    MULTIPLICATIVE = 2
    UNARY = 3


_KIND_OF_TYPE = {
    TokenType.INTEGER: TokenKind.LITERAL,
    TokenType.FLOAT: TokenKind.LITERAL,
    TokenType.PLUS: TokenKind.OPERATOR,
    TokenType.MINUS: TokenKind.OPERATOR,
    TokenType.STAR: TokenKind.OPERATOR,
    TokenType.SLASH: TokenKind.OPERATOR,
    TokenType.MOD: TokenKind.OPERATOR,
    TokenType.LEFT_PAREN: TokenKind.GROUP,
    TokenType.RIGHT_PAREN: TokenKind.GROUP,
}

OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "%": TokenType.MOD,
}

GROUPS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

# Operators allowed wherever a unary operator may appear.
SIGN_OPERATORS = frozenset({TokenType.PLUS, TokenType.MINUS})

_BINARY_PRECEDENCE = {
    TokenType.PLUS: Precedence.ADDITIVE,
    TokenType.MINUS: Precedence.ADDITIVE,
    TokenType.STAR: Precedence.MULTIPLICATIVE,
    TokenType.SLASH: Precedence.MULTIPLICATIVE,
    TokenType.MOD: Precedence.MULTIPLICATIVE,
}

# ASCII digits with at most one decimal point, e.g. "12", "1.5", "3."
_NUMBER_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]*)?")


@dataclass(frozen=True)
class Token:
    """
    A classified slice of the source expression.

    Only ``lexeme``, ``type`` and ``role`` are stored, plus the source column
    in ``position`` which takes no part in equality. Kind, associativity and
    precedence are derived, so the single role change an operator may go
    through (binary to unary) updates all of them at once.

    The lexeme must spell the given type. Operators default to the binary
    role and may only be binary or unary; literals and groups have role NONE.
    """

    lexeme: str
    type: TokenType
    role: Optional[TokenRole] = None
    position: Optional[int] = field(default=None, compare=False)

    def __post_init__(self):
        if not self.lexeme:
            raise ValueError("Token lexeme must not be empty")
        if not isinstance(self.type, TokenType):
            raise TypeError(f"Invalid token type: {self.type!r}")
        if not _lexeme_matches_type(self.lexeme, self.type):
            raise ValueError(f"Lexeme '{self.lexeme}' is not a valid {self.type.name}")

        is_op = self.type.kind == TokenKind.OPERATOR
        if self.role is None:
            role = TokenRole.BINARY if is_op else TokenRole.NONE
        else:
            role = TokenRole(self.role)
        # Operators are binary or unary; literals and groups have no role.
        if is_op == (role == TokenRole.NONE):
            raise ValueError(
                f"Role {role.name} is not allowed for {self.type.kind.name} '{self.lexeme}'"
            )
        object.__setattr__(self, "role", role)

    @property
    def kind(self) -> TokenKind:
        return self.type.kind

    @property
    def size(self) -> int:
        return len(self.lexeme)

    @property
    def associativity(self) -> Associativity:
        if self.role == TokenRole.UNARY:
            return Associativity.RIGHT
        if self.role == TokenRole.BINARY:
            return Associativity.LEFT
        return Associativity.NONE

    @property
    def precedence(self) -> Precedence:
        return precedence_of(self)

    def clone(self) -> "Token":
        return replace(self)

    def as_unary(self) -> "Token":
        """
        Return a copy of this operator resolved to the unary role.

        Raises:
            ValueError: If the token is not an operator.
        """
        if self.kind != TokenKind.OPERATOR:
            raise ValueError(f"Only operators can be unary, got '{self.lexeme}'")
        return replace(self, role=TokenRole.UNARY)

    def dump(self) -> str:
        return (
            f"[Token] lexeme='{self.lexeme}', size={self.size}, "
            f"kind={self.kind.name}, type={self.type.name}, role={self.role.name}, "
            f"assoc={self.associativity.name}, prec={self.precedence.name}"
        )

    def __str__(self) -> str:
        return self.lexeme


def _lexeme_matches_type(lexeme: str, token_type: TokenType) -> bool:
    if token_type in (TokenType.INTEGER, TokenType.FLOAT):
        if not _NUMBER_PATTERN.fullmatch(lexeme):
            return False
        return ("." in lexeme) == (token_type == TokenType.FLOAT)
    return OPERATORS.get(lexeme, GROUPS.get(lexeme)) == token_type


def create_number(text: str, position: Optional[int] = None) -> Optional[Token]:
    """
    Create a numeric literal from the longest numeric prefix of text.

    The first '.' makes the literal a float; a second '.' ends the literal
    and is left unconsumed.

    Returns None if text does not start with a digit.
    """
    m = _NUMBER_PATTERN.match(text)
    if not m:
        return None
    lexeme = m.group(0)
    token_type = TokenType.FLOAT if "." in lexeme else TokenType.INTEGER
    return Token(lexeme, token_type, position=position)


def create_operator(text: str, position: Optional[int] = None) -> Optional[Token]:
    if not text or text[0] not in OPERATORS:
        return None
    return Token(text[0], OPERATORS[text[0]], TokenRole.BINARY, position)


def create_group(text: str, position: Optional[int] = None) -> Optional[Token]:
    if not text or text[0] not in GROUPS:
        return None
    return Token(text[0], GROUPS[text[0]], position=position)


def precedence_of(token: Optional[Token]) -> Precedence:
    """
    Precedence of a token.

    Unary operators rank above all binary operators. Literals, parentheses
    and None have no precedence and yield Precedence.NONE.
    """
    if token is None:
        return Precedence.NONE
    if token.role == TokenRole.UNARY:
        return Precedence.UNARY
    return _BINARY_PRECEDENCE.get(token.type, Precedence.NONE)


def is_number(token: Optional[Token]) -> bool:
    return token is not None and token.kind == TokenKind.LITERAL


def is_operator(token: Optional[Token]) -> bool:
    return token is not None and token.kind == TokenKind.OPERATOR


def is_group(token: Optional[Token]) -> bool:
    return token is not None and token.kind == TokenKind.GROUP


def is_left_paren(token: Optional[Token]) -> bool:
    return token is not None and token.type == TokenType.LEFT_PAREN


def is_right_paren(token: Optional[Token]) -> bool:
    return token is not None and token.type == TokenType.RIGHT_PAREN


def is_unary(token: Optional[Token]) -> bool:
    return token is not None and token.role == TokenRole.UNARY


def is_binary(token: Optional[Token]) -> bool:
    return token is not None and token.role == TokenRole.BINARY


def is_left_associative(token: Optional[Token]) -> bool:
    return token is not None and token.associativity == Associativity.LEFT


def is_right_associative(token: Optional[Token]) -> bool:
    return token is not None and token.associativity == Associativity.RIGHT
