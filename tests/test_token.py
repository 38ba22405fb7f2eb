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

import pytest

from rpnutils import (
    Associativity,
    Precedence,
    Token,
    TokenKind,
    TokenRole,
    TokenType,
    precedence_of,
)
from rpnutils.token import (
    create_group,
    create_number,
    create_operator,
    is_binary,
    is_group,
    is_left_associative,
    is_left_paren,
    is_number,
    is_operator,
    is_right_associative,
    is_right_paren,
    is_unary,
)


class TestCreateNumber:
    """Numeric literal classification."""

    @pytest.mark.parametrize(
        "text, lexeme, token_type",
        [
            ("42", "42", TokenType.INTEGER),
            ("7+1", "7", TokenType.INTEGER),
            ("3.14", "3.14", TokenType.FLOAT),
            ("3.", "3.", TokenType.FLOAT),
            ("1.2.3", "1.2", TokenType.FLOAT),
            ("10 ", "10", TokenType.INTEGER),
        ],
    )
    def test_longest_numeric_prefix(self, text, lexeme, token_type):
        token = create_number(text)
        assert token is not None
        assert token.lexeme == lexeme
        assert token.type == token_type
        assert token.kind == TokenKind.LITERAL
        assert token.role == TokenRole.NONE
        assert token.associativity == Associativity.NONE
        assert token.precedence == Precedence.NONE

    @pytest.mark.parametrize("text", ["", ".5", "+1", "(", "x1"])
    def test_rejects_non_digit_start(self, text):
        assert create_number(text) is None

    def test_position_is_recorded(self):
        assert create_number("12", 5).position == 5


class TestCreateOperator:
    """Operator classification and precedence table."""

    @pytest.mark.parametrize(
        "text, token_type, precedence",
        [
            ("+", TokenType.PLUS, Precedence.ADDITIVE),
            ("-", TokenType.MINUS, Precedence.ADDITIVE),
            ("*", TokenType.STAR, Precedence.MULTIPLICATIVE),
            ("/", TokenType.SLASH, Precedence.MULTIPLICATIVE),
            ("%", TokenType.MOD, Precedence.MULTIPLICATIVE),
        ],
    )
    def test_binary_defaults(self, text, token_type, precedence):
        token = create_operator(text + "1")
        assert token.lexeme == text
        assert token.type == token_type
        assert token.kind == TokenKind.OPERATOR
        assert token.role == TokenRole.BINARY
        assert token.associativity == Associativity.LEFT
        assert token.precedence == precedence
        assert precedence_of(token) == precedence

    @pytest.mark.parametrize("text", ["", "1", "(", "^"])
    def test_rejects_non_operator(self, text):
        assert create_operator(text) is None


class TestCreateGroup:
    """Parenthesis classification."""

    def test_parentheses(self):
        left = create_group("(1")
        right = create_group(")")
        assert left.type == TokenType.LEFT_PAREN
        assert right.type == TokenType.RIGHT_PAREN
        for token in (left, right):
            assert token.kind == TokenKind.GROUP
            assert token.role == TokenRole.NONE
            assert token.precedence == Precedence.NONE

    def test_rejects_non_group(self):
        assert create_group("[") is None
        assert create_group("") is None


class TestUnaryRole:
    """Unary resolution produces a new token."""

    def test_as_unary_upgrades_associativity_and_precedence(self):
        minus = create_operator("-")
        unary = minus.as_unary()
        assert unary.role == TokenRole.UNARY
        assert unary.associativity == Associativity.RIGHT
        assert unary.precedence == Precedence.UNARY
        assert minus.role == TokenRole.BINARY

    def test_unary_binds_tighter_than_any_binary(self):
        assert Precedence.UNARY > Precedence.MULTIPLICATIVE > Precedence.ADDITIVE

    def test_only_operators_can_be_unary(self):
        with pytest.raises(ValueError):
            create_number("1").as_unary()

    def test_token_is_frozen(self):
        token = create_operator("-")
        with pytest.raises(AttributeError):
            token.role = TokenRole.UNARY


class TestTokenValue:
    def test_empty_lexeme_is_rejected(self):
        with pytest.raises(ValueError):
            Token("", TokenType.INTEGER)

    def test_type_must_be_token_type(self):
        with pytest.raises(TypeError):
            Token("1", "integer-ish")

    def test_operator_role_defaults_to_binary(self):
        token = Token("-", TokenType.MINUS)
        assert token.role == TokenRole.BINARY
        assert token.associativity == Associativity.LEFT
        assert token.precedence == Precedence.ADDITIVE

    def test_literal_and_group_role_defaults_to_none(self):
        assert Token("1", TokenType.INTEGER).role == TokenRole.NONE
        assert Token("(", TokenType.LEFT_PAREN).role == TokenRole.NONE

    @pytest.mark.parametrize(
        "lexeme, token_type, role",
        [
            ("-", TokenType.MINUS, TokenRole.NONE),
            ("1", TokenType.INTEGER, TokenRole.UNARY),
            ("1.5", TokenType.FLOAT, TokenRole.BINARY),
            ("(", TokenType.LEFT_PAREN, TokenRole.UNARY),
            (")", TokenType.RIGHT_PAREN, TokenRole.BINARY),
        ],
    )
    def test_role_must_fit_kind(self, lexeme, token_type, role):
        with pytest.raises(ValueError):
            Token(lexeme, token_type, role)

    def test_role_accepts_plain_strings(self):
        assert Token("+", TokenType.PLUS, "unary").role == TokenRole.UNARY

    @pytest.mark.parametrize(
        "lexeme, token_type",
        [
            ("7", TokenType.PLUS),
            ("+", TokenType.MINUS),
            ("(", TokenType.RIGHT_PAREN),
            ("-", TokenType.LEFT_PAREN),
            ("1.5", TokenType.INTEGER),
            ("15", TokenType.FLOAT),
            ("1x", TokenType.INTEGER),
            ("+", TokenType.INTEGER),
        ],
    )
    def test_lexeme_must_spell_type(self, lexeme, token_type):
        with pytest.raises(ValueError):
            Token(lexeme, token_type)

    @pytest.mark.parametrize(
        "lexeme, token_type",
        [
            ("15", TokenType.INTEGER),
            ("1.5", TokenType.FLOAT),
            ("3.", TokenType.FLOAT),
            ("%", TokenType.MOD),
            (")", TokenType.RIGHT_PAREN),
        ],
    )
    def test_lexeme_spelling_type_is_accepted(self, lexeme, token_type):
        assert Token(lexeme, token_type).type == token_type

    def test_clone_is_equal_but_independent(self):
        token = create_number("12", 3)
        clone = token.clone()
        assert clone == token
        assert clone is not token
        assert clone.position == 3

    def test_position_does_not_affect_equality(self):
        assert create_number("1", 0) == create_number("1", 9)

    def test_size(self):
        assert create_number("123.5").size == 5

    def test_dump(self):
        dump = create_operator("-").as_unary().dump()
        assert dump == (
            "[Token] lexeme='-', size=1, kind=OPERATOR, type=MINUS, role=UNARY, "
            "assoc=RIGHT, prec=UNARY"
        )


class TestPredicates:
    """Predicates accept None and answer False."""

    @pytest.mark.parametrize(
        "predicate",
        [
            is_number,
            is_operator,
            is_group,
            is_left_paren,
            is_right_paren,
            is_unary,
            is_binary,
            is_left_associative,
            is_right_associative,
        ],
    )
    def test_none_is_false(self, predicate):
        assert predicate(None) is False

    def test_precedence_of_none_is_sentinel(self):
        assert precedence_of(None) == Precedence.NONE

    def test_classification(self):
        number = create_number("1")
        plus = create_operator("+")
        left = create_group("(")
        right = create_group(")")
        assert is_number(number) and not is_operator(number)
        assert is_operator(plus) and is_binary(plus) and is_left_associative(plus)
        assert is_unary(plus.as_unary()) and is_right_associative(plus.as_unary())
        assert is_group(left) and is_left_paren(left) and not is_right_paren(left)
        assert is_group(right) and is_right_paren(right)
