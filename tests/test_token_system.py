"""
Token分类与数值转换的测试
"""

import math

from core.token_system import (
    TokenType, OPERATOR_DEFINITIONS,
    is_number, is_letter, is_digit, contains_letters_only,
    is_operator, is_parenthesis, is_arg_separator, is_unary,
    get_priority, is_right_associative, classify, to_number, to_token
)


class TestIsNumber:

    def test_empty_is_not_number(self):
        assert is_number("") is False

    def test_digit_run(self):
        assert is_number("12345") is True

    def test_decimal(self):
        assert is_number("2.5") is True
        assert is_number("1.") is True

    def test_signed_text_from_function_results(self):
        assert is_number("-3.0") is True

    def test_lone_decimal_point(self):
        assert is_number(".") is False

    def test_letters(self):
        assert is_number("abc") is False
        assert is_number("2x") is False


class TestCharacterPredicates:

    def test_letters(self):
        assert is_letter("a") and is_letter("Z")
        assert not is_letter("1")
        assert not is_letter("_")

    def test_digits(self):
        assert is_digit("7")
        assert not is_digit("a")

    def test_contains_letters_only(self):
        assert contains_letters_only("myvar")
        assert not contains_letters_only("my1")
        assert not contains_letters_only("my_var")

    def test_operators(self):
        for symbol in "+-*/^%":
            assert is_operator(symbol)
        assert not is_operator("&")
        assert not is_operator("")

    def test_parenthesis_and_separator(self):
        assert is_parenthesis("(") and is_parenthesis(")")
        assert not is_parenthesis("[")
        assert is_arg_separator(",")
        assert not is_arg_separator(";")

    def test_unary(self):
        assert is_unary("+") and is_unary("-")
        assert not is_unary("*")


class TestOperatorTable:

    def test_priorities(self):
        assert get_priority("^") == 4
        assert get_priority("*") == get_priority("/") == get_priority("%") == 3
        assert get_priority("+") == get_priority("-") == 2

    def test_left_paren_has_lowest_priority(self):
        assert get_priority("(") == -1

    def test_only_power_is_right_associative(self):
        right = [symbol for symbol in OPERATOR_DEFINITIONS if is_right_associative(symbol)]
        assert right == ["^"]


class TestClassify:

    def test_kinds(self):
        assert classify("42") == TokenType.NUMBER
        assert classify("*") == TokenType.OPERATOR
        assert classify("(") == TokenType.LEFT_PAREN
        assert classify(")") == TokenType.RIGHT_PAREN
        assert classify(",") == TokenType.ARG_SEPARATOR
        assert classify("pi") == TokenType.IDENTIFIER
        assert classify(".") == TokenType.UNKNOWN


class TestConversion:

    def test_to_token_keeps_precision(self):
        assert to_number(to_token(math.pi)) == math.pi

    def test_to_token_of_int(self):
        assert to_token(5) == "5.0"

    def test_to_number(self):
        assert to_number("2.5") == 2.5
