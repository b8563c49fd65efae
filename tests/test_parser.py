"""
调度场解析的测试
"""

import pytest

from core.parser import ShuntingYardParser, to_rpn
from core.errors import (
    MismatchedParenthesesError, UndefinedVariableError,
    UnrecognizedTokenError, InvalidFunctionInvocationError
)


class TestPrecedence:

    def test_multiplication_before_addition(self):
        assert list(to_rpn(["2", "+", "3", "*", "4"])) == ["2", "3", "4", "*", "+"]

    def test_parentheses_override(self):
        tokens = ["(", "2", "+", "3", ")", "*", "4"]
        assert list(to_rpn(tokens)) == ["2", "3", "+", "4", "*"]

    def test_power_is_right_associative(self):
        assert list(to_rpn(["2", "^", "3", "^", "2"])) == ["2", "3", "2", "^", "^"]

    def test_minus_is_left_associative(self):
        assert list(to_rpn(["2", "-", "3", "-", "2"])) == ["2", "3", "-", "2", "-"]

    def test_modulo_shares_multiplication_priority(self):
        assert list(to_rpn(["7", "%", "4", "*", "2"])) == ["7", "4", "%", "2", "*"]

    def test_queue_has_no_structural_tokens(self):
        tokens = ["(", "(", "1", ")", ")", "*", "(", "2", ")"]
        queue = list(to_rpn(tokens))
        assert "(" not in queue and ")" not in queue


class TestVariables:

    def test_substitution(self):
        assert list(to_rpn(["x", "*", "2"], variables={"x": 5})) == ["5.0", "2", "*"]

    def test_undefined_variable(self):
        with pytest.raises(UndefinedVariableError) as exc_info:
            to_rpn(["foo"])
        assert exc_info.value.token == "foo"
        assert str(exc_info.value) == 'Undefined variable: "foo"!'

    def test_unrecognized_token(self):
        with pytest.raises(UnrecognizedTokenError) as exc_info:
            to_rpn(["1", "+", "."])
        assert exc_info.value.token == "."


class TestParentheses:

    def test_unclosed(self):
        with pytest.raises(MismatchedParenthesesError):
            to_rpn(["(", "2", "+", "3"])

    def test_unopened(self):
        with pytest.raises(MismatchedParenthesesError):
            to_rpn(["2", ")"])

    def test_empty_pair(self):
        assert list(to_rpn(["(", ")"])) == []


class TestFunctions:

    def test_called_eagerly_with_arguments(self):
        calls = []

        def count(args):
            calls.append(list(args))
            return len(args)

        parser = ShuntingYardParser(functions={"count": count})
        queue = parser.parse(["count", "(", "1", ",", "2", ",", "3", ")"])
        assert list(queue) == ["3.0"]
        assert calls == [["1", "2", "3"]]

    def test_no_arguments(self):
        queue = to_rpn(["f", "(", ")"], functions={"f": lambda args: 1})
        assert list(queue) == ["1.0"]

    def test_variable_arguments_are_substituted(self):
        seen = []
        functions = {"f": lambda args: seen.extend(args) or 0}
        to_rpn(["f", "(", "x", ",", "y", ")"], variables={"x": 2}, functions=functions)
        assert seen == ["2.0", "y"]

    def test_result_joins_expression(self):
        tokens = ["1", "+", "f", "(", ")"]
        assert list(to_rpn(tokens, functions={"f": lambda args: 2})) == ["1", "2.0", "+"]

    def test_non_numeric_result(self):
        with pytest.raises(InvalidFunctionInvocationError) as exc_info:
            to_rpn(["f", "(", ")"], functions={"f": lambda args: "abc"})
        assert exc_info.value.name == "f"

    def test_none_result(self):
        with pytest.raises(InvalidFunctionInvocationError):
            to_rpn(["f", "(", ")"], functions={"f": lambda args: None})

    def test_caller_tables_are_not_modified(self):
        variables = {"x": 1.0}
        functions = {"f": lambda args: 1}
        to_rpn(["f", "(", "x", ")", "+", "x"], variables, functions)
        assert variables == {"x": 1.0}
        assert list(functions) == ["f"]
