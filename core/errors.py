"""core/errors.py - 表达式求值的错误类型"""


class ExpressionError(ValueError):
    """所有求值错误的基类"""
    pass


class UnrecognizedTokenError(ExpressionError):
    """Token不属于任何已知形态（数字/操作符/括号/标识符/分隔符）"""

    def __init__(self, token):
        self.token = token
        super().__init__(f'Unrecognized token type for symbol: "{token}"!')


class UndefinedVariableError(ExpressionError):
    """纯字母Token既不是变量也不是函数"""

    def __init__(self, token):
        self.token = token
        super().__init__(f'Undefined variable: "{token}"!')


class MismatchedParenthesesError(ExpressionError):
    def __init__(self):
        super().__init__("There are mismatched parenthesis!")


class InvalidExpressionError(ExpressionError):
    """操作符出栈时操作数不足"""

    def __init__(self):
        super().__init__("Invalid expression!")


class UnrecognizedOperatorError(ExpressionError):
    def __init__(self, token):
        self.token = token
        super().__init__("Unknown operator!")


class TooManyValuesError(ExpressionError):
    """求值结束后栈中剩余多个值"""

    def __init__(self, count):
        self.count = count
        super().__init__("Input has too many values!")


class InvalidFunctionArityError(ExpressionError):
    def __init__(self, name, expected, received):
        self.name = name
        self.expected = expected
        self.received = received
        super().__init__(
            f"Function {name} has wrong number of arguments! "
            f"Expected {expected} but got {received}."
        )


class InvalidArgumentTypeError(ExpressionError):
    def __init__(self, arg):
        self.arg = arg
        super().__init__(f"Function arg {arg} is wrong type!")


class InvalidFunctionInvocationError(ExpressionError):
    """函数返回值无法转换为数字"""

    def __init__(self, name):
        self.name = name
        super().__init__("Invalid function invocation!")
