"""核心模块 - Token系统、分词、调度场解析、RPN评估器和操作符"""
from .token_system import (
    TokenType, Operator, OPERATOR_DEFINITIONS,
    is_number, contains_letters_only, classify, to_number, to_token
)
from .tokenizer import Tokenizer, tokenize, rewrite_expression, normalize_whitespace
from .parser import ShuntingYardParser, to_rpn
from .rpn_evaluator import RPNEvaluator
from .operators import Operators
from .builtins import BUILTIN_VARIABLES, BUILTIN_FUNCTIONS, BuiltinFunction, bind_builtins
from .errors import (
    ExpressionError, UnrecognizedTokenError, UndefinedVariableError,
    MismatchedParenthesesError, InvalidExpressionError, UnrecognizedOperatorError,
    TooManyValuesError, InvalidFunctionArityError, InvalidArgumentTypeError,
    InvalidFunctionInvocationError
)

__all__ = [
    'TokenType', 'Operator', 'OPERATOR_DEFINITIONS',
    'is_number', 'contains_letters_only', 'classify', 'to_number', 'to_token',
    'Tokenizer', 'tokenize', 'rewrite_expression', 'normalize_whitespace',
    'ShuntingYardParser', 'to_rpn', 'RPNEvaluator', 'Operators',
    'BUILTIN_VARIABLES', 'BUILTIN_FUNCTIONS', 'BuiltinFunction', 'bind_builtins',
    'ExpressionError', 'UnrecognizedTokenError', 'UndefinedVariableError',
    'MismatchedParenthesesError', 'InvalidExpressionError', 'UnrecognizedOperatorError',
    'TooManyValuesError', 'InvalidFunctionArityError', 'InvalidArgumentTypeError',
    'InvalidFunctionInvocationError'
]
