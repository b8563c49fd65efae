"""core/parser.py - 调度场算法：中缀Token序列 -> 后缀(RPN)队列"""
import logging
from collections import deque

from core.token_system import (
    LEFT_PAREN, RIGHT_PAREN,
    is_number, is_operator, is_parenthesis, is_arg_separator, contains_letters_only,
    get_priority, is_right_associative, to_token
)
from core.errors import (
    UnrecognizedTokenError, UndefinedVariableError,
    MismatchedParenthesesError, InvalidFunctionInvocationError
)

logger = logging.getLogger(__name__)


class ShuntingYardParser:
    """
    将Token序列转换为后缀队列

    变量在解析时直接替换为数值，函数在读到右括号时立即调用，
    因此输出队列中只有数字和二元操作符。
    """

    def __init__(self, variables=None, functions=None):
        self.variables = variables or {}
        self.functions = functions or {}

    def _resolve_arg(self, token):
        # 已知变量替换为数值文本，其余原样传给函数
        if token in self.variables:
            return to_token(self.variables[token])
        return token

    def _invoke(self, name, args):
        result = self.functions[name](args)
        try:
            return to_token(result)
        except (TypeError, ValueError):
            logger.debug(f"Function {name} returned non-numeric value: {result!r}")
            raise InvalidFunctionInvocationError(name)

    @staticmethod
    def _should_pop(token, top):
        # 左结合：优先级 <= 栈顶时弹出；右结合：优先级 < 栈顶时弹出
        if is_right_associative(token):
            return get_priority(token) < get_priority(top)
        return get_priority(token) <= get_priority(top)

    def parse(self, tokens):
        """
        Args:
            tokens: 分词结果
        Returns:
            deque 形式的后缀队列
        """
        queue = deque()
        op_stack = []

        # 函数调用状态
        fn_to_invoke = None
        expecting_arg = False
        fn_args = []

        for token in tokens:
            if expecting_arg and token != RIGHT_PAREN:
                fn_args.append(self._resolve_arg(token))
                expecting_arg = False
                continue

            if is_number(token):
                queue.append(token)
            elif token in self.variables:
                queue.append(to_token(self.variables[token]))
            elif token in self.functions:
                fn_to_invoke = token
            elif is_arg_separator(token):
                expecting_arg = True
            elif is_operator(token):
                while op_stack and self._should_pop(token, op_stack[-1]):
                    queue.append(op_stack.pop())
                op_stack.append(token)
            elif token == LEFT_PAREN:
                if fn_to_invoke is not None:
                    # 函数的左括号不入栈，开始收集参数
                    expecting_arg = True
                    continue
                op_stack.append(token)
            elif token == RIGHT_PAREN:
                if fn_to_invoke is not None:
                    queue.append(self._invoke(fn_to_invoke, fn_args))
                    fn_args = []
                    fn_to_invoke = None
                    expecting_arg = False
                    continue
                while op_stack and op_stack[-1] != LEFT_PAREN:
                    queue.append(op_stack.pop())
                if not op_stack:
                    raise MismatchedParenthesesError()
                op_stack.pop()  # 丢弃左括号
            elif contains_letters_only(token):
                # 纯字母却既不是变量也不是函数
                raise UndefinedVariableError(token)
            else:
                raise UnrecognizedTokenError(token)

        while op_stack:
            top = op_stack.pop()
            if is_parenthesis(top):
                raise MismatchedParenthesesError()
            queue.append(top)

        logger.debug(f"RPN queue: {' '.join(queue)}")
        return queue


def to_rpn(tokens, variables=None, functions=None):
    return ShuntingYardParser(variables, functions).parse(tokens)
