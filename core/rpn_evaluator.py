"""RPN表达式求值器 - 调用统一的Operators类"""
import logging
from collections import deque

from core.token_system import is_number, to_number
from core.operators import Operators
from core.errors import InvalidExpressionError, TooManyValuesError

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(queue):
        """
        单遍栈式求值，会消耗传入的队列

        Args:
            queue: 后缀Token队列（deque或list）
        Returns:
            float 结果
        """
        if not isinstance(queue, deque):
            queue = deque(queue)
        stack = []

        while queue:
            token = queue.popleft()

            if is_number(token):
                stack.append(to_number(token))
                continue

            # 其余Token都应是二元操作符
            if len(stack) < 2:
                logger.debug(f"Insufficient operands for {token}")
                raise InvalidExpressionError()
            right = stack.pop()
            left = stack.pop()
            stack.append(Operators.apply(token, left, right))

        if len(stack) == 1:
            return float(stack[0])
        logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
        raise TooManyValuesError(len(stack))
