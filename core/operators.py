"""core/operators.py"""
import numpy as np
import logging

from core.token_system import OPERATOR_DEFINITIONS
from core.errors import UnrecognizedOperatorError

logger = logging.getLogger(__name__)


class Operators:
    """二元操作符的静态方法集合，统一使用 float64 的 IEEE 语义"""

    @staticmethod
    def add(left, right):
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(left) + np.float64(right)

    @staticmethod
    def sub(left, right):
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(left) - np.float64(right)

    @staticmethod
    def mul(left, right):
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(left) * np.float64(right)

    @staticmethod
    def div(left, right):
        """除零不抛异常：1/0 -> inf，0/0 -> nan"""
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return np.divide(np.float64(left), np.float64(right))

    @staticmethod
    def pow(left, right):
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return np.power(np.float64(left), np.float64(right))

    @staticmethod
    def mod(left, right):
        """
        两个操作数先向零截断为整数再取余，符号跟随被除数（C语义）；
        除数为0时得到nan
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.fmod(np.trunc(np.float64(left)), np.trunc(np.float64(right)))

    @staticmethod
    def apply(symbol, left, right):
        op = OPERATOR_DEFINITIONS.get(symbol)
        if op is None:
            logger.debug(f"Unknown binary operator: {symbol}")
            raise UnrecognizedOperatorError(symbol)
        return getattr(Operators, op.name)(left, right)
