"""core/token_system.py"""
from enum import Enum
import string


class TokenType(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    ARG_SEPARATOR = "arg_separator"
    IDENTIFIER = "identifier"  # 变量名或函数名（尚未解析）
    UNKNOWN = "unknown"


class Operator:
    def __init__(self, symbol, name, priority, right_assoc=False, unary=False):
        self.symbol = symbol
        self.name = name  # 对应 Operators 中的方法名
        self.priority = priority
        self.right_assoc = right_assoc
        self.unary = unary  # 能否作为前导符号出现（+/-）


LEFT_PAREN = '('
RIGHT_PAREN = ')'
ARG_SEPARATOR = ','
DECIMAL_POINT = '.'

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)

# 操作符定义字典
OPERATOR_DEFINITIONS = {
    '+': Operator('+', 'add', 2, unary=True),
    '-': Operator('-', 'sub', 2, unary=True),
    '*': Operator('*', 'mul', 3),
    '/': Operator('/', 'div', 3),
    '%': Operator('%', 'mod', 3),
    '^': Operator('^', 'pow', 4, right_assoc=True),
}


# 类型判断 =====================================

def is_number(token):
    """
    整数（全部为数字字符）直接判定；否则尝试转换为浮点数，
    能转换即视为数字（用于支持小数，以及函数结果回写的文本）
    """
    if not token:
        return False
    if all(c in DIGITS for c in token):
        return True
    try:
        float(token)
    except (TypeError, ValueError):
        return False
    return True


def is_digit(c):
    return c in DIGITS


def is_letter(c):
    return c in LETTERS


def contains_letters_only(token):
    return all(c in LETTERS for c in token)


def is_operator(token):
    return token in OPERATOR_DEFINITIONS


def is_parenthesis(token):
    return token == LEFT_PAREN or token == RIGHT_PAREN


def is_arg_separator(token):
    return token == ARG_SEPARATOR


def is_unary(token):
    op = OPERATOR_DEFINITIONS.get(token)
    return op is not None and op.unary


def get_priority(token):
    """非操作符（如左括号）返回-1，永远不会被弹出"""
    op = OPERATOR_DEFINITIONS.get(token)
    return op.priority if op is not None else -1


def is_right_associative(token):
    op = OPERATOR_DEFINITIONS.get(token)
    return op is not None and op.right_assoc


def classify(token):
    """按需推导Token类型，Token本身只是字符串"""
    if is_number(token):
        return TokenType.NUMBER
    if is_operator(token):
        return TokenType.OPERATOR
    if token == LEFT_PAREN:
        return TokenType.LEFT_PAREN
    if token == RIGHT_PAREN:
        return TokenType.RIGHT_PAREN
    if is_arg_separator(token):
        return TokenType.ARG_SEPARATOR
    if token and contains_letters_only(token):
        return TokenType.IDENTIFIER
    return TokenType.UNKNOWN


# 数值 <-> 文本 ================================

def to_number(token):
    return float(token)


def to_token(value):
    # repr 保留完整精度，保证回写后再解析得到相同的值
    return repr(float(value))
