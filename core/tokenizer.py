"""core/tokenizer.py - 表达式改写与分词"""
import logging
import re

from core.token_system import (
    LEFT_PAREN, DECIMAL_POINT, DIGITS, LETTERS,
    is_number, is_digit, is_letter, contains_letters_only,
    is_operator, is_parenthesis, is_arg_separator, is_unary
)

logger = logging.getLogger(__name__)

# 相邻符号合并规则：按顺序每条规则只扫描一次，不迭代到不动点
# 例如 "---" 只经过 "--" -> "+" 一次，结果是 "+-" 而不是 "-"
REWRITE_RULES = [
    ('+-', '-'),
    ('-+', '-'),
    ('++', '+'),
    ('--', '+'),
]

WHITESPACE_RE = re.compile(r'\s+')
OPERAND_CHARS = DIGITS | LETTERS | {DECIMAL_POINT}


def normalize_whitespace(expression):
    """
    去掉空白字符；夹在两个操作数字符（数字、字母、小数点）之间的空白
    保留为一个空格，只作为Token边界，例如 "2 3" 不会被拼成 "23"
    """
    def _replace(match):
        start, end = match.span()
        if 0 < start and end < len(expression) \
                and expression[start - 1] in OPERAND_CHARS and expression[end] in OPERAND_CHARS:
            return ' '
        return ''
    return WHITESPACE_RE.sub(_replace, expression)


def rewrite_expression(expression):
    """把相邻的正负号改写为单个符号，便于分词"""
    for search, replacement in REWRITE_RULES:
        expression = expression.replace(search, replacement)
    return expression


class NumberFlags:
    def __init__(self):
        # 当前括号作用域内是否已经出现过数字，用于识别前导的 +/-
        self.in_context = False
        # 当前数字是否已包含小数点（每个数字只能有一个）
        self.has_decimal = False


class Tokenizer:
    """逐字符扫描，生成Token（字符串）序列"""

    def __init__(self, expression):
        self.expression = expression
        self.tokens = []
        self.wip = ''  # 正在构建的多字符Token
        self.number = NumberFlags()

    def _finish_prev(self):
        """结束当前正在构建的Token（如果有）"""
        if self.wip:
            self.tokens.append(self.wip)
        self.wip = ''
        self.number.has_decimal = False

    def _single_char(self, c):
        self._finish_prev()
        self.tokens.append(c)

    def _multi_char(self, c, validates):
        # 多字符Token的构建方式相同，区别只在于如何验证当前缓冲区
        if not self.wip or validates():
            self.wip += c
        else:
            self._finish_prev()
            self.wip = c

    def _decimal_point_valid(self):
        valid = is_number(self.wip) and not self.number.has_decimal
        if valid:
            self.number.has_decimal = True
        return valid

    def _consume(self, c):
        # 单字符Token：操作符、括号、参数分隔符
        if is_operator(c) or is_parenthesis(c) or is_arg_separator(c):
            if c == LEFT_PAREN:
                self.number.in_context = False  # 进入新的作用域
            elif is_unary(c) and not self.wip and not self.number.in_context:
                # 作用域内数字之前的 +/-：补一个显式的0，转为二元运算
                self.tokens.append('0')
                self.number.in_context = True
            self._single_char(c)

        # 可能的多字符Token：数字、变量/函数名
        elif is_digit(c):
            self._multi_char(c, lambda: is_number(self.wip))
            self.number.in_context = True
        elif c == DECIMAL_POINT:
            self._multi_char(c, self._decimal_point_valid)
        elif is_letter(c):
            self._multi_char(c, lambda: contains_letters_only(self.wip))
        else:
            # 无法识别的字符直接丢弃
            self._finish_prev()

    def tokenize(self):
        for c in self.expression:
            if c.isspace():
                self._finish_prev()
                continue
            self._consume(c)
        self._finish_prev()
        logger.debug(f"Tokens for '{self.expression}': {self.tokens}")
        return self.tokens


def tokenize(expression):
    return Tokenizer(expression).tokenize()
