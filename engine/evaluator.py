import logging
from collections import OrderedDict

from core import (
    RPNEvaluator, ShuntingYardParser, Tokenizer,
    bind_builtins, rewrite_expression, normalize_whitespace
)
from config.config import EVALUATOR_CONFIG

logger = logging.getLogger(__name__)


class ExpressionEvaluator:
    """
    可复用的表达式求值器

    分词结果只取决于表达式文本，因此按规范化后的文本做LRU缓存；
    解析阶段会调用函数，不做缓存。
    """

    def __init__(self, cache_size=None, enable_cache=None, bind_builtins=None):
        self.cache_size = EVALUATOR_CONFIG["cache_size"] if cache_size is None else cache_size
        self.enable_cache = EVALUATOR_CONFIG["enable_cache"] if enable_cache is None else enable_cache
        self.bind_builtins = EVALUATOR_CONFIG["bind_builtins"] if bind_builtins is None else bind_builtins
        self._token_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._token_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._token_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._token_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    def cache_info(self):
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._token_cache),
        }

    @staticmethod
    def normalize(expression):
        """去空白并合并相邻符号"""
        return rewrite_expression(normalize_whitespace(expression))

    def tokenize(self, expression):
        key = self.normalize(expression)
        if not self.enable_cache:
            return Tokenizer(key).tokenize()

        if key in self._token_cache:
            self._token_cache.move_to_end(key)
            self._cache_hits += 1
            return list(self._token_cache[key])

        self._cache_misses += 1
        tokens = Tokenizer(key).tokenize()
        self._token_cache[key] = tuple(tokens)
        self._manage_cache()
        return tokens

    def _tables(self, variables, functions):
        # 总是复制，调用方的表不会被修改
        if self.bind_builtins:
            return bind_builtins(variables, functions)
        return dict(variables or {}), dict(functions or {})

    def to_rpn(self, expression, variables=None, functions=None):
        """返回后缀队列（list），便于查看解析结果"""
        vars_, fns = self._tables(variables, functions)
        return list(ShuntingYardParser(vars_, fns).parse(self.tokenize(expression)))

    def evaluate(self, expression, variables=None, functions=None):
        """
        Args:
            expression: 中缀表达式字符串
            variables: 变量名 -> 数值
            functions: 函数名 -> 接收参数列表、返回一个数值的可调用对象
        Returns:
            float 结果；空表达式返回0.0
        Raises:
            ExpressionError 的各个子类
        """
        if not normalize_whitespace(expression):
            return 0.0

        vars_, fns = self._tables(variables, functions)
        queue = ShuntingYardParser(vars_, fns).parse(self.tokenize(expression))
        return RPNEvaluator.evaluate(queue)


# 不带缓存，模块级入口在多次调用之间不共享可变状态
_default_evaluator = ExpressionEvaluator(enable_cache=False)


def evaluate(expression, variables=None, functions=None):
    """对表达式求值，variables/functions 缺省为空表"""
    return _default_evaluator.evaluate(expression, variables, functions)
