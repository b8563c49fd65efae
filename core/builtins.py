"""core/builtins.py - 内置常量与数学函数"""
import numpy as np

from core.token_system import is_number, to_number, to_token
from core.errors import InvalidFunctionArityError, InvalidArgumentTypeError


def _check_number_arg(arg):
    """参数可以是数字，也可以是能转换为数字的Token文本"""
    try:
        text = arg if isinstance(arg, str) else to_token(arg)
    except (TypeError, ValueError):
        raise InvalidArgumentTypeError(arg)
    if not is_number(text):
        raise InvalidArgumentTypeError(arg)
    return to_number(text)


def _round_half_away(x):
    # np.round 是四舍六入五成双，这里采用远离零的舍入
    return np.copysign(np.floor(np.abs(x) + 0.5), x)


class BuiltinFunction:
    """带参数个数与类型校验的内置函数"""

    def __init__(self, name, fn, arity=1):
        self.name = name
        self.fn = fn
        self.arity = arity

    def __call__(self, args):
        args = list(args)
        if len(args) != self.arity:
            raise InvalidFunctionArityError(self.name, self.arity, len(args))
        values = [_check_number_arg(arg) for arg in args]
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            return float(self.fn(*values))

    def __repr__(self):
        return f"BuiltinFunction({self.name!r}, arity={self.arity})"


# 常量
BUILTIN_VARIABLES = {
    'pi': float(np.pi),
}

# 一元函数
_UNARY_FUNCTIONS = {
    'abs': np.abs,
    'sqrt': np.sqrt,
    'cbrt': np.cbrt,
    'sin': np.sin,
    'cos': np.cos,
    'tan': np.tan,
    'asin': np.arcsin,
    'acos': np.arccos,
    'atan': np.arctan,
    'floor': np.floor,
    'ceil': np.ceil,
    'trunc': np.trunc,
    'round': _round_half_away,
}

BUILTIN_FUNCTIONS = {name: BuiltinFunction(name, fn) for name, fn in _UNARY_FUNCTIONS.items()}
BUILTIN_FUNCTIONS['hypot'] = BuiltinFunction('hypot', np.hypot, arity=2)


def bind_builtins(variables=None, functions=None):
    """
    把内置常量与函数合并到调用方表的副本中（不修改调用方的表）

    Args:
        variables: 调用方的变量表
        functions: 调用方的函数表
    Returns:
        (vars, fns) 合并后的新字典；内置条目后写入，同名时覆盖调用方的条目
    """
    merged_vars = dict(variables or {})
    merged_vars.update(BUILTIN_VARIABLES)
    merged_fns = dict(functions or {})
    merged_fns.update(BUILTIN_FUNCTIONS)
    return merged_vars, merged_fns
