"""求值入口模块"""
from .evaluator import ExpressionEvaluator, evaluate

__all__ = ['ExpressionEvaluator', 'evaluate']
