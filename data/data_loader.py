import pandas as pd
import numpy as np
import logging

from core.errors import ExpressionError
from engine.evaluator import ExpressionEvaluator
from config.config import BATCH_CONFIG

logger = logging.getLogger(__name__)


def load_variable_table(file_path):
    """
    加载CSV数据集，每一行的数值列作为一张变量表。

    Parameters:
    - file_path: CSV文件路径

    Returns:
    - DataFrame（只保留数值列）
    """
    logger.info(f"Loading dataset from {file_path}")
    dataset = pd.read_csv(file_path)

    numeric = dataset.select_dtypes(include=[np.number])
    if numeric.empty:
        raise ValueError(f"No numeric columns found in {file_path}.")

    dropped = [col for col in dataset.columns if col not in numeric.columns]
    if dropped:
        logger.warning(f"Ignoring non-numeric columns: {dropped}")

    logger.info(f"Loaded {len(numeric)} rows, variables: {numeric.columns.tolist()}")
    return numeric


def evaluate_over_frame(expression, frame, functions=None, evaluator=None, allow_errors=None):
    """
    对DataFrame的每一行求值，行内的数值列作为变量。

    Parameters:
    - expression: 表达式字符串
    - frame: 数据集
    - functions: 自定义函数表
    - evaluator: ExpressionEvaluator 实例（可复用其分词缓存）
    - allow_errors: True时出错的行记为 fill_value 而不是抛出

    Returns:
    - 与frame索引对齐的float Series
    """
    if evaluator is None:
        evaluator = ExpressionEvaluator()
    if allow_errors is None:
        allow_errors = BATCH_CONFIG["allow_errors"]

    numeric = frame.select_dtypes(include=[np.number])
    values = []
    failed = 0

    for index, row in numeric.iterrows():
        # 缺失值按NaN传入，结果按IEEE规则传播
        variables = {col: float(value) for col, value in row.items()}
        try:
            values.append(evaluator.evaluate(expression, variables, functions))
        except ExpressionError as e:
            if not allow_errors:
                raise
            logger.error(f"Error evaluating '{expression}' at row {index}: {e}")
            values.append(BATCH_CONFIG["fill_value"])
            failed += 1

    if failed:
        logger.warning(f"{failed}/{len(numeric)} rows failed for expression: {expression}")

    return pd.Series(values, index=frame.index, dtype=float, name=expression)


def apply_expressions_and_return_transformed(frame, expressions, evaluate_func=None):
    """
    把表达式逐个应用到数据集，返回包含原始列和新结果列的数据集

    Parameters:
    - frame: 原始数据集
    - expressions: 表达式列表
    - evaluate_func: 签名为 (expression, frame) -> Series 的函数，默认 evaluate_over_frame

    Returns:
    - transformed: 每个表达式新增一列（列名即表达式）
    """
    if evaluate_func is None:
        evaluate_func = evaluate_over_frame

    transformed = frame.copy()
    for expression in expressions:
        transformed[expression] = evaluate_func(expression, frame)

    return transformed
