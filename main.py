"""主程序入口 - 命令行表达式求值"""
import argparse
import logging
import sys

from config.config import EVALUATOR_CONFIG, BATCH_CONFIG, LOGGING_CONFIG, validate_config
from core.errors import ExpressionError
from engine.evaluator import ExpressionEvaluator
from data.data_loader import (
    load_variable_table,
    evaluate_over_frame,
    apply_expressions_and_return_transformed
)

logger = logging.getLogger(__name__)


def parse_assignment(text):
    """解析 name=value 形式的变量赋值"""
    name, sep, value = text.partition('=')
    name = name.strip()
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"Expected name=value, got '{text}'")
    try:
        return name, float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Value for '{name}' is not a number: '{value}'")


def build_parser():
    parser = argparse.ArgumentParser(description="Arithmetic expression evaluator")

    parser.add_argument(
        "expression",
        type=str,
        help="Expression to evaluate, e.g. \"3 + x*2\""
    )
    parser.add_argument(
        "--var",
        type=parse_assignment,
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Bind a variable (repeatable)"
    )
    parser.add_argument(
        "--data_path",
        type=str,
        default=None,
        help="CSV file; the expression is evaluated once per row using its numeric columns"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Path to save the transformed dataset (with --data_path)"
    )
    parser.add_argument(
        "--show_rpn",
        action="store_true",
        help="Also print the postfix (RPN) form of the expression"
    )
    parser.add_argument(
        "--allow_errors",
        action="store_true",
        help="With --data_path, record failed rows as NaN instead of aborting"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: %(default)s)"
    )
    return parser


def main(args):
    evaluator = ExpressionEvaluator(cache_size=EVALUATOR_CONFIG["cache_size"])
    variables = dict(args.var)

    try:
        if args.show_rpn:
            print(' '.join(evaluator.to_rpn(args.expression, variables)))

        if args.data_path is None:
            print(evaluator.evaluate(args.expression, variables))
            return 0

        frame = load_variable_table(args.data_path)
        allow_errors = args.allow_errors or BATCH_CONFIG["allow_errors"]

        def evaluate_func(expression, data):
            return evaluate_over_frame(expression, data, evaluator=evaluator, allow_errors=allow_errors)

        transformed = apply_expressions_and_return_transformed(frame, [args.expression], evaluate_func)
        transformed = transformed.rename(columns={args.expression: BATCH_CONFIG["result_column"]})
        logger.info(f"Transformed dataset shape: {transformed.shape}")

        if args.output_path:
            logger.info(f"Saving transformed data to {args.output_path}")
            transformed.to_csv(args.output_path)
        else:
            print(transformed.to_string())
        return 0

    except ExpressionError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    args = build_parser().parse_args()

    LOGGING_CONFIG["level"] = args.log_level.upper()
    validate_config()
    logging.basicConfig(
        level=LOGGING_CONFIG["level"],
        format=LOGGING_CONFIG["format"]
    )
    sys.exit(main(args))
