"""配置文件"""
import logging

# 求值器参数
EVALUATOR_CONFIG = {
    "cache_size": 256,  # 分词结果LRU缓存条目数
    "enable_cache": True,
    "bind_builtins": True,  # 是否合并内置常量与函数
}

# 批量（按行）求值参数
BATCH_CONFIG = {
    "allow_errors": False,  # True时单行出错记为fill_value而不是抛出
    "fill_value": float("nan"),
    "result_column": "result",
}

# 日志配置
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

logger = logging.getLogger(__name__)


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert EVALUATOR_CONFIG["cache_size"] > 0, "cache_size必须为正数"
    assert isinstance(BATCH_CONFIG["result_column"], str) and BATCH_CONFIG["result_column"], \
        "result_column不能为空"
    assert isinstance(logging.getLevelName(LOGGING_CONFIG["level"]), int), \
        f"Unknown log level: {LOGGING_CONFIG['level']}"
    logger.debug("Configuration validated successfully!")
