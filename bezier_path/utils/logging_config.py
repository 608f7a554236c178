"""
logging_config - 日志配置

为 bezier_path 包提供统一的日志设置。库默认只挂一个 NullHandler，
日志照常向上传播，由调用方决定如何输出；需要直接输出时显式调用 setup_logging。

用法:
    from bezier_path.utils.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("Built path with %d sections", n)

    # 应用或调试脚本中
    from bezier_path.utils.logging_config import setup_logging
    setup_logging(logging.DEBUG)
"""

import logging
import sys
from typing import Optional

# 包级 logger 名称前缀
LOGGER_PREFIX = "bezier_path"

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
DETAILED_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s:%(lineno)d - %(message)s"

logging.getLogger(LOGGER_PREFIX).addHandler(logging.NullHandler())


def setup_logging(
    level: int = logging.WARNING,
    detailed: bool = False,
    stream: Optional[object] = None,
) -> logging.Logger:
    """
    为包级 logger 挂接输出 handler。重复调用会替换已有的 handler。

    挂接后不再向上传播，避免与调用方的 root handler 重复输出。

    Args:
        level: 日志级别
        detailed: 为 True 时使用带时间戳和行号的格式
        stream: 输出流，默认 sys.stderr

    Returns:
        包的根 logger
    """
    root_logger = logging.getLogger(LOGGER_PREFIX)
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DETAILED_FORMAT if detailed else DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    root_logger.propagate = False

    return root_logger


def reset_logging() -> logging.Logger:
    """撤销 setup_logging，恢复库默认配置: NullHandler、级别 NOTSET、向上传播。"""
    root_logger = logging.getLogger(LOGGER_PREFIX)
    root_logger.handlers.clear()
    root_logger.addHandler(logging.NullHandler())
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    获取模块 logger，名称统一挂到 bezier_path 命名空间下。

    Args:
        name: 模块名（通常为 __name__）

    Returns:
        模块 logger
    """
    if not name.startswith(LOGGER_PREFIX):
        name = f"{LOGGER_PREFIX}.{name}"

    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    """运行时修改日志级别。"""
    root_logger = logging.getLogger(LOGGER_PREFIX)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug() -> None:
    """开启 DEBUG 级别日志。"""
    set_log_level(logging.DEBUG)


def disable_debug() -> None:
    """恢复到 WARNING 级别。"""
    set_log_level(logging.WARNING)


__all__ = [
    "setup_logging",
    "reset_logging",
    "get_logger",
    "set_log_level",
    "enable_debug",
    "disable_debug",
    "LOGGER_PREFIX",
]
