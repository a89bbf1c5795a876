"""日志模块

使用示例:
    from sortkit.log import setup_logger, get_logger

    setup_logger("sortkit", level="DEBUG")
    logger = get_logger()
"""

from .logger import (
    setup_logger,
    setup_logger_from_config,
    create_formatter,
    MicrosecondFormatter,
    DEFAULT_LOG_FORMAT,
    logger,
    get_logger,
)

__all__ = [
    "setup_logger",
    "setup_logger_from_config",
    "create_formatter",
    "MicrosecondFormatter",
    "DEFAULT_LOG_FORMAT",
    "logger",
    "get_logger",
]
