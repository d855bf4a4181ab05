"""
日志管理模块
根据配置初始化 app_store 的日志输出
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from utils.config_manager import ClientConfig, get_config


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOGGER_NAMES = ("app_store", "utils")


def setup_logging(config: ClientConfig | None = None) -> logging.Logger:
    """
    配置库日志

    重复调用不会叠加处理器。

    Args:
        config: 客户端配置，默认使用全局配置

    Returns:
        logging.Logger: app_store 根日志器
    """
    config = config or get_config()
    formatter = logging.Formatter(LOG_FORMAT)

    for name in LOGGER_NAMES:
        target = logging.getLogger(name)
        target.setLevel(config.log_level)

        if target.handlers:  # 避免重复添加处理器
            continue

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        target.addHandler(console_handler)

        if config.log_file:
            log_dir = os.path.dirname(config.log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                config.log_file,
                maxBytes=config.log_max_size,
                backupCount=config.log_backup_count,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            target.addHandler(file_handler)

    logger.debug(f"日志已初始化: level={config.log_level}, file={config.log_file or '-'}")
    return logging.getLogger(LOGGER_NAMES[0])


def reset_logging() -> None:
    """移除 setup_logging 添加的处理器"""
    for name in LOGGER_NAMES:
        target = logging.getLogger(name)
        for handler in list(target.handlers):
            target.removeHandler(handler)
            handler.close()
