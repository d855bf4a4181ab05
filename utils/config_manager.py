"""
配置管理模块
"""

import logging
import os
from typing import Any


logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)


class ClientConfig:
    """客户端配置类"""

    def __init__(self):
        # 默认地区配置
        self.default_country = "us"
        self.default_lang = ""

        # 请求配置
        self.request_timeout = 30
        self.user_agent = DEFAULT_USER_AGENT
        self.verify_ssl = True

        # 页面结构版本（决定 HTML 选择器）
        self.markup_version = "2025"

        # 日志配置
        self.log_level = "INFO"
        self.log_file = ""  # 为空时只输出到控制台
        self.log_max_size = 10 * 1024 * 1024  # 10MB
        self.log_backup_count = 5


class ConfigManager:
    """配置管理器"""

    def __init__(self, config_file: str | None = None):
        self.config_file = config_file or ".env"
        self.config = ClientConfig()
        self._load_config()

    def _load_config(self):
        """加载配置"""
        try:
            # 尝试加载.env文件
            if os.path.exists(self.config_file):
                self._load_from_env_file()

            # 加载环境变量
            self._load_from_environment()
            # 验证配置
            self._validate_config()

            logger.debug("Configuration loaded successfully")

        except Exception as e:
            logger.error(f"Error loading configuration: {e}")
            raise

    def _load_from_env_file(self):
        """从.env文件加载配置"""
        from dotenv import load_dotenv

        load_dotenv(self.config_file)
        logger.debug(f"Loaded configuration from {self.config_file}")

    def _load_from_environment(self):
        """从环境变量加载配置"""

        # 辅助方法：读取布尔值环境变量
        def get_bool_env(key: str, default: str = "False") -> bool:
            return os.getenv(key, default).lower() == "true"

        # 辅助方法：读取整数环境变量
        def get_int_env(key: str, default: str) -> int:
            return int(os.getenv(key, default))

        # 地区配置
        self.config.default_country = os.getenv("APP_STORE_COUNTRY", "us").lower()
        self.config.default_lang = os.getenv("APP_STORE_LANG", "")

        # 请求配置
        self.config.request_timeout = get_int_env("REQUEST_TIMEOUT", "30")
        self.config.user_agent = os.getenv("USER_AGENT", DEFAULT_USER_AGENT)
        self.config.verify_ssl = get_bool_env("VERIFY_SSL", "True")

        # 页面结构版本
        self.config.markup_version = os.getenv("MARKUP_VERSION", "2025")

        # 日志配置
        self.config.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.config.log_file = os.getenv("LOG_FILE", "")
        self.config.log_max_size = get_int_env("LOG_MAX_SIZE", str(10 * 1024 * 1024))
        self.config.log_backup_count = get_int_env("LOG_BACKUP_COUNT", "5")

    def _validate_config(self):
        """验证配置"""
        if self.config.request_timeout <= 0:
            raise ValueError("REQUEST_TIMEOUT must be a positive integer")

        if self.config.log_level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown LOG_LEVEL: {self.config.log_level}")

    def get(self, key: str, default: Any = None) -> Any:
        """获取配置值"""
        return getattr(self.config, key, default)

    def update_config(self, **kwargs):
        """更新配置"""
        for key, value in kwargs.items():
            if hasattr(self.config, key):
                setattr(self.config, key, value)
                logger.info(f"Configuration updated: {key} = {value}")
        self._validate_config()

    def reload(self):
        """重新加载配置"""
        self.config = ClientConfig()
        self._load_config()


def get_config() -> ClientConfig:
    """获取全局配置"""
    return config_manager.config


# 全局配置管理器实例
config_manager = ConfigManager()
