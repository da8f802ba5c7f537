"""统一配置管理模块。

提供应用程序的配置管理，包括默认值、环境变量支持等。
"""

import logging
import os
from dataclasses import dataclass

from pydantic import ValidationError as PydanticValidationError

from .exceptions import ConfigurationError
from .models.constants import ProcessingDefaults
from .models.conversion_config import ConversionConfig
from .utils.message_formatter import format_validation_error


ENV_PREFIX = "WEBP_BATCH_"


@dataclass(frozen=True)
class ConversionDefaults:
    """转换相关的默认配置"""

    QUALITY: int = ProcessingDefaults.QUALITY
    DIRECTORIES: tuple[str, ...] = ProcessingDefaults.DIRECTORIES
    CONCURRENCY: int = ProcessingDefaults.CONCURRENCY
    PATTERN: str = ProcessingDefaults.PATTERN
    TARGET_FORMAT: str = ProcessingDefaults.TARGET_FORMAT


@dataclass(frozen=True)
class LoggingDefaults:
    """日志相关的默认配置"""

    # 日志级别
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # 文件日志
    ENABLE_FILE_LOGGING: bool = False
    LOG_FILE_PATH: str = "py_webp_batch.log"
    LOG_FILE_MAX_SIZE: int = 10 * 1024 * 1024  # 10MB
    LOG_FILE_BACKUP_COUNT: int = 5


class AppConfig:
    """应用程序配置管理器

    支持环境变量覆盖默认配置
    """

    def __init__(self):
        self.conversion = ConversionDefaults()
        self.logging = LoggingDefaults()

        # 从环境变量加载配置
        self._load_from_env()

    def _load_from_env(self):
        """从环境变量加载配置"""
        # 转换配置
        if quality := os.getenv(f"{ENV_PREFIX}QUALITY"):
            object.__setattr__(
                self.conversion, "QUALITY", _parse_int("QUALITY", quality)
            )

        if concurrency := os.getenv(f"{ENV_PREFIX}CONCURRENCY"):
            object.__setattr__(
                self.conversion,
                "CONCURRENCY",
                _parse_int("CONCURRENCY", concurrency),
            )

        if directories := os.getenv(f"{ENV_PREFIX}DIRECTORIES"):
            object.__setattr__(
                self.conversion,
                "DIRECTORIES",
                tuple(d for d in directories.split(os.pathsep) if d),
            )

        if pattern := os.getenv(f"{ENV_PREFIX}PATTERN"):
            object.__setattr__(self.conversion, "PATTERN", pattern)

        # 日志配置
        if log_level := os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            if log_level.upper() not in logging.getLevelNamesMapping():
                raise ConfigurationError(
                    format_validation_error(
                        f"{ENV_PREFIX}LOG_LEVEL", log_level, "DEBUG/INFO/WARNING/ERROR"
                    )
                )
            object.__setattr__(self.logging, "LOG_LEVEL", log_level.upper())

        if enable_file_log := os.getenv(f"{ENV_PREFIX}ENABLE_FILE_LOGGING"):
            object.__setattr__(
                self.logging,
                "ENABLE_FILE_LOGGING",
                enable_file_log.lower() in ("true", "1", "yes"),
            )

    def build_conversion_config(self) -> ConversionConfig:
        """构建经过验证的不可变转换配置

        Raises:
            ConfigurationError: 配置值不合法
        """
        try:
            return ConversionConfig(
                quality=self.conversion.QUALITY,
                directories=self.conversion.DIRECTORIES,
                concurrency=self.conversion.CONCURRENCY,
                pattern=self.conversion.PATTERN,
                target_format=self.conversion.TARGET_FORMAT,
            )
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(loc) for loc in first["loc"])
            raise ConfigurationError(
                format_validation_error(field, first.get("input"), first["msg"])
            ) from e


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(
            format_validation_error(f"{ENV_PREFIX}{name}", value, "整数")
        ) from e


def get_config() -> AppConfig:
    """读取环境变量并返回新的配置实例"""
    return AppConfig()
