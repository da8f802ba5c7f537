"""Entry point for python -m py_webp_batch.

按内置配置（可被环境变量覆盖）执行一次批量转换。
"""

import asyncio
import sys

from .config import get_config
from .engine.batch import BatchProcessor
from .exceptions import ConfigurationError, DiscoveryError, ErrorHandler
from .utils.logging_helpers import configure_logging


EXIT_OK = 0
EXIT_DISCOVERY_FAILED = 1
EXIT_CONFIG_INVALID = 2


def run(argv: list[str] | None = None) -> int:
    """执行一次批量转换并返回进程退出码"""
    argv = sys.argv[1:] if argv is None else argv

    # 检查版本信息
    if argv and argv[0] in ["--version", "-v"]:
        from . import __version__

        print(f"py-webp-batch {__version__}")
        return EXIT_OK

    try:
        app_config = get_config()
        configure_logging(app_config.logging)
        config = app_config.build_conversion_config()
    except ConfigurationError as e:
        print(f"配置错误: {e.message}", file=sys.stderr)
        return EXIT_CONFIG_INVALID

    try:
        asyncio.run(BatchProcessor(config).run())
    except DiscoveryError as e:
        ErrorHandler.log_error("查找文件", e.input_path, e)
        return EXIT_DISCOVERY_FAILED

    return EXIT_OK


def main() -> None:
    """主入口函数"""
    sys.exit(run())


if __name__ == "__main__":
    main()
