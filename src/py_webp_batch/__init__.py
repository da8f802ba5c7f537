"""批量图像 WebP 转换工具。

递归查找图像文件，按固定质量分批并发转换为 WebP，并输出汇总统计。
"""

__version__ = "0.1.0"
__description__ = "批量图像 WebP 转换工具，基于 Pillow"

# 核心功能导出
from .core.conversion_engine import convert_image
from .engine.batch import BatchProcessor
from .engine.chunked_executor import ChunkedExecutor
from .models.conversion_config import ConversionConfig
from .models.outcome import BatchSummary, ConversionFailure, ConversionSuccess


__all__ = [
    "BatchProcessor",
    "BatchSummary",
    "ChunkedExecutor",
    "ConversionConfig",
    "ConversionFailure",
    "ConversionSuccess",
    "convert_image",
    "get_version",
]


def get_version() -> str:
    """获取版本号。"""
    return __version__
