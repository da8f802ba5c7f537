"""数据模型包。

定义批量转换相关的数据结构和模型。
"""

from .constants import (
    ImageFormats,
    ProcessingDefaults,
    ValidationLimits,
    WebPDefaults,
)
from .conversion_config import ConversionConfig
from .outcome import BatchSummary, ConversionFailure, ConversionSuccess, Outcome


__all__ = [
    "BatchSummary",
    "ConversionConfig",
    "ConversionFailure",
    "ConversionSuccess",
    "ImageFormats",
    "Outcome",
    "ProcessingDefaults",
    "ValidationLimits",
    "WebPDefaults",
]
