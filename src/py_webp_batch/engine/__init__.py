"""批量转换处理引擎模块。

包含分批并发执行、批量处理和汇总输出等核心处理逻辑。
"""

from .batch import BatchProcessor
from .chunked_executor import ChunkedExecutor, iter_chunks
from .reporter import Reporter


__all__ = [
    "BatchProcessor",
    "ChunkedExecutor",
    "Reporter",
    "iter_chunks",
]
