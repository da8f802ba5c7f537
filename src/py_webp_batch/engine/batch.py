"""批量处理器模块。

负责一次完整的运行：查找文件、分批转换、汇总输出。
"""

import time
from functools import partial

from ..core.conversion_engine import convert_image_detailed
from ..models.conversion_config import ConversionConfig
from ..models.outcome import BatchSummary
from ..utils.file_helpers import find_image_files
from ..utils.logging_helpers import get_logger
from .chunked_executor import ChunkedExecutor, ConvertOperation
from .reporter import Reporter


logger = get_logger()


class BatchProcessor:
    """批量图像处理器

    查找失败（DiscoveryError）会直接向上抛出；单个文件的转换失败
    只记入汇总，不影响其他文件。
    """

    def __init__(
        self,
        config: ConversionConfig,
        reporter: Reporter | None = None,
        operation: ConvertOperation | None = None,
    ):
        """初始化批量处理器

        Args:
            config: 转换配置
            reporter: 汇总输出器
            operation: 单个文件的转换操作，默认使用图像转换引擎
        """
        self.config = config
        self.reporter = reporter or Reporter()
        self.operation = operation or partial(convert_image_detailed, config=config)
        self.executor = ChunkedExecutor(config.concurrency)

    async def run(self) -> BatchSummary:
        """执行一次批量转换

        Returns:
            BatchSummary: 汇总结果；没有找到文件时 total 为 0

        Raises:
            DiscoveryError: 根目录无法遍历
        """
        files = find_image_files(self.config.directories, self.config.pattern)

        if not files:
            self.reporter.report_empty()
            return BatchSummary(total=0)

        logger.info(
            f"🚀 找到 {len(files)} 个文件，开始转换，并发数 {self.config.concurrency}"
        )

        start = time.perf_counter()
        outcomes = await self.executor.run(files, self.operation)
        elapsed = time.perf_counter() - start

        summary = BatchSummary(
            total=len(files), outcomes=outcomes, elapsed_seconds=elapsed
        )
        self.reporter.report(summary)
        return summary
