"""分批并发执行器模块。

把任务列表切成固定大小的批次，批内并发、批间串行。
"""

import asyncio
from collections.abc import Awaitable, Callable, Iterator, Sequence
from pathlib import Path
from typing import TypeVar

from ..exceptions import ErrorHandler
from ..models.outcome import ConversionSuccess, Outcome
from ..utils.logging_helpers import get_logger


logger = get_logger()
T = TypeVar("T")

ConvertOperation = Callable[[Path], Awaitable[Path | ConversionSuccess]]


def iter_chunks(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """按顺序切分为长度不超过 size 的连续批次"""
    if size < 1:
        raise ValueError(f"批次大小必须大于0: {size}")
    for start in range(0, len(items), size):
        yield items[start : start + size]


class ChunkedExecutor:
    """分批并发执行器

    同一时刻最多运行 concurrency 个任务。下一批只在当前批次所有任务
    都结束（成功或失败）之后才开始。
    """

    def __init__(self, concurrency: int = 4):
        """初始化执行器

        Args:
            concurrency: 每批并发数，必须 >= 1
        """
        if concurrency < 1:
            raise ValueError(f"并发数必须大于0: {concurrency}")
        self.concurrency = concurrency
        self.chunk_sizes: list[int] = []

    async def run(
        self, items: Sequence[Path], operation: ConvertOperation
    ) -> list[Outcome]:
        """执行全部任务

        Args:
            items: 输入文件列表
            operation: 单个文件的异步转换操作

        Returns:
            list[Outcome]: 每个输入对应一个结果；批内按完成顺序，批间按输入顺序
        """
        self.chunk_sizes = []
        outcomes: list[Outcome] = []
        total_chunks = -(-len(items) // self.concurrency)

        for index, chunk in enumerate(iter_chunks(items, self.concurrency), start=1):
            logger.debug(f"开始第 {index}/{total_chunks} 批，共 {len(chunk)} 个文件")
            self.chunk_sizes.append(len(chunk))
            outcomes.extend(await self._run_chunk(chunk, operation))

        return outcomes

    async def _run_chunk(
        self, chunk: Sequence[Path], operation: ConvertOperation
    ) -> list[Outcome]:
        """并发执行一个批次，等待全部任务结束"""
        tasks = [
            asyncio.create_task(self._settle(path, operation)) for path in chunk
        ]

        results: list[Outcome] = []
        for next_done in asyncio.as_completed(tasks):
            results.append(await next_done)
        return results

    async def _settle(self, input_path: Path, operation: ConvertOperation) -> Outcome:
        """执行单个任务，把异常转换为失败结果"""
        try:
            result = await operation(input_path)
        except Exception as e:
            return ErrorHandler.create_failure_outcome(e, input_path)

        if isinstance(result, ConversionSuccess):
            return result
        return ConversionSuccess(input_path=input_path, output_path=result)
