"""分批并发执行器测试。"""

import asyncio
import math
from pathlib import Path

import pytest

from py_webp_batch.engine.chunked_executor import ChunkedExecutor, iter_chunks
from py_webp_batch.exceptions import ConversionError
from py_webp_batch.models.outcome import ConversionFailure, ConversionSuccess


def _paths(count: int) -> list[Path]:
    return [Path(f"img_{i}.png") for i in range(count)]


class EventRecorder:
    """记录每个任务的开始和结束，并统计同时运行的任务数"""

    def __init__(self, fail: set[str] | None = None):
        self.events: list[tuple[str, str]] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.fail = fail or set()

    async def __call__(self, path: Path) -> Path:
        self.events.append(("start", path.name))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            # 让批内任务以与输入相反的顺序结束
            index = int(path.stem.split("_")[1])
            await asyncio.sleep(0.005 * (10 - index % 10))
            if path.name in self.fail:
                raise ConversionError("编码失败", path)
            return path.with_suffix(".webp")
        finally:
            self.in_flight -= 1
            self.events.append(("end", path.name))


class TestIterChunks:
    """批次切分测试"""

    @pytest.mark.parametrize(
        ("count", "size", "expected"),
        [
            (5, 2, [2, 2, 1]),
            (4, 2, [2, 2]),
            (3, 10, [3]),
            (1, 1, [1]),
            (0, 3, []),
        ],
    )
    def test_chunk_sizes(self, count: int, size: int, expected: list[int]):
        """测试批次大小和数量"""
        chunks = list(iter_chunks(_paths(count), size))
        assert [len(c) for c in chunks] == expected

    def test_order_preserved(self):
        """测试批次保持原始顺序"""
        items = _paths(7)
        flattened = [p for chunk in iter_chunks(items, 3) for p in chunk]
        assert flattened == items

    def test_invalid_size(self):
        """测试非法批次大小"""
        with pytest.raises(ValueError):
            list(iter_chunks(_paths(3), 0))


class TestChunkedExecutor:
    """执行器核心行为测试"""

    @pytest.mark.parametrize("count", [1, 2, 5, 9])
    @pytest.mark.parametrize("concurrency", [1, 2, 3, 8])
    def test_chunk_count_and_total(self, count: int, concurrency: int):
        """测试批次数为 ceil(N/C) 且结果总数为 N"""
        executor = ChunkedExecutor(concurrency)
        outcomes = asyncio.run(executor.run(_paths(count), EventRecorder()))

        assert len(executor.chunk_sizes) == math.ceil(count / concurrency)
        assert all(size <= concurrency for size in executor.chunk_sizes)
        assert sum(executor.chunk_sizes) == count
        assert len(outcomes) == count

    def test_chunk_barrier(self):
        """测试下一批任务只在当前批全部结束后开始"""
        recorder = EventRecorder()
        items = _paths(7)
        asyncio.run(ChunkedExecutor(3).run(items, recorder))

        chunks = [[p.name for p in c] for c in iter_chunks(items, 3)]
        position = {event: i for i, event in enumerate(recorder.events)}
        for current, following in zip(chunks, chunks[1:], strict=False):
            last_end = max(position[("end", name)] for name in current)
            first_start = min(position[("start", name)] for name in following)
            assert last_end < first_start

    def test_concurrency_bound(self):
        """测试同时运行的任务数不超过并发数"""
        recorder = EventRecorder()
        asyncio.run(ChunkedExecutor(3).run(_paths(10), recorder))
        assert recorder.max_in_flight == 3

    def test_failure_isolated(self):
        """测试单个失败不影响同批和后续批次"""
        recorder = EventRecorder(fail={"img_0.png"})
        outcomes = asyncio.run(ChunkedExecutor(2).run(_paths(5), recorder))

        failures = [o for o in outcomes if isinstance(o, ConversionFailure)]
        successes = [o for o in outcomes if isinstance(o, ConversionSuccess)]
        assert len(failures) == 1
        assert failures[0].input_path == Path("img_0.png")
        assert "编码失败" in failures[0].error
        assert len(successes) == 4
        assert Path("img_1.webp") in {s.output_path for s in successes}

    def test_unexpected_exception_becomes_failure(self):
        """测试非转换异常同样被记录为失败"""

        async def explode(path: Path) -> Path:
            raise RuntimeError(f"boom {path.name}")

        outcomes = asyncio.run(ChunkedExecutor(2).run(_paths(3), explode))
        assert all(isinstance(o, ConversionFailure) for o in outcomes)
        assert outcomes[0].error.startswith("boom")

    def test_completion_order_within_chunk(self):
        """测试批内结果按完成顺序排列"""
        outcomes = asyncio.run(ChunkedExecutor(3).run(_paths(3), EventRecorder()))
        # 序号越大休眠越短，先完成
        assert [o.input_path.name for o in outcomes] == [
            "img_2.png",
            "img_1.png",
            "img_0.png",
        ]

    def test_empty_input(self):
        """测试空列表不产生任何批次"""
        executor = ChunkedExecutor(4)
        assert asyncio.run(executor.run([], EventRecorder())) == []
        assert executor.chunk_sizes == []

    def test_invalid_concurrency(self):
        """测试非法并发数"""
        with pytest.raises(ValueError):
            ChunkedExecutor(0)

    def test_chunk_progress_logged(self, caplog):
        """测试每个批次开始时记录调试日志"""
        caplog.set_level("DEBUG", logger="py_webp_batch.engine.chunked_executor")
        asyncio.run(ChunkedExecutor(2).run(_paths(3), EventRecorder()))

        records = [
            r for r in caplog.records if r.name == "py_webp_batch.engine.chunked_executor"
        ]
        assert [r.getMessage() for r in records] == [
            "开始第 1/2 批，共 2 个文件",
            "开始第 2/2 批，共 1 个文件",
        ]
