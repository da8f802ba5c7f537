"""结果汇总输出模块。"""

import sys
from typing import TextIO

from ..models.outcome import BatchSummary


class Reporter:
    """把批量转换汇总打印到控制台"""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def _print(self, line: str = "") -> None:
        print(line, file=self.stream or sys.stdout)

    def report_empty(self) -> None:
        """没有找到任何文件"""
        self._print("指定目录中没有找到需要转换的文件。")

    def report(self, summary: BatchSummary) -> None:
        """打印汇总信息"""
        self._print()
        self._print("✨ 转换汇总:")
        self._print(f"- 文件总数: {summary.total}")
        self._print(f"- 转换成功: {summary.success_count}")
        self._print(f"- 转换失败: {summary.failure_count}")
        self._print(f"- 节省空间: {summary.get_total_size_saved_human()}")
        self._print(f"- 耗时: {summary.elapsed_seconds:.2f}s")
