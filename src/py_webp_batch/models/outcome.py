"""转换结果模型。

定义单个文件的转换结果以及整批运行的汇总。
"""

from pathlib import Path
from typing import Annotated, Literal

from humanize import naturalsize
from pydantic import BaseModel, Field, computed_field


class ConversionSuccess(BaseModel):
    """单个文件转换成功"""

    status: Literal["success"] = "success"
    input_path: Path = Field(description="输入文件路径")
    output_path: Path = Field(description="输出文件路径")
    original_size: int = Field(0, ge=0, description="原始文件大小（字节）")
    converted_size: int = Field(0, ge=0, description="转换后文件大小（字节）")

    @property
    def success(self) -> bool:
        return True

    def get_size_saved(self) -> int:
        """节省的字节数，输出变大时为负数"""
        return self.original_size - self.converted_size


class ConversionFailure(BaseModel):
    """单个文件转换失败"""

    status: Literal["failure"] = "failure"
    input_path: Path = Field(description="输入文件路径")
    error: str = Field(description="错误信息")

    @property
    def success(self) -> bool:
        return False


Outcome = Annotated[
    ConversionSuccess | ConversionFailure, Field(discriminator="status")
]


class BatchSummary(BaseModel):
    """批量转换汇总

    total 是发现的文件总数，失败数由总数减去成功数得到。
    """

    total: int = Field(ge=0, description="候选文件总数")
    outcomes: list[Outcome] = Field(default_factory=list, description="各文件结果")
    elapsed_seconds: float = Field(0.0, ge=0, description="耗时（秒）")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def success_count(self) -> int:
        return len(self.successful_outputs)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failure_count(self) -> int:
        return self.total - self.success_count

    @property
    def successful_outputs(self) -> list[Path]:
        """成功生成的输出文件，按完成顺序"""
        return [o.output_path for o in self.outcomes if isinstance(o, ConversionSuccess)]

    @property
    def failures(self) -> list[ConversionFailure]:
        return [o for o in self.outcomes if isinstance(o, ConversionFailure)]

    def get_total_size_saved_human(self) -> str:
        """人类可读的总节省大小"""
        saved = sum(
            o.get_size_saved() for o in self.outcomes if isinstance(o, ConversionSuccess)
        )
        if saved < 0:
            return f"-{naturalsize(-saved, binary=True)}"
        return naturalsize(saved, binary=True)
