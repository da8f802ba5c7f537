"""转换配置模型。

定义批量转换的不可变配置参数。
"""

from pathlib import Path, PurePath

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import ImageFormats, ProcessingDefaults, ValidationLimits


class ConversionConfig(BaseModel):
    """批量转换配置

    启动时构建一次，之后只读，所有并发任务共享同一个实例。
    """

    model_config = ConfigDict(frozen=True)

    quality: int = Field(
        ProcessingDefaults.QUALITY,
        ge=ValidationLimits.MIN_QUALITY,
        le=ValidationLimits.MAX_QUALITY,
        description="输出质量（0-100）",
    )
    directories: tuple[str, ...] = Field(
        ProcessingDefaults.DIRECTORIES,
        min_length=1,
        description="递归搜索的根目录",
    )
    concurrency: int = Field(
        ProcessingDefaults.CONCURRENCY,
        ge=ValidationLimits.MIN_CONCURRENCY,
        description="每批并发转换的文件数",
    )
    pattern: str = Field(
        ProcessingDefaults.PATTERN, min_length=1, description="文件匹配模式"
    )
    target_format: str = Field(
        ProcessingDefaults.TARGET_FORMAT, description="目标格式"
    )

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        # glob 模式必须相对于根目录
        if PurePath(v).is_absolute() or v.startswith(("/", "\\")):
            raise ValueError(f"匹配模式必须是相对路径: {v}")
        return v

    @field_validator("target_format")
    @classmethod
    def validate_target_format(cls, v: str) -> str:
        # 使用 Pillow 动态检查格式支持
        normalized = ImageFormats.normalize(v)
        supported_formats = ImageFormats.get_supported_formats()
        if normalized not in supported_formats:
            raise ValueError(
                f"不支持的格式: {v}，支持的格式: {sorted(supported_formats)}"
            )
        return normalized

    @property
    def target_extension(self) -> str:
        """目标格式的扩展名"""
        return ImageFormats.get_extension(self.target_format)

    def get_output_path(self, input_path: Path) -> Path:
        """生成输出路径：同目录、同名，只替换最后一个扩展名"""
        return input_path.with_suffix(self.target_extension)
