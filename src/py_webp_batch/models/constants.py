"""图像格式相关常量定义。

基于 Pillow 动态能力的格式管理，避免硬编码重复。
"""

from typing import Final

from PIL import Image


class ImageFormats:
    """基于 Pillow 的动态图像格式管理"""

    # 只定义必要的别名映射（用户友好的别名）
    ALIASES: Final[dict[str, str]] = {
        "JPG": "JPEG",
    }

    # 只定义首选扩展名（当 Pillow 有多个选择时）
    PREFERRED_EXTENSIONS: Final[dict[str, str]] = {
        "JPEG": ".jpg",
        "TIFF": ".tiff",
    }

    @classmethod
    def get_supported_formats(cls) -> set[str]:
        """动态获取 Pillow 支持的所有格式"""
        return {fmt.upper() for fmt in Image.registered_extensions().values() if fmt}

    @classmethod
    def normalize(cls, format_name: str) -> str:
        """统一格式名称大小写并解析别名"""
        format_upper = format_name.upper()
        return cls.ALIASES.get(format_upper, format_upper)

    @classmethod
    def get_extension(cls, format_name: str) -> str:
        """动态获取扩展名，优先使用首选扩展名"""
        format_upper = cls.normalize(format_name)

        if format_upper in cls.PREFERRED_EXTENSIONS:
            return cls.PREFERRED_EXTENSIONS[format_upper]

        # 从 Pillow 动态获取
        for ext, fmt in Image.registered_extensions().items():
            if fmt and fmt.upper() == format_upper:
                return ext.lower()

        # 后备选择
        return f".{format_upper.lower()}"


class ValidationLimits:
    """参数验证范围"""

    MIN_QUALITY: Final[int] = 0
    MAX_QUALITY: Final[int] = 100
    MIN_CONCURRENCY: Final[int] = 1


class ProcessingDefaults:
    """转换默认值"""

    QUALITY: Final[int] = 90
    DIRECTORIES: Final[tuple[str, ...]] = ("./demo",)
    CONCURRENCY: Final[int] = 4
    PATTERN: Final[str] = "**/*.png"
    TARGET_FORMAT: Final[str] = "WEBP"


class WebPDefaults:
    """WebP 编码参数"""

    METHOD: Final[int] = 6  # 0=最快，6=最慢但压缩最好
    HIGH_QUALITY_THRESHOLD: Final[int] = 85
