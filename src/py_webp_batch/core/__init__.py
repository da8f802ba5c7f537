"""核心转换模块。

单个文件的读取、编码和写入。
"""

from .conversion_engine import convert_image, convert_image_detailed
from .formats import FormatProcessor, get_save_parameters, get_webp_params


__all__ = [
    "FormatProcessor",
    "convert_image",
    "convert_image_detailed",
    "get_save_parameters",
    "get_webp_params",
]
