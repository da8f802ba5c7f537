"""格式处理器模块。

封装 Pillow 编码：把原始字节按目标格式和质量编码为新的字节。
"""

from io import BytesIO
from typing import Any

from PIL import Image, ImageOps

from ..models.constants import ImageFormats, WebPDefaults
from ..utils.logging_helpers import get_logger


logger = get_logger()


class FormatProcessor:
    """格式处理器 - 为目标格式准备图片并执行编码"""

    def __init__(self, target_format: str = "WEBP") -> None:
        self.target_format = ImageFormats.normalize(target_format)

    def encode(self, data: bytes, quality: int) -> bytes:
        """把原始图像字节编码为目标格式

        Args:
            data: 输入文件的完整内容
            quality: 输出质量（0-100）

        Returns:
            bytes: 编码后的内容

        Raises:
            PIL.UnidentifiedImageError: 无法识别输入格式
            OSError: 编码失败
        """
        with Image.open(BytesIO(data)) as img:
            # 处理EXIF旋转
            prepared = ImageOps.exif_transpose(img)
            prepared = self.prepare_for_format(prepared)

            buffer = BytesIO()
            prepared.save(
                buffer,
                format=self.target_format,
                **get_save_parameters(self.target_format, quality),
            )
            return buffer.getvalue()

    def prepare_for_format(self, img: Image.Image) -> Image.Image:
        """为目标格式准备图片

        Args:
            img: PIL图片对象

        Returns:
            Image.Image: 处理后的图片对象
        """
        match self.target_format:
            case "WEBP":
                return self._prepare_for_webp(img)
            case "JPEG":
                return self._prepare_for_jpeg(img)
            case _:
                return img

    def _prepare_for_webp(self, img: Image.Image) -> Image.Image:
        """为WebP格式准备图片"""
        # WebP支持RGB和RGBA
        if img.mode == "P":
            # 调色板模式，检查是否有透明度
            if "transparency" in img.info:
                return img.convert("RGBA")
            return img.convert("RGB")
        if img.mode == "LA":
            return img.convert("RGBA")
        if img.mode not in ("RGB", "RGBA"):
            return img.convert("RGB")
        return img

    def _prepare_for_jpeg(self, img: Image.Image) -> Image.Image:
        """为JPEG格式准备图片，透明区域合成到白色背景"""
        if img.mode == "P" and "transparency" not in img.info:
            return img.convert("RGB")
        if img.mode in ("RGBA", "LA", "P"):
            rgba = img.convert("RGBA")
            background = Image.new("RGB", rgba.size, (255, 255, 255))
            background.paste(rgba, mask=rgba.split()[-1])
            return background
        if img.mode != "RGB":
            return img.convert("RGB")
        return img


def get_save_parameters(format_name: str, quality: int) -> dict[str, Any]:
    """获取保存参数（不包含format，由调用方处理）"""
    match format_name:
        case "WEBP":
            return get_webp_params(quality)
        case "JPEG":
            return {"quality": quality, "optimize": True}
        case _:
            return {}


def get_webp_params(quality: int) -> dict[str, Any]:
    """获取WebP有损压缩参数

    基于Pillow文档建议：
    - quality控制图像质量(0=最小,100=最大)
    - method参数：0=快速，6=最慢但最佳压缩
    - alpha_quality：控制透明通道质量，100为无损
    """
    webp_quality = max(0, min(100, quality))
    params: dict[str, Any] = {
        "quality": webp_quality,
        "method": WebPDefaults.METHOD,
    }

    # 高质量时保持透明通道无损
    if webp_quality >= WebPDefaults.HIGH_QUALITY_THRESHOLD:
        params["alpha_quality"] = 100

    logger.debug(f"WebP参数: {params}")
    return params
