"""转换引擎模块。

单个文件的转换：读取、编码、写入，每一步都在线程中执行，不阻塞事件循环。
"""

import asyncio
from pathlib import Path

from ..exceptions import handle_codec_errors
from ..models.conversion_config import ConversionConfig
from ..models.outcome import ConversionSuccess
from ..utils.logging_helpers import get_logger
from ..utils.message_formatter import MessageFormatter
from .formats import FormatProcessor


logger = get_logger()


@handle_codec_errors("图像转换")
async def convert_image(input_path: Path, config: ConversionConfig) -> Path:
    """转换单个图像文件。

    输出文件与输入文件同目录同名，只替换扩展名；已存在的输出文件会被覆盖。

    Args:
        input_path: 输入文件路径
        config: 转换配置

    Returns:
        Path: 输出文件路径

    Raises:
        ConversionError: 读取、编码或写入失败
    """
    outcome = await convert_image_detailed(input_path, config)
    return outcome.output_path


@handle_codec_errors("图像转换")
async def convert_image_detailed(
    input_path: Path, config: ConversionConfig
) -> ConversionSuccess:
    """转换单个图像文件并返回包含文件大小的成功结果"""
    output_path = config.get_output_path(input_path)
    processor = FormatProcessor(config.target_format)

    data = await asyncio.to_thread(input_path.read_bytes)
    encoded = await asyncio.to_thread(processor.encode, data, config.quality)
    await asyncio.to_thread(output_path.write_bytes, encoded)

    logger.info(MessageFormatter.conversion_succeeded(input_path, output_path))
    return ConversionSuccess(
        input_path=input_path,
        output_path=output_path,
        original_size=len(data),
        converted_size=len(encoded),
    )
