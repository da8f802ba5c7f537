"""批量转换异常处理模块。

定义统一的异常类和错误处理机制，包含异常处理装饰器。
"""

from collections.abc import Awaitable, Callable
from functools import wraps
from pathlib import Path
from typing import TypeVar

from PIL.Image import DecompressionBombError, UnidentifiedImageError

from .models.outcome import ConversionFailure
from .utils.logging_helpers import get_logger
from .utils.message_formatter import MessageFormatter


logger = get_logger()
T = TypeVar("T")


# 统一的异常类型
class BatchConversionError(Exception):
    """批量转换相关错误基类"""

    def __init__(self, message: str, input_path: Path | None = None):
        super().__init__(message)
        self.message = message
        self.input_path = input_path


class ConfigurationError(BatchConversionError):
    """配置参数错误"""

    pass


class DiscoveryError(BatchConversionError):
    """文件查找失败，整次运行终止"""

    pass


class ConversionError(BatchConversionError):
    """单个文件转换失败，只影响该文件"""

    def __init__(
        self,
        message: str,
        input_path: Path | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message, input_path)
        self.cause = cause


# 异常处理装饰器
def handle_codec_errors(operation_name: str = "图像转换"):
    """统一的转换异常处理装饰器

    把读取、编码、写入过程中的任意异常转换为 ConversionError，
    被装饰的协程第一个参数必须是输入文件路径。

    Args:
        operation_name: 操作名称，用于错误消息
    """

    def decorator(
        func: Callable[..., Awaitable[T]],
    ) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def wrapper(input_path: Path, *args, **kwargs) -> T:
            try:
                return await func(input_path, *args, **kwargs)
            except ConversionError:
                raise
            except UnidentifiedImageError as e:
                raise ConversionError(
                    f"{operation_name} - 无法识别图像格式: {e}", input_path, e
                ) from e
            except DecompressionBombError as e:
                raise ConversionError(
                    f"{operation_name} - 图像过大，可能存在安全风险: {e}",
                    input_path,
                    e,
                ) from e
            except OSError as e:
                raise ConversionError(
                    f"{operation_name} - 文件操作失败: {e}", input_path, e
                ) from e
            except (ValueError, TypeError) as e:
                raise ConversionError(
                    f"{operation_name} - 参数错误: {e}", input_path, e
                ) from e
            except Exception as e:
                raise ConversionError(
                    f"{operation_name} - 未知错误: {e}", input_path, e
                ) from e

        return wrapper

    return decorator


class ErrorHandler:
    """统一错误处理器

    提供标准化的错误处理和日志记录功能。
    """

    @staticmethod
    def log_error(
        operation: str, path: Path, error: Exception, level: str = "error"
    ) -> None:
        """标准化的错误日志记录

        Args:
            operation: 操作名称
            path: 相关文件路径
            error: 异常对象
            level: 日志级别 ("error", "warning", "debug")
        """
        log_msg = MessageFormatter.format_error(operation, path, error)
        getattr(logger, level, logger.error)(log_msg)

    @staticmethod
    def create_failure_outcome(
        error: BaseException, input_path: Path
    ) -> ConversionFailure:
        """把单个文件的异常转换为失败结果并记录日志"""
        match error:
            case ConversionError(cause=FileNotFoundError()):
                level = "warning"
            case ConversionError(cause=UnidentifiedImageError()):
                level = "warning"
            case _:
                level = "error"

        message = error.message if isinstance(error, BatchConversionError) else str(error)
        getattr(logger, level)(MessageFormatter.conversion_failed(input_path, message))
        return ConversionFailure(input_path=input_path, error=message or repr(error))
