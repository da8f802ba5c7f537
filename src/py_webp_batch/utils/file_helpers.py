"""文件查找模块。

把配置的根目录展开为待转换的图像文件列表。
"""

import os
from collections.abc import Sequence
from pathlib import Path

from ..exceptions import DiscoveryError
from .logging_helpers import get_logger
from .message_formatter import MessageFormatter


logger = get_logger()


def find_image_files(
    directories: Sequence[str | Path],
    pattern: str = "**/*.png",
) -> list[Path]:
    """在所有根目录下查找匹配的文件。

    按配置顺序遍历根目录，每个根目录内的结果排序后追加；
    根目录重叠时重复的路径只保留第一次出现。

    Args:
        directories: 根目录列表
        pattern: 相对于根目录的 glob 模式（** 表示递归）

    Returns:
        list[Path]: 匹配的文件路径，不包含目录

    Raises:
        DiscoveryError: 根目录不存在、不是目录或无法遍历
    """
    logger.info(f"🔍 搜索模式: {[f'{d}/{pattern}' for d in directories]}")

    found: list[Path] = []
    seen: set[Path] = set()

    for directory in directories:
        for file_path in _glob_directory(Path(directory), pattern):
            if file_path not in seen:
                seen.add(file_path)
                found.append(file_path)

    logger.info(f"找到 {len(found)} 个文件")
    return found


def _glob_directory(directory: Path, pattern: str) -> list[Path]:
    """遍历单个根目录"""
    if not directory.exists():
        raise DiscoveryError(
            MessageFormatter.directory_not_found(directory), input_path=directory
        )

    if not directory.is_dir():
        raise DiscoveryError(
            MessageFormatter.path_not_directory(directory), input_path=directory
        )

    try:
        # Path.glob 会静默跳过无法读取的目录，先逐级检查可读性
        _check_readable(directory, recursive="**" in pattern)
        return sorted(
            file_path for file_path in directory.glob(pattern) if file_path.is_file()
        )
    except PermissionError as e:
        raise DiscoveryError(
            MessageFormatter.permission_error(e.filename or directory, "访问目录"),
            input_path=directory,
        ) from e
    except OSError as e:
        raise DiscoveryError(
            MessageFormatter.operation_failed("搜索图像文件", directory, e),
            input_path=directory,
        ) from e
    except (ValueError, NotImplementedError) as e:
        raise DiscoveryError(
            MessageFormatter.validation_error("匹配模式", pattern, str(e)),
            input_path=directory,
        ) from e


def _check_readable(directory: Path, recursive: bool) -> None:
    """确认根目录（递归时包括所有子目录）都可以列出内容"""
    if not recursive:
        with os.scandir(directory):
            return

    def raise_error(error: OSError) -> None:
        raise error

    for _ in os.walk(directory, onerror=raise_error):
        pass
