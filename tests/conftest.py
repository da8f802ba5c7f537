"""测试配置文件。

提供测试所需的fixtures和配置。
"""

import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image, ImageDraw

from py_webp_batch.models.conversion_config import ConversionConfig


def _draw_png(path: Path, size: tuple[int, int] = (64, 48), seed: int = 0) -> Path:
    """生成带有简单图形的PNG图片"""
    path.parent.mkdir(parents=True, exist_ok=True)
    img = Image.new("RGB", size, color="white")
    draw = ImageDraw.Draw(img)
    for i in range(8):
        x, y = (i * 9 + seed) % size[0], (i * 7 + seed) % size[1]
        color = ((i + seed) * 31 % 256, i * 57 % 256, (i * 83 + seed) % 256)
        draw.rectangle([x, y, x + 12, y + 10], fill=color)
    img.save(path, "PNG")
    return path


@pytest.fixture
def temp_dir():
    """临时目录fixture"""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def make_png() -> Callable[..., Path]:
    """生成PNG图片的工厂"""
    return _draw_png


@pytest.fixture
def demo_dir(temp_dir: Path) -> Path:
    """包含5个PNG（其中一个损坏）以及一个非PNG文件的目录树"""
    root = temp_dir / "demo"
    _draw_png(root / "a.png", seed=1)
    _draw_png(root / "b.png", seed=2)
    _draw_png(root / "nested" / "c.png", seed=3)
    _draw_png(root / "nested" / "deeper" / "d.png", seed=4)
    (root / "broken.png").write_bytes(b"this is not a png")
    (root / "notes.txt").write_text("ignored")
    return root


@pytest.fixture
def config_factory() -> Callable[..., ConversionConfig]:
    """创建完整的ConversionConfig，提供默认值"""

    def factory(**kwargs) -> ConversionConfig:
        defaults = {
            "quality": 90,
            "directories": ("./demo",),
            "concurrency": 2,
        }
        defaults.update(kwargs)
        return ConversionConfig(**defaults)

    return factory
