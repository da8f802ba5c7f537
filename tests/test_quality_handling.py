"""质量参数处理测试。"""

import asyncio
from pathlib import Path

import pytest
from pydantic import ValidationError

from py_webp_batch.core.conversion_engine import convert_image_detailed
from py_webp_batch.core.formats import get_webp_params


class TestQualityHandling:
    """质量参数核心测试"""

    def test_quality_passed_to_codec(self):
        """测试质量值原样传给WebP编码"""
        params = get_webp_params(42)
        assert params["quality"] == 42
        assert params["method"] == 6
        assert "alpha_quality" not in params

    def test_high_quality_keeps_alpha_lossless(self):
        """测试高质量时透明通道无损"""
        assert get_webp_params(90)["alpha_quality"] == 100

    def test_lower_quality_smaller_output(
        self, temp_dir: Path, make_png, config_factory
    ):
        """测试低质量输出更小"""
        low_source = make_png(temp_dir / "low" / "img.png", size=(300, 200))
        high_source = make_png(temp_dir / "high" / "img.png", size=(300, 200))

        low = asyncio.run(convert_image_detailed(low_source, config_factory(quality=5)))
        high = asyncio.run(
            convert_image_detailed(high_source, config_factory(quality=100))
        )

        assert low.converted_size < high.converted_size

    @pytest.mark.parametrize("quality", [-1, 101])
    def test_quality_out_of_range(self, config_factory, quality: int):
        """测试质量值超出范围"""
        with pytest.raises(ValidationError):
            config_factory(quality=quality)

    @pytest.mark.parametrize("quality", [0, 100])
    def test_quality_bounds_accepted(self, config_factory, quality: int):
        """测试质量边界值"""
        assert config_factory(quality=quality).quality == quality
