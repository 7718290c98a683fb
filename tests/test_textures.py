"""Unit tests for textures and texture loading."""

import numpy as np
import pytest
from PIL import Image

from pathtracer.core.errors import InvalidInputError
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.materials.presets import ColorPresets, TexturePresets
from pathtracer.materials.textures import (
    CheckerTexture,
    ImageTexture,
    SolidTexture,
    as_texture,
    load_texture,
)

RED = Vector3(1.0, 0.0, 0.0)
BLUE = Vector3(0.0, 0.0, 1.0)
ORIGIN_UV = UV(0.0, 0.0)


@pytest.fixture
def quadrant_png(tmp_path):
    """2x2 image: red, green on the top row; blue, white on the bottom row."""
    pixels = np.array(
        [
            [[255, 0, 0], [0, 255, 0]],
            [[0, 0, 255], [255, 255, 255]],
        ],
        dtype=np.uint8,
    )
    path = tmp_path / "quadrants.png"
    Image.fromarray(pixels).save(path)
    return str(path)


class TestSolidTexture:
    def test_same_color_everywhere(self):
        texture = SolidTexture(RED)
        assert texture.sample(ORIGIN_UV, Vector3(0, 0, 0)) is RED
        assert texture.sample(UV(0.7, 0.1), Vector3(5, -3, 2)) is RED


class TestCheckerTexture:
    """Tests for the 3D checker pattern."""

    def test_positive_product_is_even(self):
        checker = CheckerTexture(RED, BLUE, scale=1.0)
        assert checker.sample(ORIGIN_UV, Vector3(1, 1, 1)) == BLUE

    def test_negative_product_is_odd(self):
        checker = CheckerTexture(RED, BLUE, scale=1.0)
        assert checker.sample(ORIGIN_UV, Vector3(-1, 1, 1)) == RED

    def test_scale_shrinks_the_cells(self):
        """sin(10 * 0.4) is negative while sin(0.4) is not."""
        coarse = CheckerTexture(RED, BLUE, scale=1.0)
        fine = CheckerTexture(RED, BLUE, scale=10.0)
        p = Vector3(0.4, 0.1, 0.1)
        assert coarse.sample(ORIGIN_UV, p) == BLUE
        assert fine.sample(ORIGIN_UV, p) == RED

    def test_nested_textures(self):
        inner = CheckerTexture(RED, BLUE, scale=1.0)
        outer = CheckerTexture(inner, SolidTexture(Vector3(0, 1, 0)), scale=1.0)
        assert outer.sample(ORIGIN_UV, Vector3(-1, 1, 1)) == RED

    def test_checkerboard_preset(self):
        checker = TexturePresets.checkerboard()
        assert isinstance(checker, CheckerTexture)
        assert checker.odd.color == ColorPresets.GREEN
        assert checker.even.color == ColorPresets.WHITE
        assert checker.scale == 10.0


class TestImageTexture:
    """Tests for ImageTexture lookups."""

    def test_v_runs_bottom_to_top(self, quadrant_png):
        texture = ImageTexture.from_file(quadrant_png)
        p = Vector3(0, 0, 0)

        assert texture.sample(UV(0.25, 0.75), p) == Vector3(1.0, 0.0, 0.0)
        assert texture.sample(UV(0.75, 0.75), p) == Vector3(0.0, 1.0, 0.0)
        assert texture.sample(UV(0.25, 0.25), p) == Vector3(0.0, 0.0, 1.0)
        assert texture.sample(UV(0.75, 0.25), p) == Vector3(1.0, 1.0, 1.0)

    def test_coordinates_wrap(self, quadrant_png):
        texture = ImageTexture.from_file(quadrant_png)
        p = Vector3(0, 0, 0)
        assert texture.sample(UV(1.25, 0.75), p) == texture.sample(UV(0.25, 0.75), p)
        assert texture.sample(UV(-0.75, -0.25), p) == texture.sample(UV(0.25, 0.75), p)

    def test_returns_python_floats(self, quadrant_png):
        color = ImageTexture.from_file(quadrant_png).sample(UV(0.5, 0.5), Vector3(0, 0, 0))
        assert all(type(c) is float for c in color)

    def test_greyscale_image_is_converted(self, tmp_path):
        path = tmp_path / "grey.png"
        Image.fromarray(np.full((2, 2), 51, dtype=np.uint8)).save(path)
        texture = load_texture(str(path))
        assert texture.data.shape == (2, 2, 3)
        assert texture.sample(UV(0.5, 0.5), Vector3(0, 0, 0)).to_tuple() == pytest.approx((0.2, 0.2, 0.2))


class TestLoading:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_texture(str(tmp_path / "nope.png"))

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "notes.png"
        path.write_text("definitely not a png")
        with pytest.raises(InvalidInputError):
            load_texture(str(path))


class TestAsTexture:
    def test_color_is_wrapped(self):
        texture = as_texture(RED)
        assert isinstance(texture, SolidTexture)
        assert texture.color is RED

    def test_texture_passes_through(self):
        texture = SolidTexture(RED)
        assert as_texture(texture) is texture

    @pytest.mark.parametrize("value", [0.5, (1, 0, 0), "red"])
    def test_other_values_are_rejected(self, value):
        with pytest.raises(InvalidInputError):
            as_texture(value)
