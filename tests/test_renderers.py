"""
Pytest tests for terminal and raster rendering.
"""

import pytest
from PIL import Image

from createqrcode.errors import FileWriteError
from createqrcode.image_utils import DARK, LIGHT, render_raster, save_image
from createqrcode.qr_generator import QrSymbol, encode
from createqrcode.terminal import render_terminal


@pytest.fixture
def symbol():
    return encode("Hello, World!")


@pytest.fixture
def tiny_symbol():
    """Hand-built 2x2 checkerboard, dark at top left."""
    return QrSymbol(modules=((True, False), (False, True)), version=1)


class TestRenderTerminal:
    """Test cases for the terminal renderer."""

    def test_line_count_and_width(self, symbol):
        lines = render_terminal(symbol).split("\n")
        assert len(lines) == symbol.module_count
        assert all(len(line) == 2 * symbol.module_count for line in lines)

    def test_glyphs(self, tiny_symbol):
        assert render_terminal(tiny_symbol) == "██  \n  ██"

    def test_no_quiet_zone(self, symbol):
        first_line = render_terminal(symbol).split("\n")[0]
        # Finder pattern: seven dark modules start the top row
        assert first_line.startswith("█" * 14)

    def test_only_block_and_space(self, symbol):
        assert set(render_terminal(symbol)) <= {"█", " ", "\n"}


class TestRenderRaster:
    """Test cases for the raster renderer."""

    @pytest.mark.parametrize("scale,border", [(1, 0), (10, 4), (3, 1), (2, 12)])
    def test_dimensions(self, symbol, scale, border):
        image = render_raster(symbol, scale, border)
        side = (symbol.module_count + 2 * border) * scale
        assert image.size == (side, side)
        assert image.mode == "L"

    def test_border_band_is_light(self, symbol):
        scale, border = 3, 4
        image = render_raster(symbol, scale, border)
        band = border * scale
        side = image.width
        for x in range(side):
            for y in range(side):
                inside = band <= x < side - band and band <= y < side - band
                if not inside:
                    assert image.getpixel((x, y)) == LIGHT

    def test_modules_become_uniform_blocks(self, tiny_symbol):
        image = render_raster(tiny_symbol, scale=3, border=1)
        assert image.size == (12, 12)
        for x in range(3, 6):
            for y in range(3, 6):
                assert image.getpixel((x, y)) == DARK
        for x in range(6, 9):
            for y in range(3, 6):
                assert image.getpixel((x, y)) == LIGHT
        assert image.getpixel((7, 7)) == DARK

    def test_only_two_tones(self, symbol):
        image = render_raster(symbol, scale=2, border=2)
        histogram = image.histogram()
        assert {value for value, n in enumerate(histogram) if n} == {DARK, LIGHT}

    def test_matches_terminal_rendering(self, symbol):
        image = render_raster(symbol, scale=1, border=0)
        lines = render_terminal(symbol).split("\n")
        for row, line in enumerate(lines):
            for col in range(symbol.module_count):
                dark_glyph = line[2 * col] == "█"
                assert (image.getpixel((col, row)) == DARK) == dark_glyph


class TestSaveImage:
    """Test cases for writing raster images."""

    def test_saves_png(self, tmp_path, symbol):
        image = render_raster(symbol, scale=2, border=4)
        path = str(tmp_path / "qr.png")
        assert save_image(image, path) == path
        with Image.open(path) as saved:
            assert saved.size == image.size
            assert saved.mode == "L"

    def test_creates_parent_directories(self, tmp_path, symbol):
        image = render_raster(symbol, scale=1, border=0)
        path = str(tmp_path / "nested" / "dir" / "qr.png")
        save_image(image, path)
        assert (tmp_path / "nested" / "dir" / "qr.png").exists()

    def test_unknown_extension(self, tmp_path, symbol):
        image = render_raster(symbol, scale=1, border=0)
        path = str(tmp_path / "qr.notanimage")
        with pytest.raises(FileWriteError, match="qr.notanimage"):
            save_image(image, path)

    def test_path_is_a_directory(self, tmp_path, symbol):
        image = render_raster(symbol, scale=1, border=0)
        target = tmp_path / "taken.png"
        target.mkdir()
        with pytest.raises(FileWriteError, match="taken.png"):
            save_image(image, str(target))
