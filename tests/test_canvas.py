"""Tests for the RGBA drawing surface."""

import pytest
from PIL import Image

from roundimage.canvas import Canvas, encode_png


class TestCanvas:
    def test_new_is_transparent(self):
        canvas = Canvas.new(30, 20)
        assert canvas.width == 30
        assert canvas.height == 20
        assert canvas.image.getbbox() is None

    def test_new_with_background(self):
        canvas = Canvas.new(10, 10, background=0xFF0000FF)
        assert canvas.image.getpixel((5, 5)) == (0, 0, 255, 255)

    def test_rejects_non_rgba(self):
        with pytest.raises(ValueError, match="RGBA"):
            Canvas(Image.new("RGB", (10, 10)))

    def test_draw_bitmap_at_offset(self):
        canvas = Canvas.new(20, 20)
        canvas.draw_bitmap(Image.new("RGBA", (5, 5), (255, 0, 0, 255)), 10, 10)
        assert canvas.image.getbbox() == (10, 10, 15, 15)

    def test_draw_bitmap_negative_offset_clipped(self):
        canvas = Canvas.new(20, 20)
        canvas.draw_bitmap(Image.new("RGBA", (10, 10), (255, 0, 0, 255)), -5, -5)
        assert canvas.image.getbbox() == (0, 0, 5, 5)

    def test_draw_bitmap_past_edge_clipped(self):
        canvas = Canvas.new(20, 20)
        canvas.draw_bitmap(Image.new("RGBA", (10, 10), (255, 0, 0, 255)), 15, 15)
        assert canvas.image.getbbox() == (15, 15, 20, 20)

    def test_draw_bitmap_fully_outside(self):
        canvas = Canvas.new(20, 20)
        canvas.draw_bitmap(Image.new("RGBA", (10, 10), (255, 0, 0, 255)), 30, 0)
        assert canvas.image.getbbox() is None

    def test_draw_bitmap_transparent_keeps_background(self):
        canvas = Canvas.new(10, 10, background=0xFF00FF00)
        canvas.draw_bitmap(Image.new("RGBA", (10, 10), (0, 0, 0, 0)), 0, 0)
        assert canvas.image.getpixel((3, 3)) == (0, 255, 0, 255)

    def test_draw_bitmap_converts_rgb(self):
        canvas = Canvas.new(10, 10)
        canvas.draw_bitmap(Image.new("RGB", (4, 4), (1, 2, 3)), 0, 0)
        assert canvas.image.getpixel((0, 0)) == (1, 2, 3, 255)

    def test_stroke_circle(self):
        canvas = Canvas.new(40, 40)
        canvas.stroke_circle(20, 20, 15, 2, 0xFFFFFFFF)
        assert canvas.image.getpixel((20, 20))[3] == 0
        assert canvas.image.getpixel((34, 20)) == (255, 255, 255, 255)

    def test_to_png(self):
        png = Canvas.new(8, 8).to_png()
        assert png[:4] == b"\x89PNG"
        assert encode_png(Image.new("RGBA", (2, 2)))[:4] == b"\x89PNG"
