"""Drawing surface for round image views.

A thin mutable wrapper around an RGBA Pillow image exposing the two
primitives the view needs: stroking a circle and blitting a bitmap with
source-over alpha compositing.
"""

from __future__ import annotations

import io

from PIL import Image

from .colors import argb_to_rgba
from .compositor import draw_border_ring


def encode_png(image: Image.Image) -> bytes:
    """Encode an image as PNG bytes."""
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


class Canvas:
    """Mutable RGBA drawing surface.

    Attributes:
        image: The underlying Pillow image; drawing mutates it in place.
    """

    def __init__(self, image: Image.Image) -> None:
        if image.mode != "RGBA":
            raise ValueError(f"Canvas requires an RGBA image, got mode {image.mode}")
        self.image = image

    @classmethod
    def new(cls, width: int, height: int, background: int = 0x00000000) -> Canvas:
        """Allocate a canvas filled with an ARGB background (transparent by default)."""
        return cls(Image.new("RGBA", (width, height), argb_to_rgba(background)))

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def stroke_circle(
        self,
        center_x: int,
        center_y: int,
        radius: int,
        stroke_width: int,
        color: int,
    ) -> None:
        """Stroke an anti-aliased circle outline."""
        draw_border_ring(self.image, center_x, center_y, radius, stroke_width, color)

    def draw_bitmap(self, bitmap: Image.Image, x: int, y: int) -> None:
        """Blit ``bitmap`` with its top-left corner at (x, y), source-over.

        Offsets may be negative or run past the surface; the bitmap is
        clipped to the canvas.
        """
        if bitmap.mode != "RGBA":
            bitmap = bitmap.convert("RGBA")

        # Intersection of the bitmap rectangle with the canvas.
        left = max(0, x)
        top = max(0, y)
        right = min(self.width, x + bitmap.width)
        bottom = min(self.height, y + bitmap.height)
        if left >= right or top >= bottom:
            return

        self.image.alpha_composite(
            bitmap,
            dest=(left, top),
            source=(left - x, top - y, right - x, bottom - y),
        )

    def to_png(self) -> bytes:
        return encode_png(self.image)
