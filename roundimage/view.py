"""Round image view: draws a source image clipped to a circle.

Draw contract for a view of width x height:

- Zero-sized view: nothing is drawn (layout not resolved yet).
- radius = min(width, height) // 2. With a border, the radius shrinks
  by the border width and the ring is stroked first at that radius, so
  the image circle sits inside the ring's outer edge.
- No source image: only the ring (if any) is drawn.
- Otherwise the circular image is blitted centered in the view.

Degenerate inputs are silent no-ops; nothing here raises for a missing
image or an empty view.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import structlog
from PIL import Image

from .canvas import Canvas
from .colors import OPAQUE_WHITE
from .compositor import compose_circular_image
from .decoding import decode_image
from .style import RoundImageStyle

logger = structlog.get_logger(__name__)


class DrawSurface(Protocol):
    """Anything that can stroke circles and blit bitmaps."""

    def stroke_circle(
        self, center_x: int, center_y: int, radius: int, stroke_width: int, color: int
    ) -> None: ...

    def draw_bitmap(self, bitmap: Image.Image, x: int, y: int) -> None: ...


@dataclass(frozen=True)
class ViewGeometry:
    """Width and height of a view in pixels."""

    width: int
    height: int

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


def render(
    canvas: DrawSurface,
    source: Image.Image | None,
    view_width: int,
    view_height: int,
    border_width: int = 0,
    border_color: int = OPAQUE_WHITE,
) -> bool:
    """Draw ``source`` as a circle centered in a view, with an optional ring.

    Args:
        canvas: Destination surface (mutated in place).
        source: Source image, or None if none is available.
        view_width: View width in pixels.
        view_height: View height in pixels.
        border_width: Ring width in pixels (0 = no ring).
        border_color: Ring ARGB color.

    Returns:
        True if the image was drawn, False if there was nothing to draw.
    """
    if view_width <= 0 or view_height <= 0:
        logger.debug("render_skipped_empty_view", width=view_width, height=view_height)
        return False

    center_x = view_width // 2
    center_y = view_height // 2
    radius = min(view_width, view_height) // 2

    if border_width > 0:
        radius -= border_width
        if radius > 0:
            canvas.stroke_circle(center_x, center_y, radius, border_width, border_color)

    if source is None:
        logger.debug("render_skipped_no_image")
        return False
    if radius <= 0:
        logger.debug(
            "render_skipped_no_room",
            width=view_width,
            height=view_height,
            border_width=border_width,
        )
        return False

    circular = compose_circular_image(source, radius)
    try:
        canvas.draw_bitmap(circular, center_x - radius, center_y - radius)
    finally:
        circular.close()

    logger.debug("render_done", radius=radius, border_width=border_width)
    return True


class RoundImageView:
    """A view that displays its image clipped to a circle.

    Geometry is taken from the latest ``set_size`` on every draw. With
    ``cache_geometry=True`` the first non-zero width and height are kept
    for the lifetime of the view and later resizes are ignored, matching
    the legacy widget.
    """

    def __init__(
        self,
        style: RoundImageStyle | None = None,
        cache_geometry: bool = False,
    ) -> None:
        self.style = style or RoundImageStyle()
        self.cache_geometry = cache_geometry
        self._image: Image.Image | None = None
        self._width = 0
        self._height = 0
        self._cached_width = 0
        self._cached_height = 0

    @property
    def image(self) -> Image.Image | None:
        return self._image

    def set_image(self, image: Image.Image | None) -> None:
        self._image = image

    def set_image_bytes(self, data: bytes | None) -> bool:
        """Decode and set the source image. Returns False if decoding failed."""
        self._image = decode_image(data)
        return self._image is not None

    def set_size(self, width: int, height: int) -> None:
        self._width = width
        self._height = height

    @property
    def size(self) -> ViewGeometry:
        return ViewGeometry(self._width, self._height)

    def geometry(self) -> ViewGeometry:
        """Geometry used for drawing (cached or current)."""
        if not self.cache_geometry:
            return self.size
        if self._cached_width == 0:
            self._cached_width = self._width
        if self._cached_height == 0:
            self._cached_height = self._height
        return ViewGeometry(self._cached_width, self._cached_height)

    def on_draw(self, canvas: DrawSurface) -> bool:
        if self.size.is_empty:
            return False
        geometry = self.geometry()
        return render(
            canvas,
            self._image,
            geometry.width,
            geometry.height,
            self.style.border_width,
            self.style.border_color,
        )

    def draw(self) -> Image.Image | None:
        """Draw onto a fresh transparent canvas of the current view size.

        Returns:
            The drawn RGBA image, or None if the view has no size yet.
        """
        if self.size.is_empty:
            return None
        canvas = Canvas.new(self._width, self._height)
        self.on_draw(canvas)
        return canvas.image
