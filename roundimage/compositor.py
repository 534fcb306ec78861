"""Circular image compositor.

Turns an arbitrary rectangular image into a circular RGBA image that
can be blitted onto a canvas:

1. Center-crop to a square of side min(width, height)
2. Bilinear resample to the circle diameter (2 * radius)
3. Composite against an anti-aliased circular mask using source-in
   (color from the image, alpha = image alpha * mask coverage)

The border ring is drawn separately onto the destination surface with
``draw_border_ring``.

Anti-aliasing is analytic rather than supersampled: coverage is a
1-pixel linear ramp measured from pixel centers, so output is exact and
deterministic. For the fill mask, pixels whose center lies at distance
>= radius are fully transparent and pixels at distance <= radius - 1 are
untouched.
"""

from __future__ import annotations

import numpy as np
import structlog
from PIL import Image

from .colors import argb_to_rgba, rgba_to_hex

logger = structlog.get_logger(__name__)


def _distance_from(
    width: int,
    height: int,
    center_x: float,
    center_y: float,
    origin: tuple[int, int] = (0, 0),
) -> np.ndarray:
    """Distance from (center_x, center_y) to each pixel center of a grid."""
    ox, oy = origin
    ys, xs = np.mgrid[oy : oy + height, ox : ox + width]
    dx = xs + 0.5 - center_x
    dy = ys + 0.5 - center_y
    return np.sqrt(dx * dx + dy * dy)


def crop_to_square(image: Image.Image) -> Image.Image:
    """Center-crop an image to a square of side min(width, height).

    Wide images are cropped horizontally around the center, tall images
    vertically. A square image is returned as-is (same object, no copy).
    """
    width, height = image.size
    if width > height:
        side = height
        x, y = (width - height) // 2, 0
    elif height > width:
        side = width
        x, y = 0, (height - width) // 2
    else:
        return image

    return image.crop((x, y, x + side, y + side))


def scale_to_diameter(square: Image.Image, diameter: int) -> Image.Image:
    """Resample a square image to diameter x diameter.

    Args:
        square: Square input image.
        diameter: Target side length in pixels.

    Returns:
        The resampled image, or ``square`` itself if it already has the
        requested size.

    Raises:
        ValueError: If the image is not square or diameter is not positive.
    """
    if diameter <= 0:
        raise ValueError(f"Diameter must be positive, got {diameter}")
    width, height = square.size
    if width != height:
        raise ValueError(f"Expected a square image, got {width}x{height}")
    if width == diameter:
        return square
    return square.resize((diameter, diameter), Image.Resampling.BILINEAR)


def circle_mask(width: int, height: int, radius: int) -> np.ndarray:
    """Anti-aliased filled circle of ``radius`` centered in a width x height grid.

    Returns:
        uint8 coverage array of shape (height, width); 0 = outside,
        255 = fully inside.
    """
    dist = _distance_from(width, height, width / 2.0, height / 2.0)
    coverage = np.clip(radius - dist, 0.0, 1.0)
    return np.rint(coverage * 255.0).astype(np.uint8)


def mask_to_circle(scaled: Image.Image, radius: int) -> Image.Image:
    """Clip an image to a circle of ``radius`` centered in it.

    Args:
        scaled: RGBA image, normally 2 * radius on each side.
        radius: Circle radius in pixels.

    Returns:
        A new RGBA image of the same size, transparent outside the circle.
    """
    if radius <= 0:
        raise ValueError(f"Radius must be positive, got {radius}")
    if scaled.mode != "RGBA":
        raise ValueError(f"Expected an RGBA image, got mode {scaled.mode}")

    width, height = scaled.size
    src = np.asarray(scaled)
    out = np.zeros((height, width, 4), dtype=np.uint8)

    mask = circle_mask(width, height, radius)

    # Source-in: keep source color where the mask has coverage, scale alpha.
    inside = mask > 0
    out[inside, :3] = src[inside, :3]
    alpha = src[..., 3].astype(np.uint32) * mask.astype(np.uint32)
    out[..., 3] = ((alpha + 127) // 255).astype(np.uint8)

    return Image.fromarray(out)


def draw_border_ring(
    surface: Image.Image,
    center_x: int,
    center_y: int,
    radius: int,
    stroke_width: int,
    color: int,
) -> None:
    """Stroke an anti-aliased circle onto ``surface`` in place.

    The stroke straddles the radius: it covers [radius - w/2, radius + w/2].
    Only the ring's bounding box is composited, clipped to the surface.

    Args:
        surface: Destination RGBA image (modified in place).
        center_x: Circle center x in pixels.
        center_y: Circle center y in pixels.
        radius: Ring radius in pixels.
        stroke_width: Ring width in pixels.
        color: ARGB color.
    """
    if stroke_width <= 0 or radius <= 0:
        return
    if surface.mode != "RGBA":
        raise ValueError(f"Expected an RGBA surface, got mode {surface.mode}")

    half = stroke_width / 2.0
    reach = int(np.ceil(radius + half + 1))
    x0 = max(0, center_x - reach)
    y0 = max(0, center_y - reach)
    x1 = min(surface.width, center_x + reach)
    y1 = min(surface.height, center_y + reach)
    if x0 >= x1 or y0 >= y1:
        return

    dist = _distance_from(x1 - x0, y1 - y0, center_x, center_y, origin=(x0, y0))
    coverage = np.clip(half + 0.5 - np.abs(dist - radius), 0.0, 1.0)

    r, g, b, a = argb_to_rgba(color)
    layer = np.zeros((y1 - y0, x1 - x0, 4), dtype=np.uint8)
    layer[..., 0] = r
    layer[..., 1] = g
    layer[..., 2] = b
    layer[..., 3] = np.rint(coverage * a).astype(np.uint8)

    surface.alpha_composite(Image.fromarray(layer), dest=(x0, y0))

    logger.debug(
        "border_ring_drawn",
        center=(center_x, center_y),
        radius=radius,
        stroke_width=stroke_width,
        color=rgba_to_hex(r, g, b, a),
    )


def compose_circular_image(source: Image.Image, radius: int) -> Image.Image:
    """Produce the circular image for ``source`` at ``radius``.

    Works on an RGBA copy of ``source``, which is never modified. Each
    intermediate buffer is closed as soon as the next stage has consumed
    it, so at most two buffers are alive at a time.

    Returns:
        RGBA image of size (2 * radius, 2 * radius).
    """
    if radius <= 0:
        raise ValueError(f"Radius must be positive, got {radius}")

    rgba = source.convert("RGBA")

    square = crop_to_square(rgba)
    if square is not rgba:
        rgba.close()

    scaled = scale_to_diameter(square, radius * 2)
    if scaled is not square:
        square.close()

    circular = mask_to_circle(scaled, radius)
    scaled.close()

    logger.debug(
        "circle_composed",
        source_size=source.size,
        radius=radius,
        cropped=source.width != source.height,
        scaled=min(source.size) != radius * 2,
    )
    return circular
