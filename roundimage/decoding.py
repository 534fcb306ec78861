"""Source image decoding.

Decodes raw image bytes into an RGBA Pillow image. Raster formats go
through Pillow; SVG (vector drawables) is rasterized with CairoSVG first.

Undecodable input is not an error for a view: it simply has nothing to
draw, so failures are logged and reported as ``None``.
"""

from __future__ import annotations

import io

import structlog
from PIL import Image

logger = structlog.get_logger(__name__)


def _looks_like_svg(data: bytes) -> bool:
    head = data[:1024].lstrip()
    return head.startswith((b"<?xml", b"<svg")) and b"<svg" in head


def decode_image(data: bytes | None) -> Image.Image | None:
    """Decode image bytes into an RGBA image.

    Args:
        data: PNG, JPEG, WebP, GIF or SVG bytes.

    Returns:
        RGBA image, or None if data is empty or cannot be decoded.
    """
    if not data:
        logger.debug("decode_image_empty")
        return None

    try:
        if _looks_like_svg(data):
            import cairosvg

            data = cairosvg.svg2png(bytestring=data)
        with Image.open(io.BytesIO(data)) as img:
            rgba = img.convert("RGBA")
    except Exception as e:
        logger.warning("decode_image_failed", error=str(e), bytes=len(data))
        return None

    logger.debug("decode_image_ok", size=rgba.size)
    return rgba
