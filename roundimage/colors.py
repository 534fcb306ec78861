"""Color helpers for border rendering.

Colors are carried around as 32-bit ARGB integers (``0xAARRGGBB``), the
same packing the widget's style attributes use. Hex strings are accepted
at the edges and normalized.
"""

from __future__ import annotations

import string

OPAQUE_WHITE = 0xFFFFFFFF


def parse_color(value: int | str) -> int:
    """Normalize a color to an ARGB integer.

    Args:
        value: ARGB integer, or a hex string ``#RRGGBB``, ``#AARRGGBB``
            or ``0xAARRGGBB``. Six-digit strings are fully opaque.

    Returns:
        ARGB integer in ``[0, 0xFFFFFFFF]``.

    Raises:
        ValueError: If the value is not a valid color.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid color: {value!r}")
    if isinstance(value, int):
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"Color out of range: {value:#x}")
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid color: {value!r}")

    h = value.strip()
    if h.startswith("#"):
        h = h[1:]
    else:
        h = h.removeprefix("0x").removeprefix("0X")

    if len(h) not in (6, 8) or not all(c in string.hexdigits for c in h):
        raise ValueError(f"Invalid color '{value}'. Use #RRGGBB or #AARRGGBB")
    packed = int(h, 16)

    if len(h) == 6:
        packed |= 0xFF000000
    return packed


def argb_to_rgba(argb: int) -> tuple[int, int, int, int]:
    """Unpack an ARGB integer into an (r, g, b, a) tuple."""
    return (
        (argb >> 16) & 0xFF,
        (argb >> 8) & 0xFF,
        argb & 0xFF,
        (argb >> 24) & 0xFF,
    )


def rgba_to_hex(r: int, g: int, b: int, a: int = 255) -> str:
    """Convert (r, g, b, a) to a ``#AARRGGBB`` string."""
    return f"#{a:02X}{r:02X}{g:02X}{b:02X}"
