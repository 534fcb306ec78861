#!/usr/bin/env python3
"""Basic usage example for roundimage.

Renders a generated photo-like gradient as a round avatar, with and
without a border ring, and writes the results as PNG files.

Usage:
    python examples/basic_usage.py [output_dir]
"""

import os
import sys

import numpy as np
from PIL import Image

# Add parent directory to path for direct script execution
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from roundimage.canvas import Canvas
from roundimage.compositor import compose_circular_image
from roundimage.style import RoundImageStyle
from roundimage.view import RoundImageView, render


def make_source(width: int = 320, height: int = 200) -> Image.Image:
    """A wide gradient image standing in for a decoded photo."""
    ys, xs = np.mgrid[0:height, 0:width]
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    arr[..., 0] = (xs * 255 // (width - 1)).astype(np.uint8)
    arr[..., 1] = (ys * 255 // (height - 1)).astype(np.uint8)
    arr[..., 2] = 160
    arr[..., 3] = 255
    return Image.fromarray(arr)


def example_compositor(out_dir: str) -> None:
    """Run the bare transform: crop, scale, mask."""
    print("=" * 60)
    print("Example 1: Circular image from a wide source")
    print("=" * 60)

    source = make_source()
    circular = compose_circular_image(source, radius=64)
    print(f"  Source size:   {source.size}")
    print(f"  Circular size: {circular.size}")

    path = os.path.join(out_dir, "circular.png")
    circular.save(path)
    print(f"  Wrote:         {path}")
    print()


def example_render_with_border(out_dir: str) -> None:
    """Draw into a canvas the way a view's draw callback would."""
    print("=" * 60)
    print("Example 2: render() with a ring border")
    print("=" * 60)

    canvas = Canvas.new(240, 180, background=0xFF202830)
    drawn = render(canvas, make_source(), 240, 180, border_width=8, border_color=0xFFFFD700)
    print(f"  Image drawn:   {drawn}")

    path = os.path.join(out_dir, "bordered.png")
    canvas.image.save(path)
    print(f"  Wrote:         {path}")
    print()


def example_view(out_dir: str) -> None:
    """Use the stateful view with a style and a resize."""
    print("=" * 60)
    print("Example 3: RoundImageView across a resize")
    print("=" * 60)

    view = RoundImageView(RoundImageStyle(border_width=4, border_color="#CD7F32"))
    view.set_image(make_source())

    for width, height in [(0, 0), (128, 128), (256, 160)]:
        view.set_size(width, height)
        img = view.draw()
        if img is None:
            print(f"  {width}x{height}: nothing to draw")
            continue
        path = os.path.join(out_dir, f"view_{width}x{height}.png")
        img.save(path)
        print(f"  {width}x{height}: wrote {path}")
    print()


if __name__ == "__main__":
    out_dir = sys.argv[1] if len(sys.argv) > 1 else "."
    os.makedirs(out_dir, exist_ok=True)
    example_compositor(out_dir)
    example_render_with_border(out_dir)
    example_view(out_dir)
