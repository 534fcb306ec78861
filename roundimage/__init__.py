"""roundimage -- circular image view with an optional ring border.

Renders a bitmap clipped to a circle, centered in a view, optionally
surrounded by a colored ring. The core is a small raster pipeline
(center-crop to square, resample to the circle diameter, source-in
composite against an anti-aliased circular mask) built on Pillow and
NumPy, plus a FastAPI service that exposes it over HTTP.
"""
