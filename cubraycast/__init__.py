"""Grid raycasting, player movement, XPM image reading and text helpers."""

__version__ = "0.1.0"