"""
IO helpers for loading image assets consumed by the rasterizer.
"""

from .image_loader import load_rgba

__all__ = ["load_rgba"]
