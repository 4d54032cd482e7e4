from __future__ import annotations

from dataclasses import dataclass

import cv2
import numpy as np

from ..errors import InvalidImage

DEFAULT_SIDE = 50

# BT.601 luma weights; vectors built with other weights are not comparable.
LUMA_RED = 0.299
LUMA_GREEN = 0.587
LUMA_BLUE = 0.114

_INTERPOLATIONS = frozenset(
    getattr(cv2, name)
    for name in (
        "INTER_NEAREST",
        "INTER_LINEAR",
        "INTER_CUBIC",
        "INTER_AREA",
        "INTER_LANCZOS4",
        "INTER_LINEAR_EXACT",
        "INTER_NEAREST_EXACT",
    )
    if hasattr(cv2, name)
)

_TO_RGBA = {
    1: cv2.COLOR_GRAY2RGBA,
    3: cv2.COLOR_RGB2RGBA,
}


@dataclass(frozen=True, slots=True)
class Rasterizer:
    """
    Turns RGBA pixel data into a fixed-length grayscale intensity vector.

    The image is resampled to ``side`` x ``side`` pixels and every pixel is
    reduced to its luminance, read out in row-major order. Use one instance
    for both references and queries so their vectors line up.
    """

    side: int = DEFAULT_SIDE
    interpolation: int = cv2.INTER_AREA

    def __post_init__(self) -> None:
        if isinstance(self.side, bool) or not isinstance(self.side, int):
            raise ValueError("side must be an integer")
        if self.side <= 0:
            raise ValueError("side must be positive")
        if self.interpolation not in _INTERPOLATIONS:
            raise ValueError(f"unsupported interpolation flag: {self.interpolation!r}")

    @property
    def length(self) -> int:
        return self.side * self.side

    def rasterize(self, image: np.ndarray) -> np.ndarray:
        """
        Return the read-only luminance vector of ``image``.

        Accepts uint8 arrays shaped (H, W, 4) RGBA, (H, W, 3) RGB or (H, W)
        grayscale. Raises InvalidImage for anything else.
        """
        rgba = self._to_rgba(image)
        resized = cv2.resize(rgba, (self.side, self.side), interpolation=self.interpolation)

        channels = resized.astype(np.float64)
        red = channels[:, :, 0]
        green = channels[:, :, 1]
        blue = channels[:, :, 2]
        gray = LUMA_RED * red + LUMA_GREEN * green + LUMA_BLUE * blue

        vector = np.ascontiguousarray(gray).ravel()
        vector.flags.writeable = False
        return vector

    @staticmethod
    def _to_rgba(image: np.ndarray) -> np.ndarray:
        if image is None:
            raise InvalidImage("image has no pixel data")
        if not isinstance(image, np.ndarray):
            raise InvalidImage(f"expected a numpy array, got {type(image).__name__}")
        if image.dtype != np.uint8:
            raise InvalidImage(f"expected 8-bit channels, got dtype {image.dtype}")
        if image.ndim not in (2, 3):
            raise InvalidImage(f"expected a 2-D or 3-D pixel array, got {image.ndim} dimensions")

        height, width = image.shape[:2]
        if height < 1 or width < 1:
            raise InvalidImage(f"image dimensions must be at least 1x1, got {width}x{height}")

        channels = 1 if image.ndim == 2 else image.shape[2]
        if channels == 4:
            return image
        if channels not in _TO_RGBA:
            raise InvalidImage(f"unsupported channel count: {channels}")
        if image.ndim == 3 and channels == 1:
            image = image[:, :, 0]
        return cv2.cvtColor(np.ascontiguousarray(image), _TO_RGBA[channels])


def rasterize(image: np.ndarray, side: int = DEFAULT_SIDE) -> np.ndarray:
    """
    Shortcut for ``Rasterizer(side).rasterize(image)``.
    """
    return Rasterizer(side=side).rasterize(image)


__all__ = ["DEFAULT_SIDE", "Rasterizer", "rasterize"]
