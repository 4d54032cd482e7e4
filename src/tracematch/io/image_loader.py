from __future__ import annotations

from pathlib import Path
from typing import Union

import cv2
import numpy as np

from ..errors import InvalidImage

PathLike = Union[str, Path]

_TO_RGBA = {
    1: cv2.COLOR_GRAY2RGBA,
    3: cv2.COLOR_BGR2RGBA,
    4: cv2.COLOR_BGRA2RGBA,
}


def load_rgba(path: PathLike) -> np.ndarray:
    """
    Decode an image file into an 8-bit RGBA array ready for rasterizing.
    """
    image = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if image is None:
        raise InvalidImage(f"Unable to load image at {path}")

    if image.dtype == np.uint16:
        image = (image // 257).astype(np.uint8)
    elif image.dtype != np.uint8:
        raise InvalidImage(f"Unsupported pixel depth {image.dtype} in {path}")

    channels = 1 if image.ndim == 2 else image.shape[2]
    if channels not in _TO_RGBA:
        raise InvalidImage(f"Unsupported channel count {channels} in {path}")
    return cv2.cvtColor(image, _TO_RGBA[channels])
