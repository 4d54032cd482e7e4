from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from ..errors import DimensionMismatch

VectorLike = Union[np.ndarray, Sequence[float]]


def inner_product(a: VectorLike, b: VectorLike) -> float:
    """
    Raw trace inner product ``tr(A^t B) = sum(A_ij * B_ij)``.

    Both operands must share the same shape, so flattened positions refer to
    the same pixel. No normalization is applied.
    """
    left = np.asarray(a, dtype=np.float64)
    right = np.asarray(b, dtype=np.float64)
    if left.shape != right.shape:
        raise DimensionMismatch(f"cannot score shape {left.shape} against {right.shape}")
    return float(np.dot(left.ravel(), right.ravel()))


__all__ = ["inner_product"]
