"""
Core package for nearest-prototype image classification by trace inner product.
"""

from .errors import (
    DimensionMismatch,
    DuplicateLabel,
    EmptyReferenceSet,
    InvalidImage,
    TraceMatchError,
)
from .matching import (
    Rasterizer,
    ReferenceSet,
    ScoreReport,
    build_reference_set,
    classify,
    format_report,
    inner_product,
    rasterize,
)

__all__ = [
    "DimensionMismatch",
    "DuplicateLabel",
    "EmptyReferenceSet",
    "InvalidImage",
    "Rasterizer",
    "ReferenceSet",
    "ScoreReport",
    "TraceMatchError",
    "build_reference_set",
    "classify",
    "format_report",
    "inner_product",
    "rasterize",
]
