"""
Matching subpackage exposes rasterizing, scoring, and classification APIs.
"""

from .classifier import ReferenceSet, ScoreReport, build_reference_set, classify, score_vector
from .raster import DEFAULT_SIDE, Rasterizer, rasterize
from .report import format_report, format_score
from .scorer import inner_product

__all__ = [
    "DEFAULT_SIDE",
    "Rasterizer",
    "ReferenceSet",
    "ScoreReport",
    "build_reference_set",
    "classify",
    "format_report",
    "format_score",
    "inner_product",
    "rasterize",
    "score_vector",
]
