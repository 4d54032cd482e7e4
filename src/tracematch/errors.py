from __future__ import annotations


class TraceMatchError(ValueError):
    """
    Base class for errors raised while rasterizing, scoring, or classifying.
    """


class InvalidImage(TraceMatchError):
    """
    Pixel data is unreadable or has a zero dimension.
    """


class DimensionMismatch(TraceMatchError):
    """
    Two vectors with different layouts reached the scorer.
    """


class DuplicateLabel(TraceMatchError):
    """
    A reference label appeared more than once.
    """


class EmptyReferenceSet(TraceMatchError):
    """
    Classification was requested without any references.
    """


__all__ = [
    "DimensionMismatch",
    "DuplicateLabel",
    "EmptyReferenceSet",
    "InvalidImage",
    "TraceMatchError",
]
