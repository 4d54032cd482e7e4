from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from ..errors import DimensionMismatch, DuplicateLabel, EmptyReferenceSet
from .raster import Rasterizer
from .scorer import VectorLike, inner_product

logger = logging.getLogger(__name__)


class ReferenceSet(Mapping):
    """
    Read-only mapping from label to reference intensity vector.

    Iteration follows insertion order. The rasterizer that produced the
    vectors is kept so queries can be converted the same way.
    """

    __slots__ = ("_vectors", "_rasterizer")

    def __init__(
        self,
        vectors: Mapping,
        rasterizer: Optional[Rasterizer] = None,
    ) -> None:
        self._vectors: Dict[str, np.ndarray] = {}
        shape: Optional[Tuple[int, ...]] = None
        for label, values in vectors.items():
            vector = np.array(values, dtype=np.float64)
            if shape is None:
                shape = vector.shape
            elif vector.shape != shape:
                raise DimensionMismatch(
                    f"reference {label!r} has shape {vector.shape}, expected {shape}"
                )
            vector.flags.writeable = False
            self._vectors[label] = vector
        self._rasterizer = rasterizer

    @classmethod
    def from_vectors(
        cls,
        items: Iterable[Tuple[str, VectorLike]],
        rasterizer: Optional[Rasterizer] = None,
    ) -> "ReferenceSet":
        """
        Build a set from precomputed vectors, e.g. ``[("A", [1, 2]), ("B", [2, 1])]``.
        """
        vectors: Dict[str, VectorLike] = {}
        for label, values in items:
            if label in vectors:
                raise DuplicateLabel(f"label {label!r} appears more than once")
            vectors[label] = values
        return cls(vectors, rasterizer=rasterizer)

    @property
    def rasterizer(self) -> Optional[Rasterizer]:
        return self._rasterizer

    def __getitem__(self, label: str) -> np.ndarray:
        return self._vectors[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._vectors)

    def __len__(self) -> int:
        return len(self._vectors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReferenceSet):
            return NotImplemented
        if list(self._vectors) != list(other._vectors):
            return False
        return all(np.array_equal(vector, other._vectors[label]) for label, vector in self._vectors.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ReferenceSet(labels={list(self._vectors)!r})"


@dataclass(slots=True)
class ScoreReport:
    """
    Per-reference scores in reference order, plus the winning label.
    """

    scores: List[Tuple[str, float]]
    label: str
    score: float


def build_reference_set(
    labeled_images: Iterable[Tuple[str, np.ndarray]],
    rasterizer: Optional[Rasterizer] = None,
) -> ReferenceSet:
    """
    Rasterize every ``(label, image)`` pair in order.

    Raises DuplicateLabel for repeated labels; InvalidImage propagates from
    the rasterizer.
    """
    rasterizer = rasterizer or Rasterizer()
    vectors: Dict[str, np.ndarray] = {}
    for label, image in labeled_images:
        if label in vectors:
            raise DuplicateLabel(f"label {label!r} appears more than once")
        vectors[label] = rasterizer.rasterize(image)
        logger.debug("rasterized reference %r (side=%d)", label, rasterizer.side)

    logger.info("reference set ready: %d labels at %dx%d", len(vectors), rasterizer.side, rasterizer.side)
    return ReferenceSet(vectors, rasterizer=rasterizer)


def score_vector(query_vector: VectorLike, refs: ReferenceSet) -> ScoreReport:
    """
    Score an already rasterized query against every reference.

    The winner is the first label holding the greatest score.
    """
    if len(refs) == 0:
        raise EmptyReferenceSet("no reference vectors loaded")

    scores: List[Tuple[str, float]] = []
    best_label = ""
    best_score = 0.0
    for index, (label, vector) in enumerate(refs.items()):
        score = inner_product(query_vector, vector)
        scores.append((label, score))
        if index == 0 or score > best_score:
            best_label = label
            best_score = score

    logger.debug("winner %r with score %.3f", best_label, best_score)
    return ScoreReport(scores=scores, label=best_label, score=best_score)


def classify(query: np.ndarray, refs: ReferenceSet) -> ScoreReport:
    """
    Rasterize ``query`` like the references and pick the best match.
    """
    if len(refs) == 0:
        raise EmptyReferenceSet("no reference vectors loaded")

    rasterizer = refs.rasterizer or Rasterizer()
    return score_vector(rasterizer.rasterize(query), refs)


__all__ = [
    "ReferenceSet",
    "ScoreReport",
    "build_reference_set",
    "classify",
    "score_vector",
]
