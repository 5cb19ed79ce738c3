"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/core/matrix.py

Weight matrix built from raw base counts.

Construction is eager: the strand transform, probabilities, per-position
conservation and the theoretical maximum score are all computed once in
__post_init__ and never mutated afterwards.
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from ..errors import MalformedMatrixError
from .strand import Strand

ALPHABET = ("A", "C", "G", "T")


def reverse_complement_counts(counts: Sequence[Sequence[float]]) -> list[list[float]]:
    """
    Reverse the row order and, within each row, reverse the A,C,G,T values.

    Reversing a row swaps A<->T and C<->G, so the result is the count table of
    the reverse-complement motif.
    """
    return [list(row)[::-1] for row in list(counts)[::-1]]


def _validated_counts(counts: Sequence[Sequence[float]]) -> np.ndarray:
    rows = [list(row) for row in counts]
    if not rows:
        raise MalformedMatrixError("Matrix has no positions")
    for i, row in enumerate(rows):
        if len(row) != len(ALPHABET):
            raise MalformedMatrixError(
                f"Matrix has {len(row)} values when {len(ALPHABET)} is expected (position {i + 1})"
            )
    try:
        arr = np.asarray(rows, dtype=float)
    except (TypeError, ValueError) as exc:
        raise MalformedMatrixError(f"Matrix values must be numeric: {exc}") from exc
    if not np.all(np.isfinite(arr)):
        raise MalformedMatrixError("Matrix values must be finite")
    if np.any(arr < 0):
        raise MalformedMatrixError("Matrix values must be non-negative counts")
    return arr


def _probabilities(counts: np.ndarray) -> np.ndarray:
    # Rows are scaled by the largest row total, so sparser positions keep the
    # missing mass in a fifth residual column.
    totals = counts.sum(axis=1)
    max_total = totals.max()
    if max_total <= 0:
        raise MalformedMatrixError("Matrix counts are all zero")
    probs = np.empty((counts.shape[0], len(ALPHABET) + 1), dtype=float)
    probs[:, : len(ALPHABET)] = counts / max_total
    probs[:, len(ALPHABET)] = 1.0 - totals / max_total
    return probs


def _conservation(probs: np.ndarray) -> np.ndarray:
    """1 + sum(p ln p) / ln(n) per row, with 0 ln 0 taken as 0."""
    safe = np.where(probs > 0, probs, 1.0)
    plogp = np.where(probs > 0, probs * np.log(safe), 0.0)
    return 1.0 + plogp.sum(axis=1) / np.log(probs.shape[1])


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, slots=True, eq=False)
class WeightMatrix:
    """
    Position weight matrix for one strand.

    Attributes:
      name: identifier for the motif, opaque to scoring
      threshold: minimum normalized score reported by a scan
      counts: (L x 4) raw counts, A,C,G,T order, as supplied (forward orientation)
      strand: strand this matrix scores; REVERSE holds the reverse-complement tables
      probs: (L x 5) base probabilities plus the residual mass per position
      conservation: (L,) entropy-derived weight per position
      weights: (L x 4) probs[:, :4] * conservation, the per-base score contribution
      max_score: sum of the best base weight per position, the normalization denominator
    """

    name: str
    threshold: float
    counts: Sequence[Sequence[float]]
    strand: Strand = Strand.FORWARD
    probs: np.ndarray = field(init=False, repr=False)
    conservation: np.ndarray = field(init=False, repr=False)
    weights: np.ndarray = field(init=False, repr=False)
    max_score: float = field(init=False)

    def __post_init__(self) -> None:
        counts = _readonly(_validated_counts(self.counts))
        strand = Strand.parse(self.strand)
        threshold = float(self.threshold)
        if not np.isfinite(threshold):
            raise ValueError("threshold must be a finite number")

        oriented = counts[::-1, ::-1] if strand is Strand.REVERSE else counts
        probs = _probabilities(oriented)
        conservation = _conservation(probs)
        weights = probs[:, : len(ALPHABET)] * conservation[:, None]
        max_score = float(weights.max(axis=1).sum())
        if max_score == 0.0:
            raise MalformedMatrixError(f"Matrix '{self.name}' has a maximum score of zero")

        object.__setattr__(self, "counts", counts)
        object.__setattr__(self, "strand", strand)
        object.__setattr__(self, "threshold", threshold)
        object.__setattr__(self, "probs", _readonly(probs))
        object.__setattr__(self, "conservation", _readonly(conservation))
        object.__setattr__(self, "weights", _readonly(weights))
        object.__setattr__(self, "max_score", max_score)

    @property
    def length(self) -> int:
        return self.counts.shape[0]

    def __len__(self) -> int:
        return self.length

    @property
    def oriented_counts(self) -> np.ndarray:
        """Counts after the strand transform, i.e. the table the probabilities came from."""
        if self.strand is Strand.REVERSE:
            return self.counts[::-1, ::-1]
        return self.counts

    def for_strand(self, strand: Strand | str) -> "WeightMatrix":
        return WeightMatrix(name=self.name, threshold=self.threshold, counts=self.counts, strand=Strand.parse(strand))

    def consensus(self) -> str:
        return "".join(ALPHABET[i] for i in self.probs[:, : len(ALPHABET)].argmax(axis=1))
