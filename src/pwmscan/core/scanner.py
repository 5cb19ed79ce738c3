"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/core/scanner.py

Sliding-window scan of a GappedSequence against a WeightMatrix.

Windows are always visited left to right over the gap-free bases. The strand
only decides which window edge is reported as the start: reverse-strand hits
carry start > end.
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from ..errors import UnrecognizedBaseError
from .matrix import WeightMatrix
from .sequence import GappedSequence
from .strand import Strand

_LOOKUP = {"A": 0, "a": 0, "C": 1, "c": 1, "G": 2, "g": 2, "T": 3, "t": 3}


@dataclass(frozen=True, slots=True)
class Score:
    """One reported window. All coordinates are 1-based."""

    seq_start: int
    seq_end: int
    align_start: int
    align_end: int
    score: float

    def __str__(self) -> str:
        return f"{self.seq_start}\t{self.seq_end}\t{self.align_start}\t{self.align_end}\t{self.score:.3f}"


def encode_bases(bases: str) -> np.ndarray:
    """Map A/C/G/T (any case) to 0..3; any other character aborts."""
    idx = np.empty(len(bases), dtype=np.intp)
    for i, base in enumerate(bases):
        try:
            idx[i] = _LOOKUP[base]
        except KeyError:
            raise UnrecognizedBaseError(base, i) from None
    return idx


def boundary_offsets(strand: Strand, length: int) -> tuple[int, int]:
    if strand is Strand.FORWARD:
        return 1, length
    return length, 1


def window_scores(matrix: WeightMatrix, sequence: GappedSequence) -> np.ndarray:
    """
    Normalized score of every window, in window-start order (no threshold).

    Every base of a sequence at least as long as the matrix falls inside some
    window, so the whole sequence is encoded up front; an unrecognized base
    therefore aborts before any window is returned.
    """
    width = matrix.length
    if len(sequence) < width:
        return np.empty(0, dtype=float)
    windows = sliding_window_view(encode_bases(sequence.bases), width)
    raw = matrix.weights[np.arange(width), windows].sum(axis=1)
    return raw / matrix.max_score


def scan(matrix: WeightMatrix, sequence: GappedSequence) -> list[Score]:
    """Return Scores for windows whose normalized score is >= matrix.threshold."""
    normalized = window_scores(matrix, sequence)
    s, e = boundary_offsets(matrix.strand, matrix.length)
    positions = sequence.positions
    hits: list[Score] = []
    for i in np.flatnonzero(normalized >= matrix.threshold):
        i = int(i)
        hits.append(
            Score(
                seq_start=i + s,
                seq_end=i + e,
                align_start=positions[i + s - 1] + 1,
                align_end=positions[i + e - 1] + 1,
                score=float(normalized[i]),
            )
        )
    return hits
