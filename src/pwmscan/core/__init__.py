"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/core/__init__.py

Pure scoring core: no I/O, no logging.
--------------------------------------------------------------------------------
"""

from .matrix import WeightMatrix, reverse_complement_counts
from .scanner import Score, scan, window_scores
from .sequence import GappedSequence
from .strand import Strand

__all__ = [
    "GappedSequence",
    "Score",
    "Strand",
    "WeightMatrix",
    "reverse_complement_counts",
    "scan",
    "window_scores",
]
