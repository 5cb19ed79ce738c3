"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/__init__.py

Public API:
  - GappedSequence, Strand, WeightMatrix, Score, scan  (pure core)
  - load_counts, read_sequences                         (inputs)
  - build_matrices, scan_all, run_job                   (orchestration)
--------------------------------------------------------------------------------
"""

from .api import build_matrices, run_job, scan_all
from .core import GappedSequence, Score, Strand, WeightMatrix, reverse_complement_counts, scan
from .errors import MalformedMatrixError, PwmScanError, UnrecognizedBaseError
from .io import load_counts, read_sequences

__all__ = [
    "GappedSequence",
    "MalformedMatrixError",
    "PwmScanError",
    "Score",
    "Strand",
    "UnrecognizedBaseError",
    "WeightMatrix",
    "build_matrices",
    "load_counts",
    "read_sequences",
    "reverse_complement_counts",
    "run_job",
    "scan",
    "scan_all",
]
