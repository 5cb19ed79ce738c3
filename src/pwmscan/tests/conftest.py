"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/tests/conftest.py
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import math
from pathlib import Path

import pytest

TOY_COUNTS = [
    [2.0, 0.0, 0.0, 0.0],
    [1.0, 0.0, 0.0, 1.0],
    [1.0, 0.0, 0.0, 0.0],
    [0.5, 0.5, 0.5, 0.5],
]

# Conservation of the toy rows: two-way split and four-way split over five outcomes.
C_HALF = 1.0 - math.log(2) / math.log(5)
C_QUARTER = 1.0 - 2 * math.log(2) / math.log(5)
TOY_MAX_SCORE = 1.0 + 2 * 0.5 * C_HALF + 0.25 * C_QUARTER
# An A-started ACGT window scores 1 (first column) + 0.25 * C_QUARTER on both strands.
TOY_ACGT_SCORE = (1.0 + 0.25 * C_QUARTER) / TOY_MAX_SCORE


@pytest.fixture
def toy_counts() -> list[list[float]]:
    return [list(row) for row in TOY_COUNTS]


@pytest.fixture
def toy_counts_file(tmp_path: Path) -> Path:
    path = tmp_path / "toy.counts"
    body = "\n".join("\t".join(f"{v:g}" for v in row) for row in TOY_COUNTS)
    path.write_text(f"# toy motif\nA\tC\tG\tT\n{body}\n")
    return path


@pytest.fixture
def gapped_fasta(tmp_path: Path) -> Path:
    path = tmp_path / "aln.fasta"
    path.write_text(">s1\n-ACG-TACGTACGT\n>s2\nGGGGACGTGG\n")
    return path


@pytest.fixture
def toy_expected() -> dict[str, float]:
    return {
        "c_half": C_HALF,
        "c_quarter": C_QUARTER,
        "max_score": TOY_MAX_SCORE,
        "acgt_score": TOY_ACGT_SCORE,
    }
