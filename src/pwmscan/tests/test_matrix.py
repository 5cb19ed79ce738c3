"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/tests/test_matrix.py
--------------------------------------------------------------------------------
"""

import numpy as np
import pytest

from pwmscan.core.matrix import WeightMatrix, reverse_complement_counts
from pwmscan.core.strand import Strand
from pwmscan.errors import MalformedMatrixError


def test_forward_probabilities_and_residual(toy_counts) -> None:
    m = WeightMatrix(name="toy", threshold=0.5, counts=toy_counts)
    expected = np.array(
        [
            [1.0, 0.0, 0.0, 0.0, 0.0],
            [0.5, 0.0, 0.0, 0.5, 0.0],
            [0.5, 0.0, 0.0, 0.0, 0.5],
            [0.25, 0.25, 0.25, 0.25, 0.0],
        ]
    )
    assert m.length == 4
    assert np.allclose(m.probs, expected)
    assert np.allclose(m.probs.sum(axis=1), 1.0)


def test_conservation_and_max_score(toy_counts, toy_expected) -> None:
    m = WeightMatrix(name="toy", threshold=0.5, counts=toy_counts)
    c_half, c_quarter = toy_expected["c_half"], toy_expected["c_quarter"]
    assert np.allclose(m.conservation, [1.0, c_half, c_half, c_quarter])
    assert m.max_score == pytest.approx(toy_expected["max_score"])


def test_reverse_matrix_is_reverse_complement(toy_counts) -> None:
    m = WeightMatrix(name="toy", threshold=0.5, counts=toy_counts, strand=Strand.REVERSE)
    assert np.allclose(m.oriented_counts, reverse_complement_counts(toy_counts))
    # last forward row [.5 x4] becomes the first position; first row [2,0,0,0] becomes all-T
    assert np.allclose(m.probs[0], [0.25, 0.25, 0.25, 0.25, 0.0])
    assert np.allclose(m.probs[3], [0.0, 0.0, 0.0, 1.0, 0.0])
    assert m.consensus().endswith("T")


def test_reverse_transform_is_an_involution(toy_counts) -> None:
    fwd = WeightMatrix(name="toy", threshold=0.5, counts=toy_counts)
    rev = WeightMatrix(name="toy", threshold=0.5, counts=toy_counts, strand="-")
    back = WeightMatrix(name="toy", threshold=0.5, counts=reverse_complement_counts(rev.oriented_counts))
    assert np.allclose(back.probs, fwd.probs)
    assert np.allclose(back.conservation, fwd.conservation)
    assert rev.max_score == pytest.approx(fwd.max_score)


def test_sparse_rows_keep_residual_mass() -> None:
    m = WeightMatrix(name="sparse", threshold=0.0, counts=[[10, 0, 0, 0], [1, 1, 1, 2]])
    assert m.probs[1, 4] == pytest.approx(0.5)
    assert np.allclose(m.probs.sum(axis=1), 1.0)


def test_row_with_three_values_is_fatal() -> None:
    with pytest.raises(MalformedMatrixError, match="3 values"):
        WeightMatrix(name="bad", threshold=0.5, counts=[[1, 0, 0, 0], [1, 0, 0]])


@pytest.mark.parametrize(
    "counts",
    [
        [],
        [[0, 0, 0, 0]],
        [[1, -1, 0, 0]],
        [[1, float("nan"), 0, 0]],
    ],
)
def test_malformed_tables_rejected(counts) -> None:
    with pytest.raises(MalformedMatrixError):
        WeightMatrix(name="bad", threshold=0.5, counts=counts)


def test_derived_arrays_are_read_only(toy_counts) -> None:
    m = WeightMatrix(name="toy", threshold=0.5, counts=toy_counts)
    with pytest.raises(ValueError):
        m.probs[0, 0] = 0.0
    with pytest.raises(AttributeError):
        m.threshold = 0.1  # type: ignore[misc]


def test_for_strand_rebuilds_from_raw_counts(toy_counts) -> None:
    fwd = WeightMatrix(name="toy", threshold=0.5, counts=toy_counts)
    rev = fwd.for_strand("-")
    assert rev.strand is Strand.REVERSE
    assert np.allclose(rev.counts, fwd.counts)
    assert np.allclose(rev.probs, WeightMatrix(name="toy", threshold=0.5, counts=toy_counts, strand="-").probs)
