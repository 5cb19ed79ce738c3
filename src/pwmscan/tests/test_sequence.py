"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/tests/test_sequence.py
--------------------------------------------------------------------------------
"""

import pytest

from pwmscan.core.sequence import GappedSequence
from pwmscan.core.strand import Strand, parse_strands


def test_gaps_are_stripped_and_positions_kept() -> None:
    seq = GappedSequence.from_string("-ACG-TACG")
    assert seq.positions == (1, 2, 3, 5, 6, 7, 8)
    assert seq.bases == "ACGTACG"
    assert len(seq) == 7


def test_empty_and_all_gap_inputs() -> None:
    for raw in ("", "----"):
        seq = GappedSequence.from_string(raw)
        assert seq.positions == ()
        assert seq.bases == ""


def test_no_alphabet_validation_at_construction() -> None:
    seq = GappedSequence.from_string("aNx-t")
    assert seq.bases == "aNxt"
    assert seq.positions == (0, 1, 2, 4)


def test_mismatched_lengths_rejected() -> None:
    with pytest.raises(ValueError):
        GappedSequence(positions=(0, 1), bases="A")


def test_strand_display_and_parse() -> None:
    assert str(Strand.FORWARD) == "+"
    assert str(Strand.REVERSE) == "-"
    assert Strand.parse("reverse") is Strand.REVERSE
    assert Strand.parse("+") is Strand.FORWARD
    assert parse_strands("both") == (Strand.FORWARD, Strand.REVERSE)
    with pytest.raises(ValueError):
        Strand.parse("x")
