"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/core/sequence.py

Gap-aware DNA sequence: bases with alignment gaps removed, plus the table that
maps each retained base back to its index in the original (gapped) string.
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass

GAP = "-"


@dataclass(frozen=True, slots=True)
class GappedSequence:
    """
    DNA bases with gaps stripped.

    Attributes:
      positions: 0-based index in the original string of each retained base
      bases: retained characters, original order, no alphabet validation
    """

    positions: tuple[int, ...]
    bases: str

    def __post_init__(self) -> None:
        if len(self.positions) != len(self.bases):
            raise ValueError("positions and bases must have the same length")

    @classmethod
    def from_string(cls, raw: str) -> "GappedSequence":
        kept = [(i, ch) for i, ch in enumerate(raw) if ch != GAP]
        return cls(
            positions=tuple(i for i, _ in kept),
            bases="".join(ch for _, ch in kept),
        )

    def __len__(self) -> int:
        return len(self.bases)
