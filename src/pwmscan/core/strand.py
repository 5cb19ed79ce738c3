"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/core/strand.py
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from enum import Enum


class Strand(Enum):
    FORWARD = "+"
    REVERSE = "-"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "Strand | str") -> "Strand":
        if isinstance(value, Strand):
            return value
        key = str(value).strip().lower()
        if key in {"+", "forward", "fwd"}:
            return cls.FORWARD
        if key in {"-", "reverse", "rev"}:
            return cls.REVERSE
        raise ValueError(f"Unknown strand {value!r}; expected '+' or '-'")


def parse_strands(value: str) -> tuple[Strand, ...]:
    """'both' -> (+, -); otherwise a single strand."""
    if value.strip().lower() == "both":
        return (Strand.FORWARD, Strand.REVERSE)
    return (Strand.parse(value),)
