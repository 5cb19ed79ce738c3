"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/io/sequences.py

Sequence inputs. FASTA (and other Bio.SeqIO formats) may carry alignment
gaps; they are kept in the raw string so hits can be mapped back onto the
alignment columns.
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Tuple

from Bio import SeqIO

from ..core.sequence import GappedSequence
from ..errors import SequenceInputError

NamedSequence = Tuple[str, GappedSequence]


def read_sequences(path: Path | str, fmt: str = "fasta") -> List[NamedSequence]:
    path = Path(path)
    if not path.is_file():
        raise SequenceInputError(f"Sequence file not found: {path}")
    try:
        records = list(SeqIO.parse(str(path), fmt))
    except ValueError as exc:
        raise SequenceInputError(f"Failed to read {path} as {fmt}: {exc}") from exc
    if not records:
        raise SequenceInputError(f"No sequences found in {path}")
    return [(rec.id, GappedSequence.from_string(str(rec.seq))) for rec in records]


def sequences_from_strings(seqs: Iterable[str]) -> List[NamedSequence]:
    return [(f"seq{i}", GappedSequence.from_string(s.strip())) for i, s in enumerate(seqs, start=1)]
