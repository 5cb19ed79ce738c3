"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/io/writers.py

Tabular output for scan hits (pandas). Text formats round the score to three
decimals; parquet keeps full precision.
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Literal

import pandas as pd

from ..core.scanner import Score
from ..core.strand import Strand
from ..errors import OutputError

OutputFormat = Literal["tsv", "csv", "parquet"]

COLUMNS = [
    "matrix",
    "strand",
    "sequence_id",
    "seq_start",
    "seq_end",
    "align_start",
    "align_end",
    "score",
]


@dataclass(frozen=True, slots=True)
class Hit:
    matrix: str
    strand: Strand
    sequence_id: str
    score: Score


def format_hit(hit: Hit) -> str:
    return f"{hit.matrix}\t{hit.strand}\t{hit.sequence_id}\t{hit.score}"


def hits_to_frame(hits: Iterable[Hit]) -> pd.DataFrame:
    rows = [
        {
            "matrix": h.matrix,
            "strand": str(h.strand),
            "sequence_id": h.sequence_id,
            "seq_start": h.score.seq_start,
            "seq_end": h.score.seq_end,
            "align_start": h.score.align_start,
            "align_end": h.score.align_end,
            "score": h.score.score,
        }
        for h in hits
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def write_hits(hits: Iterable[Hit], path: Path | str, fmt: OutputFormat = "tsv") -> Path:
    path = Path(path)
    df = hits_to_frame(hits)
    path.parent.mkdir(parents=True, exist_ok=True)
    if fmt == "parquet":
        df.to_parquet(path, index=False)
    elif fmt in ("tsv", "csv"):
        df.to_csv(path, sep="\t" if fmt == "tsv" else ",", index=False, float_format="%.3f")
    else:
        raise OutputError(f"Unsupported output format '{fmt}'")
    return path
