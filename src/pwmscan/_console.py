"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/_console.py
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Iterable, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from .config import ScanConfig
from .core.matrix import ALPHABET, WeightMatrix
from .io.writers import Hit

theme = Theme(
    {
        "ok": "green",
        "warn": "yellow",
        "bad": "red",
        "muted": "dim",
        "accent": "bright_cyan",
        "title": "bold bright_cyan",
    }
)
console = Console(theme=theme)
err_console = Console(theme=theme, stderr=True)


def _rounded_table(title: str) -> Table:
    return Table(
        title=Text(title, style="title"),
        show_header=True,
        header_style="bold white",
        border_style="accent",
        row_styles=["", "muted"],
        box=box.ROUNDED,
    )


def render_hits_table(hits: Sequence[Hit]) -> None:
    t = _rounded_table(f"Hits ({len(hits)})")
    for col in ("matrix", "strand", "sequence", "seq_start", "seq_end", "align_start", "align_end"):
        t.add_column(col, justify="right" if col not in {"matrix", "sequence"} else "left")
    t.add_column("score", justify="right", style="ok")
    for h in hits:
        s = h.score
        t.add_row(
            h.matrix,
            str(h.strand),
            h.sequence_id,
            str(s.seq_start),
            str(s.seq_end),
            str(s.align_start),
            str(s.align_end),
            f"{s.score:.3f}",
        )
    console.print(t)


def render_matrix_detail(matrix: WeightMatrix) -> None:
    t = _rounded_table(f"{matrix.name} ({matrix.strand})")
    t.add_column("pos", justify="right")
    for base in ALPHABET:
        t.add_column(base, justify="right")
    t.add_column("residual", justify="right", style="muted")
    t.add_column("conservation", justify="right", style="accent")
    for i, (row, c) in enumerate(zip(matrix.probs, matrix.conservation), start=1):
        t.add_row(str(i), *(f"{p:.3f}" for p in row), f"{c:.3f}")
    t.caption = f"consensus {matrix.consensus()} · max score {matrix.max_score:.4f} · threshold {matrix.threshold:g}"
    console.print(t)


def render_config_summary(cfg: ScanConfig, matrices: Iterable[WeightMatrix]) -> None:
    t = _rounded_table("Matrices")
    t.add_column("name")
    t.add_column("strand")
    t.add_column("length", justify="right")
    t.add_column("threshold", justify="right")
    t.add_column("max score", justify="right")
    for m in matrices:
        t.add_row(m.name, str(m.strand), str(m.length), f"{m.threshold:g}", f"{m.max_score:.4f}")
    console.print(t)

    t2 = _rounded_table("Inputs / outputs")
    t2.add_column("field")
    t2.add_column("value")
    t2.add_row("sequences", f"{cfg.sequences.path} ({cfg.sequences.format})")
    out = f"{cfg.output.path} ({cfg.output.format})" if cfg.output.path else Text("console table", style="muted")
    t2.add_row("output", out)
    console.print(t2)
