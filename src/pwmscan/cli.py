"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/cli.py

Commands:
  pwmscan scan MATRIX_FILE (--fasta FILE | --seq SEQ ...)
  pwmscan run --config config.yaml
  pwmscan matrix MATRIX_FILE
  pwmscan formats
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from ._console import (
    console,
    err_console,
    render_config_summary,
    render_hits_table,
    render_matrix_detail,
)
from ._logging import rich_tracebacks, setup_console_logging
from .api import build_matrices, load_matrices, run_job, scan_all
from .config import load_config
from .core.strand import parse_strands
from .errors import (
    ConfigError,
    CountsParseError,
    MalformedMatrixError,
    PwmScanError,
    SequenceInputError,
    UnrecognizedBaseError,
)
from .io.counts import available_formats, load_counts
from .io.sequences import read_sequences, sequences_from_strings
from .io.writers import format_hit, write_hits

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Scan DNA sequences for count-matrix motif matches on either strand.",
)


def _exit_for(e: Exception) -> int:
    mapping = {
        ConfigError: 2,
        MalformedMatrixError: 3,
        UnrecognizedBaseError: 3,
        CountsParseError: 4,
        SequenceInputError: 4,
    }
    for etype, code in mapping.items():
        if isinstance(e, etype):
            return code
    return 1


def _fail(e: PwmScanError) -> typer.Exit:
    err_console.print(f"[bad]✖ {escape(str(e))}[/bad]")
    return typer.Exit(code=_exit_for(e))


def _strands(value: str):
    try:
        return parse_strands(value)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc


@app.callback()
def _root(
    log_level: str = typer.Option(
        os.environ.get("PWMSCAN_LOG_LEVEL", "WARNING"),
        "--log-level",
        help="Console log level (logs go to stderr).",
    ),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit JSON logs."),
    trace: bool = typer.Option(False, "--trace", help="Rich tracebacks on errors."),
):
    setup_console_logging(log_level, json_logs, console=err_console)
    rich_tracebacks(enabled=trace)


@app.command(help="Scan sequences with every matrix in MATRIX_FILE.")
def scan(
    matrix_file: Path = typer.Argument(..., help="Count-matrix file."),
    fasta: Optional[Path] = typer.Option(None, "--fasta", "-f", help="FASTA file (aligned/gapped allowed)."),
    seq: List[str] = typer.Option([], "--seq", "-s", help="Raw sequence, gaps '-' allowed. Repeatable."),
    fmt: Optional[str] = typer.Option(None, "--format", help="Matrix format (default: guessed from suffix)."),
    threshold: float = typer.Option(0.8, "--threshold", "-t", help="Minimum normalized score."),
    strand: str = typer.Option("both", "--strand", help="'+', '-' or 'both'."),
    name: Optional[str] = typer.Option(None, "--name", help="Override the matrix name (single-matrix files)."),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write hits to a file instead of the console."),
    out_format: str = typer.Option("tsv", "--out-format", help="tsv, csv or parquet."),
    plain: bool = typer.Option(False, "--plain", help="Print tab-separated lines instead of a table."),
):
    try:
        if fasta is None and not seq:
            raise ConfigError("Provide --fasta or at least one --seq.")
        if fasta is not None and seq:
            raise ConfigError("Use either --fasta or --seq, not both.")
        strands = _strands(strand)
        tables = load_counts(matrix_file, fmt)
        matrices = build_matrices(tables, threshold=threshold, strands=strands, name=name)
        sequences = read_sequences(fasta) if fasta is not None else sequences_from_strings(seq)
        hits = scan_all(matrices, sequences)
        if out is not None:
            path = write_hits(hits, out, out_format)  # type: ignore[arg-type]
            console.print(f"[ok]✔ Wrote {len(hits)} hit(s) to {escape(str(path))}[/ok]")
        elif plain:
            for h in hits:
                typer.echo(format_hit(h))
        else:
            render_hits_table(hits)
    except PwmScanError as e:
        raise _fail(e) from e


@app.command(help="Run a YAML-configured scan job.")
def run(
    config: Path = typer.Option(..., "--config", "-c", help="Path to config.yaml"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Validate inputs and print a summary, then exit."),
):
    try:
        cfg = load_config(config)
        if dry_run:
            render_config_summary(cfg, load_matrices(cfg))
            console.print("[ok]✔ Config validated (dry run).[/ok]")
            return
        hits = run_job(cfg)
        if cfg.output.path is None:
            render_hits_table(hits)
        else:
            console.print(f"[ok]✔ Wrote {len(hits)} hit(s) to {escape(str(cfg.output.path))}[/ok]")
    except PwmScanError as e:
        raise _fail(e) from e


@app.command(help="Show probabilities, conservation and max score for each matrix.")
def matrix(
    matrix_file: Path = typer.Argument(..., help="Count-matrix file."),
    fmt: Optional[str] = typer.Option(None, "--format", help="Matrix format (default: guessed from suffix)."),
    strand: str = typer.Option("+", "--strand", help="'+', '-' or 'both'."),
    threshold: float = typer.Option(0.8, "--threshold", "-t"),
):
    try:
        tables = load_counts(matrix_file, fmt)
        for m in build_matrices(tables, threshold=threshold, strands=_strands(strand)):
            render_matrix_detail(m)
    except PwmScanError as e:
        raise _fail(e) from e


@app.command(help="List registered count-matrix formats.")
def formats():
    for fmt in available_formats():
        console.print(fmt.lower())
