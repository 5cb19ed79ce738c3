"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/api.py

Public API:
  - build_matrices  (count tables -> one WeightMatrix per table and strand)
  - scan_all        (every matrix over every sequence)
  - run_job         (YAML-driven, see config.py)
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from pydantic import ValidationError

from ._logging import get_logger
from .config import ScanConfig
from .core.matrix import WeightMatrix
from .core.scanner import scan
from .core.strand import Strand
from .errors import ConfigError, MalformedMatrixError, UnrecognizedBaseError
from .io.counts import CountsTable, load_counts
from .io.sequences import NamedSequence, read_sequences
from .io.writers import Hit, write_hits

_LOG = get_logger(__name__)


def build_matrices(
    tables: Sequence[CountsTable],
    *,
    threshold: float,
    strands: Iterable[Strand | str] = (Strand.FORWARD,),
    name: str | None = None,
) -> List[WeightMatrix]:
    if name is not None and len(tables) != 1:
        raise ConfigError(f"A matrix name override needs a single-matrix file (got {len(tables)} matrices)")
    resolved = [Strand.parse(s) for s in strands]
    matrices: List[WeightMatrix] = []
    for table in tables:
        label = name or table.name
        for strand in resolved:
            try:
                matrices.append(WeightMatrix(name=label, threshold=threshold, counts=table.rows, strand=strand))
            except MalformedMatrixError as exc:
                raise MalformedMatrixError(f"{label}: {exc}") from exc
        _LOG.debug("Built %s (length %d) for strands %s", label, table.length, "".join(map(str, resolved)))
    return matrices


def scan_all(matrices: Sequence[WeightMatrix], sequences: Sequence[NamedSequence]) -> List[Hit]:
    hits: List[Hit] = []
    for matrix in matrices:
        before = len(hits)
        for seq_id, seq in sequences:
            try:
                scores = scan(matrix, seq)
            except UnrecognizedBaseError:
                _LOG.error("Scan of '%s' with %s (%s) aborted", seq_id, matrix.name, matrix.strand)
                raise
            _LOG.debug("%s (%s) on %s: %d hit(s)", matrix.name, matrix.strand, seq_id, len(scores))
            hits.extend(Hit(matrix=matrix.name, strand=matrix.strand, sequence_id=seq_id, score=s) for s in scores)
        _LOG.info(
            "%s (%s): %d hit(s) at threshold %.3f across %d sequence(s)",
            matrix.name,
            matrix.strand,
            len(hits) - before,
            matrix.threshold,
            len(sequences),
        )
    return hits


def load_matrices(cfg: ScanConfig) -> List[WeightMatrix]:
    matrices: List[WeightMatrix] = []
    for m in cfg.matrices:
        tables = load_counts(m.path, m.format)
        threshold = cfg.threshold if m.threshold is None else m.threshold
        matrices.extend(build_matrices(tables, threshold=threshold, strands=cfg.strands, name=m.name))
    return matrices


def run_job(cfg: ScanConfig | dict) -> List[Hit]:
    if not isinstance(cfg, ScanConfig):
        try:
            cfg = ScanConfig(**cfg)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc
    matrices = load_matrices(cfg)
    sequences = read_sequences(cfg.sequences.path, cfg.sequences.format)
    _LOG.info("Scanning %d sequence(s) with %d matrix strand(s)", len(sequences), len(matrices))
    hits = scan_all(matrices, sequences)
    if cfg.output.path is not None:
        out = write_hits(hits, cfg.output.path, cfg.output.format)
        _LOG.info("Wrote %d hit(s) to %s", len(hits), out)
    return hits
