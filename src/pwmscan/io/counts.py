"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/io/counts.py

Count-matrix readers. Each parser is registered under an upper-case format
key; load_counts() picks one from the file suffix unless a format is given.

Row lengths are deliberately not checked here: a row without four values is
reported by WeightMatrix when the table is turned into a matrix.
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional

from Bio import motifs

from ..core.matrix import ALPHABET
from ..errors import CountsParseError

Parser = Callable[[Path], List["CountsTable"]]

_REGISTRY: Dict[str, Parser] = {}
_SUFFIX_FORMATS = {
    "counts": "COUNTS",
    "txt": "COUNTS",
    "tsv": "COUNTS",
    "jaspar": "JASPAR",
    "pfm": "PFM",
    "transfac": "TRANSFAC",
    "dat": "TRANSFAC",
    "meme": "MEME",
}
_HEADER_RE = re.compile(r"^[ACGT](?:[\s,]+[ACGT]){3}$", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class CountsTable:
    name: str
    rows: List[List[float]]
    source: Optional[Path] = None

    @property
    def length(self) -> int:
        return len(self.rows)


def register(fmt: str) -> Callable[[Parser], Parser]:
    fmt = fmt.upper()

    def _decorator(fn: Parser) -> Parser:
        _REGISTRY[fmt] = fn
        return fn

    return _decorator


def available_formats() -> list[str]:
    return sorted(_REGISTRY)


def guess_format(path: Path) -> str:
    suffix = path.suffix.lower().lstrip(".")
    try:
        return _SUFFIX_FORMATS[suffix]
    except KeyError:
        raise CountsParseError(
            f"Cannot guess matrix format from suffix '{path.suffix}'; pass one of {available_formats()}"
        ) from None


def load_counts(path: Path | str, fmt: str | None = None) -> list[CountsTable]:
    path = Path(path)
    if not path.is_file():
        raise CountsParseError(f"Matrix file not found: {path}")
    key = (fmt or guess_format(path)).upper()
    try:
        parser = _REGISTRY[key]
    except KeyError as e:
        raise CountsParseError(f"No parser registered for format '{key}'") from e
    tables = parser(path)
    if not tables:
        raise CountsParseError(f"No count matrices found in {path}")
    return tables


def parse_counts_text(text: str, *, default_name: str, source: Optional[Path] = None) -> list[CountsTable]:
    """
    Plain count tables: one position per line, values separated by whitespace
    or commas. '#' starts a comment line, an 'A C G T' header is skipped and
    '>name' starts a new matrix.
    """
    where = str(source) if source is not None else "<text>"
    tables: list[CountsTable] = []
    name = default_name
    rows: list[list[float]] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or _HEADER_RE.match(stripped):
            continue
        if stripped.startswith(">"):
            if rows:
                tables.append(CountsTable(name=name, rows=rows, source=source))
            label = stripped[1:].split()
            name = label[0] if label else f"{default_name}_{len(tables) + 1}"
            rows = []
            continue
        try:
            rows.append([float(tok) for tok in stripped.replace(",", " ").split()])
        except ValueError as exc:
            raise CountsParseError(f"{where}:{lineno}: non-numeric count in {stripped!r}") from exc
    if rows:
        tables.append(CountsTable(name=name, rows=rows, source=source))
    return tables


@register("COUNTS")
def parse_counts_file(path: Path) -> list[CountsTable]:
    return parse_counts_text(path.read_text(), default_name=path.stem, source=path)


def _motif_name(motif, fallback: str) -> str:
    for candidate in (getattr(motif, "name", None), getattr(motif, "matrix_id", None)):
        if candidate:
            return str(candidate).strip()
    if isinstance(motif, dict) and motif.get("ID"):
        return str(motif["ID"]).strip()
    return fallback


def _read_biopython(path: Path, bio_fmt: str) -> list[CountsTable]:
    with path.open() as handle:
        try:
            record = motifs.parse(handle, bio_fmt)
        except Exception as exc:  # Bio raises a mix of ValueError/IndexError/KeyError
            raise CountsParseError(f"Failed to parse {path} as {bio_fmt}: {exc}") from exc

    tables: list[CountsTable] = []
    for i, motif in enumerate(record):
        if sorted(motif.alphabet) != sorted(ALPHABET):
            raise CountsParseError(f"{path}: motif {i + 1} is not a DNA (ACGT) matrix")
        rows = [[float(motif.counts[base][pos]) for base in ALPHABET] for pos in range(motif.length)]
        fallback = path.stem if len(record) == 1 else f"{path.stem}_{i + 1}"
        tables.append(CountsTable(name=_motif_name(motif, fallback), rows=rows, source=path))
    return tables


@register("JASPAR")
def parse_jaspar(path: Path) -> list[CountsTable]:
    return _read_biopython(path, "jaspar")


@register("PFM")
def parse_pfm(path: Path) -> list[CountsTable]:
    return _read_biopython(path, "pfm")


@register("TRANSFAC")
def parse_transfac(path: Path) -> list[CountsTable]:
    return _read_biopython(path, "transfac")


@register("MEME")
def parse_meme_minimal(path: Path) -> list[CountsTable]:
    return _read_biopython(path, "minimal")
