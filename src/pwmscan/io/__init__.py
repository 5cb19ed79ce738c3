"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/io/__init__.py

Matrix and sequence readers, hit writers.
--------------------------------------------------------------------------------
"""

from .counts import CountsTable, available_formats, load_counts, parse_counts_text
from .sequences import read_sequences, sequences_from_strings
from .writers import Hit, format_hit, hits_to_frame, write_hits

__all__ = [
    "CountsTable",
    "Hit",
    "available_formats",
    "format_hit",
    "hits_to_frame",
    "load_counts",
    "parse_counts_text",
    "read_sequences",
    "sequences_from_strings",
    "write_hits",
]
