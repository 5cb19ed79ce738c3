"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/errors.py
--------------------------------------------------------------------------------
"""

from __future__ import annotations


class PwmScanError(Exception):
    """Base exception for this package."""


class ConfigError(PwmScanError): ...


class MalformedMatrixError(PwmScanError, ValueError):
    """A counts table that cannot be turned into a weight matrix."""


class UnrecognizedBaseError(PwmScanError, ValueError):
    """A scored window contains a character outside A/C/G/T (either case)."""

    def __init__(self, base: str, position: int) -> None:
        self.base = base
        self.position = position
        super().__init__(f"DNA base unknown {base!r} at gap-free position {position + 1}")


class CountsParseError(PwmScanError):
    """Count-matrix file could not be parsed."""


class SequenceInputError(PwmScanError):
    """Sequence file missing or unreadable."""


class OutputError(PwmScanError): ...
