"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/config.py

YAML job config, validated with Pydantic. The document has a single
top-level `pwmscan:` key.

Relative paths are resolved against the directory of the config file.
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import List, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

StrandLabel = Literal["+", "-"]
OutputFormat = Literal["tsv", "csv", "parquet"]


class MatrixConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: Path
    format: Optional[str] = None  # guessed from suffix when omitted
    name: Optional[str] = None  # only valid for single-matrix files
    threshold: Optional[float] = None

    @field_validator("threshold")
    @classmethod
    def _finite(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and not math.isfinite(v):
            raise ValueError("threshold must be finite")
        return v


class SequenceConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: Path
    format: str = "fasta"


class OutputConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: Optional[Path] = None
    format: OutputFormat = "tsv"


class ScanConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    threshold: float = 0.8
    strands: List[StrandLabel] = Field(default_factory=lambda: ["+", "-"])
    matrices: List[MatrixConfig]
    sequences: SequenceConfig
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("threshold")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("threshold must be finite")
        return v

    @field_validator("strands")
    @classmethod
    def _non_empty_unique(cls, v: List[StrandLabel]) -> List[StrandLabel]:
        if not v:
            raise ValueError("strands must list at least one of '+', '-'")
        return list(dict.fromkeys(v))

    @field_validator("matrices")
    @classmethod
    def _at_least_one(cls, v: List[MatrixConfig]) -> List[MatrixConfig]:
        if not v:
            raise ValueError("at least one matrix is required")
        return v

    def resolve_paths(self, base: Path) -> "ScanConfig":
        def _abs(p: Path) -> Path:
            return p if p.is_absolute() else (base / p).resolve()

        for m in self.matrices:
            m.path = _abs(m.path)
        self.sequences.path = _abs(self.sequences.path)
        if self.output.path is not None:
            self.output.path = _abs(self.output.path)
        return self


class RootConfig(BaseModel):
    pwmscan: ScanConfig


def load_config(path: Path | str) -> ScanConfig:
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    try:
        raw = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(raw, dict) or "pwmscan" not in raw:
        raise ConfigError(f"{path}: missing top-level 'pwmscan' key")
    try:
        root = RootConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    return root.pwmscan.resolve_paths(path.parent.resolve())
