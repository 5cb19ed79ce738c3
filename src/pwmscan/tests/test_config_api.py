"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/tests/test_config_api.py
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest
import yaml

from pwmscan.api import run_job, scan_all
from pwmscan.config import load_config
from pwmscan.core.matrix import WeightMatrix
from pwmscan.core.strand import Strand
from pwmscan.errors import ConfigError, UnrecognizedBaseError
from pwmscan.io.sequences import sequences_from_strings


def _write_yaml(d: dict, path: Path) -> Path:
    path.write_text(yaml.safe_dump(d, sort_keys=False))
    return path


@pytest.fixture
def job_cfg(tmp_path: Path, toy_counts_file: Path, gapped_fasta: Path) -> dict:
    return {
        "pwmscan": {
            "threshold": 0.5,
            "strands": ["+", "-"],
            "matrices": [{"path": toy_counts_file.name}],
            "sequences": {"path": gapped_fasta.name},
            "output": {"path": "out/hits.tsv", "format": "tsv"},
        }
    }


def test_load_config_resolves_relative_paths(tmp_path: Path, job_cfg: dict) -> None:
    cfg = load_config(_write_yaml(job_cfg, tmp_path / "config.yaml"))
    assert cfg.matrices[0].path == (tmp_path / "toy.counts").resolve()
    assert cfg.sequences.path.is_absolute()
    assert cfg.output.path == (tmp_path / "out" / "hits.tsv").resolve()
    assert cfg.strands == ["+", "-"]


@pytest.mark.parametrize(
    "patch",
    [
        {"strands": []},
        {"strands": ["x"]},
        {"matrices": []},
        {"threshold": float("inf")},
        {"unexpected": 1},
    ],
)
def test_invalid_config_raises_config_error(tmp_path: Path, job_cfg: dict, patch: dict) -> None:
    job_cfg["pwmscan"].update(patch)
    with pytest.raises(ConfigError):
        load_config(_write_yaml(job_cfg, tmp_path / "config.yaml"))


def test_missing_root_key_and_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="pwmscan"):
        load_config(_write_yaml({"other": {}}, tmp_path / "config.yaml"))
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "absent.yaml")


def test_run_job_end_to_end(tmp_path: Path, job_cfg: dict) -> None:
    cfg = load_config(_write_yaml(job_cfg, tmp_path / "config.yaml"))
    hits = run_job(cfg)
    # s1 carries three ACGT windows and s2 one, found on both strands
    assert len(hits) == 8
    assert [(h.strand, h.sequence_id) for h in hits[:4]] == [(Strand.FORWARD, "s1")] * 3 + [(Strand.FORWARD, "s2")]
    df = pd.read_csv(cfg.output.path, sep="\t")
    assert len(df) == 8
    s2_rev = df[(df["sequence_id"] == "s2") & (df["strand"] == "-")].iloc[0]
    assert (s2_rev["seq_start"], s2_rev["seq_end"]) == (8, 5)
    assert s2_rev["score"] == pytest.approx(0.645)


def test_per_matrix_threshold_override(tmp_path: Path, job_cfg: dict) -> None:
    job_cfg["pwmscan"]["matrices"][0]["threshold"] = 0.99
    cfg = load_config(_write_yaml(job_cfg, tmp_path / "config.yaml"))
    assert run_job(cfg) == []


def test_run_job_accepts_plain_dict(job_cfg: dict, tmp_path: Path) -> None:
    raw = dict(job_cfg["pwmscan"])
    raw["matrices"] = [{"path": str(tmp_path / "toy.counts")}]
    raw["sequences"] = {"path": str(tmp_path / "aln.fasta")}
    raw["output"] = {}
    assert len(run_job(raw)) == 8
    with pytest.raises(ConfigError):
        run_job({"matrices": []})


def test_scan_all_reraises_unrecognized_base(toy_counts) -> None:
    m = WeightMatrix(name="toy", threshold=0.5, counts=toy_counts)
    with pytest.raises(UnrecognizedBaseError):
        scan_all([m], sequences_from_strings(["ACGT", "ACGTNN"]))
