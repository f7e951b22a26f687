import random

import pytest

from statsboard import data as sd
from statsboard.colors import ColorAssigner


SAMPLE_CSV = "K,A,B\nalpha,1,2\nbeta,3,4\nA-very-long-label,5,6\n"
SAMPLE_LOG = "O2,1.5s,0.10\nO3,1.4s,0.20\nbroken line\n\n"


@pytest.fixture
def colors():
    return ColorAssigner(rng=random.Random(1234))


@pytest.fixture
def data_sources(tmp_path, monkeypatch):
    """Point statsboard.data at sample sources in a temp dir."""
    csv_path = tmp_path / "data.csv"
    log_path = tmp_path / "benchmark.log"
    csv_path.write_text(SAMPLE_CSV, encoding="utf-8")
    log_path.write_text(SAMPLE_LOG, encoding="utf-8")
    monkeypatch.setattr(sd, "CSV_SOURCE", csv_path)
    monkeypatch.setattr(sd, "LOG_SOURCE", log_path)
    sd.clear_caches()
    yield {"csv": csv_path, "log": log_path}
    sd.clear_caches()


@pytest.fixture
def missing_sources(tmp_path, monkeypatch):
    monkeypatch.setattr(sd, "CSV_SOURCE", tmp_path / "nope.csv")
    monkeypatch.setattr(sd, "LOG_SOURCE", tmp_path / "nope.log")
    sd.clear_caches()
    yield
    sd.clear_caches()
