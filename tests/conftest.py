import matplotlib
matplotlib.use("Agg")

from pathlib import Path

import numpy as np
import pandas as pd
import pytest


TEST_DIR = Path(__file__).resolve().parent

SAMPLE_FILES = ["A01_0.fcs", "A02_6.fcs", "B01_0.fcs"]


@pytest.fixture
def data_dir():
    return TEST_DIR / "data"


def synthetic_events(path, n_events=400):
    """
    Fake FCS content: a DNA-content-like FL1-A peak that moves with the
    time point, plus a scatter channel.
    """
    name = Path(path).name
    seed = sum(ord(c) for c in name)
    rng = np.random.default_rng(seed)
    shift = (seed % 7) * 2.5e5
    return pd.DataFrame({
        "FSC-A": rng.normal(5e4, 1e4, n_events),
        "FL1-A": rng.normal(3e6 + shift, 4e5, n_events),
    })


class RecordingReader:
    """Sample reader that records which paths were read."""

    def __init__(self):
        self.paths = []

    def __call__(self, path):
        self.paths.append(Path(path))
        return synthetic_events(path)


@pytest.fixture
def reader():
    return RecordingReader()


@pytest.fixture
def fcs_dir(tmp_path):
    """
    Directory with placeholder FCS files; contents are never parsed
    because the tests inject `reader`.
    """
    d = tmp_path / "facs"
    d.mkdir()
    for name in SAMPLE_FILES:
        (d / name).write_bytes(b"")
    return d


@pytest.fixture
def out_dir(tmp_path):
    return tmp_path / "plots"


@pytest.fixture(autouse=True)
def _close_figures():
    import matplotlib.pyplot as plt
    yield
    plt.close("all")


@pytest.fixture
def fake_fcs_reader(monkeypatch):
    """Replace the flowkit-backed default reader with synthetic events."""
    monkeypatch.setattr("facsdensity.core.density_plot.read_fcs_events", synthetic_events)
