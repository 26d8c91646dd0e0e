import os
import subprocess
import sys
from pathlib import Path

import pytest
import yaml

from facsdensity.cli.main import main
from facsdensity.core.loader import DEFAULT_PLOT_CONFIG, load_plot_config


def test_plot_command_writes_file(fcs_dir, out_dir, fake_fcs_reader):
    rc = main([
        "plot", "--id", "A", "--dir", str(fcs_dir), "--outdir", str(out_dir),
        "--gate", "1500000", "7000000", "--no-input",
    ])

    assert rc == 0
    assert os.listdir(out_dir) == ["A.jpg"]


def test_plot_command_uses_config(fcs_dir, out_dir, data_dir, fake_fcs_reader):
    # valid_basic.yaml asks for pdf without prompting
    rc = main([
        "plot", "--id", "A", "--dir", str(fcs_dir), "--outdir", str(out_dir),
        "--config", str(data_dir / "valid_basic.yaml"),
    ])

    assert rc == 0
    assert os.listdir(out_dir) == ["A.pdf"]


def test_command_line_overrides_config(fcs_dir, out_dir, data_dir, fake_fcs_reader):
    rc = main([
        "plot", "--id", "A", "--dir", str(fcs_dir), "--outdir", str(out_dir),
        "--config", str(data_dir / "valid_basic.yaml"), "--format", "jpeg",
    ])

    assert rc == 0
    assert os.listdir(out_dir) == ["A.jpg"]


def test_plot_command_cancelled(fcs_dir, out_dir, fake_fcs_reader, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt="": "1")
    rc = main(["plot", "--id", "A", "--dir", str(fcs_dir), "--outdir", str(out_dir)])

    assert rc == 0
    assert not out_dir.exists()


@pytest.mark.parametrize("extra", [
    ["--format", "gif"],
    ["--alpha", "3"],
    ["--gate", "7000000", "1500000"],
])
def test_plot_command_rejects_bad_settings(fcs_dir, out_dir, fake_fcs_reader, extra):
    rc = main(["plot", "--id", "A", "--dir", str(fcs_dir), "--outdir", str(out_dir), "--no-input"] + extra)
    assert rc == 1
    assert not out_dir.exists()


def test_plot_command_no_matching_files(fcs_dir, out_dir, fake_fcs_reader):
    rc = main(["plot", "--id", "Z99", "--dir", str(fcs_dir), "--outdir", str(out_dir), "--no-input"])
    assert rc == 1


def test_plot_command_strict_timepoints(fcs_dir, out_dir, fake_fcs_reader):
    # A01_0 and B01_0 share time point 0
    rc = main(["plot", "--id", "01", "--dir", str(fcs_dir), "--outdir", str(out_dir),
               "--no-input", "--strict-timepoints"])
    assert rc == 1

    rc = main(["plot", "--id", "01", "--dir", str(fcs_dir), "--outdir", str(out_dir), "--no-input"])
    assert rc == 0
    assert os.listdir(out_dir) == ["01.jpg"]


def test_generate_config(tmp_path):
    out = tmp_path / "plot.yaml"
    assert main(["generate-config", "--out", str(out)]) == 0
    assert load_plot_config(out) == DEFAULT_PLOT_CONFIG


def test_generate_config_keeps_existing_values(tmp_path):
    out = tmp_path / "plot.yaml"
    out.write_text(yaml.safe_dump({"plot_color": "orange", "gate": [1, 2]}))

    assert main(["generate-config", "--out", str(out)]) == 0

    data = load_plot_config(out)
    assert data["plot_color"] == "orange"
    assert data["gate"] == [1, 2]
    assert data["channel"] == DEFAULT_PLOT_CONFIG["channel"]


def test_cli_module_entrypoint():
    result = subprocess.run(
        [sys.executable, "-m", "facsdensity.cli.main", "plot", "--id", "A", "--format", "gif", "--no-input"],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        cwd=Path(__file__).resolve().parent.parent,
    )

    assert result.returncode == 1
    assert "gif" in result.stderr


@pytest.mark.parametrize("content", [
    "- a\n- b\n",
    "gate: [1, 2\nplot_color: black\n",
])
def test_generate_config_rejects_bad_existing_file(tmp_path, content):
    out = tmp_path / "plot.yaml"
    out.write_text(content)

    assert main(["generate-config", "--out", str(out)]) == 1
    # left as it was
    assert out.read_text() == content


def test_generate_config_normalizes_format(tmp_path):
    out = tmp_path / "plot.yaml"
    out.write_text("file_format: PDF\n")

    assert main(["generate-config", "--out", str(out)]) == 0
    assert load_plot_config(out)["file_format"] == "pdf"


def test_plot_command_config_format_any_case(fcs_dir, out_dir, tmp_path, fake_fcs_reader):
    cfg = tmp_path / "plot.yaml"
    cfg.write_text("file_format: PDF\nuser_input: false\n")

    rc = main(["plot", "--id", "A", "--dir", str(fcs_dir), "--outdir", str(out_dir),
               "--config", str(cfg)])

    assert rc == 0
    assert os.listdir(out_dir) == ["A.pdf"]
