import pytest

from facsdensity.core.discovery import extract_time_point, find_sample_files
from facsdensity.core.errors import (
    InvalidDirectoryError,
    InvalidFileNameError,
    NoMatchingFCSFilesError,
    NoMatchingFilesError,
)


# -----------------------------
# File discovery
# -----------------------------
def test_identifier_is_a_substring_match(fcs_dir):
    assert find_sample_files(fcs_dir, "A") == ["A01_0.fcs", "A02_6.fcs"]


def test_numeric_identifier(tmp_path):
    for name in ("A01 119_0.fcs", "A02 119_2.fcs", "A03 8401_0.fcs"):
        (tmp_path / name).write_bytes(b"")
    assert find_sample_files(tmp_path, 119) == ["A01 119_0.fcs", "A02 119_2.fcs"]


def test_identifier_has_no_pattern_syntax(tmp_path):
    (tmp_path / "A01_0.fcs").write_bytes(b"")
    (tmp_path / "A.1_0.fcs").write_bytes(b"")
    assert find_sample_files(tmp_path, "A.") == ["A.1_0.fcs"]


def test_no_matching_files(fcs_dir):
    with pytest.raises(NoMatchingFilesError) as exc:
        find_sample_files(fcs_dir, "Z99")
    assert "Z99" in str(exc.value)


def test_matching_files_without_fcs(tmp_path):
    (tmp_path / "C01_0.csv").write_text("x")
    (tmp_path / "C01_1.txt").write_text("x")
    with pytest.raises(NoMatchingFCSFilesError) as exc:
        find_sample_files(tmp_path, "C01")
    assert "C01" in str(exc.value)


def test_missing_directory(tmp_path):
    missing = tmp_path / "does_not_exist"
    with pytest.raises(InvalidDirectoryError) as exc:
        find_sample_files(missing, "A")
    assert "does_not_exist" in str(exc.value)


def test_empty_directory(tmp_path):
    with pytest.raises(InvalidDirectoryError):
        find_sample_files(tmp_path, "A")


def test_subdirectories_are_ignored(fcs_dir):
    (fcs_dir / "A_old_fcs").mkdir()
    assert find_sample_files(fcs_dir, "A") == ["A01_0.fcs", "A02_6.fcs"]


# -----------------------------
# Time point extraction
# -----------------------------
@pytest.mark.parametrize("filename, expected", [
    ("A02_6.fcs", "6"),
    ("A01_0.fcs", "0"),
    ("sample_119_0.fcs", "0"),
    ("A01 119_0.fcs", "0"),
    ("A01_3.rep2.fcs", "3"),
    ("A01_t2h.fcs", "t2h"),
])
def test_extract_time_point(filename, expected):
    assert extract_time_point(filename) == expected


def test_time_point_needs_an_underscore():
    with pytest.raises(InvalidFileNameError) as exc:
        extract_time_point("A01.fcs")
    assert "A01.fcs" in str(exc.value)


def test_empty_time_point():
    with pytest.raises(InvalidFileNameError):
        extract_time_point("A01_.fcs")
