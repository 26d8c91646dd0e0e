#discovery.py
from pathlib import Path

from facsdensity.core.errors import (
    InvalidDirectoryError,
    InvalidFileNameError,
    NoMatchingFCSFilesError,
    NoMatchingFilesError,
)


def check_directory(directory):
    """
    Ensure that `directory` is an existing, non-empty directory.
    Returns it as a Path.
    """
    path = Path(directory)
    if not path.is_dir() or not any(path.iterdir()):
        raise InvalidDirectoryError(
            f'"{directory}" must be a path to a non-empty directory'
        )
    return path


def find_sample_files(directory, identifier):
    """
    Find the FCS files that belong to one sample.

    A file belongs to the sample when its name contains the identifier
    anywhere (plain substring, no pattern syntax). Of those, only names
    containing "fcs" are kept. Files come back in sorted name order,
    which is the order the time points are later plotted in.
    """
    path = check_directory(directory)
    pattern = str(identifier)

    files = sorted(p.name for p in path.iterdir() if p.is_file())

    target_files = [f for f in files if pattern in f]
    if not target_files:
        raise NoMatchingFilesError(
            f'Could not find any files containing "{pattern}" in their name.'
        )

    target_files = [f for f in target_files if "fcs" in f]
    if not target_files:
        raise NoMatchingFCSFilesError(
            f'Could not find any ".fcs" files containing "{pattern}" in their name.'
        )

    return target_files


def extract_time_point(filename):
    """
    Read the time point label out of an FCS file name.

    Names follow `<prefix>_<timepoint>.fcs`; everything after the first
    dot is ignored and the label is the field after the last underscore:

      'A02_6.fcs'         -> '6'
      'A01 119_0.fcs'     -> '0'
      'sample_119_0.fcs'  -> '0'
      'A01_3.rep2.fcs'    -> '3'
    """
    stem = Path(filename).name.split(".")[0]
    if "_" not in stem:
        raise InvalidFileNameError(
            f'Cannot read a time point from "{filename}": '
            f'expected a name like "<prefix>_<timepoint>.fcs".'
        )

    time_point = stem.rsplit("_", 1)[1]
    if not time_point:
        raise InvalidFileNameError(
            f'Empty time point in file name "{filename}".'
        )
    return time_point
