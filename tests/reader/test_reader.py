""" Test :mod:`icgem.reader._reader`.

The passes over the data section are run against file objects that are wrapped, so that read failures can be
triggered and the handles can be checked after the passes are done.
"""

# Standard library imports
import builtins

# Third party imports
import pytest

# Icgem imports
from icgem import data
from icgem.lib import exceptions
from icgem.reader import _reader
from icgem.reader.extractor import parse_static_coefficients
from icgem.reader.inspector import inspect_data


class FailingFile:
    """File object where reading fails after a given number of lines"""

    def __init__(self, fid, num_lines):
        self._fid = fid
        self._lines_left = num_lines

    def seek(self, offset):
        return self._fid.seek(offset)

    def readline(self, size=-1):
        if self._lines_left <= 0:
            raise OSError("Input/output error")
        self._lines_left -= 1
        return self._fid.readline(size)

    @property
    def closed(self):
        return self._fid.closed

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self._fid.close()


@pytest.fixture
def failing_open(monkeypatch):
    """Make files opened by the reader fail after reading a given number of lines"""

    def _failing_open(num_lines):
        opened = list()

        def _open(*args, **kwargs):
            fid = FailingFile(builtins.open(*args, **kwargs), num_lines)
            opened.append(fid)
            return fid

        monkeypatch.setattr(_reader, "open", _open, raising=False)
        return opened

    return _failing_open


@pytest.fixture
def opened_files(monkeypatch):
    """Keep track of the files opened by the reader"""
    opened = list()

    def _open(*args, **kwargs):
        fid = builtins.open(*args, **kwargs)
        opened.append(fid)
        return fid

    monkeypatch.setattr(_reader, "open", _open, raising=False)
    return opened


def test_records_of_data_section(icgem_file, static_lines):
    file_path, offset = icgem_file(static_lines(1) + ["", "comment"])

    with _reader.data_section(file_path, offset) as records:
        lines = [(r.line_num, r.line) for r in records]
    assert [n for n, _ in lines] == [1, 2, 3, 4, 5]
    assert lines[0][1].startswith("gfc    0    0")
    assert lines[-1] == (5, "comment")


def test_inspect_read_failure(icgem_file, static_lines, failing_open):
    file_path, offset = icgem_file(static_lines(4))
    opened = failing_open(num_lines=3)

    with pytest.raises(exceptions.DataIOError) as err:
        inspect_data(file_path, offset)
    assert isinstance(err.value, OSError)
    assert opened and all(fid.closed for fid in opened)


def test_extract_read_failure(icgem_file, static_lines, failing_open):
    file_path, offset = icgem_file(static_lines(4))
    opened = failing_open(num_lines=5)

    with pytest.raises(exceptions.DataIOError):
        parse_static_coefficients(file_path, offset, 4, 4, data.HarmonicCoeffs(4, 4))
    assert opened and all(fid.closed for fid in opened)


def test_file_closed_after_reading(icgem_file, static_lines, opened_files):
    file_path, offset = icgem_file(static_lines(2))

    inspect_data(file_path, offset)
    parse_static_coefficients(file_path, offset, 2, 2, data.HarmonicCoeffs(2, 2))
    assert len(opened_files) == 2
    assert all(fid.closed for fid in opened_files)


def test_file_closed_after_malformed_field(icgem_file, static_lines, opened_files):
    file_path, offset = icgem_file(static_lines(1) + ["gfc    X    1  1.0E-10  1.0E-10  1.0E-12 1.0E-12"])

    with pytest.raises(exceptions.FieldParseError):
        parse_static_coefficients(file_path, offset, 2, 2, data.HarmonicCoeffs(2, 2))
    with pytest.raises(exceptions.FieldParseError):
        inspect_data(file_path, offset)
    assert len(opened_files) == 2
    assert all(fid.closed for fid in opened_files)


def test_file_closed_after_integrity_error(icgem_file, static_lines, opened_files):
    file_path, offset = icgem_file(["gfc    0    0  1.0E+00  1.0E-09"] + static_lines(2)[1:])

    with pytest.raises(exceptions.DataIntegrityError):
        parse_static_coefficients(file_path, offset, 2, 2, data.HarmonicCoeffs(2, 2))
    assert len(opened_files) == 1
    assert opened_files[0].closed


def test_file_closed_after_truncated_data(icgem_file, static_lines, opened_files):
    file_path, offset = icgem_file(static_lines(3, skip=[(2, 1)]))

    with pytest.raises(exceptions.TruncatedDataError):
        parse_static_coefficients(file_path, offset, 3, 3, data.HarmonicCoeffs(3, 3))
    assert len(opened_files) == 1
    assert opened_files[0].closed


def test_file_closed_after_too_long_line(icgem_file, static_lines, opened_files):
    file_path, offset = icgem_file(static_lines(1) + ["gfc" + " " * 600 + "2 0 1.0 0.0"])

    with pytest.raises(exceptions.LineLengthError):
        inspect_data(file_path, offset)
    assert opened_files[0].closed
