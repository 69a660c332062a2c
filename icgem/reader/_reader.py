"""Access to the data section of ICGEM files

Description:
------------

Both passes over an ICGEM file, the inspection and the extraction of coefficients, open their own handle to the file
and start reading at the byte offset where the data section begins. :func:`data_section` takes care of opening,
seeking and closing the file, and yields the data lines as :class:`~icgem.lib.records.Record`-objects.

"""

# Standard library imports
from contextlib import contextmanager
import pathlib
from typing import Iterator, Optional, Union

# Icgem imports
from icgem.lib import config
from icgem.lib import exceptions
from icgem.lib import log
from icgem.lib.records import Record


@contextmanager
def data_section(
    file_path: Union[str, pathlib.Path], data_offset: int, encoding: Optional[str] = None
) -> Iterator[Iterator[Record]]:
    """Open an ICGEM file positioned at the start of its data section

    The file is closed when the with-block is left, also when an exception is raised.

    Example:
        >>> with data_section(file_path, data_offset) as records:
        ...     for record in records:
        ...         print(record.type)

    Args:
        file_path:    Path to ICGEM file.
        data_offset:  Byte position in the file where the data section starts.
        encoding:     Encoding used to decode the lines, default is read from the configuration.

    Returns:
        Iterator over the records of the data section.
    """
    file_path = pathlib.Path(file_path)
    if not data_offset:
        raise exceptions.PreconditionError(f"Header not parsed for icgem file {file_path}")

    encoding = config.icgem.reader.encoding.str if encoding is None else encoding
    max_line_length = config.icgem.reader.max_line_length.int
    try:
        fid = open(file_path, mode="rb")
    except OSError as err:
        raise exceptions.DataIOError(f"Failed opening icgem file {file_path}: {err}") from err

    with fid:
        try:
            fid.seek(data_offset)
        except OSError as err:
            raise exceptions.DataIOError(f"Failed going to data section of icgem file {file_path}: {err}") from err
        yield _read_records(fid, file_path, encoding, max_line_length)


def _read_records(fid, file_path, encoding, max_line_length):
    """Yield records until the end of the file

    Lines are read with a bounded length, so that too long lines are detected instead of silently truncated.
    """
    line_num = 0
    while True:
        try:
            raw_line = fid.readline(max_line_length + 1)
        except OSError as err:
            raise exceptions.DataIOError(f"Failed reading icgem file {file_path}: {err}") from err
        if not raw_line:
            return

        line_num += 1
        content = raw_line.rstrip(b"\r\n")
        if len(content) >= max_line_length:
            raise exceptions.LineLengthError(
                f"Data line {line_num} is longer than {max_line_length - 1} characters in icgem file {file_path}"
            )
        yield Record(content.decode(encoding), line_num=line_num, file_path=file_path)


def skip_record(record: Record) -> None:
    """Report a data line of unknown type, which is skipped"""
    if not record.line.strip():
        log.debug(f"Skipping empty line {record.line_num} in icgem file {record.file_path}")
        return
    log.log(
        f"ICGEM line skipped: {record.line!r} (icgem file {record.file_path})", config.icgem.reader.unknown_line_level.str
    )
