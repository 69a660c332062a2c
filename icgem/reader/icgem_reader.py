"""A reader for gravity field models in the ICGEM format

Description:
------------

Reading an ICGEM file is done in three steps, each reading the file independently:

1. Parse the header, giving the model constants and the byte offset of the data section.
2. Inspect the data section, giving the degree/order ranges of the model and the periods of its periodic terms.
3. Extract the coefficients up to a degree and order chosen by the caller into a container sized by the caller.

Example:
--------

    >>> from icgem.data import HarmonicCoeffs
    >>> from icgem.reader import IcgemReader
    >>> reader = IcgemReader("EGM2008.gfc")
    >>> header = reader.parse_header()
    >>> structure = reader.inspect()
    >>> coeffs = HarmonicCoeffs(20, 20)
    >>> reader.extract(20, 20, coeffs)
    231

The reader only keeps the header and the result of the latest inspection. Each pass keeps its scan state locally and
opens its own file handle.

"""

# Standard library imports
import pathlib
from typing import Optional, Union

# Icgem imports
from icgem import parsers
from icgem.lib import exceptions
from icgem.lib import log
from icgem.parsers.gravity_icgem import ModelHeader
from icgem.reader import extractor
from icgem.reader import inspector


class IcgemReader:
    """Reader of one ICGEM file

    Attributes:
        file_path:   Path to the ICGEM file.
        header:      Information from the header of the file, set by `parse_header`.
        structure:   Degree/order ranges and periods of the model, set by `inspect`.
    """

    def __init__(
        self, file_path: Union[str, pathlib.Path], header: Optional[ModelHeader] = None, encoding: Optional[str] = None
    ) -> None:
        self.file_path = pathlib.Path(file_path)
        self.encoding = encoding
        self.header = header
        self.structure: Optional[inspector.ModelStructure] = None

    def __repr__(self):
        return f"{type(self).__name__}({str(self.file_path)!r})"

    @property
    def data_offset(self) -> int:
        return 0 if self.header is None else self.header.data_offset

    def parse_header(self) -> ModelHeader:
        """Read the header of the file"""
        parser = parsers.parse_file("gravity_icgem", self.file_path, encoding=self.encoding, timer_logger=log.time)
        if not parser.data_available:
            raise exceptions.DataIOError(f"Failed opening icgem file {self.file_path}")
        self.header = parser.header()
        return self.header

    def inspect(self) -> inspector.ModelStructure:
        """Find degree/order ranges and periods of the model

        The result replaces the result of any previous inspection.
        """
        if not self.data_offset:
            raise exceptions.PreconditionError(
                f"Failed inspecting data for icgem file {self.file_path}, header not parsed"
            )
        self.structure = inspector.inspect_data(self.file_path, self.data_offset, encoding=self.encoding)
        return self.structure

    def extract(self, max_degree: int, max_order: int, target) -> int:
        """Read static coefficients up to the given degree and order into target

        Args:
            max_degree:   Max degree of coefficients, at most the max degree of the model.
            max_order:    Max order of coefficients, at most max_degree.
            target:       Coefficient container sized for at least max_degree and max_order.

        Returns:
            Number of coefficients stored.
        """
        self._check_degree(max_degree, max_order)
        return extractor.parse_static_coefficients(
            self.file_path, self.data_offset, max_degree, max_order, target, encoding=self.encoding
        )

    def extract_time_variable(self, max_degree: int, max_order: int, field) -> int:
        """Read time variable coefficients, trends and periodic terms up to the given degree and order into field"""
        self._check_degree(max_degree, max_order)
        return extractor.parse_time_variable_coefficients(
            self.file_path, self.data_offset, max_degree, max_order, field, encoding=self.encoding
        )

    def _check_degree(self, max_degree, max_order):
        if self.header is None:
            raise exceptions.PreconditionError(f"Failed reading data for icgem file {self.file_path}, header not parsed")
        if max_degree > self.header.max_degree or not 0 <= max_order <= max_degree:
            raise exceptions.InvalidRangeError(
                f"Invalid degree/order {max_degree}/{max_order} for icgem file {self.file_path} with max degree "
                f"{self.header.max_degree}"
            )
