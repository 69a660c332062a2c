"""A parser for reading the header of ICGEM gravity field files

Description:
------------

Reads the header of a file in the ICGEM format, containing the coefficients of the spherical harmonic functions which
determine the Earth gravitational field. The header consists of `keyword value` lines ending with the line
`end_of_head`. The byte position directly after `end_of_head` is stored as `data_offset`, and is where the data
section with the coefficient records starts. The coefficients themselves are read by :mod:`icgem.reader`.


References:
-----------

http://icgem.gfz-potsdam.de/ICGEM-Format-2011.pdf
http://icgem.gfz-potsdam.de/tom_longtime

"""

# Standard library imports
import pathlib
from typing import Callable, NamedTuple, Optional, Union

# Midgard imports
from midgard.dev import plugins
from midgard.parsers._parser import Parser

# Icgem imports
from icgem.lib import config
from icgem.lib import exceptions
from icgem.lib import log


class HeaderField(NamedTuple):
    name: str
    converter: Callable


HEADER_FIELDS = (
    HeaderField("product_type", str),
    HeaderField("modelname", str),
    HeaderField("tide_system", str),
    HeaderField("norm", str),
    HeaderField("errors", str),
    HeaderField("earth_gravity_constant", float),
    HeaderField("radius", float),
    HeaderField("max_degree", int),
)

# Values used for optional header fields not found in the file
HEADER_DEFAULTS = dict(product_type="", modelname="", tide_system="unknown", norm="fully_normalized", errors="")

END_OF_HEAD = "end_of_head"


class ModelHeader(NamedTuple):
    """Information about a gravity field model read from the header of an ICGEM file"""

    product_type: str
    modelname: str
    tide_system: str
    norm: str
    errors: str
    earth_gravity_constant: float
    radius: float
    max_degree: int
    data_offset: int

    @property
    def is_normalized(self):
        return self.norm == "fully_normalized"


@plugins.register
class GravityIcgemParser(Parser):
    """A parser for reading the header of gravity coefficient files
    """

    def __init__(self, file_path: Union[str, pathlib.Path], encoding: Optional[str] = None) -> None:
        """Set up the basic information needed by the parser

        Args:
            file_path:    Path to file that will be read.
            encoding:     Encoding of file that will be read.
        """
        super().__init__(file_path, encoding=encoding)
        if self.file_encoding is None:
            self.file_encoding = config.icgem.reader.encoding.str

    def read_data(self):
        with open(self.file_path, mode="rb") as fid:
            self._read_header(fid)

    def _read_header(self, fid):
        header_fields = {h.name: h for h in HEADER_FIELDS}
        self.meta.update(HEADER_DEFAULTS)

        # Read with readline to be able to ask for the byte position of the data section
        for raw_line in iter(fid.readline, b""):
            line = raw_line.decode(self.file_encoding)
            if line.startswith(END_OF_HEAD):
                self.meta["data_offset"] = fid.tell()
                break

            fields = line.strip().split()
            if len(fields) > 1 and fields[0] in header_fields:
                header_def = header_fields[fields[0]]
                try:
                    self.meta[header_def.name] = header_def.converter(fields[1])
                except ValueError:
                    raise exceptions.HeaderError(
                        f"Invalid value {fields[1]!r} for {header_def.name!r} in icgem file {self.file_path}"
                    ) from None
        else:
            raise exceptions.HeaderError(f"File ended without {END_OF_HEAD!r} in icgem file {self.file_path}")

        missing = [f for f in ModelHeader._fields if f not in self.meta]
        if missing:
            raise exceptions.HeaderError(f"Missing {', '.join(missing)} in header of icgem file {self.file_path}")

        log.debug(
            f"Read header of {self.meta['modelname'] or self.file_path.name}: max degree {self.meta['max_degree']}, "
            f"data starts at byte {self.meta['data_offset']}"
        )

    def header(self) -> ModelHeader:
        """Return the header information as a ModelHeader"""
        return ModelHeader(**{f: self.meta[f] for f in ModelHeader._fields})
