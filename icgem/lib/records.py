"""Classification and field extraction of ICGEM data records

Description:
------------

Every line in the data section of an ICGEM file starts with a key identifying the type of the record, followed by
whitespace separated fields. The first two fields are always the degree and order of the coefficient, the remaining
fields are floating point numbers. For instance::

    gfc     2    0 -0.484165143790815E-03  0.000000000000000E+00  0.7481239490E-11  0.0000000000E+00
    acos    1    0  1.98940208316E-10  0.00000000000E+00 2.4920E-11 0.0000E+00 19500101.0000 19930115.0546 1.0

A :class:`Record` classifies a line and acts as a cursor over its fields, so that the fields can be read left to
right. Numbers written in FORTRAN notation (`1.0D-05`) are not supported.

"""

# Standard library imports
import math
from typing import List, Optional, Tuple

# Icgem imports
from icgem.lib import exceptions
from icgem.lib.enums import RecordType

# Length of the key starting each record
KEY_LENGTH = 4


def classify(line: str) -> RecordType:
    """Identify the type of a data line by its leading key

    The comparison is case sensitive and requires an exact prefix match.

    Args:
        line:  Line from the data section of an ICGEM file.

    Returns:
        Type of the record, `RecordType.unknown` if the key is not recognized.
    """
    for record_type in RecordType:
        if record_type.value and line.startswith(record_type.value):
            return record_type
    return RecordType.unknown


class Record:
    """A typed data record with a cursor into its remaining fields"""

    def __init__(self, line: str, line_num: Optional[int] = None, file_path=None) -> None:
        self.line = line
        self.line_num = line_num
        self.file_path = file_path
        self.type = classify(line)
        self._fields = line[KEY_LENGTH:].split() if self.type is not RecordType.unknown else []
        self._idx = 0

    def __repr__(self):
        return f"{type(self).__name__}({self.line!r}, line_num={self.line_num})"

    def _next_field(self) -> Optional[str]:
        if self._idx >= len(self._fields):
            return None
        field = self._fields[self._idx]
        self._idx += 1
        return field

    def _integer(self, kind: str) -> int:
        field = self._next_field()
        if field is None or not (field.isascii() and field.isdigit()):
            raise exceptions.FieldParseError(kind, self.line, self.file_path)
        return int(field)

    def degree_order(self) -> Tuple[int, int]:
        """Read the degree and order of the record

        Both are plain non-negative integers, and the order can not be larger than the degree.

        Returns:
            Tuple with degree and order.
        """
        degree = self._integer("degree")
        order = self._integer("order")
        if order > degree:
            raise exceptions.FieldParseError("order", self.line, self.file_path)
        return degree, order

    def floats(self, num: int, kind: str = "coefficients") -> List[float]:
        """Read the next floating point fields of the record

        All `num` fields are attempted. Failed conversions, including missing fields, are counted and reported as one
        error for the line.

        Args:
            num:   Number of fields to read.
            kind:  Description of the fields, used in the error message.

        Returns:
            List with the values of the fields.
        """
        values = list()
        errors = 0
        for _ in range(num):
            field = self._next_field()
            try:
                value = float(field)
            except (TypeError, ValueError):
                errors += 1
                continue
            if "_" in field or not math.isfinite(value):
                errors += 1
                continue
            values.append(value)

        if errors:
            raise exceptions.FieldParseError(kind, self.line, self.file_path)
        return values
