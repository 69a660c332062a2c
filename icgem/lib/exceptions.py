"""Definition of Icgem-specific exceptions

Description:
------------

Custom exceptions used by Icgem for more specific error messages and handling. All errors raised while reading an
ICGEM file abort the current pass, and carry enough context (file, offending line, expected and actual values) to
report a precise diagnostic.

"""


class IcgemException(Exception):
    pass


class PreconditionError(IcgemException):
    pass


class HeaderError(IcgemException):
    pass


class DataIOError(IcgemException, OSError):
    pass


class LineLengthError(DataIOError):
    pass


class InvalidRangeError(IcgemException):
    pass


class FieldParseError(IcgemException):
    """A numeric field could not be converted at its expected position"""

    def __init__(self, kind, line, file_path=None):
        self.kind = kind
        self.line = line
        self.file_path = file_path
        super().__init__(f"Failed parsing {kind} in line {line!r} (icgem file {file_path})")


class ContextMismatchError(IcgemException):
    pass


class UnknownPeriodError(IcgemException):
    def __init__(self, period, line, file_path=None):
        self.period = period
        self.line = line
        self.file_path = file_path
        super().__init__(f"Period {period:.3f} years not listed for line {line!r} (icgem file {file_path})")


class DataIntegrityError(IcgemException):
    pass


class TruncatedDataError(IcgemException):
    def __init__(self, read, expected, file_path=None):
        self.read = read
        self.expected = expected
        self.file_path = file_path
        super().__init__(
            f"End of file reached before reading all Clm/Slm coefficients, read/expected {read}/{expected} "
            f"(icgem file {file_path})"
        )
