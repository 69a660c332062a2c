"""Extraction of spherical harmonic coefficients from ICGEM files

Description:
------------

The second pass over an ICGEM file. The data section is scanned again, and the coefficients up to a given degree and
order are stored in a coefficient container, typically a :class:`~icgem.data.HarmonicCoeffs` sized by the caller.

For some models (e.g. EGM2008) the coefficients C(1,0) and C(1,1) are not written in the file, as they are nominally
zero. If exactly these coefficients are missing when the end of the file is reached, they are set to zero. Any other
missing coefficient is an error.

"""

# Standard library imports
import pathlib
from typing import Optional, Union

# Midgard imports
from midgard.dev.timer import Timer

# Icgem imports
from icgem.lib import exceptions
from icgem.lib import log
from icgem.lib.enums import RecordType
from icgem.reader._reader import data_section
from icgem.reader.inspector import NUM_PERIODIC_FIELDS

# Coefficients that may be left out of ICGEM files, and are then implicitly zero
IMPLICIT_ZERO_COEFFICIENTS = ((1, 0), (1, 1))


def coeffs_nr(max_degree: int, max_order: int) -> int:
    """Number of coefficients with degree up to max_degree and order up to max_order

    Counts all pairs (l, m) with `0 <= l <= max_degree` and `0 <= m <= min(l, max_order)`: a triangle for the degrees
    up to max_order, and max_order + 1 coefficients for each of the higher degrees.

    Examples:
        >>> coeffs_nr(2, 2)
        6
        >>> coeffs_nr(3, 2)
        9
    """
    num_orders = max_order + 1
    return num_orders * (num_orders + 1) // 2 + (max_degree - max_order) * num_orders


def check_range(max_degree: int, max_order: int, coeffs) -> None:
    """Check that a degree/order is valid and fits in the given coefficient container"""
    if not 0 <= max_order <= max_degree:
        raise exceptions.InvalidRangeError(f"Invalid degree/order {max_degree}/{max_order}, order must be <= degree")
    if not coeffs.fits(max_degree, max_order):
        raise exceptions.InvalidRangeError(
            f"Coefficients of degree/order {max_degree}/{max_order} do not fit in container of size "
            f"{coeffs.max_degree}/{coeffs.max_order}"
        )


def _store(coeffs, degree, order, clm, slm, record):
    """Store one pair of coefficients, order 0 coefficients have no sine term"""
    coeffs.C[degree, order] = clm
    if order == 0:
        if slm != 0:
            raise exceptions.DataIntegrityError(
                f"Non-zero Slm for order 0 in line {record.line!r} (icgem file {record.file_path})"
            )
    else:
        coeffs.S[degree, order] = slm


def parse_static_coefficients(
    file_path: Union[str, pathlib.Path],
    data_offset: int,
    max_degree: int,
    max_order: int,
    coeffs,
    encoding: Optional[str] = None,
) -> int:
    """Read static coefficients up to the given degree and order

    Only `gfc`-records are read. Coefficients of higher degree or order are skipped.

    Args:
        file_path:    Path to ICGEM file.
        data_offset:  Byte position in the file where the data section starts.
        max_degree:   Max degree of coefficients to read.
        max_order:    Max order of coefficients to read, at most max_degree.
        coeffs:       Container where coefficients are stored, with attributes C, S, max_degree and max_order.
        encoding:     Encoding of the file, default is read from the configuration.

    Returns:
        Number of coefficients stored, including implicit zero coefficients.
    """
    check_range(max_degree, max_order, coeffs)
    coeffs_to_read = coeffs_nr(max_degree, max_order)
    expected_omissions = {(l, m) for l, m in IMPLICIT_ZERO_COEFFICIENTS if l <= max_degree and m <= max_order}
    read = set()

    file_name = pathlib.Path(file_path).name
    with Timer(f"Finish reading {coeffs_to_read} coefficients from {file_name} in", logger=log.time):
        with data_section(file_path, data_offset, encoding=encoding) as records:
            for record in records:
                if record.type is not RecordType.static:
                    continue

                degree, order = record.degree_order()
                if degree > max_degree or order > max_order:
                    continue

                if (degree, order) in read:
                    raise exceptions.DataIntegrityError(
                        f"Coefficient C({degree}, {order}) is listed more than once, line {record.line!r} "
                        f"(icgem file {record.file_path})"
                    )

                clm, slm = record.floats(2, kind="Clm/Slm")
                _store(coeffs, degree, order, clm, slm, record)
                read.add((degree, order))
                if len(read) == coeffs_to_read:
                    break

    coeffs_read = len(read)
    if coeffs_read < coeffs_to_read:
        num_missing = coeffs_to_read - coeffs_read
        if expected_omissions and num_missing == len(expected_omissions) and not expected_omissions & read:
            missing = ", ".join(f"C({l}, {m})" for l, m in sorted(expected_omissions))
            log.info(f"The coefficients {missing} are not explicitly written in icgem file {file_name}, set to 0")
            for degree, order in expected_omissions:
                coeffs.C[degree, order] = 0.0
                coeffs.S[degree, order] = 0.0
            return coeffs_to_read

        raise exceptions.TruncatedDataError(coeffs_read, coeffs_to_read, file_path)

    return coeffs_read


def parse_time_variable_coefficients(
    file_path: Union[str, pathlib.Path],
    data_offset: int,
    max_degree: int,
    max_order: int,
    field,
    encoding: Optional[str] = None,
) -> int:
    """Read time variable coefficients up to the given degree and order

    Base coefficients (`gfct`) are stored in `field.tvg`, trends (`trnd`) in `field.trend` and periodic terms (`acos`,
    `asin`) in `field.periodic[period]`. Periods must be known by the field, see
    :func:`~icgem.reader.inspector.inspect_data`.

    Args:
        file_path:    Path to ICGEM file.
        data_offset:  Byte position in the file where the data section starts.
        max_degree:   Max degree of coefficients to read.
        max_order:    Max order of coefficients to read, at most max_degree.
        field:        GravityField where coefficients are stored.
        encoding:     Encoding of the file, default is read from the configuration.

    Returns:
        Number of records stored.
    """
    check_range(max_degree, max_order, field.tvg)
    num_read = 0
    with data_section(file_path, data_offset, encoding=encoding) as records:
        for record in records:
            if record.type in (RecordType.static, RecordType.unknown):
                continue

            degree, order = record.degree_order()
            if degree > max_degree or order > max_order:
                continue

            if record.type is RecordType.time_variable:
                clm, slm = record.floats(2, kind="Clm/Slm")
                coeffs = field.tvg
            elif record.type is RecordType.trend:
                clm, slm = record.floats(2, kind="Clm/Slm trend")
                coeffs = field.trend
            else:
                clm, slm, *_, period = record.floats(NUM_PERIODIC_FIELDS, kind="periodic terms")
                if period not in field.periodic:
                    raise exceptions.UnknownPeriodError(period, record.line, record.file_path)
                coeffs = field.periodic[period][record.type.value]

            _store(coeffs, degree, order, clm, slm, record)
            num_read += 1

    log.debug(f"Read {num_read} time variable records from {pathlib.Path(file_path).name}")
    return num_read
