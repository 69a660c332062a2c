""" Test :mod:`icgem.lib.records`.

"""

# Third party imports
import pytest

# Icgem imports
from icgem.lib import exceptions
from icgem.lib import records
from icgem.lib.enums import RecordType


@pytest.mark.parametrize(
    "line, record_type",
    [
        ("gfc     2    0 -4.84E-04 0.0", RecordType.static),
        ("gfct    2    0 -4.84E-04 0.0", RecordType.time_variable),
        ("trnd    2    0  1.16E-11 0.0", RecordType.trend),
        ("acos    1    0  1.9E-10 0.0 0 0 19500101.0 20050101.0 1.0", RecordType.periodic_cos),
        ("asin    1    0  1.9E-10 0.0 0 0 19500101.0 20050101.0 1.0", RecordType.periodic_sin),
        ("GFC     2    0 -4.84E-04 0.0", RecordType.unknown),
        (" gfc    2    0 -4.84E-04 0.0", RecordType.unknown),
        ("gfc\t2\t0\t-4.84E-04\t0.0", RecordType.unknown),
        ("gfc", RecordType.unknown),
        ("", RecordType.unknown),
    ],
)
def test_classify(line, record_type):
    assert records.classify(line) is record_type


def test_degree_order():
    record = records.Record("gfc     3    2  9.047878948095E-07 -6.190054751776E-07  6.4981E-12  6.5014E-12")
    assert record.degree_order() == (3, 2)
    assert record.floats(4) == [9.047878948095e-07, -6.190054751776e-07, 6.4981e-12, 6.5014e-12]


def test_degree_order_gfct_key():
    """The key of gfct-records is four characters without a trailing blank"""
    record = records.Record("gfct 12 11 1.0 2.0")
    assert record.type is RecordType.time_variable
    assert record.degree_order() == (12, 11)


def test_malformed_degree():
    line = "gfc  X 2 1.0 2.0"
    with pytest.raises(exceptions.FieldParseError) as err:
        records.Record(line).degree_order()
    assert err.value.kind == "degree"
    assert err.value.line == line


def test_malformed_order():
    line = "gfc  2 2.5 1.0 2.0"
    with pytest.raises(exceptions.FieldParseError) as err:
        records.Record(line).degree_order()
    assert err.value.kind == "order"
    assert err.value.line == line


def test_missing_order():
    with pytest.raises(exceptions.FieldParseError) as err:
        records.Record("gfc  2").degree_order()
    assert err.value.kind == "order"


def test_negative_degree():
    with pytest.raises(exceptions.FieldParseError) as err:
        records.Record("gfc  -2 0 1.0 0.0").degree_order()
    assert err.value.kind == "degree"


def test_floats_exponential_notation():
    record = records.Record("gfc 2 1 1.234E+05 -2.5e-3")
    record.degree_order()
    assert record.floats(2) == [123400.0, -0.0025]


def test_floats_errors_reported_once():
    """Several failed conversions in a line are reported as one error referencing the line"""
    line = "acos 1 0 1.0 x 0 0 19500101.0 y"
    record = records.Record(line)
    record.degree_order()
    with pytest.raises(exceptions.FieldParseError) as err:
        record.floats(7, kind="periodic terms")
    assert err.value.kind == "periodic terms"
    assert err.value.line == line


def test_floats_missing_fields():
    record = records.Record("gfc 2 1 1.0")
    record.degree_order()
    with pytest.raises(exceptions.FieldParseError):
        record.floats(2)


def test_floats_fortran_notation_not_supported():
    """Numbers in FORTRAN notation, with D as exponent marker, are not supported"""
    record = records.Record("gfc 2 0 -0.484165143790815D-03 0.0D+00")
    record.degree_order()
    with pytest.raises(exceptions.FieldParseError):
        record.floats(2)


def test_unknown_record_has_no_fields():
    record = records.Record("comment 2 0")
    assert record.type is RecordType.unknown
    with pytest.raises(exceptions.FieldParseError):
        record.degree_order()


def test_is_periodic():
    assert RecordType.periodic_cos.is_periodic
    assert RecordType.periodic_sin.is_periodic
    assert not RecordType.trend.is_periodic


def test_order_larger_than_degree():
    line = "gfc 2 3 1.0 1.0"
    with pytest.raises(exceptions.FieldParseError) as err:
        records.Record(line).degree_order()
    assert err.value.kind == "order"
    assert err.value.line == line


@pytest.mark.parametrize("degree", ["1_0", "+3", "٣", "0x3"])
def test_degree_must_be_plain_digits(degree):
    with pytest.raises(exceptions.FieldParseError) as err:
        records.Record(f"gfc {degree} 0 1.0 0.0").degree_order()
    assert err.value.kind == "degree"


@pytest.mark.parametrize("value", ["nan", "inf", "-Infinity", "1_0.0"])
def test_floats_must_be_finite_numbers(value):
    record = records.Record(f"gfc 2 1 {value} 0.0")
    record.degree_order()
    with pytest.raises(exceptions.FieldParseError) as err:
        record.floats(2, kind="Clm/Slm")
    assert err.value.kind == "Clm/Slm"
