"""Inspection of the data section of ICGEM files

Description:
------------

The first pass over an ICGEM file. All records of the data section are scanned to find the degree/order ranges of the
static and the time variable part of the model, and the periods of the periodic terms of the time variable part. The
caller uses this information to decide which degree and order to read and to size the coefficient containers.

The scan is strict about the structure of time variable models: every `trnd`, `acos` and `asin` record must belong to
the `gfct` record directly preceding it, that is have the same degree and order. Periods are registered by the periodic
terms of degree 1 and order 0. Periodic terms of all other coefficients must use one of these periods.

"""

# Standard library imports
import pathlib
from typing import List, NamedTuple, Optional, Tuple, Union

# Midgard imports
from midgard.dev.timer import Timer

# Icgem imports
from icgem.lib import exceptions
from icgem.lib import log
from icgem.lib.enums import RecordType
from icgem.reader._reader import data_section, skip_record

# Periodic terms are registered on this degree and order
PERIOD_DEGREE_ORDER = (1, 0)

# Number of floating point fields in periodic records, the last one being the period in years
NUM_PERIODIC_FIELDS = 7


class ModelStructure(NamedTuple):
    """Structure of the data section of an ICGEM file

    For each of the static and time variable parts, `start` is the first non-zero degree or order seen, and `stop` is
    the largest degree or order seen. All values of a part are zero if no records of that part exist.
    """

    degree_static_start: int = 0
    degree_static_stop: int = 0
    order_static_start: int = 0
    order_static_stop: int = 0
    degree_tv_start: int = 0
    degree_tv_stop: int = 0
    order_tv_start: int = 0
    order_tv_stop: int = 0
    periods: Tuple[float, ...] = ()

    @property
    def degree(self):
        """Max degree of the model"""
        return max(self.degree_static_stop, self.degree_tv_stop)

    @property
    def order(self):
        """Max order of the model"""
        return max(self.order_static_stop, self.order_tv_stop)

    @property
    def has_time_variable(self):
        return self.degree_tv_stop > 0


class _Bounds:
    """Range of degrees and orders seen for one part of the model"""

    def __init__(self):
        self.degree_start = self.degree_stop = 0
        self.order_start = self.order_stop = 0

    def update(self, degree, order):
        if not self.degree_start and degree:
            self.degree_start = degree
        self.degree_stop = max(self.degree_stop, degree)
        if not self.order_start and order:
            self.order_start = order
        self.order_stop = max(self.order_stop, order)


class _InspectState:
    """Local state of one inspection pass"""

    def __init__(self):
        self.static = _Bounds()
        self.tv = _Bounds()
        self.tv_context: Optional[Tuple[int, int]] = None
        self.periods: List[float] = list()

    def structure(self):
        return ModelStructure(
            degree_static_start=self.static.degree_start,
            degree_static_stop=self.static.degree_stop,
            order_static_start=self.static.order_start,
            order_static_stop=self.static.order_stop,
            degree_tv_start=self.tv.degree_start,
            degree_tv_stop=self.tv.degree_stop,
            order_tv_start=self.tv.order_start,
            order_tv_stop=self.tv.order_stop,
            periods=tuple(self.periods),
        )


def inspect_data(
    file_path: Union[str, pathlib.Path], data_offset: int, encoding: Optional[str] = None
) -> ModelStructure:
    """Inspect the data section of an ICGEM file

    Args:
        file_path:    Path to ICGEM file.
        data_offset:  Byte position in the file where the data section starts, found when parsing the header.
        encoding:     Encoding of the file, default is read from the configuration.

    Returns:
        The degree/order ranges and periods found in the data section.
    """
    state = _InspectState()
    with Timer(f"Finish inspecting {pathlib.Path(file_path).name} in", logger=log.time):
        with data_section(file_path, data_offset, encoding=encoding) as records:
            for record in records:
                if record.type is RecordType.static:
                    state.static.update(*record.degree_order())
                elif record.type is RecordType.time_variable:
                    degree, order = record.degree_order()
                    state.tv.update(degree, order)
                    state.tv_context = (degree, order)
                elif record.type is RecordType.trend:
                    _check_context(record, record.degree_order(), state.tv_context)
                elif record.type.is_periodic:
                    _inspect_periodic(record, state)
                else:
                    skip_record(record)

    structure = state.structure()
    log.debug(
        f"Static part of {pathlib.Path(file_path).name}: degree {structure.degree_static_start}-"
        f"{structure.degree_static_stop}, order {structure.order_static_start}-{structure.order_static_stop}"
    )
    if structure.has_time_variable:
        log.debug(
            f"Time variable part: degree {structure.degree_tv_start}-{structure.degree_tv_stop}, order "
            f"{structure.order_tv_start}-{structure.order_tv_stop}, periods {list(structure.periods)}"
        )
    return structure


def _check_context(record, degree_order, tv_context):
    """Check that a trend or periodic record belongs to the latest time variable coefficient"""
    if degree_order != tv_context:
        current = "none" if tv_context is None else "{}/{}".format(*tv_context)
        raise exceptions.ContextMismatchError(
            f"Reading line of type {record.type.value!r} with degree/order {degree_order[0]}/{degree_order[1]}, "
            f"but current TVG degree/order is {current}: {record.line!r} (icgem file {record.file_path})"
        )


def _inspect_periodic(record, state):
    """Check a periodic record and register its period"""
    degree_order = record.degree_order()
    *_, period = record.floats(NUM_PERIODIC_FIELDS, kind="periodic terms")
    _check_context(record, degree_order, state.tv_context)

    if degree_order == PERIOD_DEGREE_ORDER:
        if period not in state.periods:
            state.periods.append(period)
    elif period not in state.periods:
        raise exceptions.UnknownPeriodError(period, record.line, record.file_path)
