"""Definition of Icgem-specific enumerations

Description:
------------

Custom enumerations used by Icgem for structured names.


"""

# Standard library imports
import colorama
import enum

# Make Midgard-enums functions available
from midgard.collections.enums import get_enum, get_value, register_enum  # noqa


#
# ENUMS
#
@register_enum("log_level")
class LogLevel(int, enum.Enum):
    """Levels used when deciding how much log output to show"""

    all = enum.auto()
    debug = enum.auto()
    time = enum.auto()
    dev = enum.auto()
    info = enum.auto()
    out = enum.auto()
    warn = enum.auto()
    check = enum.auto()
    error = enum.auto()
    fatal = enum.auto()
    none = enum.auto()


@register_enum("log_color")
class LogColor(str, enum.Enum):
    """Colors used when logging"""

    dev = (colorama.Fore.BLUE,)
    time = (colorama.Fore.WHITE,)
    out = (colorama.Style.BRIGHT,)
    check = (colorama.Style.BRIGHT + colorama.Fore.YELLOW,)
    warn = colorama.Fore.YELLOW
    error = colorama.Fore.RED
    fatal = colorama.Style.BRIGHT + colorama.Fore.RED


@register_enum("record_type")
class RecordType(str, enum.Enum):
    """Types of data records in an ICGEM file, identified by their leading token

    The token of `static` includes the trailing blank, so that it does not match `gfct`-records.
    """

    static = "gfc "
    time_variable = "gfct"
    trend = "trnd"
    periodic_cos = "acos"
    periodic_sin = "asin"
    unknown = ""

    @property
    def is_periodic(self):
        return self in (RecordType.periodic_cos, RecordType.periodic_sin)
