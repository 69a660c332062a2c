"""Reading of the data section of ICGEM files

Description:
------------

The data section of an ICGEM file is read in two independent passes, see :mod:`icgem.reader.inspector` and
:mod:`icgem.reader.extractor`. :class:`IcgemReader` ties the passes together with the header of the file.

"""

# Import relevant functions and classes
from icgem.reader.extractor import coeffs_nr  # noqa
from icgem.reader.icgem_reader import IcgemReader  # noqa
from icgem.reader.inspector import ModelStructure  # noqa

# Do not support *-imports
__all__ = []
