"""Icgem library module for logging

Description:
------------

This module provides simple logging inside Icgem. To write a log message, simply call one of icgem.log-functions
corresponding to the log levels defined in icgem.lib.enums.


Example:
--------

    >>> from icgem.lib import log
    >>> log.init("info", prefix="My prefix")
    >>> n, m = 5, 3
    >>> log.info(f"Reading coefficients up to degree {n} and order {m}")
    INFO  [My prefix] Reading coefficients up to degree 5 and order 3

"""

# Standard library imports
import functools

# Midgard imports
from midgard.dev import log as mg_log

# Icgem imports
from icgem.lib import enums  # Log levels and colors for Icgem

# Make functions from Midgard available
from midgard.dev.log import log, init, file_init  # noqa


# Make each log level available as a function, done here to include extra Icgem log levels
for level in enums.get_enum("log_level"):
    globals()[level.name] = functools.partial(mg_log.log, level=level.name)
