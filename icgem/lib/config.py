"""Icgem library module for handling of Icgem configuration settings

Example:
--------

    >>> from icgem.lib import config
    >>> config.icgem.reader.max_line_length.int
    512

Description:
------------

This module is used to read Icgem configuration settings. We first try to read configuration settings from the current
working directory, then from the user's ~/.icgem directory and finally from Icgem's config directory (see
`_CONFIG_DIRECTORIES`). The main configuration file is called icgem.conf. Personal changes to the config can be done in
a file called icgem_local.conf (see `_CONFIG_FILENAMES`).

Configuration entries are read as `config.icgem.section.key`, and converted to the required data type using one of the
properties `str`, `int`, `float`, `bool`, `list` etc. For instance, `config.icgem.reader.encoding.str` reads the key
`encoding` in the `reader`-section.

"""

# Standard library imports
import pathlib

# Midgard imports
from midgard.config.config import Configuration

# Icgem imports
from icgem.lib import enums  # noqa  # Register Icgem enums


# Base directory of the Icgem package
ICGEM_DIR = pathlib.Path(__file__).resolve().parent.parent

# Prioritized list of possible names of Icgem config files
_CONFIG_FILENAMES = dict(icgem=("icgem_local.conf", "icgem.conf"))

# Prioritized list of possible locations for all Icgem config files
_CONFIG_DIRECTORIES = (pathlib.Path.cwd(), pathlib.Path.home() / ".icgem", ICGEM_DIR / "config")


def config_paths(cfg_name):
    """Yield all files that contain the given configuration, the least important first"""
    for file_name in _CONFIG_FILENAMES.get(cfg_name, (f"{cfg_name}.conf",))[::-1]:
        for file_dir in _CONFIG_DIRECTORIES:
            file_path = file_dir / file_name
            if file_path.exists():
                yield file_path
                break


def read_icgem_config():
    """Read Icgem-configuration"""
    icgem.clear()
    for file_path in config_paths("icgem"):
        icgem.update_from_file(file_path, interpolate=True)


# Add configuration as module variable
icgem = Configuration("icgem")
read_icgem_config()
