"""Framework for reading apriori data sources

Description:
------------

Each data source should be defined in a separate .py-file. The function inside the .py-file that
should be called need to be decorated with the :func:`~midgard.dev.plugins.register` decorator as follows::

    from midgard.dev import plugins

    @plugins.register
    def read_fun_datasource(file_path):
        ...

The decorated function will be called through the :func:`get`. Parameters to the registered function should be passed
as named keyword arguments.

"""

# Midgard imports
from midgard.dev import plugins


def names():
    """List the names of the available apriori data sources

    Returns:
        List: List of strings with the names of the available data sources
    """
    return plugins.names(package_name=__name__)


def get(datasource_name, **kwargs):
    """Read data from the given data source

    Args:
        datasource_name (String):   Name of apriori data source
        kwargs:                     Input arguments to the data source

    Returns:
        The data from the data source (data type depends on source)
    """
    return plugins.call(package_name=__name__, plugin_name=datasource_name, **kwargs)
