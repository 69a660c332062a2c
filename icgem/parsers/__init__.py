"""Framework for parsers

Description:
------------

To add a new parser, simply create a new .py-file which defines a class inheriting from midgard's Parser. The class
needs to be decorated with the :func:`~midgard.dev.plugins.register` decorator as follows::

    from midgard.dev import plugins
    from midgard.parsers._parser import Parser

    @plugins.register
    class MyNewParser(Parser):
        ...

To use a parser, you will typically use the :func:`parse_file`-function defined below

    from icgem import parsers
    my_new_parser = parsers.parse_file('my_new_parser', 'file_name.txt', ...)
    my_data = my_new_parser.as_dict()

The name used in `parse_file` to call the parser is the name of the module (file) containing the parser.

"""

# Midgard imports
from midgard.parsers import names, parse_file  # noqa
from midgard import parsers as mg_parsers
from midgard.dev import plugins

# Add Icgem parsers to Midgard parsers
plugins.add_alias(mg_parsers.__name__, __name__)
