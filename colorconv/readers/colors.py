#!/usr/bin/env python
"""Readers that extract named colors from data files

Two record formats are understood, both introduced by the marker token
`color`:

    ============   ==================================   ==========================
    **Form**       **Record**                           **Requirements**
    ------------   ----------------------------------   --------------------------
    fractional     ``color <name> <r> <g> <b> [<a>]``   at least 5 tokens
    hex            ``color <name> #<RRGGBB>``           at least 3 tokens
    ============   ==================================   ==========================

Lines that do not meet these requirements, and lines indented beneath
another node, are skipped without comment. A hex record whose code is not
shaped like `#RRGGBB` is still read, with an empty tuple of channels.

Functions & classes
-------------------
:func:`parse_es_color`
    Read a fractional color record from a |DataNode|

:func:`parse_hex_color`
    Read a hex color record from a |DataNode|

|ESColorReader|
    Iterate over fractional color records in one or more files

|HexColorReader|
    Iterate over hex color records in one or more files
"""
from abc import abstractmethod
from collections import namedtuple
from colorconv.color.formatters import hex_to_fractions
from colorconv.readers.datafile import DataFileReader
from colorconv.util.io.filters import AbstractReader, FilterMapReader

COLOR_MARKER = "color"
"""First token of every color record"""

MAX_CHANNELS = 4
"""Red, green, blue, and alpha"""

ColorRecord = namedtuple("ColorRecord",["name","channels"])
ColorRecord.__doc__ = """A named color, with channels given as a tuple of fractional values"""


#===============================================================================
# INDEX: record parsers
#===============================================================================

def parse_es_color(node):
    """Read a fractional color record, ``color <name> <r> <g> <b> [<a>]``

    Parameters
    ----------
    node : |DataNode|

    Returns
    -------
    |ColorRecord| or None
        Record with three or four channels, or `None` if `node` is not
        a fractional color record
    """
    if node.token(0) != COLOR_MARKER or len(node) < 5:
        return None

    stop = min(len(node),2 + MAX_CHANNELS)
    return ColorRecord(node.token(1),tuple(node.value(i) for i in range(2,stop)))

def parse_hex_color(node):
    """Read a hex color record, ``color <name> #<RRGGBB>``

    Parameters
    ----------
    node : |DataNode|

    Returns
    -------
    |ColorRecord| or None
        Record with three channels, or none if the color code is malformed.
        `None` if `node` is not a hex color record
    """
    if node.token(0) != COLOR_MARKER or len(node) < 3:
        return None

    return ColorRecord(node.token(1),tuple(hex_to_fractions(node.token(2))))



#===============================================================================
# INDEX: readers
#===============================================================================

class ColorRecordReader(FilterMapReader):
    """
    ColorRecordReader(*streams)

    Abstract base class for readers that yield a |ColorRecord| for each
    top-level color record found in one or more data files.

    Subclasses override :meth:`~ColorRecordReader._parse`

    Parameters
    ----------
    *streams : str or file-like
        One or more filenames or open filehandles of input data
    """

    def __init__(self,*streams):
        AbstractReader.__init__(self,DataFileReader(*streams))

    @abstractmethod
    def _parse(self,node):
        """Make a |ColorRecord| from `node`, or return `None` to skip it"""
        pass

    def filter(self,node):
        """Return a |ColorRecord| for top-level `node`, or `None` to skip it

        Parameters
        ----------
        node : |DataNode|

        Returns
        -------
        |ColorRecord| or None
        """
        if node.indent > 0:
            return None

        return self._parse(node)


class ESColorReader(ColorRecordReader):
    """Yield fractional color records, ``color <name> <r> <g> <b> [<a>]``"""

    def _parse(self,node):
        return parse_es_color(node)


class HexColorReader(ColorRecordReader):
    """Yield hex color records, ``color <name> #<RRGGBB>``, as fractional channels"""

    def _parse(self,node):
        return parse_hex_color(node)
