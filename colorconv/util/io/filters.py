#!/usr/bin/env python
"""Stream filters, analagous to Unix-style pipes, for processing input or output
streams such as file objects.

Filters may be composed by wrapping one around another. For example, a stream
of text lines may be wrapped by a reader that tokenizes each line, which may
in turn be wrapped by a reader that turns tokens into color records.

Readers:

    :class:`AbstractReader`
        Base class for all readers. To create a reader, subclass this and
        override the :py:meth:`~AbstractReader.filter` method.

    :class:`FilterMapReader`
        Base class for readers whose :py:meth:`~FilterMapReader.filter` may
        reject a unit of input by returning `None`. Rejected units are skipped,
        so each unit of input produces zero or one unit of output.

Writers:

    :class:`AbstractWriter`
        Base class for all writers. To create a writer, subclass this and
        override the :py:meth:`~AbstractWriter.filter` method.

    :class:`ColorWriter`
        Enable ANSI coloring of text to output streams that support color.
        For streams that do not support color, text is not colored.

    :class:`NameDateWriter`
        Prepend program name, date, and time to each line of string input
        before writing

And one convenience function:

    :func:`colored`
        Colorize text (via :func:`termcolor.colored`) if and only
        if color is supported by :obj:`sys.stderr`


Examples
--------
Write progress messages to stderr, prepending name and date::

    >>> my_writer = NameDateWriter("color_converter")
    >>> my_writer.write("Reading colors...")
"""
import sys
import datetime
from abc import abstractmethod
from io import IOBase

import termcolor

if hasattr(sys.stderr,"isatty") and sys.stderr.isatty():
    colored = termcolor.colored
else:
    colored = lambda x, **kwargs: str(x)



#===============================================================================
# INDEX: readers
#===============================================================================

class AbstractReader(IOBase):
    """Abstract base class for stream-reading filters. These may be wrapped around
    open file-like objects, for example to convert lines of text into tokens,
    or tokens into records.

    Create a filter by subclassing this, and defining `self.filter()`
    """

    def __init__(self,stream):
        """Create an |AbstractReader|

        Parameters
        ----------
        stream : file-like or iterator
            Input data
        """
        self.stream = stream

    def isatty(self):
        return hasattr(self.stream,"isatty") and self.stream.isatty()

    def writable(self):
        return False

    def seekable(self):
        return False

    def readable(self):
        return True

    def fileno(self):
        raise IOError()

    def __next__(self):
        return self.filter(next(self.stream))

    def __iter__(self):
        return self

    def readlines(self):
        """Process all remaining units of input

        Returns
        -------
        list
            processed data
        """
        return list(self)

    def close(self):
        """Close stream"""
        try:
            self.stream.close()
        except AttributeError:
            pass

    @abstractmethod
    def filter(self,data):
        """Method that filters or processes each unit of data.
        Override this in subclasses

        Parameters
        ----------
        data : unit of data
            Whatever data to filter/format. Often string, but not necessarily

        Returns
        -------
        object
            formatted data
        """
        pass


class FilterMapReader(AbstractReader):
    """Reader that maps each unit of input to zero or one units of output.

    Subclasses override :py:meth:`filter` to return a processed unit, or
    `None` to drop the unit entirely. Dropped units never reach the caller,
    and never halt iteration over the rest of the stream.
    """

    def __next__(self):
        for data in self.stream:
            result = self.filter(data)
            if result is not None:
                return result

        raise StopIteration



#===============================================================================
# INDEX: writers
#===============================================================================

class AbstractWriter(IOBase):
    """Abstract base class for stream-writing filters.
    Create a filter by subclassing this, and defining self.filter().

    Parameters
    ----------
    stream : file-like, open for writing
        Output stream to which filtered/formatted data will be written
    """
    def __init__(self,stream):
        self.stream = stream

    def isatty(self):
        return hasattr(self.stream,"isatty") and self.stream.isatty()

    def writable(self):
        return True

    def seekable(self):
        return False

    def readable(self):
        return False

    def fileno(self):
        raise IOError()

    def write(self,data):
        """Write data to `self.stream`

        Parameters
        ----------
        data : unit of data
            Whatever data to filter/format. Often string, but not necessarily
        """
        self.stream.write(self.filter(data))

    def flush(self):
        """Flush `self.stream`"""
        self.stream.flush()

    def close(self):
        """Flush and close `self.stream`"""
        try:
            self.flush()
            self.stream.close()
        except (AttributeError, ValueError, OSError):
            pass

    @abstractmethod
    def filter(self,data):
        """Method that filters or processes each unit of data.
        Override this in subclasses
        """
        pass


class ColorWriter(AbstractWriter):
    """Detect whether output stream supports color, and enable/disable colored output

    Parameters
    ----------
    stream : file-like
        Stream to write to (Default: :obj:`sys.stderr`)
    """
    def __init__(self,stream=None):
        stream = sys.stderr if stream is None else stream
        AbstractWriter.__init__(self,stream=stream)
        if self.isatty():
            self.color = termcolor.colored

    def color(self,text,**kwargs):
        """Color `text` with attributes specified in `kwargs` if `stream` supports ANSI color.

        See :func:`termcolor.colored` for usage

        Returns
        -------
        str
            `text`, colored as indicated, if color is supported
        """
        return text

    def filter(self,data):
        return data


class NameDateWriter(ColorWriter):
    """Prepend program name, date, and time to each line of output"""

    def __init__(self,name,line_delimiter="\n",stream=None):
        """Create a NameDateWriter

        Parameters
        ----------
        name : str
            Name to prepend

        line_delimiter : str, optional
            Delimiter, postpended to lines. (Default `'\\n'`)

        stream : file-like
            Stream to write to (Default: :obj:`sys.stderr`)
        """
        ColorWriter.__init__(self,stream=stream)
        self.name = name
        self.delimiter = line_delimiter
        self.fmtstr = "%s %s%s %s%s: {2}%s" % (self.color(name,color="blue",attrs=["bold"]),
                                               self.color("[",color="blue",attrs=["bold"]),
                                               self.color("{0}",color="green"),
                                               self.color("{1}",color="green",attrs=["bold"]),
                                               self.color("]",color="blue",attrs=["bold"]),
                                               self.delimiter
                                              )

    def filter(self,line):
        """Prepend date and time to `line`

        Parameters
        ----------
        line : str
            Input

        Returns
        -------
        str : Input with name, date and time prepended
        """
        now = datetime.datetime.now()
        d   = now.strftime("%Y-%m-%d")
        t   = now.strftime("%H:%M:%S")
        return self.fmtstr.format(d,t,line.strip(self.delimiter))
