#!/usr/bin/env python
"""Wrappers and utilities for opening input files and naming scripts.

Important methods
-----------------
:py:func:`opener`
    Guesses whether a file is gzipped, bzipped, or uncompressed based upon
    file extension, opens it appropriately, and returns a file-like object.

:py:func:`multiopen`
    Normalize a filename, open file, or list of either, into a sequence of
    open file-like objects

:py:func:`get_short_name`
    Basename of a path or dotted module name, used to label progress output

:py:class:`NullWriter`
    Writer that discards everything written to it
"""
import os
import re
import bz2
import gzip
from collections.abc import Iterable
from colorconv.util.io.filters import AbstractWriter


class NullWriter(AbstractWriter):
    """Writes to system-dependent null location.
    On Unix-like systems & OSX, this is typically /dev/null. On Windows, simply "nul"
    """

    def __init__(self):
        AbstractWriter.__init__(self,open(os.devnull,"w"))

    def filter(self,data):
        return data

    def __repr__(self):
        return "NullWriter()"

    def __str__(self):
        return self.__repr__()


def opener(filename,mode="r",**kwargs):
    """Open a file, detecting whether it is compressed or not, based upon
    its file extension:

       +----------------+------------------+
       | File ends with | Presumed to be   |
       +================+==================+
       | gz             |    gzipped       |
       +----------------+------------------+
       | bz2            |    bzipped       |
       +----------------+------------------+
       | anything else  |    uncompressed  |
       +----------------+------------------+

    Compressed files are opened in text mode unless `mode` asks for bytes,
    so that all three kinds of file yield lines of `str`.

    Parameters
    ----------
    filename : str
        Name of file to open

    mode : str
        Mode in which to open file (e.g. "r", "a", "w" with or without "b")

    **kwargs
        Other parameters to pass to appropriate file opener

    Returns
    -------
    file-like
    """
    if filename.endswith(".gz"):
        call_func = gzip.open
    elif filename.endswith(".bz2"):
        call_func = bz2.open
    else:
        return open(filename,mode,**kwargs)

    if "b" not in mode and "t" not in mode:
        mode += "t"

    return call_func(filename,mode,**kwargs)


def multiopen(inp,**kwargs):
    """Normalize filename/file-like/list of filename or file-like to a list of appropriate objects

    If not list-like, `inp` is converted to a list. Then, for each element `x` in
    `inp`, if `x` is file-like, it is yielded. Otherwise, `x` is opened with :func:`opener`,
    and the result yielded.

    Parameters
    ----------
    inp : str, file-like, or list-like of either of those
        Input describing file(s) to open

    **kwargs
        Keyword arguments to pass to :func:`opener`

    Yields
    ------
    file-like
    """
    if isinstance(inp,str) or not isinstance(inp,Iterable):
        inp = [inp]
    elif hasattr(inp,"read"):
        inp = [inp]

    for obj in inp:
        if isinstance(obj,str):
            yield opener(obj,**kwargs)
        else:
            yield obj


def get_short_name(inpt,separator=os.path.sep,terminator=""):
    """Gives the basename of a filename or module name passed as a string.
    If the string doesn't match the pattern specified by the separator
    and terminator, it is returned unchanged.

    Examples
    --------
    >>> get_short_name("test")
    'test'

    >>> get_short_name("/home/jdoe/color_converter.py",terminator=".py")
    'color_converter'

    >>> get_short_name("colorconv.bin.color_converter",separator=r"\\.")
    'color_converter'

    Parameters
    ----------
    inpt : str
        Input

    separator : str, optional
        Regex fragment matching path separators (Default: :obj:`os.path.sep`)

    terminator : str, optional
        Suffix to remove (Default: "")

    Returns
    -------
    str
    """
    if terminator and inpt.endswith(terminator):
        inpt = inpt[:-len(terminator)]

    if separator == os.path.sep:
        separator = re.escape(separator)

    match = re.search(r"([^%s]+)$" % separator,inpt)
    if match is None:
        return inpt

    return match.group(1)
