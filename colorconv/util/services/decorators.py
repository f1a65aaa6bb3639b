#!/usr/bin/env python
"""Function decorators useful for scripts and their tests

Decorators
----------
:py:func:`catch_stdout`
    Redirect standard out from a wrapped function into a buffer
"""
import functools
import os
import sys


def catch_stdout(buf=None):
    """Function factory producing decorators that capture stdout to a buffer

    Only output written through :obj:`sys.stdout` is captured, so the wrapped
    function must look up :obj:`sys.stdout` when it writes, rather than hold
    a reference made at import time.

    Parameters
    ----------
    buf : file-like or None
        Buffer that will hold captured stdout output. Must implement
        ``write()``. A :class:`io.StringIO` is fine. If `None`,
        output is discarded to :py:obj:`os.devnull`.

    Examples
    --------
    Capture the output of a command-line script::

        >>> from io import StringIO
        >>> buf = StringIO()
        >>> catch_stdout(buf)(main)(["#FF0000"])
        >>> buf.getvalue()
        '1 0 0'

    Returns
    -------
    function
        Function decorator
    """
    def decorator(func,buf=buf):
        if buf is None:
            buf = open(os.devnull,"a")

        @functools.wraps(func)
        def new_func(*args,**kwargs):
            old_stdout = sys.stdout
            sys.stdout = buf
            try:
                return func(*args,**kwargs)
            finally:
                sys.stdout = old_stdout

        return new_func

    return decorator
