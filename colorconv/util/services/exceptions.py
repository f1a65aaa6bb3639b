#!/usr/bin/env python
"""This module contains custom warning classes, implements a custom warning
filter action, called `"onceperfamily"`, and replaces warning output to
improve legibility.

Contents:

.. contents::
   :local:

The `onceperfamily` action
--------------------------
`onceperfamily` groups warning messages into families by regular expression,
and only prints the first warning instance that matches a given family's
regular expression. In contrast, Python's native `once` action prints any string
literal once, even if it matches the same regex as another warning already given.

To use this action, create the filter with :func:`filterwarnings`, which also
accepts every action understood by :func:`warnings.filterwarnings`, and issue
warnings with :func:`warn`. :func:`warn_onceperfamily` does both at once.


Warning types
-------------
|ArgumentWarning|
    Warning for command-line arguments that are nonsensical, but recoverable
    (e.g. bare color values given alongside an input file)

|FileFormatWarning|
    Warning for slightly malformed but usable files (e.g. a quoted token
    missing its closing quote)

|DataWarning|
    Warning raised when a value cannot be interpreted as expected, but a
    substitute value lets conversion continue (e.g. a non-numeric color
    channel, read as 0)


See also
--------
:mod:`warnings`
    Warnings module
"""
import re
import warnings
import inspect
import linecache
import textwrap
from colorconv.util.io.filters import colored

_wrapper = textwrap.TextWrapper(break_long_words=False,width=77)



#===============================================================================
# INDEX: Warning classes
#===============================================================================

class ArgumentWarning(Warning):
    """Warning for nonsensical but recoverable combinations of command-line arguments"""
    pass


class FileFormatWarning(Warning):
    """Warning for slightly malformed but usable files"""
    pass


class DataWarning(Warning):
    """Warning for values that cannot be used as given. Raised when:

      - a token that should hold a number does not parse as one
      - values are out of the domain of a given operation, but execution
        can continue if a substitute value is used
    """
    pass



#===============================================================================
# INDEX: extensions to Python warnings
#===============================================================================

cc_once_registry = {}
"""Registry of `onceperfamily` warnings that have been seen in the current execution context"""

cc_filters       = []
"""Warnings filters that allow the `onceperfamily` action in addition to Python's own"""

def filterwarnings(action,message="",category=Warning,module="",lineno=0,append=False):
    """Insert an entry into the warnings filter. Behaviors are as in :func:`warnings.filterwarnings`,
    except the additional action `'onceperfamily'` can be used to allow one warning per `family`
    of messages, specified by a regex.

    Parameters
    ----------
    action : str
        How the warning should be filtered. Accceptable values are "error",
        "ignore", "always", "default", 'module", "once", and "onceperfamily"

    message : str, optional
        str that can be compiled to a regex, used to detect warnings. If "onceperfamily"
        is chosen, only the first warning to give a string that matches the regex
        will be shown. (Default: `""`, match any message)

    category : Warning or subclass, optional
        Type of warning. (Default: :class:`Warning`)

    module : str, optional
        str that can be compiled to a regex, limiting the warning behavior to modules
        that match that regex. (Default: `""`, match all modules)

    lineno : int, optional
        integer line used to specify warning in source code. If 0 (default), match
        all warnings regardless of line number.

    append : bool, optional
        If `True`, add warning to end of filter list. If `False` (default), insert
        warning at beginning of filters list.
    """
    if action != "onceperfamily":
        warnings.filterwarnings(action,message=message,
                                category=category,module=module,
                                lineno=lineno,append=append)
        return

    tup = (action,re.compile(message,re.I),category,re.compile(module),lineno)
    if tup in cc_filters:
        return

    if append:
        cc_filters.append(tup)
    else:
        cc_filters.insert(0,tup)

def warn_onceperfamily(message,pattern=None,category=None,stacklevel=1):
    """Issue a warning, creating a `onceperfamily` filter for it if one does not already exist

    Parameters
    ----------
    message : str
        Message of warning. Used to create the warnings filter if `pattern`
        is `None`, so should be escaped if it contains regex metacharacters

    pattern : str or None, optional
        Regex describing the family of `message`. If `None`, `message` is used

    category: :class:`Warning`, or subclass, optional
        Type of warning

    stacklevel : int
        Frame, counted from the caller, to which the warning is attributed
    """
    pattern = message if pattern is None else pattern
    category = UserWarning if category is None else category
    filterwarnings("onceperfamily",message=pattern,category=category)
    warn(message,category=category,stacklevel=stacklevel+1)

def warn(message,category=None,stacklevel=1):
    """Issue a non-essential warning to users, honoring `onceperfamily` filters

    Parameters
    ----------
    message : str
        Message

    category: :class:`Warning`, or subclass, optional
        Type of warning

    stacklevel : int
        Frame, counted from the caller, to which the warning is attributed
    """
    if category is None:
        category = UserWarning

    frame = inspect.stack()[stacklevel]
    warn_explicit(message,category,frame.filename,frame.lineno,module=frame.filename)

def warn_explicit(message,category,filename,lineno,module=None,registry=None,module_globals=None):
    """Low-level interface to issue warnings, honoring `onceperfamily` filters

    Parameters
    ----------
    message : str
        Message

    category: :class:`Warning`, or subclass
        Type of warning

    filename : str
        Name of module from which warning is issued

    lineno : int
        Line in module at which warning is called

    module : str, optional
        Module name

    registry : dict, optional
        Registry of ignore filters (see :func:`warnings.warn_explicit`)

    module_globals : dict, optional
        Dictionary of module-level variables
    """
    module = __name__ if module is None else module

    for _, pat, filter_category, mod, filter_line in cc_filters:
        if pat.match(message) and issubclass(category,filter_category) and \
           mod.match(module) and (filter_line == 0 or filter_line == lineno):

            key = (pat.pattern,filter_category,mod.pattern,filter_line)
            if key in cc_once_registry:
                return

            cc_once_registry[key] = 1
            break

    warnings.warn_explicit(message,category,filename,lineno,
                           module=module,registry=registry,
                           module_globals=module_globals)


def formatwarning(message,category,filename,lineno,line=None):
    """Colorize warnings for readability. Replaces :func:`warnings.formatwarning`

    Parameters
    ----------
    message : str
        Warning message

    category : Warning
        Class (not instance) of warning

    filename : str
        Name of file calling warning

    lineno : int
        Line in file calling warning

    line : str
        Text of line in file calling warning. If `None`, lines surrounding
        `lineno` are read from `filename`

    Returns
    -------
    str
        Pretty-printed warning message
    """
    sep     = colored("-"*75,color="cyan")
    message = str(message)
    if "\n" not in message:
        message = _wrapper.fill(message)

    message = colored(message,color="white",attrs=["bold"])
    name    = colored(category.__name__,color="cyan",attrs=["bold"])

    if line is None:
        numwidth = len(str(lineno+3))
        fmtstr   = "{0: >%ss} {1}" % numwidth
        lines    = []
        for x in range(max(0,lineno-2),lineno+3):
            tmpline = linecache.getline(filename,x).strip("\n")
            if tmpline:
                attrs = ["bold"] if x == lineno else []
                lines.append(fmtstr.format(colored(x,color="green",attrs=attrs),
                                           colored(tmpline,attrs=attrs)
                                           ))
        line = "\n".join(lines)

    filename = "in %s, line %s:" % (colored(filename,color="cyan"),lineno)

    return "\n".join([sep,name,message,filename,"",line,"",sep,""])


warnings.formatwarning = formatwarning
