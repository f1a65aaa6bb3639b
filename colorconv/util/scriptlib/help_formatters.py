#!/usr/bin/env python
"""Post-processors that reformat module docstrings for use as command-line
script help, by removing `reStructuredText`_ markup and truncating text at
the first `numpydoc`_ section heading.

See also
--------
`reStructuredText <http://docutils.sourceforge.net/rst.html>`_
    Markup language used throughout the docstrings in this package

`numpydoc <https://numpydoc.readthedocs.io/en/latest/format.html>`_
    Docstring standard used throughout this package
"""
import re

_section_headings = ("Parameters",
                     "Returns",
                     "Yields",
                     "Raises",
                     "Attributes",
                     "Examples",
                     "See also",
                     )
"""`numpydoc`_ headings at which command-line help text is truncated"""

pyrst_pattern = re.compile(r"(?P<spacing>^|\s+)(?::(?P<domain>[^:`<>]+))?:(?P<role>[^:`]*):`(?P<argument>[^`<>]+)(?: +<(?P<pointer>[^`]+)>)?`")
"""RegEx pattern that detects `reStructuredText`_ markup of python tokens
of the form ``:domain:role:`argument``` or simply ``:role:`argument```,
if the token is preceded by whitespace or begins a line.
"""

subst_pattern = re.compile(r"\|([^|]*)\|")
"""RegEx pattern that matches `reStructuredText`_ substitution tokens
of form ``|substitution|``
"""

link_pattern = re.compile(r"`([^`<>]+)( <[^`]+>)?`_")
"""RegEx pattern that matches `reStructuredText`_ link references of forms ```Linkname`_``
and ```Link text <url>`_``
"""

literal_pattern = re.compile(r"``([^`]+)``")
"""RegEx pattern that matches `reStructuredText`_ inline literals"""

_separator = "\n" + (78*"-") + "\n"
"""78-dash long text separator for separating help sections in command-line environments"""


def shorten_help(inp):
    """Strip `reStructuredText`_ markup from a docstring, and truncate it
    at its first `numpydoc`_ section heading

    Parameters
    ----------
    inp : multi-line str
        Class, function, or module docstring to format

    Returns
    -------
    str
        Cleaned helptext
    """
    inp = pyrst_pattern.sub(r"\g<spacing>\g<argument>",inp)
    inp = subst_pattern.sub(r"\g<1>",inp)
    inp = link_pattern.sub(r"\g<1>",inp)
    inp = literal_pattern.sub(r"\g<1>",inp)

    end = len(inp)
    for heading in _section_headings:
        match = re.search(r"^\s*%s\s*\n\s*-+\s*$" % heading,inp,re.M)
        if match is not None:
            end = min(end,match.start())

    return inp[:end].strip() + "\n"

def format_module_docstring(inp):
    """Pretty prints module docstrings for use in command-line help,
    surrounding the shortened text with separators

    Parameters
    ----------
    inp : multi-line str
        Module docstring to format

    Returns
    -------
    str
        Formatted docstring
    """
    return _separator + "\n" + shorten_help(inp) + "\n" + _separator
