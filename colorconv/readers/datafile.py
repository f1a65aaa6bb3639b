#!/usr/bin/env python
"""Reader for whitespace-tokenized data files.

Each line of a data file is a node made of tokens separated by whitespace.
A token that begins with a double quote (`"`) or a backtick (`````) runs
until the matching closing mark, so it may contain whitespace; the marks
themselves are not part of the token. Indentation is preserved as the node's
`indent`, and lines indented under a node are that node's children.

Blank lines, and lines whose first non-whitespace character is `#`, are
comments and produce no node. A `#` anywhere else is part of a token, so
HTML color codes like `#FF0000` can be read from data lines.

Example data::

    # this line is ignored
    color "faint red" 1 0.2 0.2
    color bright 1 1 1 0.5
        child "nested under bright"

Functions & classes
-------------------
:func:`tokenize_line`
    Split one line of text into tokens

:func:`parse_line`
    Make a |DataNode| from one line of text, or `None` for comment lines

|DataNode|
    Tokens from one line, with lenient numeric access

|DataFileReader|
    Iterate over the |DataNodes| in one or more files
"""
import re
import math
import itertools
from colorconv.util.io.filters import AbstractReader, FilterMapReader
from colorconv.util.io.openers import multiopen
from colorconv.util.services.exceptions import DataWarning, FileFormatWarning, warn, warn_onceperfamily

_token_pattern = re.compile(r"""(["`])(.*?)(\1|$)|(\S+)""")
"""Matches one token: a quoted run (quote, contents, closing quote or end
of line) or a run of non-whitespace characters"""


#===============================================================================
# INDEX: helper functions
#===============================================================================

def tokenize_line(line):
    """Split a line of text into tokens

    Parameters
    ----------
    line : str
        Line of text, without indentation or line terminator

    Returns
    -------
    list
        list of str
    """
    tokens = []
    for match in _token_pattern.finditer(line):
        quote, quoted, closing, bare = match.groups()
        if quote is None:
            tokens.append(bare)
            continue

        if closing == "":
            warn_onceperfamily("Quoted token '%s' is missing its closing %s. Reading to end of line." % (quoted,quote),
                               pattern="Quoted token .* is missing its closing",
                               category=FileFormatWarning,
                               stacklevel=2)
        tokens.append(quoted)

    return tokens

def parse_line(line,line_num=None):
    """Make a |DataNode| from a line of text

    Parameters
    ----------
    line : str
        Line of text, with or without line terminator

    line_num : int or None, optional
        Line number, for reference

    Returns
    -------
    |DataNode| or None
        `None` if `line` is blank or a comment
    """
    line = line.rstrip("\r\n")
    content = line.lstrip()
    if content == "" or content.startswith("#"):
        return None

    return DataNode(tokenize_line(content),
                    indent=len(line) - len(content),
                    line_num=line_num)



#===============================================================================
# INDEX: classes
#===============================================================================

class DataNode(object):
    """Tokens read from a single line of a data file

    Parameters
    ----------
    tokens : list
        Tokens, as str

    indent : int, optional
        Number of whitespace characters before the first token (Default: 0)

    line_num : int or None, optional
        Line number in the source file, if any

    Attributes
    ----------
    tokens : list
        Tokens, as str

    indent : int
        Number of whitespace characters before the first token. Nodes
        with `indent > 0` are children of an earlier node

    line_num : int or None
        Line number in the source file, if any
    """

    def __init__(self,tokens,indent=0,line_num=None):
        self.tokens   = list(tokens)
        self.indent   = indent
        self.line_num = line_num

    def __len__(self):
        return len(self.tokens)

    def __repr__(self):
        return "<DataNode line=%s indent=%s tokens=%s>" % (self.line_num,self.indent,self.tokens)

    def __eq__(self,other):
        return isinstance(other,DataNode) and \
               (self.tokens,self.indent) == (other.tokens,other.indent)

    def token(self,index):
        """Return token `index`, or an empty string if there is no such token

        Parameters
        ----------
        index : int

        Returns
        -------
        str
        """
        if 0 <= index < len(self.tokens):
            return self.tokens[index]

        return ""

    def is_number(self,index):
        """Return `True` if token `index` can be read as a finite number"""
        try:
            return math.isfinite(float(self.token(index)))
        except ValueError:
            return False

    def value(self,index):
        """Read token `index` as a number.

        Tokens that are not finite numbers are read as 0, with a |DataWarning|

        Parameters
        ----------
        index : int

        Returns
        -------
        float
        """
        if self.is_number(index):
            return float(self.token(index))

        warn("Cannot convert value '%s' to a number. Using 0 instead." % self.token(index),
             category=DataWarning,
             stacklevel=2)
        return 0.0


class DataFileReader(FilterMapReader):
    """
    DataFileReader(*streams)

    Read |DataNodes| from one or more data files, skipping blank and
    comment lines.

    Parameters
    ----------
    *streams : str or file-like
        One or more filenames or open filehandles of input data. Filenames
        ending in `.gz` or `.bz2` are decompressed. Bytes that cannot be decoded
        are read as U+FFFD

    Attributes
    ----------
    counter : int
        Cumulative line number counter over all streams
    """

    def __init__(self,*streams):
        opened = list(multiopen(streams,errors="replace"))
        self._owned = [Y for X,Y in zip(streams,opened) if isinstance(X,str)]
        AbstractReader.__init__(self,itertools.chain.from_iterable(opened))
        self.counter = 0

    def filter(self,line):
        """Make a |DataNode| from `line`

        Parameters
        ----------
        line : str
            Line of text

        Returns
        -------
        |DataNode| or None
            `None` if `line` is blank or a comment
        """
        self.counter += 1
        return parse_line(line,line_num=self.counter)

    def close(self):
        """Close streams opened by this reader from filenames.
        Filehandles passed in by the caller are left open
        """
        for stream in self._owned:
            stream.close()
