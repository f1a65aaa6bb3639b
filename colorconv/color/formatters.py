#!/usr/bin/env python
"""Render colors in fractional or hexadecimal form

Fractional values are written the way a C++ output stream writes a `double`
by default, equivalent to the `'%g'` format: six significant digits, with
trailing zeros and decimal points dropped, so that `1.0` is written as `1`.

Functions
---------
:func:`fractions_to_hex`
    Fractional channels to an HTML color code, `#RRGGBB`

:func:`hex_to_fractions`
    HTML color code to a list of fractional channels

:func:`format_values`
    Space-separated fractional values

:func:`format_hex_record`
    A named HTML color, as `"name" #RRGGBB`

:func:`format_es_record`
    A named fractional color, as `color "name" r g b`
"""
from colorconv.color.hexcodec import byte_to_hex, parse_hex_code
from colorconv.color.scaling import fractions_to_bytes, bytes_to_fractions

def fractions_to_hex(channels):
    """Convert fractional red, green, and blue channels to an HTML color code

    Parameters
    ----------
    channels : sequence of float
        At least three fractional channels. A fourth (alpha) channel, if
        present, is ignored, because HTML color codes carry no alpha

    Returns
    -------
    str
        Color code of form `#RRGGBB`
    """
    return "#" + "".join(byte_to_hex(X) for X in fractions_to_bytes(channels[:3]))

def hex_to_fractions(hexcode):
    """Convert an HTML color code to fractional red, green, and blue channels

    Parameters
    ----------
    hexcode : str
        Color code of form `#RRGGBB`

    Returns
    -------
    list
        Three floats, or an empty list if `hexcode` is malformed
    """
    return bytes_to_fractions(parse_hex_code(hexcode))

def format_number(value):
    """Format a fractional value the way a C++ output stream does by default:
    six significant digits, without trailing zeros

    Examples
    --------
    >>> format_number(1.0)
    '1'
    >>> format_number(128/255.0)
    '0.501961'
    """
    return "%g" % value

def format_values(values):
    """Join fractional values with single spaces

    Parameters
    ----------
    values : sequence of float

    Returns
    -------
    str
    """
    return " ".join(format_number(X) for X in values)

def format_hex_record(name,hexcode):
    """Format a named HTML color as `"name" #RRGGBB`

    Parameters
    ----------
    name : str
        Color name

    hexcode : str
        HTML color code

    Returns
    -------
    str
    """
    return '"%s" %s' % (name,hexcode)

def format_es_record(name,values):
    """Format a named color as a fractional color record, `color "name" r g b`

    Parameters
    ----------
    name : str
        Color name

    values : sequence of float
        Fractional channels. An empty sequence yields a record with a name
        but no values

    Returns
    -------
    str
    """
    return " ".join(['color','"%s"' % name] + [format_number(X) for X in values])
