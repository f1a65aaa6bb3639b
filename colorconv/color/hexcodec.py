#!/usr/bin/env python
"""Conversion between single byte values and hexadecimal text

:py:func:`byte_to_hex`
    Render an integer from 0 to 255 as two uppercase hexadecimal digits

:py:func:`hex_pair_to_byte`
    Read hexadecimal digits back into an integer, leniently

:py:func:`parse_hex_code`
    Split an HTML color code of form `#RRGGBB` into its three byte values

Decoding never fails: characters that are not hexadecimal digits contribute
0 to the decoded value, and a code that is not of the form `#RRGGBB` decodes
to an empty list.
"""

_digit_values = { X : int(X,16) for X in "0123456789ABCDEFabcdef" }
"""Value of each character accepted as a hexadecimal digit, in either case"""

def byte_to_hex(value):
    """Render `value` as a zero-padded, two-digit uppercase hexadecimal string

    `value` is not clamped here. Callers are responsible for keeping it
    within 0 to 255.

    Parameters
    ----------
    value : int
        Integer from 0 to 255

    Returns
    -------
    str
        Hexadecimal representation of `value`, e.g. `'0A'` or `'FF'`
    """
    return "%02X" % value

def hex_pair_to_byte(text):
    """Decode a string of hexadecimal digits, typically two, into an integer

    Digits may be upper- or lower-case. Any other character contributes 0
    but still occupies its position, so `'G1'` decodes to 1 and `'1G'` to 16.

    Parameters
    ----------
    text : str
        Hexadecimal digits, most significant first

    Returns
    -------
    int
    """
    result = 0
    for char in text:
        result = 16*result + _digit_values.get(char,0)

    return result

def parse_hex_code(text):
    """Decode an HTML color code of form `#RRGGBB` into its red, green, and blue bytes

    Parameters
    ----------
    text : str
        Color code. Must start with `'#'` and be at least seven characters
        long. Characters after the seventh are ignored.

    Returns
    -------
    list
        `[red, green, blue]` as ints from 0 to 255, or an empty list if
        `text` is not shaped like a color code
    """
    if not text.startswith("#") or len(text) < 7:
        return []

    return [hex_pair_to_byte(text[i:i+2]) for i in (1,3,5)]
