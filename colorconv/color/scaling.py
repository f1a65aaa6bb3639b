#!/usr/bin/env python
"""Linear scaling between fractional color channels and bytes

Fractional channels are nominally between 0.0 and 1.0, and map onto bytes
from 0 to 255 by multiplication by 255. Conversion to bytes truncates towards
zero and then clamps to 0..255, so out-of-range fractions saturate instead of
wrapping. Conversion from bytes is division by 255.

Channels that are not numbers (NaN) are treated as 0.
"""
import numpy

SCALE = 255
"""Largest byte value, and factor relating fractions to bytes"""

def fraction_to_byte(value):
    """Scale a fractional channel by 255, truncate, and clamp to 0..255

    Parameters
    ----------
    value : float
        Fractional channel value. Values outside 0.0..1.0 are permitted

    Returns
    -------
    int
        Byte from 0 to 255

    Examples
    --------
    >>> fraction_to_byte(0.5)
    127
    >>> fraction_to_byte(2.0)
    255
    >>> fraction_to_byte(-0.5)
    0
    """
    scaled = SCALE*value
    if scaled >= SCALE:
        return SCALE
    if not scaled > 0:
        return 0

    return int(scaled)

def byte_to_fraction(value):
    """Convert a byte from 0 to 255 into a fractional channel value

    Parameters
    ----------
    value : int

    Returns
    -------
    float
    """
    return value / float(SCALE)

def fractions_to_bytes(values):
    """Vectorized :func:`fraction_to_byte`

    Parameters
    ----------
    values : sequence of float

    Returns
    -------
    :class:`numpy.ndarray`
        Array of ints from 0 to 255, one per value
    """
    scaled = numpy.nan_to_num(SCALE*numpy.asarray(values,dtype=float),nan=0.0)
    scaled = numpy.clip(scaled,0,SCALE)
    return scaled.astype(int)

def bytes_to_fractions(values):
    """Vectorized :func:`byte_to_fraction`

    Parameters
    ----------
    values : sequence of int

    Returns
    -------
    list
        Fractional values as Python floats, one per byte
    """
    return (numpy.asarray(values,dtype=float) / SCALE).tolist()
