#!/usr/bin/env python
"""Welcome to colorconv!

This package converts colors between two textual representations: the
fractional `r g b [a]` channels used in game data files, and 24-bit
hexadecimal HTML color codes of form `#RRGGBB`. It provides:

  #. A command-line script that converts a single color, or every color
     record in a file (see |bin|).

  #. Readers that extract named color records from tokenized data files
     (see |readers|), and functions that convert and format colors
     (see |color|).


Package overview
----------------
colorconv is divided into the following subpackages:

    ==============    =========================================================
    Package           Contents
    --------------    ---------------------------------------------------------
    |bin|             Command-line scripts
    |color|           Conversion between fractional channels and hex codes
    |readers|         Parsers for data files and color records
    |util|            Utilities (e.g. stream filters, warnings, help formatting)
    |test|            Unit and functional tests
    ==============    =========================================================

"""
__version__ = "0.1.0"

from colorconv.color.hexcodec import byte_to_hex, hex_pair_to_byte
from colorconv.color.scaling import fraction_to_byte, byte_to_fraction
from colorconv.color.formatters import fractions_to_hex, hex_to_fractions
from colorconv.readers.colors import ColorRecord, ESColorReader, HexColorReader
from colorconv.readers.datafile import DataFileReader

from colorconv.util.services.exceptions import formatwarning
