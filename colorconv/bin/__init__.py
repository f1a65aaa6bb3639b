#!/usr/bin/env python
"""Command-line scripts

    =========================   =============================================================================
    |color_converter|            Convert named colors between the fractional format of game data files
                                 and 24-bit hexadecimal HTML color codes, either one color given on
                                 the command line, or every color record in a file
    =========================   =============================================================================
"""
