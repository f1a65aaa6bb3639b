#!/usr/bin/env python
"""
Package overview
================

This package contains parsers for data files holding named colors. All
parsers behave as iterators, and yield one item per usable line, skipping
lines they cannot use instead of halting.

    ======================================    =======================================
    **Module**                                **Contents**
    --------------------------------------    ---------------------------------------
    :py:mod:`colorconv.readers.datafile`      Tokenized data files, line by line
    :py:mod:`colorconv.readers.colors`        Color records in fractional or hex form
    ======================================    =======================================
"""
