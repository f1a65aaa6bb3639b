#!/usr/bin/env python
"""Conversion between fractional color channels and HTML color codes

Package overview
================

    ===============================================  ==============================================
    **Package module**                               **Contents**
    -----------------------------------------------  ----------------------------------------------
    :py:mod:`~colorconv.color.hexcodec`              Bytes to and from hexadecimal digits
    :py:mod:`~colorconv.color.scaling`               Fractional channels to and from bytes
    :py:mod:`~colorconv.color.formatters`            Text renderings of colors and color records
    ===============================================  ==============================================
"""
