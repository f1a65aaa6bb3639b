#!/usr/bin/env python
"""Library components for writing command-line scripts

Package overview
================

    ======================================================    =========================
    **Package module**                                        **Contents**
    ------------------------------------------------------    -------------------------
    :py:mod:`~colorconv.util.scriptlib.help_formatters`       Reformat module docstrings for use as command-line help text
    ======================================================    =========================
"""
