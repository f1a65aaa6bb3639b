#!/usr/bin/env python
"""Miscellaneous, general utilities useful for scripting

Package overview
================

    ==========================================   ==========================================================
    **Subpackages**                              **Contents**
    ------------------------------------------   ----------------------------------------------------------
    :py:obj:`~colorconv.util.io`                 Stream filters and file openers
    :py:obj:`~colorconv.util.scriptlib`          Tools for writing command-line scripts
    :py:obj:`~colorconv.util.services`           Function decorators and warnings
    ==========================================   ==========================================================
"""
