#!/usr/bin/env python
"""Unit and functional tests for :data:`colorconv`

Tests are tagged with `pytest` markers, and may be selected accordingly::

    $ pytest -m unit
    $ pytest -m functional
"""
