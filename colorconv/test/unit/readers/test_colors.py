#!/usr/bin/env python
"""Test suite for :py:mod:`colorconv.readers.colors`"""
import unittest
import warnings
from io import StringIO

import pytest
from colorconv.readers.colors import (ColorRecord, parse_es_color, parse_hex_color,
                                      ESColorReader, HexColorReader)
from colorconv.readers.datafile import DataNode
from colorconv.util.services.exceptions import DataWarning

_es_data = """# fractional colors
color red 1 0 0
color "faint red" 1 0.2 0.2
color alpha 0 0 1 0.5
color short 1 0
colour misspelled 1 1 1
shade red 1 0 0
color red 0 1 0
	color nested 0 0 0
color many 0.1 0.2 0.3 0.4 0.5 0.6
"""

_hex_data = """color red #FF0000
color "faint red" #ff3333
color short #FFF
color nohash FF0000
color missing
colour misspelled #FFFFFF
	color nested #000000
color green #00FF00
"""

@pytest.mark.unit
class TestParsers(unittest.TestCase):

    def test_parse_es_color(self):
        found = parse_es_color(DataNode(["color","red","1","0","0"]))
        self.assertEqual(found,ColorRecord("red",(1.0,0.0,0.0)))

    def test_parse_es_color_keeps_alpha(self):
        found = parse_es_color(DataNode(["color","red","1","0","0","0.5"]))
        self.assertEqual(found.channels,(1.0,0.0,0.0,0.5))

    def test_parse_es_color_rejects(self):
        for tokens in (["color","red","1","0"],
                       ["color","red"],
                       ["colour","red","1","0","0"],
                       [],
                      ):
            self.assertIsNone(parse_es_color(DataNode(tokens)),"Failed on %s" % tokens)

    def test_parse_es_color_non_numeric_channel(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            found = parse_es_color(DataNode(["color","red","1","x","0"]))

        self.assertEqual(found.channels,(1.0,0.0,0.0))
        self.assertTrue(issubclass(caught[0].category,DataWarning))

    def test_parse_hex_color(self):
        found = parse_hex_color(DataNode(["color","green","#00FF80"]))
        self.assertEqual(found,ColorRecord("green",(0.0,1.0,128/255.0)))

    def test_parse_hex_color_malformed_code_is_empty(self):
        self.assertEqual(parse_hex_color(DataNode(["color","red","#FFF"])),ColorRecord("red",()))

    def test_parse_hex_color_rejects(self):
        for tokens in (["color","red"],["hue","red","#FF0000"],[]):
            self.assertIsNone(parse_hex_color(DataNode(tokens)),"Failed on %s" % tokens)


@pytest.mark.unit
class TestESColorReader(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.records = list(ESColorReader(StringIO(_es_data)))

    def test_names_in_order(self):
        self.assertEqual([X.name for X in self.records],
                         ["red","faint red","alpha","red","many"])

    def test_channels(self):
        self.assertEqual(self.records[0].channels,(1.0,0.0,0.0))
        self.assertEqual(self.records[1].channels,(1.0,0.2,0.2))
        self.assertEqual(self.records[2].channels,(0.0,0.0,1.0,0.5))

    def test_duplicate_names_kept(self):
        self.assertEqual(self.records[3],ColorRecord("red",(0.0,1.0,0.0)))

    def test_extra_tokens_truncated_to_four_channels(self):
        self.assertEqual(self.records[4].channels,(0.1,0.2,0.3,0.4))


@pytest.mark.unit
class TestHexColorReader(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.records = list(HexColorReader(StringIO(_hex_data)))

    def test_names_in_order(self):
        self.assertEqual([X.name for X in self.records],
                         ["red","faint red","short","nohash","green"])

    def test_channels(self):
        self.assertEqual(self.records[0].channels,(1.0,0.0,0.0))
        self.assertEqual(self.records[1].channels,(1.0,0.2,0.2))
        self.assertEqual(self.records[4].channels,(0.0,1.0,0.0))

    def test_malformed_codes_have_no_channels(self):
        self.assertEqual(self.records[2].channels,())
        self.assertEqual(self.records[3].channels,())
