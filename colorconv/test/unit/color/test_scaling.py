#!/usr/bin/env python
"""Test suite for :py:mod:`colorconv.color.scaling`"""
import unittest
import pytest
from colorconv.color.scaling import (fraction_to_byte, byte_to_fraction,
                                     fractions_to_bytes, bytes_to_fractions)

@pytest.mark.unit
class TestScaling(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        # fractions and the bytes they truncate and clamp to
        cls.fractions = [(0.0,0),
                         (1.0,255),
                         (0.5,127),
                         (0.2,51),
                         (0.999,254),
                         (-0.5,0),
                         (-1e10,0),
                         (1.5,255),
                         (2.0,255),
                         (1e100,255),
                        ]

    def test_fraction_to_byte_known(self):
        for value, expected in self.fractions:
            self.assertEqual(fraction_to_byte(value),expected,"Failed on %s" % value)

    def test_fraction_to_byte_always_in_range(self):
        for x in range(-300,600):
            found = fraction_to_byte(x / 255.0 + 0.0001)
            self.assertTrue(0 <= found <= 255)

    def test_fraction_to_byte_returns_int(self):
        for value, _ in self.fractions:
            self.assertIsInstance(fraction_to_byte(value),int)

    def test_byte_round_trip_is_exact(self):
        for n in range(256):
            self.assertEqual(fraction_to_byte(byte_to_fraction(n)),n)

    def test_byte_to_fraction(self):
        self.assertEqual(byte_to_fraction(0),0.0)
        self.assertEqual(byte_to_fraction(255),1.0)
        self.assertAlmostEqual(byte_to_fraction(128),0.50196078431)

    def test_fractions_to_bytes_matches_scalar(self):
        values = [X[0] for X in self.fractions]
        expected = [X[1] for X in self.fractions]
        self.assertEqual(fractions_to_bytes(values).tolist(),expected)

    def test_vectorized_byte_round_trip_is_exact(self):
        values = list(range(256))
        self.assertEqual(fractions_to_bytes(bytes_to_fractions(values)).tolist(),values)

    def test_bytes_to_fractions_returns_floats(self):
        found = bytes_to_fractions([0,51,255])
        self.assertEqual(found,[0.0,0.2,1.0])
        for x in found:
            self.assertIsInstance(x,float)

    def test_bytes_to_fractions_empty(self):
        self.assertEqual(bytes_to_fractions([]),[])

    def test_fraction_to_byte_truncates_just_below_integer(self):
        value = 127.9999999995 / 255
        self.assertEqual(fraction_to_byte(value),127)
        self.assertEqual(fractions_to_bytes([value]).tolist(),[127])

    def test_nan_is_zero(self):
        nan = float("nan")
        self.assertEqual(fraction_to_byte(nan),0)
        self.assertEqual(fractions_to_bytes([nan,1.0,0.5]).tolist(),[0,255,127])
