#!/usr/bin/env python
"""Test suite for :py:mod:`colorconv.util.io.openers`"""
import bz2
import gzip
import os
import shutil
import tempfile
import unittest
from io import StringIO

import pytest
from colorconv.util.io.openers import get_short_name, opener, multiopen, NullWriter

@pytest.mark.unit
class TestGetShortName(unittest.TestCase):

    def test_get_short_name(self):
        tests = [("test","test",{}),
                 ("test.py","test",dict(terminator=".py")),
                 ("/home/jdoe/test.py","test",dict(terminator=".py")),
                 ("/home/jdoe/test.py.py","test.py",dict(terminator=".py")),
                 ("/home/jdoe/test.py.2","test.py.2",{}),
                 ("/home/jdoe/test.py.2","test.py.2",dict(terminator=".py")),
                 ("colorconv.bin.color_converter","color_converter",dict(separator=r"\.")),
                 ]
        for inp, expected, kwargs in tests:
            found = get_short_name(inp,**kwargs)
            self.assertEqual(expected,found,
                             "get_short_name(): failed on input '%s'. Expected '%s'. Got '%s'" % (inp,expected,found))


@pytest.mark.unit
class TestOpener(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.tmpdir = tempfile.mkdtemp(prefix="colorconv")
        cls.text = "color red 1 0 0\ncolor blue 0 0 1\n"

    @classmethod
    def tearDownClass(cls):
        shutil.rmtree(cls.tmpdir)

    def test_plain(self):
        filename = os.path.join(self.tmpdir,"colors.txt")
        with open(filename,"w") as fh:
            fh.write(self.text)

        with opener(filename) as fh:
            self.assertEqual(fh.read(),self.text)

    def test_gzip_reads_text(self):
        filename = os.path.join(self.tmpdir,"colors.txt.gz")
        with gzip.open(filename,"wt") as fh:
            fh.write(self.text)

        with opener(filename) as fh:
            self.assertEqual(fh.readlines(),self.text.splitlines(True))

    def test_bzip2_reads_text(self):
        filename = os.path.join(self.tmpdir,"colors.txt.bz2")
        with bz2.open(filename,"wt") as fh:
            fh.write(self.text)

        with opener(filename) as fh:
            self.assertEqual(fh.read(),self.text)

    def test_binary_mode_respected(self):
        filename = os.path.join(self.tmpdir,"binary.txt.gz")
        with opener(filename,"wb") as fh:
            fh.write(self.text.encode("ascii"))

        with opener(filename,"rb") as fh:
            self.assertEqual(fh.read(),self.text.encode("ascii"))


@pytest.mark.unit
class TestMultiopen(unittest.TestCase):

    def test_file_like_passed_through(self):
        stream = StringIO("a")
        self.assertEqual(list(multiopen(stream)),[stream])
        self.assertEqual(list(multiopen([stream,stream])),[stream,stream])

    def test_filenames_opened(self):
        tmpdir = tempfile.mkdtemp(prefix="colorconv")
        try:
            filename = os.path.join(tmpdir,"colors.txt.gz")
            with gzip.open(filename,"wb") as fh:
                fh.write(b"color \xff 1 0 0\n")

            stream = StringIO("a")
            found = list(multiopen([filename,stream],encoding="utf-8",errors="replace"))
            self.assertIs(found[1],stream)
            with found[0] as fh:
                self.assertEqual(fh.read(),"color \ufffd 1 0 0\n")
        finally:
            shutil.rmtree(tmpdir)


@pytest.mark.unit
class TestNullWriter(unittest.TestCase):

    def test_write_discards(self):
        writer = NullWriter()
        writer.write("nothing to see")
        writer.flush()
        writer.close()
        self.assertEqual(repr(writer),"NullWriter()")
