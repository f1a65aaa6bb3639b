#!/usr/bin/env python
"""Test suite for :py:mod:`colorconv.util.services.exceptions`"""
import unittest
import warnings

import pytest
from colorconv.util.services import exceptions
from colorconv.util.services.exceptions import (DataWarning, FileFormatWarning, filterwarnings,
                                                warn, warn_onceperfamily, formatwarning)

@pytest.mark.unit
class TestWarnings(unittest.TestCase):

    def setUp(self):
        self.old_filters = list(exceptions.cc_filters)
        exceptions.cc_once_registry.clear()

    def tearDown(self):
        exceptions.cc_filters[:] = self.old_filters
        exceptions.cc_once_registry.clear()

    def test_warn_issues_category(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            warn("something odd",category=DataWarning)

        self.assertEqual(len(caught),1)
        self.assertTrue(issubclass(caught[0].category,DataWarning))
        self.assertEqual(str(caught[0].message),"something odd")

    def test_warn_default_category(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            warn("something odd")

        self.assertTrue(issubclass(caught[0].category,UserWarning))

    def test_onceperfamily_shows_first_of_family(self):
        filterwarnings("onceperfamily",message="Family member .*",category=DataWarning)
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            warn("Family member 1",category=DataWarning)
            warn("Family member 2",category=DataWarning)
            warn("Unrelated message",category=DataWarning)

        self.assertEqual([str(X.message) for X in caught],["Family member 1","Unrelated message"])

    def test_onceperfamily_respects_category(self):
        filterwarnings("onceperfamily",message="Member .*",category=FileFormatWarning)
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            warn("Member 1",category=DataWarning)
            warn("Member 2",category=DataWarning)

        self.assertEqual(len(caught),2)

    def test_warn_onceperfamily(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            for n in range(3):
                warn_onceperfamily("Bad quote %s" % n,pattern="Bad quote",category=FileFormatWarning)

        self.assertEqual(len(caught),1)
        self.assertEqual(str(caught[0].message),"Bad quote 0")

    def test_filterwarnings_passes_python_actions(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            filterwarnings("ignore",message="ignore me",category=DataWarning)
            warn("ignore me",category=DataWarning)
            warn("keep me",category=DataWarning)

        self.assertEqual([str(X.message) for X in caught],["keep me"])

    def test_formatwarning(self):
        found = formatwarning("Cannot convert value 'x'",DataWarning,"nofile.py",3,line="value = x")
        self.assertIn("DataWarning",found)
        self.assertIn("Cannot convert value 'x'",found)
        self.assertIn("nofile.py",found)
        self.assertIn("line 3",found)
        self.assertIn("value = x",found)
