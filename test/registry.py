"""
Registry behavioral tests (ordered option lookup).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
import warnings
from unittest import TestCase

from argot import DuplicateFlagWarning, Option
from argot.registry import Options


class TestOptions(TestCase):
    """Behavioral tests for the Options registry."""

    def setUp(self):
        self.options = Options()
        self.verbose = Option("v", "verbose")
        self.help = Option("h", "help", tail=True)
        self.name = Option("n", "name", argument=True, required=True)
        for option in (self.verbose, self.help, self.name):
            self.options.append(option)

    def testLookupByEitherFlag(self):
        self.assertIs(self.options["v"], self.verbose)
        self.assertIs(self.options["verbose"], self.verbose)
        self.assertIs(self.options["--verbose"], self.verbose)

    def testLookupByIndex(self):
        self.assertIs(self.options[0], self.verbose)
        self.assertEqual(self.options[1:], [self.help, self.name])

    def testExactLookupKeepsDashes(self):
        self.assertIs(self.options.lookup("verbose"), self.verbose)
        self.assertIsNone(self.options.lookup("-verbose"))
        self.assertIs(self.options.find("-verbose"), self.verbose)

    def testMissingFlagIsNone(self):
        self.assertIsNone(self.options["missing"])

    def testContains(self):
        self.assertIn("name", self.options)
        self.assertIn(self.name, self.options)
        self.assertNotIn("missing", self.options)

    def testOnlyOptionsRegistered(self):
        with self.assertRaises(TypeError):
            self.options.append("verbose")

    def testDuplicateFlagWarnsAndKeepsFirst(self):
        loud = Option("l", "verbose")
        with self.assertWarns(DuplicateFlagWarning):
            self.options.append(loud)
        self.assertIs(self.options["verbose"], self.verbose)
        self.assertIs(self.options["l"], loud)

    def testDistinctFlagsDoNotWarn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            self.options.append(Option("q", "quiet"))

    def testPartitions(self):
        self.assertEqual(self.options.heads, [self.verbose, self.name])
        self.assertEqual(self.options.tails, [self.help])
        self.assertEqual(self.options.required, [self.name])


if __name__ == "__main__":
    unittest.main()
