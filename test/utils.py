"""
Utils module behavioral tests (Unset, coalesce, rename, mirror, flag text).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argot.utils import *


class TestUnset(TestCase):
    """Behavioral tests for the Unset sentinel."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testNotSubclassable(self):
        with self.assertRaises(TypeError):
            type("Subclass", (UnsetType,), {})

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce(0, 1), 0)


class TestRename(TestCase):
    """Behavioral tests for rename()."""

    def testDirectForm(self):
        function = rename(lambda: None, "named")
        self.assertEqual(function.__name__, "named")
        self.assertEqual(function.__qualname__, "named")

    def testDecoratorForm(self):
        @rename("named")
        def function():
            pass
        self.assertEqual(function.__name__, "named")

    def testInvalidArguments(self):
        with self.assertRaises(TypeError):
            rename(1, "named")
        with self.assertRaises(TypeError):
            rename()


class TestMirror(TestCase):
    """Behavioral tests for mirror() properties."""

    def testCopiesContainers(self):
        class Holder:
            items = mirror("items")

            def __init__(self):
                self._items = ["a"]

        holder = Holder()
        holder.items.append("b")
        self.assertEqual(holder.items, ["a"])

    def testKeepsRanges(self):
        class Holder:
            span = mirror("span")

            def __init__(self):
                self._span = range(3)

        self.assertEqual(Holder().span, range(3))


class TestFlagText(TestCase):
    """Behavioral tests for the dash grammar helpers."""

    def testStripDashes(self):
        self.assertEqual(strip_dashes("--verbose"), "verbose")
        self.assertEqual(strip_dashes("-v"), "v")
        self.assertEqual(strip_dashes("---x"), "-x")
        self.assertEqual(strip_dashes("plain"), "plain")

    def testIsDashed(self):
        self.assertTrue(is_dashed("-"))
        self.assertTrue(is_dashed("-5"))
        self.assertFalse(is_dashed("value"))
        self.assertFalse(is_dashed(5))

    def testIsFlagLike(self):
        self.assertTrue(is_flag_like("-v"))
        self.assertTrue(is_flag_like("--dry-run"))
        self.assertFalse(is_flag_like("-5"))
        self.assertFalse(is_flag_like("--"))
        self.assertFalse(is_flag_like("--a b"))


if __name__ == "__main__":
    unittest.main()
