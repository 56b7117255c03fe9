"""
Faults module behavioral tests (errors, warnings, rendering).

Scope
- Validate codes and titles, options access and copy.replace merging.
- Validate trigger(): errors raise, warnings warn, invalid faults are refused.
- Validate rich rendering in plain and fancy forms.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import io
import unittest
from unittest import TestCase

from rich.console import Console

from argot import *


def render(fault):
    console = Console(file=io.StringIO(), width=80, color_system=None)
    console.print(fault)
    return console.file.getvalue()


class TestParseError(TestCase):
    """Behavioral tests for errors raised while scanning."""

    def testMessageAndOptions(self):
        error = MissingArgumentError("'name' expects an argument, none given", flag="name")
        self.assertEqual(str(error), "'name' expects an argument, none given")
        self.assertEqual(error.flag, "name")
        self.assertEqual(error.code, FaultCode.MISSING_ARGUMENT)
        self.assertEqual(error.title, "missing argument")

    def testMissingOptionAttribute(self):
        with self.assertRaises(AttributeError):
            ParseError("boom").flag  # NOQA: attribute access under test

    def testOptionsAreReadOnly(self):
        with self.assertRaises(TypeError):
            ParseError("boom", hint="h").options["hint"] = "other"

    def testCodeAndTitleOverride(self):
        error = ParseError("boom", code=FaultCode.MISSING_OPTION, title="custom")
        self.assertEqual(error.code, FaultCode.MISSING_OPTION)
        self.assertEqual(error.title, "custom")

    def testHierarchy(self):
        for cls in (MissingArgumentError, MissingOptionError, InvalidArgumentError, InvalidOptionError):
            self.assertTrue(issubclass(cls, ParseError))
        self.assertTrue(issubclass(DuplicateCommandError, ValueError))

    def testTriggerRaisesWithMergedOptions(self):
        with self.assertRaises(InvalidOptionError) as context:
            trigger(InvalidOptionError("Unknown option -- 'x'", flags=("x",)), hint="declare it")
        self.assertEqual(context.exception.flags, ("x",))
        self.assertEqual(context.exception.hint, "declare it")

    def testTriggerRefusesPlainObjects(self):
        with self.assertRaises(TypeError):
            trigger(ValueError("boom"))


class TestParseWarning(TestCase):
    """Behavioral tests for soft issues."""

    def testTriggerWarns(self):
        with self.assertWarns(DuplicateFlagWarning) as context:
            trigger(DuplicateFlagWarning("flag 'v' is already registered", flag="v"))
        self.assertEqual(context.warning.options["flag"], "v")

    def testWarningIsUserWarning(self):
        self.assertTrue(issubclass(DuplicateFlagWarning, UserWarning))


class TestRendering(TestCase):
    """Behavioral tests for rich rendering of faults."""

    def testPlainRendering(self):
        output = render(MissingOptionError("Expected option `name` is required", hint="add '--name'"))
        self.assertIn("[ 21112 | Missing Option ]", output)
        self.assertIn("Expected option `name` is required", output)
        self.assertIn("→ add '--name'", output)

    def testFancyRendering(self):
        output = render(InvalidArgumentError("'x' does not match /\\d+/", fancy=True))
        self.assertIn("21113", output)
        self.assertIn("Invalid Argument", output)
        self.assertIn("╭", output)

    def testWarningRendering(self):
        output = render(DuplicateFlagWarning("flag 'v' is already registered"))
        self.assertIn("[ 22101 | Duplicate Flag ]", output)


class TestFaultCode(TestCase):
    """Behavioral tests for fault codes and documentation lookup."""

    def testNormalize(self):
        self.assertEqual(FaultCode.DUPLICATE_COMMAND.normalize(), "21101")

    def testGetdocDefaultsToNone(self):
        self.assertIsNone(getdoc(FaultCode.MISSING_OPTION))

    def testGetdocRequiresCode(self):
        with self.assertRaises(TypeError):
            getdoc(21112)


if __name__ == "__main__":
    unittest.main()
