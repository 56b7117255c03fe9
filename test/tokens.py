"""
Tokens module behavioral tests (classification and extraction).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argot import InvalidOptionError, MissingArgumentError, Option, Settings
from argot.registry import Options
from argot.tokens import Classifier, Token, TokenKind, classify


class TestClassify(TestCase):
    """Behavioral tests for the textual token grammar."""

    def testDoubleDash(self):
        self.assertIs(classify("--").kind, TokenKind.DOUBLE_DASH)

    def testCluster(self):
        self.assertEqual(classify("-abc"), Token(TokenKind.CLUSTER, "abc", None))

    def testAssignment(self):
        self.assertEqual(classify("--size=3"), Token(TokenKind.ASSIGNMENT, "size", "3"))
        self.assertEqual(classify("--expr=a=b"), Token(TokenKind.ASSIGNMENT, "expr", "a=b"))

    def testNegation(self):
        self.assertEqual(classify("--no-color"), Token(TokenKind.NEGATION, "color", None))

    def testLong(self):
        self.assertEqual(classify("--color"), Token(TokenKind.LONG, "color", None))

    def testValues(self):
        for token in ("value", "-", "a-b"):
            self.assertEqual(classify(token), Token(TokenKind.VALUE, None, None))


class TestClassifier(TestCase):
    """Behavioral tests for resolving tokens against a registry."""

    def classifier(self, **settings):
        options = Options()
        for option in (
            Option("a", "all"),
            Option("b", "brief"),
            Option("n", "name", argument=True),
            Option(long="no-cache"),
            Option(long="color", default=True),
        ):
            options.append(option)
        return Classifier(options, Settings(**settings))

    def testDirectLookup(self):
        classifier = self.classifier()
        self.assertEqual(classifier.extract("--all"), (classifier.options["all"], None))
        self.assertEqual(classifier.extract("-n"), (classifier.options["name"], None))

    def testLiteralNameWinsOverNegation(self):
        classifier = self.classifier()
        option, argument = classifier.extract("--no-cache")
        self.assertEqual(option.key, "no-cache")
        self.assertFalse(option.forced)

    def testNegationForcesFalse(self):
        classifier = self.classifier()
        option, argument = classifier.extract("--no-color")
        self.assertIs(option.value, False)
        self.assertTrue(option.forced)

    def testAssignment(self):
        classifier = self.classifier()
        self.assertEqual(classifier.extract("--name=Ada"), (classifier.options["name"], "Ada"))

    def testSwitchCluster(self):
        classifier = self.classifier()
        self.assertEqual(classifier.extract("-ab"), (None, None))
        self.assertEqual(classifier.options["all"].count, 1)
        self.assertIs(classifier.options["brief"].value, True)

    def testSwitchClusterRejectsArgumentOption(self):
        with self.assertRaises(MissingArgumentError) as context:
            self.classifier().extract("-an")
        self.assertEqual(str(context.exception), "'-n' expects an argument, used in multiple_switch context")

    def testSwitchClusterUnknownStrict(self):
        with self.assertRaises(InvalidOptionError):
            self.classifier(strict=True).extract("-az")

    def testSwitchClusterUnknownIgnored(self):
        classifier = self.classifier()
        classifier.extract("-az")
        self.assertEqual(classifier.options["all"].count, 1)

    def testShortWithInlineArgument(self):
        classifier = self.classifier(multiple_switches=False)
        self.assertEqual(classifier.extract("-nAda"), (classifier.options["name"], "Ada"))

    def testIgnoreCase(self):
        classifier = self.classifier(ignore_case=True)
        self.assertIs(classifier.extract("--ALL")[0], classifier.options["all"])
        self.assertIsNone(self.classifier().extract("--ALL")[0])

    def testExtraDashesResolveToNothing(self):
        classifier = self.classifier()
        self.assertEqual(classifier.extract("---all"), (None, None))
        self.assertEqual(classifier.options["all"].count, 0)

    def testValueResolvesToNothing(self):
        self.assertEqual(self.classifier().extract("all"), (None, None))


if __name__ == "__main__":
    unittest.main()
