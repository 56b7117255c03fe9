r"""
Token classification and option extraction.

Grammar (one raw token at a time)
- '--'             → DOUBLE_DASH  end of options, everything after is plain
- '-abc'           → CLUSTER      single dash: switch cluster or '-fVALUE'
- '--name=value'   → ASSIGNMENT   long flag with an attached argument
- '--no-name'      → NEGATION     forces the 'name' option to False
- '--name'         → LONG         plain long flag
- anything else    → VALUE        not an option ('-' alone is a value too)

Classification is purely textual; extraction (Classifier.extract) resolves
the text against the option registry and applies the precedence rules:

1. dashed tokens are first looked up verbatim (dash-stripped), so an option
   literally named 'no-cache' or 'a=b' wins over the derived forms;
2. only when that fails do clusters, assignments and negations apply.
"""
import re
from enum import Enum
from typing import NamedTuple

from .faults import *
from .utils import strip_dashes

_CLUSTER = re.compile(r"\A-[^-]")
_ASSIGNMENT = re.compile(r"\A--([^=]+)=(.+)\Z")
_NEGATION = re.compile(r"\A--no-(.+)\Z")
_LONG = re.compile(r"\A--.")


class TokenKind(Enum):
    DOUBLE_DASH = "double-dash"
    CLUSTER = "cluster"
    ASSIGNMENT = "assignment"
    NEGATION = "negation"
    LONG = "long"
    VALUE = "value"


class Token(NamedTuple):
    """
    classified token.

    - kind: TokenKind
    - flag: the bare flag text ('abc' for '-abc', 'name' for '--name=value' and
      '--no-name'); None for values.
    - argument: the attached argument of an assignment, None otherwise.
    """
    kind: TokenKind
    flag: str | None
    argument: str | None


def classify(token, /):
    """
    classify one raw token (see module docstring for the grammar).

        >>> classify("--size=3")
        Token(kind=<TokenKind.ASSIGNMENT: 'assignment'>, flag='size', argument='3')
    """
    token = str(token)
    if token == "--":
        return Token(TokenKind.DOUBLE_DASH, None, None)
    if _CLUSTER.match(token):
        return Token(TokenKind.CLUSTER, token[1:], None)
    if match := _ASSIGNMENT.match(token):
        return Token(TokenKind.ASSIGNMENT, match[1], match[2])
    if match := _NEGATION.match(token):
        return Token(TokenKind.NEGATION, match[1], None)
    if _LONG.match(token):
        return Token(TokenKind.LONG, token[2:], None)
    return Token(TokenKind.VALUE, None, None)


class Classifier:
    """
    resolve tokens against a registry, following a parser's settings.

    parameters
    - options: the Options registry to search.
    - settings: the Settings in effect (ignore_case, multiple_switches, strict).
    """

    def __init__(self, options, settings):
        self.options = options
        self.settings = settings

    def extract(self, item, flag=None):
        """
        return (option or None, inline argument or None) for a raw token.

        side effects
        - a switch cluster marks every member option (value True, count + 1);
          the cluster token itself resolves to (None, None).
        - a negation forces the negated option's value to False.

        raises
        - MissingArgumentError: a cluster member expects an argument.
        - InvalidOptionError: a cluster member is unknown (strict mode only).
        """
        item = str(item)
        if flag is None:
            flag = strip_dashes(item)
        option = argument = None

        if item.startswith("-"):
            option = self.options.lookup(flag)
            if option is None and self.settings.ignore_case:
                option = self.options.lookup(flag.lower())

        if option is None:
            token = classify(item)
            match token.kind:
                case TokenKind.CLUSTER if self.settings.multiple_switches:
                    self.switches(item)
                case TokenKind.CLUSTER:
                    flag, argument = flag[:1], flag[1:] or None
                    option = self.options.lookup(flag)
                case TokenKind.ASSIGNMENT:
                    option, argument = self.options.lookup(token.flag), token.argument
                case TokenKind.NEGATION:
                    if (option := self.options.lookup(token.flag)) is not None:
                        option.force(False)

        return option, argument

    def switches(self, item):
        """
        apply a switch cluster such as '-abc' to the options a, b and c.
        """
        for switch in item[1:]:
            if (option := self.options.lookup(switch)) is not None:
                if option.expects_argument:
                    trigger(MissingArgumentError(
                        "'-%s' expects an argument, used in multiple_switch context" % switch,
                        hint="pass '-%s' on its own followed by its argument" % switch,
                        flag=switch,
                    ))
                option.value = True
                option.count += 1
            elif self.settings.strict:
                trigger(InvalidOptionError(
                    "Unknown option '-%s'" % switch,
                    hint="remove '-%s' from %r" % (switch, item),
                    flags=(switch,),
                ))


__all__ = (
    "TokenKind",
    "Token",
    "classify",
    "Classifier",
)
