"""
Argot faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing issue.
  Codes are grouped by domain to keep copy consistent and make logs/searches
  predictable.
- ParseError and its subclasses: raised while scanning a token list. They carry
  a message plus read-only options (code, title, hint and the offending flag or
  argument) and know how to render themselves through rich.
- DuplicateCommandError: a registration-time usage error (also a ValueError).
- ParseWarning / DuplicateFlagWarning: soft issues surfaced through warnings.warn.
- trigger(): central entry point to surface any fault with extra context.
- getdoc(): optional description lookup for a code from the host application.

Behavior
- The library never prints on error paths: errors are raised to the caller and
  warnings are emitted through the warnings machinery. Printing a fault is the
  caller's decision (console.print(error) renders it).

Integration
- Host programs may remap codes through a __codes__ mapping and override
  colors through a __styles__ mapping, both looked up on __main__.
"""
import copy
import warnings
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, UnsetType, coalesce


class FaultCode(IntEnum):
    """
    canonical fault codes used across the parser (stable identifiers).

    grouping (by high-level domain)
    - routing (2110x)
      • DUPLICATE_COMMAND
    - options (2111x)
      • MISSING_ARGUMENT, MISSING_OPTION, INVALID_ARGUMENT, INVALID_OPTION
    - warnings (2210x)
      • DUPLICATE_FLAG

    rationale
    - codes are discoverable (searchable in logs and docs) and normalized to a
      string via normalize() so hosts can remap them if desired.
    """
    # --- routing errors ---
    DUPLICATE_COMMAND = 21101

    # --- option errors ---
    MISSING_ARGUMENT  = 21111
    MISSING_OPTION    = 21112
    INVALID_ARGUMENT  = 21113
    INVALID_OPTION    = 21114

    # --- warnings ---
    DUPLICATE_FLAG    = 22101

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _render(fault, title_style, styles, /):
    """
    shared rich renderer for errors and warnings.

    the header reads "[ code | title ]", followed by the message and, when one
    was given, a hint line. with fancy=True the body is framed in a panel.
    """
    styles = defaultdict(str, styles | getattr(__import__("__main__"), "__styles__", {}))
    colorful = fault.options.get("colorful", True)

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if isinstance(fragment, Text):
            return fragment
        return Text(str(fragment), styles[style] if colorful else "")

    header = Text.assemble(
        "[ ",
        text(fault.code.normalize(), "code"),
        " | ",
        text(fault.title.title(), title_style),
        " ]"
    )
    body = [text(fault.message, "message")]
    if hint := fault.options.get("hint"):
        body.append(Text.assemble(text(" → ", "hint-arrow"), text(hint, "hint")))

    if fault.options.get("fancy", False):
        return Panel(Group(*body), title=header, title_align="left")
    return Group(header, *body)


class ParseError(Exception):
    """
    base class for every failure raised while scanning tokens.

    parameters
    - message: str, the one-line description (also the str() of the error).
    - options: keyword context kept in a read-only mapping. recognized keys are
      code (FaultCode), title (str), hint (str) and fancy/colorful (rendering);
      anything else (flag, argument, flags, ...) is free-form context.
    """
    code = FaultCode.INVALID_OPTION
    title = "parse error"

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | UnsetType)
        self.message = coalesce(message, "")
        self.options = MappingProxyType(options)
        if "code" in options:
            self.code = options["code"]
        if "title" in options:
            self.title = options["title"]
        super().__init__(self.message)

    def __getattr__(self, name):
        try:
            return self.__dict__["options"][name]
        except KeyError:
            raise AttributeError(name) from None

    def __rich__(self):
        return _render(self, "error-title", {
            "code": "bold #00E5FF",
            "error-title": "bold #FF4DA6",
            "message": "#C8C8D0",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        })

    def __trigger__(self):
        raise self from None

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class MissingArgumentError(ParseError):
    """an option expects an argument and none was given."""
    code = FaultCode.MISSING_ARGUMENT
    title = "missing argument"


class MissingOptionError(ParseError):
    """a required option never appeared in the tokens."""
    code = FaultCode.MISSING_OPTION
    title = "missing option"


class InvalidArgumentError(ParseError):
    """an argument does not match the option's pattern."""
    code = FaultCode.INVALID_ARGUMENT
    title = "invalid argument"


class InvalidOptionError(ParseError):
    """strict mode met one or more unknown options."""
    code = FaultCode.INVALID_OPTION
    title = "unknown option"


class DuplicateCommandError(ParseError, ValueError):
    """a command label was registered twice on the same parser."""
    code = FaultCode.DUPLICATE_COMMAND
    title = "duplicate command"


class ParseWarning(UserWarning):
    """
    base class for soft issues; same message/options/rendering contract as errors.
    """
    code = FaultCode.DUPLICATE_FLAG
    title = "warning"

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | UnsetType)
        self.message = coalesce(message, "")
        self.options = MappingProxyType(options)
        super().__init__(self.message)

    def __rich__(self):
        return _render(self, "warning-title", {
            "code": "bold #FFB400",
            "warning-title": "bold #FFC2E0",
            "message": "#D6D6DE",
            "hint-arrow": "#B8EFAF dim",
            "hint": "italic #B8EFAF",
        })

    def __trigger__(self):
        warnings.warn(self, stacklevel=4)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class DuplicateFlagWarning(ParseWarning):
    """a flag was registered while another option already answers to it."""
    code = FaultCode.DUPLICATE_FLAG
    title = "duplicate flag"


def trigger(fault, /, **options):
    """
    surface a fault with the given context options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via copy.replace before triggering.
    - errors are raised, warnings are emitted through warnings.warn.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    returns None when nothing is registered.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    return getattr(__import__("__main__"), "__docs__", {}).get(code)


__all__ = (
    "FaultCode",
    "ParseError",
    "MissingArgumentError",
    "MissingOptionError",
    "InvalidArgumentError",
    "InvalidOptionError",
    "DuplicateCommandError",
    "ParseWarning",
    "DuplicateFlagWarning",
    "trigger",
    "getdoc",
)
