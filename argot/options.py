r"""
Argot option declarations.

Overview
- Kind: the closed set of argument casts an option can apply to its value
  (raw, array, range, float, string, symbol, integer).
- Option: one declared flag (short and/or long), its declaration metadata,
  and its per-parse state (match count, raw value, forced marker).

Value lifecycle
- The parser first stores True as a placeholder when an option matches, then
  replaces it with the argument string when one is consumed.
- Array options accumulate: every string stored is split on the delimiter and
  appended, so '--tags a,b --tags c' reads back as ['a', 'b', 'c'].
- Reading .value casts the stored value according to .kind, falling back to
  the declared default when nothing (or False) was stored.
- force(value) pins the raw value (used by '--no-name' negation); a forced
  value is returned verbatim, without default fallback or casting.

State is never reset between parses: counts and values accumulate when the
same option is matched by several scans.

Metadata (sanitized on construction)
- short: single character (dash-stripped) or None.
- long: string (dash-stripped) or None. At least one of short/long is required.
- description: str or None.
- argument / optional: argument requirement. optional is tri-state; an
  explicit optional=False also makes the option expect an argument.
- kind: Kind, a Kind name ("array", "int", ...) or one of the builtin types
  list, range, float, str, int.
- delimiter / limit: array splitting rules (limit <= 0 means unbounded).
- match: regular expression (str or compiled) arguments must satisfy.
- unless: flag whose presence in the tokens suppresses the callback.
- tail / help: help placement and visibility (help may be a str label).
- required: the option must appear among the parsed tokens.
- default / callback: fallback value and the one-argument callable run on match.
"""
import functools
import inspect
import operator
import re
import sys
from enum import Enum

from .utils import *


class Kind(Enum):
    """
    argument cast applied when reading an option value.

    lookup accepts the canonical names plus the short aliases used on the
    command line ("str", "sym", "int"):

        >>> Kind("int") is Kind.INTEGER
        True
    """
    RAW = "raw"
    ARRAY = "array"
    RANGE = "range"
    FLOAT = "float"
    STRING = "string"
    SYMBOL = "symbol"
    INTEGER = "integer"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            value = value.strip().lower()
            value = {"str": "string", "sym": "symbol", "int": "integer", "": "raw"}.get(value, value)
            for member in cls:
                if member.value == value:
                    return member
        return None

    @classmethod
    def resolve(cls, object, /):
        """
        turn a kind-like object (Kind, name, builtin type, None) into a Kind.

        raises
        - ValueError: unknown kind name.
        - TypeError: unsupported object.
        """
        if object is None:
            return cls.RAW
        if isinstance(object, cls):
            return object
        if isinstance(object, str):
            return cls(object)
        if isinstance(object, type):
            try:
                return _TYPES[object]
            except KeyError:
                raise TypeError(f"kind type {object.__name__!r} is not supported") from None
        raise TypeError("kind must be a Kind, a kind name or a builtin type")


_TYPES = {
    list: Kind.ARRAY,
    range: Kind.RANGE,
    float: Kind.FLOAT,
    str: Kind.STRING,
    int: Kind.INTEGER,
}

# A..B, A-B and A,B are inclusive; A...B is exclusive.
_INCLUSIVE_RANGE = re.compile(r"\A(-?\d+?)(?:\.\.|-|,)(-?\d+)\Z")
_EXCLUSIVE_RANGE = re.compile(r"\A(-?\d+?)\.\.\.(-?\d+)\Z")
_INTEGER = re.compile(r"\A-?\d+\Z")

# Leading numeric prefixes, the lenient textual conversion of the casts.
_FLOAT_PREFIX = re.compile(r"\A\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_INTEGER_PREFIX = re.compile(r"\A\s*([+-]?\d+)")


def _stringify(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _to_range(value):
    text = _stringify(value)
    if match := _INCLUSIVE_RANGE.match(text):
        return range(int(match[1]), int(match[2]) + 1)
    if match := _EXCLUSIVE_RANGE.match(text):
        return range(int(match[1]), int(match[2]))
    if _INTEGER.match(text):
        return int(text)
    return value


def _to_float(value):
    match = _FLOAT_PREFIX.match(_stringify(value))
    return float(match[1]) if match else 0.0


def _to_integer(value):
    match = _INTEGER_PREFIX.match(_stringify(value))
    return int(match[1]) if match else 0


_CASTS = {
    Kind.RANGE: _to_range,
    Kind.FLOAT: _to_float,
    Kind.STRING: _stringify,
    Kind.SYMBOL: lambda value: sys.intern(_stringify(value)),
    Kind.INTEGER: _to_integer,
}


def _unary(callback):
    """
    tell whether a callback can receive the option value as a single argument.

    zero-argument callables are called without it; non-introspectable callables
    (some builtins) are assumed to accept it.
    """
    try:
        inspect.signature(callback).bind(None)
    except TypeError:
        return False
    except ValueError:
        return True
    return True


class OptionType(type):
    """
    Metaclass giving options a stable, introspectable shape.

    Responsibilities
    - Derive __typename__ from the class name (camel-case split with hyphens)
      for consistent labels in representations.
    - Expose every name listed in __introspectable__ as a read-only property
      mirroring the private backing field (self._name).
    - Provide __repr__/__rich_repr__ limited to __displayable__ when set.
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


class Option(metaclass=OptionType):
    """
    A single declared flag and its parse-time state.

    Options are usually created through Parser.on(...), which cleans the
    declaration syntax; constructing one directly takes the bare fields.

    Runtime attributes
    - count: times the option matched (accumulates across parses).
    - forced: True once force() pinned the raw value.
    - value: cast value (property, see module docstring).
    """

    __introspectable__ = (
        "short",
        "long",
        "description",
        "argument",
        "optional",
        "kind",
        "delimiter",
        "limit",
        "match",
        "tail",
        "help",
        "required",
        "unless",
        "default",
        "callback",
    )

    __displayable__ = (
        "short",
        "long",
        "argument",
        "description",
    )

    def __init__(
            self,
            short=None,
            long=None,
            description=None,
            argument=False,
            *,
            optional=Unset,
            kind=Kind.RAW,
            delimiter=",",
            limit=0,
            match=None,
            tail=False,
            help=True,
            required=False,
            unless=None,
            default=None,
            callback=None,
    ):
        short = strip_dashes(short) if short is not None else None
        long = strip_dashes(long) if long is not None else None
        if not short and not long:
            raise TypeError(f"{type(self).__typename__} must specify a short or a long flag")
        if short is not None and len(short) != 1:
            raise ValueError(f"{type(self).__typename__} short flag must be a single character")
        if description is not None and not isinstance(description, str):
            raise TypeError(f"{type(self).__typename__} 'description' must be a string")
        if not isinstance(delimiter, str) or not delimiter:
            raise TypeError(f"{type(self).__typename__} 'delimiter' must be a non-empty string")
        if not isinstance(limit, int):
            raise TypeError(f"{type(self).__typename__} 'limit' must be an integer")
        if not isinstance(help, bool | str):
            raise TypeError(f"{type(self).__typename__} 'help' must be a boolean or a string")
        if callback is not None and not callable(callback):
            raise TypeError(f"{type(self).__typename__} 'callback' must be callable")

        self._short = short or None
        self._long = long or None
        self._description = description
        self._argument = bool(argument)
        self._optional = coalesce(optional)
        self._kind = Kind.resolve(kind)
        self._delimiter = delimiter
        self._limit = limit
        self._match = re.compile(match) if isinstance(match, str) else match
        self._tail = bool(tail)
        self._help = help
        self._required = bool(required)
        self._unless = unless
        self._default = default
        self._callback = callback
        self._unary = callback is None or _unary(callback)

        self._value = None
        self.forced = False
        self.count = 0

    @property
    def key(self):
        """the long flag when present, the short flag otherwise."""
        return self._long or self._short

    @property
    def flags(self):
        """the bare flags this option answers to, short first."""
        return tuple(flag for flag in (self._short, self._long) if flag)

    @property
    def width(self):
        """columns taken by the long flag (and its help label) in help rows."""
        if not self._long:
            return 0
        if isinstance(self._help, str):
            return len(self._long) + len(self._help) + 1
        return len(self._long)

    @property
    def expects_argument(self):
        return self._argument or self._optional is False

    @property
    def accepts_optional_argument(self):
        return self._optional is True

    @property
    def value(self):
        """
        the stored value cast according to kind.

        forced values are returned as stored. otherwise the stored value falls
        back to the default when it is None or False; None is returned when both
        are missing.
        """
        if self.forced:
            return self._value
        value = self._value
        if value is None or value is False:
            value = self._default
        if value is None:
            return None
        if self._kind is Kind.ARRAY:
            return self._value
        if cast := _CASTS.get(self._kind):
            return cast(value)
        return value

    @value.setter
    def value(self, value):
        if self._kind is Kind.ARRAY:
            if self._value is None:
                self._value = []
            if isinstance(value, str):
                self._value.extend(self._split(value))
        else:
            self._value = value

    def _split(self, text):
        # limit > 0: at most that many pieces; 0: unbounded, trailing empties dropped;
        # negative: unbounded, trailing empties kept
        if self._limit > 0:
            return text.split(self._delimiter, self._limit - 1)
        pieces = text.split(self._delimiter)
        if self._limit == 0:
            while pieces and not pieces[-1]:
                pieces.pop()
        return pieces

    def force(self, value):
        """
        pin the raw value (e.g. False for '--no-name') and mark it forced.
        """
        self._value = value
        self.forced = True

    def omits(self, items):
        """
        tell whether the 'unless' flag appears (dash-insensitively) in items.

        options without an 'unless' flag never omit their callback.
        """
        if self._unless is None:
            return False
        flag = strip_dashes(self._unless)
        return any(strip_dashes(item) == flag for item in items)

    def __call__(self, value=None, /):
        """
        run the callback, if any, with the option value.

        zero-argument callbacks are called without the value.
        """
        if self._callback is None:
            return None
        if self._unary:
            return self._callback(value)
        return self._callback()

    def __str__(self):
        from .helps import describe
        return describe(self, self.width)


__all__ = (
    "Kind",
    "Option",
)
