"""
Argot utilities.

Small pieces shared by the options, tokens and parser layers:

- Unset: "no value given" marker, distinct from None (a legitimate default).
- coalesce(value, default): resolve Unset to a default, keep everything else.
- rename(name): give generated functions a readable __name__/__qualname__.
- mirror(name): read-only property over the private field self._name.
- strip_dashes / is_dashed / is_flag_like: the flag-text grammar. One or two
  leading dashes are cosmetic; the bare text is what options answer to.

    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> strip_dashes("--verbose")
    'verbose'
    >>> is_flag_like("--name"), is_flag_like("-1")
    (True, False)
"""
import builtins
import functools
import re
from collections.abc import Mapping, Sequence, Set
from typing import final

# One or two leading dashes.
DASHED = re.compile(r"\A--?")

# Exactly a flag: dashes, then a name starting with a letter. '-5' is not one.
FLAG_LIKE = re.compile(r"\A--?[a-zA-Z][a-zA-Z0-9_-]*\Z")


@final
class UnsetType:
    """
    Type of the Unset marker.

    Unset stands for an omitted parameter where None is a meaningful value
    (an option default, a banner). It is falsy, prints as "Unset", has a single
    instance and cannot be subclassed.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()


def coalesce(object, default=None, /):
    """
    return default when object is Unset, object otherwise (None, 0 and "" included).
    """
    return default if object is Unset else object


def rename(*parameters):
    """
    set __name__ and __qualname__ of a function.

    rename(function, name) renames in place and returns the function;
    rename(name) returns a decorator doing the same.
    """
    match parameters:
        case (str() as name,):
            def decorator(function):
                return rename(function, name)
            return decorator
        case (function, str() as name) if builtins.callable(function):
            try:
                function.__name__ = function.__qualname__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() cannot update %r" % function) from None
            return function
        case _:
            raise TypeError("rename() expects (name) or (callable, name)")


def _detach(value):
    # containers are copied (recursively) so a property read cannot alter the field
    if isinstance(value, Sequence) and not isinstance(value, str | range):
        return [_detach(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _detach(item) for key, item in value.items()}
    if isinstance(value, Set):
        return {_detach(item) for item in value}
    return value


def mirror(name, /):
    """
    read-only property returning (a copy of) self._<name>.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _detach(getattr(self, "_" + name))

    return property(getter)


def strip_dashes(text, /):
    """
    '--name' → 'name', '-n' → 'n'. non-strings are stringified first.
    """
    return DASHED.sub("", str(text), count=1)


def is_dashed(text, /):
    """tell whether a token starts with a dash ('-', '--x' and '-5' all do)."""
    return isinstance(text, str) and DASHED.match(text) is not None


def is_flag_like(text, /):
    """
    tell whether a token is shaped exactly like a flag ('-v', '--dry-run').

    negative numbers and free text do not qualify, so '-5' can still be
    consumed as an argument.
    """
    return isinstance(text, str) and FLAG_LIKE.match(text) is not None


__all__ = (
    "UnsetType",
    "Unset",
    "coalesce",
    "rename",
    "mirror",
    "strip_dashes",
    "is_dashed",
    "is_flag_like",
)
