"""
Parser-level configuration.

Settings enumerates every recognized configuration key with its default;
unknown keys are refused at construction (TypeError), so a misspelled
'multiple_switch=False' cannot be silently ignored.

Settings are immutable. Nested commands derive theirs from the parent through
copy.replace(settings, **overrides), which is how a command inherits 'strict'
or 'ignore_case' from the parser it was declared on.

Keys
- help (False): register -h/--help, printing the help text on match.
- strict (False): unknown options raise InvalidOptionError.
- multiple_switches (True): '-abc' is the three switches a, b and c;
  otherwise '-abc' is the option a with the argument 'bc'.
- banner (None): first line of the help text.
- on_empty (None): called with the parser when there is nothing to parse.
- io (Console(stderr=True)): rich Console, or a file-like object wrapped into
  one, receiving help and ambiguity notices.
- exit_on_help (True): exit the process after printing help.
- ignore_case (False): retry failed lookups with the lowercased flag.
- on_noopts (None): called with the parser when no token looks like an option.
- autocreate (False): register unknown flags on the fly.
- arguments (False): every registered option expects an argument.
- aliases (()): extra names a command answers to.
- completion (True): unambiguous command prefixes select the command.
"""
from rich.console import Console

from .utils import *


class Settings:
    """
    Immutable, explicit parser configuration (see module docstring).
    """

    __introspectable__ = (
        "help",
        "strict",
        "multiple_switches",
        "banner",
        "on_empty",
        "io",
        "exit_on_help",
        "ignore_case",
        "on_noopts",
        "autocreate",
        "arguments",
        "aliases",
        "completion",
    )

    __slots__ = tuple("_" + name for name in __introspectable__) + ("_frozen",)

    def __init__(
            self,
            *,
            help=False,
            strict=False,
            multiple_switches=True,
            banner=None,
            on_empty=None,
            io=Unset,
            exit_on_help=True,
            ignore_case=False,
            on_noopts=None,
            on_optionless=None,
            autocreate=False,
            arguments=False,
            aliases=(),
            completion=True,
    ):
        if banner is not None and not isinstance(banner, str):
            raise TypeError("settings 'banner' must be a string")
        for name, hook in (("on_empty", on_empty), ("on_noopts", on_noopts), ("on_optionless", on_optionless)):
            if hook is not None and not callable(hook):
                raise TypeError(f"settings {name!r} must be callable")
        if isinstance(aliases, str):
            aliases = (aliases,)
        aliases = tuple(aliases)
        if not all(isinstance(alias, str) and alias for alias in aliases):
            raise TypeError("settings 'aliases' must be non-empty strings")

        if io is Unset:
            io = Console(stderr=True)
        elif not isinstance(io, Console):
            if not callable(getattr(io, "write", None)):
                raise TypeError("settings 'io' must be a rich console or a writable stream")
            io = Console(file=io, soft_wrap=True, highlight=False)

        object.__setattr__(self, "_frozen", False)
        self._help = bool(help)
        self._strict = bool(strict)
        self._multiple_switches = bool(multiple_switches)
        self._banner = banner
        self._on_empty = on_empty
        self._io = io
        self._exit_on_help = bool(exit_on_help)
        self._ignore_case = bool(ignore_case)
        self._on_noopts = on_noopts or on_optionless
        self._autocreate = bool(autocreate)
        self._arguments = bool(arguments)
        self._aliases = aliases
        self._completion = bool(completion)
        self._frozen = True

    def __setattr__(self, name, value, /):
        if getattr(self, "_frozen", False):
            raise AttributeError("settings are read-only; use copy.replace() to derive new ones")
        object.__setattr__(self, name, value)

    def __replace__(self, /, **overrides):
        return type(self)(**{name: getattr(self, "_" + name) for name in self.__introspectable__} | overrides)

    def __repr__(self):
        return "settings(%s)" % ", ".join(
            "%s=%r" % (name, getattr(self, "_" + name)) for name in self.__introspectable__
        )

    def __rich_repr__(self):
        for name in self.__introspectable__:
            yield name, getattr(self, "_" + name)


# Public read-only accessors for every key.
for _name in Settings.__introspectable__:
    setattr(Settings, _name, mirror(_name))
del _name


__all__ = (
    "Settings",
)
