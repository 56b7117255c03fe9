"""
Argot parser: registration, scanning, routing, and queries.

What this module provides
- Parser: holds the option registry, nested commands and settings, and scans
  token lists into option values.
- parse(...): convenience builder that configures a parser and scans once.

Quick start
    from argot import Parser

    def setup(parser):
        parser.on("v", "verbose", "Enable verbose mode")
        parser.on("n", "name", "Your name", True)
        parser.on("t", "--tags LIST", "Labels", kind=list)

    parser = Parser("Usage: greet [options]", setup=setup, help=True)
    parser.parse(["-v", "--name=Ada", "--tags", "a,b", "rest"], print)  # prints 'rest'
    parser["name"], parser.present("verbose"), parser["tags"]
    # ('Ada', True, ['a', 'b'])

Scanning (see Parser.parse)
- one left-to-right pass; '--' ends option processing;
- options match by short or long flag, '-abc' clusters, '--name=value' and
  '--no-name' negation;
- arguments come inline or from the next token; patterns, strict mode and
  required options are validated; callbacks run on match;
- a leading command name hands the rest of the tokens to the nested parser.

State accumulates: scanning twice with the same parser adds to the counts and
array values of the first scan.
"""
import copy
import re
import shlex
import sys

from rich.text import Text

from .commands import Commands
from .faults import *
from .helps import render
from .options import Kind, Option
from .registry import Options
from .settings import Settings
from .tokens import Classifier, TokenKind, classify
from .utils import *

# 'name ARG' or '--name [ARG]': long flag followed by an argument label.
_LABELLED = re.compile(r"\A(?:--?)?[a-z_-]+\s[A-Z\s\[\]]+\Z")
_LONG = re.compile(r"\A(?:--?)?[a-zA-Z][a-zA-Z0-9_-]+\Z")


class Parser:
    """
    Command-line parser.

    Parameters
    - banner: optional first line of the help text (positional-only).
    - setup: optional callable receiving the parser before the built-in help
      option is registered; the place to declare options and commands.
    - settings: a Settings instance to start from (defaults to Settings()).
    - **overrides: any Settings key (help, strict, multiple_switches, ...);
      unknown keys raise TypeError.
    """

    def __init__(self, banner=Unset, /, *, setup=None, settings=Unset, **overrides):
        if banner is not Unset:
            overrides["banner"] = banner
        settings = coalesce(settings, Settings())
        if not isinstance(settings, Settings):
            raise TypeError("parser 'settings' must be a Settings instance")
        self.settings = copy.replace(settings, **overrides) if overrides else settings

        self.options = Options()
        self.commands = Commands(self)
        self.classifier = Classifier(self.options, self.settings)

        self._banner = self.settings.banner
        self._summary = None
        self._description = None
        self._executor = None

        if setup is not None:
            setup(self)

        if self.settings.help:
            self.on("h", "help", "Print this help message", tail=True, callback=self._print_help)

    # --- help and descriptive text ---

    @property
    def banner(self):
        return self._banner

    @banner.setter
    def banner(self, text):
        self._banner = text

    @property
    def summary(self):
        return self._summary

    @summary.setter
    def summary(self, text):
        self._summary = text

    @property
    def description(self):
        return self._description

    @description.setter
    def description(self, text):
        self._description = text

    def help(self):
        """return the help text (banner, summary, description, options)."""
        return render(self)

    def _print_help(self):
        self.settings.io.print(self.help(), markup=False, highlight=False)
        if self.settings.exit_on_help:
            sys.exit(0)

    # --- registration ---

    def on(self, *args, callback=None, **config):
        """
        declare an option and return it.

        positional declaration (each part optional, in this order)
        - a kind, anywhere: a Kind member or one of the builtin types
          list/range/float/str/int (kind names go through the 'kind' keyword).
        - short flag: a one-character string, dashes allowed ('v', '-v').
        - long flag: 'verbose', '--verbose', or with an argument label
          '--name NAME' (argument required) / '--name [NAME]' (optional).
        - description: a string.
        - argument: a bool, whether the option expects an argument.

        keyword configuration
        - optional, argument, default, callback, delimiter, limit, tail,
          match, unless, help, required, kind (or as_).

            >>> parser.on("n", "--name NAME", "Your name", required=True)

        raises
        - TypeError: unrecognized configuration keys or leftover positionals.
        """
        short, long, description, argument, extras = self._clean(args)

        if "as_" in config:
            config["kind"] = config.pop("as_")
        for name, value in extras.items():
            config.setdefault(name, value)
        argument = argument or bool(config.pop("argument", False))

        option = Option(short, long, description, argument, callback=callback, **config)
        self.options.append(option)
        return option

    option = on
    opt = on

    def _clean(self, args):
        """
        split positional declaration parts into (short, long, description, argument, extras).
        """
        args = list(args)
        extras = {}

        for index, arg in enumerate(args):
            if isinstance(arg, Kind) or (isinstance(arg, type) and arg is not bool):
                extras["kind"] = args.pop(index)
                break

        short = None
        if args and isinstance(args[0], str) and len(strip_dashes(args[0])) == 1:
            short = strip_dashes(args.pop(0))

        long = None
        if args and isinstance(args[0], str):
            if _LABELLED.match(args[0]):
                name, label = args.pop(0).split(" ", 1)
                long = strip_dashes(name)
                extras["optional"] = label[:1] == "[" and label[-1:] == "]"
                extras["help"] = label
            elif _LONG.match(args[0]):
                long = strip_dashes(args.pop(0))

        description = None
        if args and isinstance(args[0], str):
            description = args.pop(0)

        argument = False
        if args and isinstance(args[0], bool):
            argument = args.pop(0)

        if args:
            raise TypeError("unexpected option declaration parts: %s" % ", ".join(map(repr, args)))

        return short, long, description, self.settings.arguments or argument, extras

    def command(self, label, /, *, setup=None, **overrides):
        """
        declare a nested command parser and return it.

        the command inherits this parser's settings, with overrides applied;
        'aliases' (or 'alias') are extra labels for the same command.

        raises
        - DuplicateCommandError: label is already registered.
        """
        label = str(label)
        if "alias" in overrides:
            overrides.setdefault("aliases", overrides.pop("alias"))
        overrides.setdefault("aliases", ())
        parser = Parser(setup=setup, settings=copy.replace(self.settings, **overrides))
        return self.commands.register(label, parser)

    def execute(self, callback, /):
        """
        register the callback run when this parser is selected as a command.

        the callback receives (parser, remaining_tokens). returns the callback,
        so this can be used as a decorator.
        """
        if not callable(callback):
            raise TypeError("execute() argument must be callable")
        self._executor = callback
        return callback

    def invoke(self, items=(), /):
        """run the execution callback, if any, with items."""
        if self._executor is not None:
            return self._executor(self, list(items))
        return None

    def on_empty(self, callback, /):
        """
        set the callback run (with the parser) when there is nothing to parse.

        the first callback set wins; later calls leave it in place.
        """
        if self.settings.on_empty is None:
            self.settings = copy.replace(self.settings, on_empty=callback)
            self.classifier.settings = self.settings
        return callback

    def on_noopts(self, callback, /):
        """
        set the callback run (with the parser) when no token looks like an option.

        the first callback set wins; later calls leave it in place.
        """
        if self.settings.on_noopts is None:
            self.settings = copy.replace(self.settings, on_noopts=callback)
            self.classifier.settings = self.settings
        return callback

    on_optionless = on_noopts

    # --- scanning ---

    def parse(self, items=Unset, handler=None, /, *, delete=False):
        """
        scan items and update option state; return items.

        parameters
        - items: list of tokens, a shell-like string (split with shlex), or
          Unset for sys.argv[1:].
        - handler: called with every token that is not an option nor an
          option argument (before '--').
        - delete: remove parsed options and their arguments from items, in place.

        raises
        - MissingArgumentError, InvalidArgumentError, InvalidOptionError,
          MissingOptionError (see argot.faults).
        """
        argv = items is Unset
        if argv:
            items = sys.argv[1:]
        elif isinstance(items, str):
            items = shlex.split(items)
        elif not isinstance(items, list):
            if delete:
                raise TypeError("parse() items must be a list when delete is set")
            items = list(items)

        self._scan(items, handler, delete)
        if argv and delete:
            sys.argv[1:] = items
        return items

    def consume(self, items=Unset, handler=None, /):
        """parse items, removing parsed options and their arguments in place."""
        return self.parse(items, handler, delete=True)

    def _scan(self, items, handler, delete):
        if not items and self.settings.on_empty is not None:
            self.settings.on_empty(self)
            return
        if not any(map(is_dashed, items)) and self.settings.on_noopts is not None:
            self.settings.on_noopts(self)
            return
        if self.commands.dispatch(items, delete):
            return

        snapshot = list(items)
        invalid = []
        trash = set()
        ignore_all = False

        for index, item in enumerate(snapshot):
            item = str(item)
            flag = strip_dashes(item)

            if item == "--":
                trash.add(index)
                ignore_all = True
            if ignore_all:
                continue

            if self.settings.autocreate:
                self._autocreate(item, index, snapshot)

            option, argument = self.classifier.extract(item, flag)

            if option is None and self.settings.multiple_switches and classify(item).kind is TokenKind.CLUSTER:
                trash.add(index)
                continue

            if option is None:
                if is_dashed(item) and self.settings.strict:
                    invalid.append(flag)
                elif handler is not None and index not in trash:
                    handler(item)
                continue

            if not item.startswith("--no-"):
                option.count += 1
            trash.add(index)
            if option.forced:
                continue
            option.value = True

            if not (option.expects_argument or option.accepts_optional_argument):
                if not option.omits(snapshot):
                    option()
                continue

            if argument is None and index + 1 < len(snapshot):
                candidate = str(snapshot[index + 1])
                if candidate != "--" and not (option.accepts_optional_argument and is_flag_like(candidate)):
                    argument = candidate
                    trash.add(index + 1)

            if argument is not None and not option.accepts_optional_argument and is_flag_like(argument):
                trigger(MissingArgumentError(
                    "'%s' expects an argument, none given" % option.key,
                    hint="pass a value after '%s'" % item,
                    flag=option.key,
                    argument=argument,
                ))

            if argument is None:
                option.value = None
                self._check_optional_argument(option, flag)
                continue

            if option.match is not None and not option.match.search(argument):
                trigger(InvalidArgumentError(
                    "'%s' does not match /%s/" % (argument, option.match.pattern),
                    hint="pass a value matching /%s/ to '%s'" % (option.match.pattern, option.key),
                    flag=option.key,
                    argument=argument,
                ))

            option.value = argument
            if not option.omits(snapshot):
                option(option.value)

        if delete:
            items[:] = [item for index, item in enumerate(snapshot) if index not in trash]

        self._raise_if_invalid_options(invalid)
        self._raise_if_missing_required_options(snapshot)

    def _check_optional_argument(self, option, flag):
        if option.accepts_optional_argument:
            option()
        else:
            trigger(MissingArgumentError(
                "'%s' expects an argument, none given" % flag,
                hint="pass a value after '%s'" % flag,
                flag=flag,
            ))

    def _raise_if_invalid_options(self, invalid):
        if not self.settings.strict or not invalid:
            return
        message = "Unknown option%s -- %s" % ("s" if len(invalid) > 1 else "", ", ".join("'%s'" % flag for flag in invalid))
        trigger(InvalidOptionError(
            message,
            hint="remove the unknown options or declare them",
            flags=tuple(invalid),
        ))

    def _raise_if_missing_required_options(self, items):
        given = set()
        for item in items:
            if is_dashed(item):
                given.add(strip_dashes(item))
                if (token := classify(item)).kind is TokenKind.ASSIGNMENT:
                    given.add(token.flag)
        for option in self.options.required:
            if given.isdisjoint(option.flags):
                trigger(MissingOptionError(
                    "Expected option `%s` is required" % option.key,
                    hint="add '%s%s' to the command line" % ("--" if option.long else "-", option.key),
                    flag=option.key,
                ))

    def _autocreate(self, item, index, items):
        """
        register an option for an unknown dashed token.

        the option takes an argument when the next token exists and is not dashed
        (or when the token carries one, '--name=value').
        """
        if not is_dashed(item) or item == "--":
            return
        token = classify(item)
        flag = token.flag if token.kind is TokenKind.ASSIGNMENT else strip_dashes(item)
        if not flag or is_dashed(flag):
            return
        if self.options.lookup(flag) is not None:
            return
        if token.kind is TokenKind.ASSIGNMENT:
            argument = True
        else:
            argument = index + 1 < len(items) and not is_dashed(str(items[index + 1]))

        if len(flag) == 1:
            short, long = flag, None
        elif _LONG.match(flag):
            short, long = None, flag
        else:
            return
        # created with count 0, the scan that met the token counts it to 1
        self.options.append(Option(short, long, None, argument))

    # --- queries ---

    def __getitem__(self, key):
        """the value of the option answering to key, else the command named key."""
        if (option := self.options[key]) is not None:
            return option.value
        return self.commands.get(str(key))

    def get(self, key, default=None):
        if (option := self.options[key]) is not None:
            return option.value
        return self.commands.get(str(key), default)

    def present(self, key):
        """tell whether the option answering to key matched at least once."""
        option = self.options[key]
        return option is not None and option.count > 0

    def __contains__(self, key):
        return self.present(key)

    @property
    def presence(self):
        """mapping of every option key to whether it matched."""
        return {option.key: option.count > 0 for option in self.options}

    def to_dict(self, *, identifiers=False):
        """
        return {key: value} for every option.

        with identifiers=True, keys are turned into Python identifiers
        ('dry-run' → 'dry_run').
        """
        if identifiers:
            return {option.key.replace("-", "_"): option.value for option in self.options}
        return {option.key: option.value for option in self.options}

    def __iter__(self):
        return iter(self.options)

    def __len__(self):
        return len(self.options)

    def __str__(self):
        return self.help()

    def __rich__(self):
        return Text(self.help())

    def __repr__(self):
        return "parser(settings=%r, options=[%s])" % (self.settings, ", ".join(map(repr, self.options)))


def parse(items=Unset, setup=None, /, *, delete=False, **settings):
    """
    build a Parser (settings as keywords), run setup on it, scan items, and
    return the parser.

        >>> opts = parse(["-v"], lambda p: p.on("v", "verbose"))
        >>> opts.present("verbose")
        True
    """
    parser = Parser(setup=setup, **settings)
    parser.parse(items, delete=delete)
    return parser


__all__ = (
    "Parser",
    "parse",
)
