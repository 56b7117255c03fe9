"""
Command routing: nested parsers selected by the leading token.

A command is a full Parser registered under a label (and any aliases) on its
parent. When the first token names a command, the parent stops there: the
token is removed, the nested parser scans what remains, and the nested
parser's execution callback runs with the leftover tokens.

Selection
- exact label or alias match first;
- with completion enabled, an unambiguous prefix selects its command
  ('pus' → 'push'); an ambiguous one ('pu' → 'pull', 'push') selects nothing
  and prints a notice on the parent's console:

      Command 'pu' is ambiguous:
        pull, push
"""
from .faults import DuplicateCommandError, FaultCode, trigger


class Commands(dict):
    """
    label → nested parser mapping; aliases are extra keys for the same parser.

    parameters
    - owner: the Parser the commands belong to (its settings and console are
      used for completion and notices).
    """

    def __init__(self, owner, /):
        super().__init__()
        self.owner = owner

    def register(self, label, parser, /):
        """
        register parser under label and under every alias of its settings.

        raises
        - DuplicateCommandError: label is already registered.
        """
        if label in self:
            trigger(DuplicateCommandError(
                "command `%s` already exists" % label,
                code=FaultCode.DUPLICATE_COMMAND,
                hint="register each command label once, or use aliases",
                label=label,
            ))
        self[label] = parser
        for alias in parser.settings.aliases:
            self[alias] = parser
        return parser

    def select(self, token, /):
        """
        return the label selected by token, or None.
        """
        if not isinstance(token, str) or not token:
            return None
        if token in self:
            return token
        if not self.owner.settings.completion:
            return None

        candidates = [label for label in self if label[:len(token)] == token]
        if len(candidates) > 1:
            console = self.owner.settings.io
            console.print("Command '%s' is ambiguous:" % token, markup=False, highlight=False)
            console.print("  " + ", ".join(sorted(candidates)), markup=False, highlight=False)
            return None
        return candidates[0] if candidates else None

    def dispatch(self, items, delete=False, /):
        """
        run the command named by the first item, if any; return whether one ran.

        the leading item is removed from items; the nested parser then parses the
        rest (deleting what it consumes when delete is set) and is executed with
        the remaining items, '--' markers excluded.
        """
        if not items:
            return False
        if (label := self.select(items[0])) is None:
            return False

        del items[0]
        parser = self[label]
        parser.parse(items, delete=delete)
        parser.invoke([item for item in items if item != "--"])
        return True


__all__ = (
    "Commands",
)
