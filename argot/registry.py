"""
Ordered option registry.

Options are kept in declaration order (help output follows it) and looked up
by either of their flags. A mapping cannot do both: one option answers to two
labels, and uniqueness is not enforced, so lookups scan and return the first
option that answers to the flag.
"""
from .faults import DuplicateFlagWarning, FaultCode, trigger
from .options import Option
from .utils import strip_dashes


class Options(list):
    """
    A list of Option objects indexable by flag.

        >>> options = Options([Option("v", "verbose")])
        >>> options["verbose"] is options["v"] is options[0]
        True
        >>> options["missing"] is None
        True

    Integers and slices index the list as usual; any other key is compared
    (dash-stripped, as a string) against the short and long flag of every option.
    """

    def __getitem__(self, key):
        if isinstance(key, int | slice):
            return super().__getitem__(key)
        return self.find(key)

    def find(self, flag, /):
        """
        return the first option answering to flag, or None.
        """
        return self.lookup(strip_dashes(flag))

    def lookup(self, flag, /):
        """
        return the first option answering to the bare flag as given, or None.

        no dashes are stripped: the scan passes flags it already stripped once,
        so '---verbose' is looked up as '-verbose' and stays unknown.
        """
        for option in self:
            if flag in option.flags:
                return option
        return None

    def __contains__(self, key):
        if isinstance(key, Option):
            return super().__contains__(key)
        return self.find(key) is not None

    def append(self, option, /):
        """
        register an option; flags already known emit a DuplicateFlagWarning.
        """
        if not isinstance(option, Option):
            raise TypeError("only options can be registered")
        for flag in option.flags:
            if (known := self.find(flag)) is not None:
                trigger(DuplicateFlagWarning(
                    "flag %r is already registered by %r" % (flag, known.key),
                    code=FaultCode.DUPLICATE_FLAG,
                    hint="lookups keep returning the first option registered for %r" % flag,
                    flag=flag,
                ))
        super().append(option)

    @property
    def heads(self):
        """options rendered first in help (non-tail)."""
        return [option for option in self if not option.tail]

    @property
    def tails(self):
        """options rendered last in help (tail)."""
        return [option for option in self if option.tail]

    @property
    def required(self):
        return [option for option in self if option.required]


__all__ = (
    "Options",
)
