"""
Help text rendering.

The layout is a plain two-column listing, stable enough to be asserted on:

    Usage: deploy [options]

    options:

        -e, --env NAME      Target environment
            --dry-run       Do not change anything
        -h, --help          Print this help message

- banner, summary and the wrapped description come first, separated by blank lines;
- non-tail options are listed before tail options, in declaration order;
- options declared with help=False are not listed;
- a string 'help' (e.g. "NAME") is printed after the long flag and counts
  toward the column width.
"""
import textwrap


def describe(option, longest, /):
    """
    render one help row for option, aligning descriptions on longest + 6 columns.
    """
    row = "    "
    row += "-%s, " % option.short if option.short else " " * 4
    if option.long:
        row += "--%s" % option.long
        if isinstance(option.help, str):
            row += " %s" % option.help
        row += " " * (longest - option.width + 6)
    else:
        row += " " * (longest + 8)
    return row + (option.description or "")


def wrap_and_indent(text, width, indentation, /):
    """
    wrap every paragraph (line) of text below width columns and indent it.
    """
    lines = []
    for paragraph in text.splitlines():
        for line in textwrap.wrap(paragraph, width - 1) or [""]:
            lines.append(" " * indentation + line)
    return "\n".join(lines)


def render(parser, /):
    """
    render the full help text of a parser.
    """
    parts = []

    if parser.banner:
        parts.append(parser.banner)
    if parser.summary:
        parts.append(parser.summary)
    if parser.description:
        parts.append(wrap_and_indent(parser.description, 80, 4))

    if len(parser.options):
        parts.append("options:")
        listed = [option for option in parser.options.heads + parser.options.tails if option.help]
        longest = max((option.width for option in parser.options), default=0)
        parts.append("\n".join(describe(option, longest) for option in listed))

    return "\n\n".join(parts)


__all__ = (
    "describe",
    "wrap_and_indent",
    "render",
)
