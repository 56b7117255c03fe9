import sys

from rich.pretty import pprint

from argot import *


def setup(parser):
    parser.on("v", "verbose", "Enable verbose mode")
    parser.on("n", "--name NAME", "Your name")
    parser.on("t", "--tags LIST", "Labels for the run", kind=list)

    remote = parser.command("remote", aliases=("r",))
    remote.on("u", "url", "Remote address", True)
    remote.execute(lambda parser, args: pprint(parser.to_dict() | {"args": args}))


if __name__ == '__main__':
    pprint(parse(sys.argv[1:], setup, help=True).to_dict())
