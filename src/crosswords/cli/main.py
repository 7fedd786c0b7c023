"""
Crosswords CLI.
"""

import argparse
from crosswords.cli.commands import lookup, search, serve, synset


def main(argv=None):
    parser = argparse.ArgumentParser(prog="crosswords", description="Crosswords related-word search")
    subparsers = parser.add_subparsers(dest="command")

    search.add_subparser(subparsers)
    synset.add_subparser(subparsers)
    lookup.add_subparser(subparsers)
    serve.add_subparser(subparsers)

    args = parser.parse_args(argv)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
