"""
Search commands (via the API server).
"""

import sys

import httpx

from crosswords.cli import client
from crosswords.cli.commands.options import add_search_options
from crosswords.core.synset import ResultEntry


def add_subparser(subparsers):
    parser = subparsers.add_parser("search", help="Search related words via the API server")
    add_search_options(parser)
    parser.set_defaults(func=run_search)


def run_search(args):
    try:
        if args.verbose:
            rows = client.search_words_verbose(args.word, args.length, args.recurse, args.pattern)
            for row in rows:
                print(ResultEntry.from_dict(row).display_verbose())
        else:
            for word in client.search_words(args.word, args.length, args.recurse, args.pattern):
                print(word.replace("_", " "))
    except httpx.HTTPStatusError as e:
        if e.response.status_code == 404:
            print(f"No related words found for '{args.word}'.")
        else:
            print(f"✗ Error: {e.response.json().get('detail', e)}")
        sys.exit(1)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
