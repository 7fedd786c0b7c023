"""
Synset commands.
"""

import sys
from rich import print_json
from crosswords.cli import client


def add_subparser(subparsers):
    parser = subparsers.add_parser("synset", help="Show a synset by ID")
    parser.add_argument("synset_id", help="Synset ID, e.g. 02542283-n")
    parser.add_argument("--json", action="store_true", help="Print raw JSON")
    parser.set_defaults(func=synset_show)


def synset_show(args):
    try:
        synset = client.get_synset(args.synset_id)
        if args.json:
            print_json(data=synset)
            return
        print(f"ID: {synset['id']}")
        print(f"POS: {synset['pos']}")
        print(f"Words: {', '.join(synset['words'])}")
        print(f"Gloss: {synset['gloss']}")
        print(f"Pointers ({len(synset['pointers'])}):")
        for p in synset["pointers"]:
            print(f"  {p['symbol']:3} {p['synset']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
