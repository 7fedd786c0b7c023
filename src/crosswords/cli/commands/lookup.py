"""Local search commands (no server needed)."""

import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from crosswords.cli.commands.options import add_search_options
from crosswords.core.config import get_settings

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("lookup", help="Search related words directly from a dataset file")
    add_search_options(parser)
    parser.add_argument("-d", "--data", help="Path to wordnet.json (default: CROSSWORDS_DATA_PATH)")
    parser.set_defaults(func=run_lookup)


def run_lookup(args):
    from crosswords.core.engine import SearchEngine, terse_words
    from crosswords.core.errors import CrosswordsError, QueryValidationError, WordNotFoundError
    from crosswords.core.loader import load_wordnet_json

    settings = get_settings()
    path = Path(args.data or settings.data_path)
    if not path.exists():
        console.print(f"[red]✗ File not found: {path}[/red]")
        sys.exit(1)

    try:
        graph = load_wordnet_json(path)
        graph.validate()
        console.print(f"[dim]Loaded {len(graph)} synsets from {path}[/dim]")

        engine = SearchEngine(graph, max_visits=settings.max_visits)
        entries = engine.search(
            args.word, length=args.length, max_depth=args.recurse,
            pattern=args.pattern, verbose=args.verbose,
        )
    except QueryValidationError as e:
        console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)
    except WordNotFoundError:
        console.print(f"No related words found for '{args.word}'.")
        sys.exit(1)
    except CrosswordsError as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        sys.exit(1)

    if not args.verbose:
        for word in terse_words(entries):
            console.print(word.replace("_", " "), highlight=False)
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Word")
    table.add_column("Type")
    table.add_column("Relation")
    table.add_column("Gloss")
    for entry in entries:
        table.add_row(entry.display(), entry.word_type, entry.relation, entry.gloss)
    console.print(table)
