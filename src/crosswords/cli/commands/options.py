"""Search options shared by the search and lookup commands."""

from crosswords.core.engine import DEFAULT_RECURSE_DEPTH


def add_search_options(parser):
    parser.add_argument("word", help="Word to search for, e.g. 'shark'")
    parser.add_argument("-l", "--length", type=int, default=0, help="Only words this many characters long")
    parser.add_argument("-r", "--recurse", type=int, default=DEFAULT_RECURSE_DEPTH, help="Depth of recursion, 1-5")
    parser.add_argument("-p", "--pattern", help="Character pattern, '_' matches anything (e.g. _a_c)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show word type, relation and gloss")
