"""Check that a WordNet JSON export loads cleanly and is fully linked."""

import sys

from crosswords.core.errors import CrosswordsError
from crosswords.core.loader import load_wordnet_json
from crosswords.core.log import configure_logging

configure_logging()

path = sys.argv[1] if len(sys.argv) > 1 else "WordNet/wordnet.json"

try:
    graph = load_wordnet_json(path)
except CrosswordsError as e:
    print(f"✗ {path}: {e}")
    sys.exit(1)

stats = graph.stats()
print(f"✓ {path}")
print(f"  Synsets:  {stats['synsets']}")
print(f"  Words:    {stats['words']}")
print(f"  Pointers: {stats['pointers']}")

try:
    graph.validate()
    print("✓ All pointer targets exist")
except CrosswordsError as e:
    print(f"✗ {e}")
    sys.exit(1)
