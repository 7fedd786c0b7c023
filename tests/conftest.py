# tests/conftest.py
"""Shared fixtures: small synthetic word graphs."""

import json

import pytest

from crosswords.core.graph import LexicalGraph
from crosswords.core.loader import graph_from_records
from crosswords.core.synset import Pointer, Synset


# Records in the WordNet JSON export format.
ANIMAL_RECORDS = {
    "02542283-n": {
        "offset": 2542283, "pos": "n", "word": ["shark"],
        "gloss": "any of numerous elongate mostly marine carnivorous fishes",
        "pointer": [{"symbol": "@", "synset": "02512053-n"}, {"symbol": "+", "synset": "02575325-v"}],
    },
    "02575325-v": {
        "offset": 2575325, "pos": "v", "word": ["shark", "cheat"],
        "gloss": "play the shark; act with trickery",
        "pointer": [{"symbol": "+", "synset": "02542283-n"}],
    },
    "10752480-n": {
        "offset": 10752480, "pos": "n", "word": ["shark", "loan_shark", "usurer"],
        "gloss": "someone who lends money at excessive rates of interest",
        "pointer": [],
    },
    "02512053-n": {
        "offset": 2512053, "pos": "n", "word": ["fish"],
        "gloss": "any of various mostly cold-blooded aquatic vertebrates",
        "pointer": [{"symbol": "~", "synset": "02542283-n"}, {"symbol": "@", "synset": "00015388-n"}],
    },
    "00015388-n": {
        "offset": 15388, "pos": "n", "word": ["animal", "beast"],
        "gloss": "a living organism characterized by voluntary movement",
        "pointer": [{"symbol": "~", "synset": "02512053-n"}],
    },
}


@pytest.fixture
def animal_graph() -> LexicalGraph:
    graph = graph_from_records(ANIMAL_RECORDS)
    graph.validate()
    return graph


@pytest.fixture
def shark_graph() -> LexicalGraph:
    """S1 = shark (@ -> fish, ! -> guppy)."""
    return LexicalGraph([
        Synset("S1", "n", ("shark",), "a fierce fish",
               (Pointer("@", "S2"), Pointer("!", "S3"))),
        Synset("S2", "n", ("fish",), "an aquatic vertebrate"),
        Synset("S3", "n", ("guppy",), "a small fish"),
    ])


@pytest.fixture
def dense_graph() -> LexicalGraph:
    """Six synsets, each pointing at every other one."""
    names = ["red", "blue", "green", "amber", "cyan", "plum"]
    symbols = ["@", "~", "!", "&", "^"]
    synsets = []
    for i, name in enumerate(names):
        pointers = tuple(
            Pointer(symbols[(i + j) % len(symbols)], f"C{j}")
            for j in range(len(names)) if j != i
        )
        words = (name, name + "ish") if i % 2 else (name,)
        synsets.append(Synset(f"C{i}", "a", words, f"the colour {name}", pointers))
    return LexicalGraph(synsets)


@pytest.fixture
def dataset_file(tmp_path):
    path = tmp_path / "wordnet.json"
    path.write_text(json.dumps({"synset": ANIMAL_RECORDS, "index": {"shark": ["02542283-n"]}}))
    return path


class DictRedis:
    """Just enough of the redis client for SearchCache."""

    def __init__(self):
        self.data = {}
        self.expiry = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value, ex=None):
        self.data[key] = value.encode() if isinstance(value, str) else value
        self.expiry[key] = ex

    def scan_iter(self, pattern):
        prefix = pattern.rstrip("*")
        return [k for k in list(self.data) if k.startswith(prefix)]

    def delete(self, key):
        self.data.pop(key, None)


@pytest.fixture
def dict_redis():
    return DictRedis()
