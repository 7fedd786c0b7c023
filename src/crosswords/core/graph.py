# src/crosswords/core/graph.py
"""
The lexical graph: synsets keyed by id, linked by typed pointers.

Built once at startup and never mutated afterwards, so any number of
queries can read it concurrently. The graph is directed and may contain
cycles (antonym pairs point at each other).
"""

import threading
from types import MappingProxyType
from typing import Iterable

from crosswords.core.errors import DanglingPointerError, DatasetError, SynsetNotFoundError
from crosswords.core.synset import Synset


class WordIndex:
    """Normalized word -> synsets containing it, in dataset order."""

    def __init__(self, synsets: Iterable[Synset]):
        index: dict[str, list[Synset]] = {}
        for synset in synsets:
            for word in synset.words:
                hits = index.setdefault(self.normalize(word), [])
                if synset not in hits:
                    hits.append(synset)
        self._index = {word: tuple(hits) for word, hits in index.items()}

    @staticmethod
    def normalize(word: str) -> str:
        return word.upper()

    def lookup(self, word: str) -> tuple[Synset, ...]:
        return self._index.get(self.normalize(word), ())

    def __len__(self) -> int:
        return len(self._index)


class LexicalGraph:
    def __init__(self, synsets: Iterable[Synset]):
        by_id: dict[str, Synset] = {}
        for synset in synsets:
            if synset.id in by_id:
                raise DatasetError(f"Duplicate synset id: {synset.id}")
            by_id[synset.id] = synset
        self._synsets = MappingProxyType(by_id)
        self._index: WordIndex | None = None
        self._index_lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._synsets)

    def __contains__(self, synset_id: str) -> bool:
        return synset_id in self._synsets

    def __iter__(self):
        return iter(self._synsets.values())

    def lookup_synset(self, synset_id: str) -> Synset:
        try:
            return self._synsets[synset_id]
        except KeyError:
            raise SynsetNotFoundError(synset_id) from None

    @property
    def word_index(self) -> WordIndex:
        """Built on first use, then shared by every query."""
        if self._index is None:
            with self._index_lock:
                if self._index is None:
                    self._index = WordIndex(self._synsets.values())
        return self._index

    def find_synsets_containing(self, word: str) -> tuple[Synset, ...]:
        """All synsets with `word` in their word list (case-insensitive, exact)."""
        return self.word_index.lookup(word)

    def validate(self) -> None:
        """Readiness gate: every pointer must land on a synset in the graph."""
        for synset in self._synsets.values():
            for pointer in synset.pointers:
                if pointer.target not in self._synsets:
                    raise DanglingPointerError(synset.id, pointer.symbol, pointer.target)

    def stats(self) -> dict:
        return {
            "synsets": len(self._synsets),
            "words": len(self.word_index),
            "pointers": sum(len(s.pointers) for s in self._synsets.values()),
        }
