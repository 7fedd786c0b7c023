# src/crosswords/core/engine.py
"""
Related-word search over the lexical graph.

A search starts at every synset containing the word and follows pointers
outward. Depth 1 is the initial hit synsets themselves, depth 2 the synsets
they point at, and so on up to MAX_RECURSE_DEPTH.

Each reached synset contributes its words, labelled with how it relates to
the synset we came from:

    ("fish" is a) "Hypernym of shark"
    ("approval" is a) "Hypernym of praise, congratulations, kudos, extolment"

Labels only describe the previous hop, never the full path from the root.
"""

import logging
import time

from crosswords.core.assembler import assemble
from crosswords.core.errors import (
    DanglingPointerError,
    InvalidPatternLengthError,
    InvalidRecurseDepthError,
    RootWordNotFoundError,
    SearchBudgetExceededError,
    SynsetNotFoundError,
)
from crosswords.core.filter import ResultFilter
from crosswords.core.graph import LexicalGraph
from crosswords.core.synset import ResultEntry, Synset
from crosswords.core.vocabulary import resolve_pos_name, resolve_relation_name

logger = logging.getLogger(__name__)

MIN_RECURSE_DEPTH = 1
MAX_RECURSE_DEPTH = 5
DEFAULT_RECURSE_DEPTH = 2


def validate_query(max_depth: int, length: int = 0, pattern: str | None = None) -> None:
    """Reject bad input before any traversal starts."""
    if max_depth < MIN_RECURSE_DEPTH or max_depth > MAX_RECURSE_DEPTH:
        raise InvalidRecurseDepthError(
            f"The depth of recursion must be between {MIN_RECURSE_DEPTH} and {MAX_RECURSE_DEPTH}."
        )
    if pattern and length > 0 and len(pattern) > length:
        raise InvalidPatternLengthError("Pattern length must be less than length parameter.")


def relation_label(synset: Synset, source_words: str) -> str:
    """'Hypernym of shark, DerivationallyRelatedForm of shark' for one hop."""
    labels = []
    for pointer in synset.pointers:
        label = f"{resolve_relation_name(pointer.symbol)} of {source_words}"
        if label not in labels:
            labels.append(label)
    return ", ".join(labels)


def terse_words(entries: list[ResultEntry]) -> list[str]:
    """Distinct word texts, in result order."""
    return list(dict.fromkeys(e.word for e in entries))


class _Query:
    """State for a single search. Never shared between searches."""

    def __init__(self, graph: LexicalGraph, word: str, result_filter: ResultFilter,
                 max_depth: int, max_visits: int | None):
        self.graph = graph
        self.word = word
        self.filter = result_filter
        self.max_depth = max_depth
        self.max_visits = max_visits
        self.entries: list[ResultEntry] = []
        self.seen: set[tuple[str, str]] = set()
        # (synset id, source words) -> remaining depth of a finished visit
        self.explored: dict[tuple[str, str], int] = {}
        self.visits = 0

    def add(self, word: str, relation: str, synset: Synset) -> None:
        key = (word, synset.gloss)
        if key in self.seen or not self.filter.admits(word):
            return
        self.seen.add(key)
        self.entries.append(ResultEntry(
            word=word,
            word_type=resolve_pos_name(synset.pos),
            relation=relation,
            gloss=synset.gloss,
        ))

    def run(self, roots: tuple[Synset, ...]) -> None:
        for synset in roots:
            for word in synset.words:
                self.add(word, "", synset)
            for pointer in synset.pointers:
                self.visit(synset, pointer.symbol, pointer.target, synset.joined_words, MIN_RECURSE_DEPTH + 1)

    def visit(self, source: Synset, symbol: str, synset_id: str, source_words: str, depth: int) -> None:
        if depth > self.max_depth:
            return

        # A finished visit with at least as much depth left already tried
        # every insertion this one would make.
        remaining = self.max_depth - depth
        memo_key = (synset_id, source_words)
        if self.explored.get(memo_key, -1) >= remaining:
            return

        self.visits += 1
        if self.max_visits and self.visits > self.max_visits:
            raise SearchBudgetExceededError(self.word, self.max_visits)

        try:
            synset = self.graph.lookup_synset(synset_id)
        except SynsetNotFoundError:
            raise DanglingPointerError(source.id, symbol, synset_id) from None

        relation = relation_label(synset, source_words)
        for word in synset.words:
            self.add(word, relation, synset)

        words = synset.joined_words
        for pointer in synset.pointers:
            self.visit(synset, pointer.symbol, pointer.target, words, depth + 1)

        if self.explored.get(memo_key, -1) < remaining:
            self.explored[memo_key] = remaining


class SearchEngine:
    """
    Finds words related to a search word.

    Holds nothing but a reference to the read-only graph, so one engine
    can serve concurrent searches.
    """

    def __init__(self, graph: LexicalGraph, max_visits: int | None = None):
        self.graph = graph
        self.max_visits = max_visits or None

    def search(
        self,
        word: str,
        length: int = 0,
        max_depth: int = DEFAULT_RECURSE_DEPTH,
        pattern: str | None = None,
        verbose: bool = False,
    ) -> list[ResultEntry]:
        """
        Words related to `word`, ordered and (unless verbose) one per word text.

        Raises QueryValidationError for bad input, WordNotFoundError when the
        word is unknown or every candidate was filtered out.
        """
        validate_query(max_depth, length, pattern)

        roots = self.graph.find_synsets_containing(word)
        if not roots:
            raise RootWordNotFoundError(word)

        start = time.perf_counter()
        result_filter = ResultFilter(length, pattern)
        query = _Query(self.graph, word, result_filter, max_depth, self.max_visits)
        query.run(roots)

        logger.debug(
            "search %r depth=%d length=%d pattern=%r: %d roots, %d visits, %d entries in %.3fs",
            word, max_depth, length, pattern, len(roots), query.visits,
            len(query.entries), time.perf_counter() - start,
        )
        return assemble(query.entries, word, result_filter.exact_length, verbose)
