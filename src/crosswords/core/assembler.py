"""
Order and collapse the entries collected by a search.
"""

from crosswords.core.errors import FilteredToEmptyError
from crosswords.core.synset import ResultEntry


def sort_entries(entries: list[ResultEntry], exact_length: bool) -> list[ResultEntry]:
    """Unlabeled (initial hit) words first, then shorter words, then alphabetical ignoring case."""
    if exact_length:
        # all words share the same length
        return sorted(entries, key=lambda e: (e.relation != "", e.word.casefold(), e.word))
    return sorted(entries, key=lambda e: (e.relation != "", len(e.word), e.word.casefold(), e.word))


def collapse_words(entries: list[ResultEntry]) -> list[ResultEntry]:
    """Keep the first entry for each word text."""
    seen = set()
    result = []
    for entry in entries:
        if entry.word not in seen:
            seen.add(entry.word)
            result.append(entry)
    return result


def assemble(entries: list[ResultEntry], word: str, exact_length: bool = False, verbose: bool = False) -> list[ResultEntry]:
    result = sort_entries(entries, exact_length)
    if not verbose:
        # Verbose keeps the other senses of a word; terse does not.
        result = collapse_words(result)
    if not result:
        raise FilteredToEmptyError(word)
    return result
