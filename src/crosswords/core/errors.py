"""
Error taxonomy for the word search.

Validation errors are the caller's fault and are raised before any traversal.
Not-found errors cover both "unknown word" and "nothing survived the filter".
DanglingPointerError means the dataset broke the ingestion contract.
"""


class CrosswordsError(Exception):
    """Base class for all crosswords errors."""


# === Caller input ===

class QueryValidationError(CrosswordsError, ValueError):
    pass


class InvalidRecurseDepthError(QueryValidationError):
    pass


class InvalidPatternLengthError(QueryValidationError):
    pass


# === Not found ===

class WordNotFoundError(CrosswordsError):
    def __init__(self, word: str):
        super().__init__(f"No related words found for '{word}'")
        self.word = word


class RootWordNotFoundError(WordNotFoundError):
    pass


class FilteredToEmptyError(WordNotFoundError):
    pass


# === Graph / dataset ===

class SynsetNotFoundError(CrosswordsError, LookupError):
    def __init__(self, synset_id: str):
        super().__init__(f"Synset not found: {synset_id}")
        self.synset_id = synset_id


class DanglingPointerError(CrosswordsError):
    def __init__(self, source_id: str, symbol: str, target_id: str):
        super().__init__(f"Synset {source_id} has a '{symbol}' pointer to missing synset {target_id}")
        self.source_id = source_id
        self.symbol = symbol
        self.target_id = target_id


class UnknownSymbolError(CrosswordsError, LookupError):
    pass


class DatasetError(CrosswordsError):
    pass


class GraphNotReadyError(CrosswordsError):
    pass


class SearchBudgetExceededError(CrosswordsError):
    def __init__(self, word: str, limit: int):
        super().__init__(f"Search for '{word}' exceeded {limit} synset visits")
        self.word = word
        self.limit = limit
