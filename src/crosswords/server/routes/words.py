"""
Word search routes: /api/words
"""

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from crosswords.core.engine import DEFAULT_RECURSE_DEPTH, terse_words, validate_query
from crosswords.core.errors import (
    DanglingPointerError,
    GraphNotReadyError,
    QueryValidationError,
    SearchBudgetExceededError,
    WordNotFoundError,
)
from crosswords.core.synset import ResultEntry
from crosswords.server.deps import get_cache, get_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/words", tags=["words"])


class WordEntry(BaseModel):
    word: str
    wordType: str
    relation: str
    gloss: str


def run_search(word: str, length: int, recurse: int, pattern: str | None, verbose: bool) -> list[ResultEntry]:
    """Search with cache, translating errors into HTTP statuses."""
    try:
        validate_query(recurse, length, pattern)
    except QueryValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    # cached results are only served while the graph is loaded
    try:
        engine = get_engine()
    except GraphNotReadyError as e:
        raise HTTPException(status_code=503, detail=str(e))

    cache = get_cache()
    if cache:
        cached = cache.get(word, length, recurse, pattern, verbose)
        if cached is not None:
            return cached

    try:
        entries = engine.search(word, length=length, max_depth=recurse, pattern=pattern, verbose=verbose)
    except WordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SearchBudgetExceededError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except DanglingPointerError as e:
        logger.error("Dataset contract violated: %s", e)
        raise HTTPException(status_code=500, detail=str(e))

    if cache:
        cache.set(word, length, recurse, pattern, verbose, entries)
    return entries


@router.get("/verbose/{word}", response_model=list[WordEntry])
def search_verbose(word: str, length: int = 0, recurse: int = DEFAULT_RECURSE_DEPTH, pattern: str | None = None):
    """
    Related words with their type, relation and gloss.

    Different meanings of the same word are kept as separate entries.
    """
    entries = run_search(word, length, recurse, pattern, verbose=True)
    return [e.to_dict() for e in entries]


@router.get("/{word}", response_model=list[str])
def search(word: str, length: int = 0, recurse: int = DEFAULT_RECURSE_DEPTH, pattern: str | None = None):
    """
    Distinct words related to `word`.

    - length: only words exactly this long
    - recurse: 1 returns the word and its synonyms, 2 adds directly related words, up to 5
    - pattern: "_" matches any character, e.g. "_a_c"
    """
    entries = run_search(word, length, recurse, pattern, verbose=False)
    return terse_words(entries)
