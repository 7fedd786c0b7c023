"""
Synset and vocabulary routes: /api/synsets, /api/vocabulary
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from crosswords.core.errors import GraphNotReadyError, SynsetNotFoundError
from crosswords.core.vocabulary import RELATIONS, WORD_TYPES
from crosswords.server.deps import get_graph


router = APIRouter(prefix="/api", tags=["synsets"])


class PointerOut(BaseModel):
    symbol: str
    synset: str


class SynsetOut(BaseModel):
    id: str
    offset: int
    pos: str
    words: list[str]
    gloss: str
    pointers: list[PointerOut]


class VocabularyOut(BaseModel):
    relations: dict[str, str]
    word_types: dict[str, str]


@router.get("/synsets/{synset_id}", response_model=SynsetOut)
async def get_synset(synset_id: str):
    """Get a synset by ID."""
    try:
        synset = get_graph().lookup_synset(synset_id)
    except GraphNotReadyError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except SynsetNotFoundError:
        raise HTTPException(status_code=404, detail="Synset not found")
    return synset.to_dict()


@router.get("/vocabulary", response_model=VocabularyOut)
async def get_vocabulary():
    """Relation and word type names."""
    return {"relations": RELATIONS, "word_types": WORD_TYPES}
