"""
Load the WordNet JSON export into a LexicalGraph.

The export is one object with several sections; only "synset" is used:

    {"synset": {"02542283-n": {"offset": 2542283, "pos": "n",
                               "word": ["shark"], "gloss": "...",
                               "pointer": [{"symbol": "@", "synset": "..."}]}}}
"""

import json
import logging
import time
from pathlib import Path

from crosswords.core.errors import DatasetError
from crosswords.core.graph import LexicalGraph
from crosswords.core.synset import Pointer, Synset
from crosswords.core.vocabulary import is_pos_tag, is_relation_symbol

logger = logging.getLogger(__name__)


def synset_from_record(synset_id: str, record: dict) -> Synset:
    if not isinstance(record, dict):
        raise DatasetError(f"Synset {synset_id} is not an object")

    words = record.get("word") or []
    if not isinstance(words, list) or not all(isinstance(w, str) and w for w in words):
        raise DatasetError(f"Synset {synset_id} word list must be a list of strings")
    if not words:
        raise DatasetError(f"Synset {synset_id} has no words")

    pos = record.get("pos")
    if not isinstance(pos, str) or not is_pos_tag(pos):
        raise DatasetError(f"Synset {synset_id} has unknown part of speech {pos!r}")

    gloss = record.get("gloss") or ""
    if not isinstance(gloss, str):
        raise DatasetError(f"Synset {synset_id} gloss must be a string")

    offset = record.get("offset") or 0
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise DatasetError(f"Synset {synset_id} has a non-integer offset {offset!r}")

    raw_pointers = record.get("pointer") or []
    if not isinstance(raw_pointers, list):
        raise DatasetError(f"Synset {synset_id} pointers must be a list")

    pointers = []
    for p in raw_pointers:
        if not isinstance(p, dict):
            raise DatasetError(f"Synset {synset_id} has a pointer that is not an object: {p!r}")
        symbol = p.get("symbol")
        if not isinstance(symbol, str) or not is_relation_symbol(symbol):
            raise DatasetError(f"Synset {synset_id} has unknown pointer symbol {symbol!r}")
        target = p.get("synset")
        if not isinstance(target, str) or not target:
            raise DatasetError(f"Synset {synset_id} has a '{symbol}' pointer without a target")
        pointers.append(Pointer(symbol=symbol, target=target))

    return Synset(
        id=synset_id,
        pos=pos,
        words=tuple(words),
        gloss=gloss,
        pointers=tuple(pointers),
        offset=offset,
    )


def graph_from_records(records: dict[str, dict]) -> LexicalGraph:
    return LexicalGraph(synset_from_record(sid, rec) for sid, rec in records.items())


def load_wordnet_json(path: str | Path) -> LexicalGraph:
    """
    Read a WordNet JSON export.

    The returned graph is not yet validated; call graph.validate()
    before serving queries from it.
    """
    path = Path(path)
    if not path.exists():
        raise DatasetError(f"Dataset file not found: {path}")

    start = time.perf_counter()
    with path.open(encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise DatasetError(f"Invalid JSON in {path}: {e}") from e

    records = data.get("synset") if isinstance(data, dict) else None
    if not isinstance(records, dict):
        raise DatasetError(f"No 'synset' section in {path}")

    graph = graph_from_records(records)
    logger.info("Loaded %d synsets from %s in %.2fs", len(graph), path, time.perf_counter() - start)
    return graph
