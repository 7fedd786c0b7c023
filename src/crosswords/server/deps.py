"""
Shared dependencies for routes.

The graph is installed once by the app's lifespan (or by tests) and is
read-only from then on. Until it is installed, queries are refused.
"""

import redis

from crosswords.core.cache import SearchCache
from crosswords.core.config import get_settings
from crosswords.core.engine import SearchEngine
from crosswords.core.errors import GraphNotReadyError
from crosswords.core.graph import LexicalGraph

_graph: LexicalGraph | None = None
_engine: SearchEngine | None = None
_cache: SearchCache | None = None


def set_graph(graph: LexicalGraph, validate: bool = True) -> None:
    """Open the readiness gate. Raises DanglingPointerError for a broken graph."""
    global _graph, _engine
    if validate:
        graph.validate()
    _graph = graph
    _engine = SearchEngine(graph, max_visits=get_settings().max_visits)


def is_ready() -> bool:
    return _graph is not None


def get_graph() -> LexicalGraph:
    if _graph is None:
        raise GraphNotReadyError("Word graph is not loaded")
    return _graph


def get_engine() -> SearchEngine:
    if _engine is None:
        raise GraphNotReadyError("Word graph is not loaded")
    return _engine


def set_cache(cache: SearchCache | None) -> None:
    global _cache
    _cache = cache


def get_cache() -> SearchCache | None:
    global _cache
    settings = get_settings()
    if _cache is None and settings.redis_url:
        _cache = SearchCache(redis.Redis.from_url(settings.redis_url), ttl=settings.cache_ttl)
    return _cache


def reset() -> None:
    """Forget the graph and cache. Useful for tests."""
    global _graph, _engine, _cache
    _graph = None
    _engine = None
    _cache = None
