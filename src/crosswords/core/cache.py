"""
Search result cache in Redis.

Only found results are stored. The graph never changes while the process
runs, so entries expire on a TTL rather than being invalidated.
"""

import json
import logging

import redis

from crosswords.core.filter import normalize_pattern
from crosswords.core.synset import ResultEntry

logger = logging.getLogger(__name__)


class SearchCache:
    def __init__(self, client: redis.Redis, prefix: str = "crosswords", ttl: int = 3600):
        self.client = client
        self.prefix = prefix
        self.ttl = ttl

    def _key(self, word: str, length: int, max_depth: int, pattern: str | None, verbose: bool) -> str:
        mode = "verbose" if verbose else "terse"
        return f"{self.prefix}:search:{mode}:{word.upper()}:{length}:{max_depth}:{normalize_pattern(pattern) or ''}"

    def get(self, word: str, length: int, max_depth: int, pattern: str | None,
            verbose: bool) -> list[ResultEntry] | None:
        key = self._key(word, length, max_depth, pattern, verbose)
        try:
            data = self.client.get(key)
        except redis.RedisError as e:
            logger.warning("Cache read failed for %s: %s", key, e)
            return None
        if data is None:
            return None
        return [ResultEntry.from_dict(d) for d in json.loads(data)]

    def set(self, word: str, length: int, max_depth: int, pattern: str | None,
            verbose: bool, entries: list[ResultEntry]) -> None:
        key = self._key(word, length, max_depth, pattern, verbose)
        payload = json.dumps([e.to_dict() for e in entries])
        try:
            self.client.set(key, payload, ex=self.ttl)
        except redis.RedisError as e:
            logger.warning("Cache write failed for %s: %s", key, e)

    def clear(self) -> None:
        try:
            for key in self.client.scan_iter(f"{self.prefix}:search:*"):
                self.client.delete(key)
        except redis.RedisError as e:
            logger.warning("Cache clear failed for %s: %s", self.prefix, e)
