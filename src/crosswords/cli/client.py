"""
HTTP client for the Crosswords API.
"""

import httpx

from crosswords.core.config import get_settings


def _base_url() -> str:
    return get_settings().api_url


def _params(length: int, recurse: int, pattern: str | None) -> dict:
    params = {"length": length, "recurse": recurse}
    if pattern:
        params["pattern"] = pattern
    return params


# === Words ===

def search_words(word: str, length: int = 0, recurse: int = 2, pattern: str | None = None) -> list[str]:
    r = httpx.get(f"{_base_url()}/words/{word}", params=_params(length, recurse, pattern), timeout=60)
    r.raise_for_status()
    return r.json()


def search_words_verbose(word: str, length: int = 0, recurse: int = 2, pattern: str | None = None) -> list[dict]:
    r = httpx.get(f"{_base_url()}/words/verbose/{word}", params=_params(length, recurse, pattern), timeout=60)
    r.raise_for_status()
    return r.json()


# === Synsets ===

def get_synset(synset_id: str) -> dict:
    r = httpx.get(f"{_base_url()}/synsets/{synset_id}")
    r.raise_for_status()
    return r.json()


def get_vocabulary() -> dict:
    r = httpx.get(f"{_base_url()}/vocabulary")
    r.raise_for_status()
    return r.json()
