# src/crosswords/core/synset.py
"""
Synsets, pointers and search result entries.

A synset is a set of synonymous words sharing one meaning.
Distinct synsets may contain the same word ("bank" the institution,
"bank" the river edge).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Pointer:
    symbol: str  # key into RELATIONS
    target: str  # synset id pointed to


@dataclass(frozen=True)
class Synset:
    id: str
    pos: str
    words: tuple[str, ...]
    gloss: str
    pointers: tuple[Pointer, ...] = ()
    offset: int = 0

    @property
    def joined_words(self) -> str:
        """Words as they appear in relation labels: 'praise, kudos'."""
        return ", ".join(self.words)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "offset": self.offset,
            "pos": self.pos,
            "words": list(self.words),
            "gloss": self.gloss,
            "pointers": [{"symbol": p.symbol, "synset": p.target} for p in self.pointers],
        }


@dataclass(frozen=True)
class ResultEntry:
    """One word in a search result, with where it came from."""
    word: str
    word_type: str
    relation: str  # empty for words of the initial hit synsets
    gloss: str

    @property
    def key(self) -> tuple[str, str]:
        """Two entries state the same fact iff their keys are equal."""
        return (self.word, self.gloss)

    def display(self) -> str:
        return self.word.replace("_", " ")

    def display_verbose(self) -> str:
        relation = f"[{self.relation}]" if self.relation else ""
        return f"{self.display()} - ({self.word_type}) - {relation} {self.gloss}"

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "wordType": self.word_type,
            "relation": self.relation,
            "gloss": self.gloss,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ResultEntry":
        return cls(
            word=data["word"],
            word_type=data["wordType"],
            relation=data.get("relation", ""),
            gloss=data.get("gloss", ""),
        )
