# src/crosswords/core/vocabulary.py
"""
Fixed symbol tables from the WordNet dataset.

WORD_TYPES maps a synset's pos tag to its name.
RELATIONS maps a pointer symbol to the relation it encodes,
e.g. "@" → "Hypernym", "!" → "Antonym".
"""

from crosswords.core.errors import UnknownSymbolError


WORD_TYPES: dict[str, str] = {
    "a": "Adjective",
    "n": "Noun",
    "r": "Adverb",
    "s": "Satellite",
    "v": "Verb",
}

RELATIONS: dict[str, str] = {
    "!": "Antonym",
    "@": "Hypernym",
    "@i": "InstanceHypernym",
    "~": "Hyponym",
    "~i": "InstanceHyponym",
    "#m": "MemberHolonym",
    "#s": "SubstanceHolonym",
    "#p": "PartHolonym",
    "%m": "MemberMeronym",
    "%s": "SubstanceMeronym",
    "%p": "PartMeronym",
    "=": "Attribute",
    "+": "DerivationallyRelatedForm",
    ";c": "DomainOfSynsetTopic",
    "-c": "MemberOfThisDomainTopic",
    ";r": "DomainOfSynsetRegion",
    "-r": "MemberOfThisDomainRegion",
    ";u": "DomainOfSynsetUsage",
    "-u": "MemberOfThisDomainUsage",
    "*": "Entailment",
    ">": "Cause",
    "^": "AlsoSee",
    "$": "VerbGroup",
    "&": "SimilarTo",
    "<": "ParticipleOfVerb",
    "\\": "Pertainym",
    # Published name; the pair with "\\" above may be the wrong way around.
    "\\\\": "DerivedFromAdjective",
}


def is_pos_tag(tag: str) -> bool:
    return tag in WORD_TYPES


def is_relation_symbol(symbol: str) -> bool:
    return symbol in RELATIONS


def resolve_pos_name(tag: str) -> str:
    """Name of a pos tag, e.g. 'n' → 'Noun'."""
    try:
        return WORD_TYPES[tag]
    except KeyError:
        raise UnknownSymbolError(f"Unknown part of speech: {tag!r}") from None


def resolve_relation_name(symbol: str) -> str:
    """Name of a pointer symbol, e.g. '@' → 'Hypernym'."""
    try:
        return RELATIONS[symbol]
    except KeyError:
        raise UnknownSymbolError(f"Unknown relation symbol: {symbol!r}") from None
