# tests/test_graph.py
"""Tests for the lexical graph and word index."""

import pytest

from crosswords.core.errors import DanglingPointerError, DatasetError, SynsetNotFoundError
from crosswords.core.graph import LexicalGraph
from crosswords.core.synset import Pointer, ResultEntry, Synset


def test_lookup_synset(animal_graph):
    synset = animal_graph.lookup_synset("02512053-n")
    assert synset.words == ("fish",)
    assert synset.pos == "n"


def test_lookup_synset_not_found(animal_graph):
    with pytest.raises(SynsetNotFoundError):
        animal_graph.lookup_synset("99999999-n")


def test_find_synsets_case_insensitive(animal_graph):
    hits = animal_graph.find_synsets_containing("SHARK")
    assert [s.id for s in hits] == ["02542283-n", "02575325-v", "10752480-n"]


def test_find_synsets_exact_match_only(animal_graph):
    assert animal_graph.find_synsets_containing("shar") == ()
    assert animal_graph.find_synsets_containing("loan shark") == ()
    assert len(animal_graph.find_synsets_containing("Loan_Shark")) == 1


def test_word_index_built_once(animal_graph):
    assert animal_graph.word_index is animal_graph.word_index


def test_duplicate_ids_rejected():
    with pytest.raises(DatasetError):
        LexicalGraph([Synset("A", "n", ("a",), ""), Synset("A", "n", ("b",), "")])


def test_validate_dangling_pointer():
    graph = LexicalGraph([Synset("A", "n", ("a",), "", (Pointer("@", "B"),))])
    with pytest.raises(DanglingPointerError) as exc:
        graph.validate()
    assert exc.value.source_id == "A"
    assert exc.value.target_id == "B"


def test_validate_ok(animal_graph):
    animal_graph.validate()


def test_stats(animal_graph):
    stats = animal_graph.stats()
    assert stats["synsets"] == 5
    assert stats["pointers"] == 6
    # shark, cheat, loan_shark, usurer, fish, animal, beast
    assert stats["words"] == 7


def test_joined_words(animal_graph):
    assert animal_graph.lookup_synset("10752480-n").joined_words == "shark, loan_shark, usurer"


def test_result_entry_display():
    entry = ResultEntry("loan_shark", "Noun", "Hypernym of usurer", "lends money")
    assert entry.display() == "loan shark"
    assert entry.display_verbose() == "loan shark - (Noun) - [Hypernym of usurer] lends money"


def test_result_entry_display_without_relation():
    entry = ResultEntry("shark", "Noun", "", "a fish")
    assert entry.display_verbose() == "shark - (Noun) -  a fish"


def test_result_entry_dict():
    entry = ResultEntry("shark", "Noun", "", "a fish")
    data = entry.to_dict()
    assert data == {"word": "shark", "wordType": "Noun", "relation": "", "gloss": "a fish"}
    assert ResultEntry.from_dict(data) == entry
