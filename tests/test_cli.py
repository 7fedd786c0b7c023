# tests/test_cli.py
"""Tests for the CLI commands."""

import httpx
import pytest

from crosswords.cli import client
from crosswords.cli.main import main


def test_lookup(dataset_file, capsys):
    main(["lookup", "shark", "--data", str(dataset_file)])
    lines = capsys.readouterr().out.splitlines()
    assert lines[-5:] == ["shark", "usurer", "loan shark", "fish", "cheat"]


def test_lookup_verbose(dataset_file, capsys):
    main(["lookup", "fish", "-r", "1", "-v", "--data", str(dataset_file)])
    out = capsys.readouterr().out
    assert "fish" in out
    assert "Noun" in out


def test_lookup_not_found(dataset_file, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["lookup", "unicorn", "--data", str(dataset_file)])
    assert exc.value.code == 1
    assert "No related words found" in capsys.readouterr().out


def test_lookup_invalid_depth(dataset_file, capsys):
    with pytest.raises(SystemExit):
        main(["lookup", "shark", "-r", "7", "--data", str(dataset_file)])
    assert "between 1 and 5" in capsys.readouterr().out


def test_lookup_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit):
        main(["lookup", "shark", "--data", str(tmp_path / "missing.json")])
    assert "File not found" in capsys.readouterr().out


def test_search_via_api(monkeypatch, capsys):
    calls = []

    def fake_search(word, length, recurse, pattern):
        calls.append((word, length, recurse, pattern))
        return ["shark", "loan_shark"]

    monkeypatch.setattr(client, "search_words", fake_search)
    main(["search", "shark", "-l", "5", "-r", "3", "-p", "s____"])
    assert calls == [("shark", 5, 3, "s____")]
    assert capsys.readouterr().out.splitlines() == ["shark", "loan shark"]


def test_search_verbose_via_api(monkeypatch, capsys):
    rows = [{"word": "fish", "wordType": "Noun", "relation": "Hypernym of shark", "gloss": "a vertebrate"}]
    monkeypatch.setattr(client, "search_words_verbose", lambda *args: rows)
    main(["search", "shark", "-v"])
    assert capsys.readouterr().out.strip() == "fish - (Noun) - [Hypernym of shark] a vertebrate"


def test_search_not_found_via_api(monkeypatch, capsys):
    def not_found(*args):
        request = httpx.Request("GET", "http://test/api/words/unicorn")
        response = httpx.Response(404, request=request, json={"detail": "Not found"})
        raise httpx.HTTPStatusError("404", request=request, response=response)

    monkeypatch.setattr(client, "search_words", not_found)
    with pytest.raises(SystemExit):
        main(["search", "unicorn"])
    assert "No related words found for 'unicorn'" in capsys.readouterr().out
