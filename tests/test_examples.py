import json
from unittest.mock import MagicMock, patch
from urllib.error import URLError

import pytest

from hierarkey.examples import (
    example_a_entries,
    example_c_lines,
    fetch_genre_wikitext,
    genre_lines,
    run_example_a,
    run_example_b,
    run_example_c,
)
from hierarkey.keys import HierarKey

SAMPLE = "==Rock==\n*Alpha\n**Beta\n**Gamma\n*Delta\nignored text\n==Pop==\n*Epsilon"


def _response(payload: bytes) -> MagicMock:
    opener = MagicMock()
    opener.return_value.__enter__.return_value.read.return_value = payload
    return opener


def _key_of(entries, name):
    return next(key for key, value in entries if value == name)


def test_example_a_has_every_name_once():
    entries = example_a_entries()
    names = [name for _, name in entries]
    assert len(entries) == 20
    assert set(names) == {
        "Animal", "Vertebrate", "Mammal", "Carnivore", "Cat", "Panthera", "Tiger",
        "Primate", "Great Apes", "Pongo", "Orangutan", "Homo", "Human", "Plant",
        "Flowering Plant", "Magnoliopsida", "Fabales", "Pae/Bean", "Pisum", "Pea",
    }


def test_example_a_is_sorted_and_valid():
    entries = example_a_entries()
    keys = [key for key, _ in entries]
    assert keys == sorted(keys)
    checker = HierarKey(1, 2)
    for key in keys:
        checker.validate("test", key)


def test_example_a_parent_child_structure():
    entries = example_a_entries()
    assert _key_of(entries, "Animal") == "01"
    assert _key_of(entries, "Vertebrate").startswith(_key_of(entries, "Animal") + ".")
    assert _key_of(entries, "Tiger").startswith(_key_of(entries, "Panthera") + ".")
    assert _key_of(entries, "Human").startswith(_key_of(entries, "Homo") + ".")
    assert "." not in _key_of(entries, "Plant")
    assert _key_of(entries, "Plant") > _key_of(entries, "Animal")
    assert _key_of(entries, "Primate").count(".") == _key_of(entries, "Carnivore").count(".")


def test_run_example_a_prints_entries(capsys):
    run_example_a()
    out = capsys.readouterr().out
    expected = "".join(f"{key}: {name}\n" for key, name in example_a_entries())
    assert out == expected


def test_genre_lines_skips_other_lines_and_strips_markup():
    lines = list(genre_lines(SAMPLE, HierarKey(1, 2)))
    entries = [line.split(": ", 1)[1] for line in lines]
    assert entries == ["Rock", "Alpha", "Beta", "Gamma", "Delta", "Pop", "Epsilon"]
    assert lines[0] == "01: Rock"


def test_genre_lines_depth_follows_asterisks():
    lines = list(genre_lines(SAMPLE, HierarKey(1, 2)))
    depths = [line.split(": ", 1)[0].count(".") for line in lines]
    assert depths == [0, 1, 2, 2, 1, 0, 1]
    keys = [line.split(": ", 1)[0] for line in lines]
    assert keys == sorted(keys)
    assert len(set(keys)) == len(keys)


def test_genre_lines_crlf_matches_lf():
    crlf = SAMPLE.replace("\n", "\r\n")
    assert list(genre_lines(crlf, HierarKey(1, 2))) == list(genre_lines(SAMPLE, HierarKey(1, 2)))


def test_fetch_genre_wikitext_returns_content():
    payload = json.dumps({"parse": {"wikitext": {"*": SAMPLE}}}).encode()
    with patch("hierarkey.examples.urlopen", _response(payload)):
        assert fetch_genre_wikitext("http://localhost/api") == SAMPLE


def test_fetch_genre_wikitext_rejects_missing_parse():
    payload = json.dumps({"other": 1}).encode()
    with patch("hierarkey.examples.urlopen", _response(payload)):
        with pytest.raises(ValueError, match="parse data not found"):
            fetch_genre_wikitext("http://localhost/api")


def test_fetch_genre_wikitext_rejects_bad_json():
    with patch("hierarkey.examples.urlopen", _response(b"not json")):
        with pytest.raises(json.JSONDecodeError):
            fetch_genre_wikitext("http://localhost/api")


def test_run_example_b_prints_lines(capsys):
    payload = json.dumps({"parse": {"wikitext": {"*": SAMPLE}}}).encode()
    with patch("hierarkey.examples.urlopen", _response(payload)):
        run_example_b()
    out = capsys.readouterr().out
    expected = "".join(f"{line}\n" for line in genre_lines(SAMPLE, HierarKey(1, 2)))
    assert out == expected


def test_run_example_b_reports_fetch_error(capsys):
    with patch("hierarkey.examples.urlopen", side_effect=URLError("offline")):
        run_example_b()
    assert capsys.readouterr().out.startswith("Error fetching data:")


def test_run_example_b_reports_format_error(capsys):
    payload = json.dumps({"parse": "nothing"}).encode()
    with patch("hierarkey.examples.urlopen", _response(payload)):
        run_example_b()
    assert "parse data not found or has unexpected format" in capsys.readouterr().out


def test_run_example_c_prints_lines(capsys):
    run_example_c()
    assert capsys.readouterr().out == "".join(f"{line}\n" for line in example_c_lines())