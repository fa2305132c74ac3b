import dataclasses

import pytest

from phrase_rhymes.core import (
    Pronunciation,
    distinct_rhyme_keys,
    normalize_word,
    word_from_pronunciation_id,
)


def test_word_from_pronunciation_id_strips_variant_suffix():
    assert word_from_pronunciation_id("READ(2)") == "READ"
    assert word_from_pronunciation_id("READ") == "READ"


def test_normalize_word_uppercases_and_strips():
    assert normalize_word("  Read ") == "READ"
    assert normalize_word(None) == ""


def test_dictionary_backed_follows_pronunciation_id():
    dictionary = Pronunciation("READ", "READ(1)", 1, "K-EED")
    heuristic = Pronunciation("GLORPFLEX", None, 2)

    assert dictionary.is_dictionary_backed
    assert not heuristic.is_dictionary_backed
    assert heuristic.rhyme_key is None


def test_pronunciation_is_immutable():
    pronunciation = Pronunciation("READ", "READ(1)", 1, "K-EED")

    with pytest.raises(dataclasses.FrozenInstanceError):
        pronunciation.word = "SEED"  # type: ignore[misc]


def test_pronunciation_rejects_non_positive_syllables():
    with pytest.raises(ValueError):
        Pronunciation("READ", "READ(1)", 0, "K-EED")


def test_str_returns_word():
    assert str(Pronunciation("READ", "READ(1)", 1, "K-EED")) == "READ"


def test_distinct_rhyme_keys_keeps_order_and_skips_missing_keys():
    pronunciations = [
        Pronunciation("LEAD", "LEAD", 1, "IY1-D"),
        Pronunciation("LEAD", "LEAD(2)", 1, "EH1-D"),
        Pronunciation("LEED", "LEED", 1, "IY1-D"),
        Pronunciation("GLORPFLEX", None, 2),
    ]

    assert distinct_rhyme_keys(pronunciations) == ["IY1-D", "EH1-D"]
    assert distinct_rhyme_keys([]) == []
