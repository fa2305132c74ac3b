"""Value record describing one reading of a word."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

_WORD_VARIANT_PATTERN = re.compile(r"\(.*$")


def word_from_pronunciation_id(pronunciation_id: str) -> str:
    """Strip the parenthesised variant suffix, e.g. ``READ(2)`` -> ``READ``."""

    return _WORD_VARIANT_PATTERN.sub("", pronunciation_id)


def normalize_word(word: Optional[str]) -> str:
    """Return ``word`` in the dictionary's canonical (upper) case."""

    return (word or "").strip().upper()


@dataclass(frozen=True)
class Pronunciation:
    """A word with its syllable count and, for dictionary entries, rhyme key.

    Records loaded from the dictionary carry a ``pronunciation_id`` and a
    ``rhyme_key``; records synthesised for unknown words have neither and
    their syllable count is a heuristic estimate.
    """

    word: str
    pronunciation_id: Optional[str]
    num_syllables: int
    rhyme_key: Optional[str] = None

    def __post_init__(self) -> None:
        if self.num_syllables < 1:
            raise ValueError(
                f"num_syllables must be positive, got {self.num_syllables!r}"
            )

    @property
    def is_dictionary_backed(self) -> bool:
        return self.pronunciation_id is not None

    def __str__(self) -> str:
        return self.word


def distinct_rhyme_keys(pronunciations: Iterable[Pronunciation]) -> List[str]:
    """Return the rhyme keys of ``pronunciations`` in order, without repeats."""

    keys: List[str] = []
    for pronunciation in pronunciations:
        key = pronunciation.rhyme_key
        if key is not None and key not in keys:
            keys.append(key)
    return keys


__all__ = [
    "Pronunciation",
    "distinct_rhyme_keys",
    "normalize_word",
    "word_from_pronunciation_id",
]
