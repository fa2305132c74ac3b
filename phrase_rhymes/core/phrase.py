"""Phrase-level syllable and rhyme summary built on the pronunciation store."""

from __future__ import annotations

import re
from typing import Dict, List, Optional

from .pronunciation import Pronunciation, distinct_rhyme_keys
from .pronunciation_store import PronunciationStore, get_default_store

_DISALLOWED_CHARACTERS = re.compile(r"[^A-Z ']")


def tokenize_phrase(phrase: str) -> List[str]:
    """Uppercase ``phrase``, drop punctuation and split on whitespace."""

    return _DISALLOWED_CHARACTERS.sub("", (phrase or "").upper()).split()


class Phrase:
    """Syllable count and rhymes for a phrase, keyed on its last word.

    >>> phrase = Phrase("to be or not to beer")
    >>> phrase.syllables
    6
    >>> phrase.flat_rhymes
    ['adhere', 'deer', 'here']
    """

    def __init__(self, phrase: str, store: Optional[PronunciationStore] = None) -> None:
        self.text = phrase
        self.store = store or get_default_store()
        self.tokens = tokenize_phrase(phrase)
        self.pronunciations: List[List[Pronunciation]] = [
            self.store.get_pronunciations(token) for token in self.tokens
        ]
        self._rhymes: Optional[Dict[str, List[str]]] = None

    @property
    def _last_word_pronunciations(self) -> List[Pronunciation]:
        return self.pronunciations[-1] if self.pronunciations else []

    @property
    def syllables(self) -> int:
        return sum(options[0].num_syllables for options in self.pronunciations)

    @property
    def last_word(self) -> str:
        pronunciations = self._last_word_pronunciations
        return pronunciations[0].word.lower() if pronunciations else ""

    @property
    def is_dictionary_word(self) -> bool:
        """Whether the last word is in the dictionary, i.e. rhymes are available."""

        pronunciations = self._last_word_pronunciations
        return bool(pronunciations) and pronunciations[0].is_dictionary_backed

    @property
    def rhyme_keys(self) -> List[str]:
        return distinct_rhyme_keys(self._last_word_pronunciations)

    @property
    def rhyme_key(self) -> Optional[str]:
        keys = self.rhyme_keys
        return keys[0] if keys else None

    @property
    def rhymes(self) -> Dict[str, List[str]]:
        """Map each rhyme key of the last word to its rhyming words."""

        if self._rhymes is None:
            self._rhymes = self._load_rhymes()
        return self._rhymes

    @property
    def flat_rhymes(self) -> List[str]:
        return [word for words in self.rhymes.values() for word in words]

    def _load_rhymes(self) -> Dict[str, List[str]]:
        if not self.is_dictionary_word:
            return {}

        rhymes: Dict[str, List[str]] = {}
        for pronunciation in self._last_word_pronunciations:
            if pronunciation.rhyme_key is None:
                continue
            rhymes[pronunciation.rhyme_key] = [
                match.word.lower() for match in self.store.get_rhymes(pronunciation)
            ]
        return rhymes

    def __repr__(self) -> str:
        return f"Phrase({self.text!r})"


__all__ = ["Phrase", "tokenize_phrase"]
