"""Pronunciation dictionary, rhyme lookup and phrase summaries."""

from .config import DictionaryConfig
from .exceptions import DictionaryError, FileAccessError, FormatError
from .phrase import Phrase, tokenize_phrase
from .pronunciation import (
    Pronunciation,
    distinct_rhyme_keys,
    normalize_word,
    word_from_pronunciation_id,
)
from .pronunciation_store import PronunciationStore, get_default_store

__all__ = [
    "DictionaryConfig",
    "DictionaryError",
    "FileAccessError",
    "FormatError",
    "Phrase",
    "Pronunciation",
    "PronunciationStore",
    "distinct_rhyme_keys",
    "get_default_store",
    "normalize_word",
    "tokenize_phrase",
    "word_from_pronunciation_id",
]
