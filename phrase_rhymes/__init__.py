"""Syllable counts and rhymes for short phrases."""

from .core import (
    DictionaryConfig,
    DictionaryError,
    FileAccessError,
    FormatError,
    Phrase,
    Pronunciation,
    PronunciationStore,
    get_default_store,
)
from .utils import estimate_syllable_count

__all__ = [
    "DictionaryConfig",
    "DictionaryError",
    "FileAccessError",
    "FormatError",
    "Phrase",
    "Pronunciation",
    "PronunciationStore",
    "estimate_syllable_count",
    "get_default_store",
]
