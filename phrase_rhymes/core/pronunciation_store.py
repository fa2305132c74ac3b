"""In-memory indices over the static pronunciation dictionary."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

from phrase_rhymes.utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)
from phrase_rhymes.utils.syllables import estimate_syllable_count

from .config import DictionaryConfig
from .exceptions import FileAccessError, FormatError
from .pronunciation import (
    Pronunciation,
    distinct_rhyme_keys,
    normalize_word,
    word_from_pronunciation_id,
)

_LOAD_SECONDS = create_histogram(
    "phrase_rhymes_dictionary_load_seconds",
    "Time spent reading the pronunciation dictionary files.",
)
_LOOKUPS = create_counter(
    "phrase_rhymes_lookups",
    "Word lookups grouped by the source of the returned pronunciations.",
    label_names=("source",),
)
_UNRESOLVED_REFERENCES = create_counter(
    "phrase_rhymes_unresolved_references",
    "Pronunciation ids dropped because the word list does not define them.",
    label_names=("source",),
)
_DUPLICATE_ENTRIES = create_counter(
    "phrase_rhymes_duplicate_entries",
    "Dictionary lines whose key repeats an earlier line of the same file.",
    label_names=("source",),
)


@dataclass(frozen=True)
class _Indices:
    by_pronunciation_id: Dict[str, Pronunciation]
    by_word_multi: Dict[str, Tuple[Pronunciation, ...]]
    by_rhyme_key: Dict[str, Tuple[Pronunciation, ...]]
    unresolved_references: int


def _read_records(path: Path) -> Iterator[Tuple[int, List[str]]]:
    """Yield ``(line_number, fields)`` for every non-blank line of ``path``."""

    try:
        with path.open("r", encoding="utf-8") as handle:
            for line_number, line in enumerate(handle, start=1):
                fields = line.split()
                if fields:
                    yield line_number, fields
    except (OSError, UnicodeDecodeError) as exc:
        raise FileAccessError(path, str(exc)) from exc


class PronunciationStore:
    """Lazily loaded lookup of pronunciations and rhyme groups.

    The store reads three files once: the primary word list
    (``ID RHYME_KEY SYLLABLES``), the multiple pronunciations list
    (``WORD ID...``) and the rhyme list (``RHYME_KEY ID...``). All three
    indices share the same :class:`Pronunciation` instances and are never
    modified after a successful load.
    """

    def __init__(
        self,
        config: Optional[DictionaryConfig] = None,
        *,
        words_path: Optional[Path | str] = None,
        multiples_path: Optional[Path | str] = None,
        rhymes_path: Optional[Path | str] = None,
    ) -> None:
        base = config or DictionaryConfig()
        self.config = DictionaryConfig(
            words_path=Path(words_path) if words_path is not None else base.words_path,
            multiples_path=(
                Path(multiples_path)
                if multiples_path is not None
                else base.multiples_path
            ),
            rhymes_path=Path(rhymes_path) if rhymes_path is not None else base.rhymes_path,
        )
        self._logger = get_logger(__name__).bind(component="pronunciation_store")
        self._lock = threading.Lock()
        self._by_pronunciation_id: Dict[str, Pronunciation] = {}
        self._by_word_multi: Dict[str, Tuple[Pronunciation, ...]] = {}
        self._by_rhyme_key: Dict[str, Tuple[Pronunciation, ...]] = {}
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # Loading ---------------------------------------------------------------
    def load(self) -> None:
        """Build the indices unless they are already built.

        Raises :class:`FileAccessError` or :class:`FormatError`; on failure
        nothing is published and the next call tries again.
        """

        if self._loaded:
            return

        with self._lock:
            if self._loaded:
                return

            paths = {
                "words_path": str(self.config.words_path),
                "multiples_path": str(self.config.multiples_path),
                "rhymes_path": str(self.config.rhymes_path),
            }
            with start_span("pronunciation_store.load", paths) as span:
                started = time.perf_counter()
                try:
                    indices = self._build_indices()
                except (FileAccessError, FormatError) as exc:
                    record_exception(span, exc)
                    self._logger.error(
                        "Pronunciation dictionary failed to load",
                        context={**paths, "error": str(exc)},
                    )
                    raise
                elapsed = time.perf_counter() - started
                _LOAD_SECONDS.observe(elapsed)

                self._by_pronunciation_id = indices.by_pronunciation_id
                self._by_word_multi = indices.by_word_multi
                self._by_rhyme_key = indices.by_rhyme_key
                self._loaded = True

                summary = {
                    "pronunciations": len(indices.by_pronunciation_id),
                    "multiple_words": len(indices.by_word_multi),
                    "rhyme_keys": len(indices.by_rhyme_key),
                    "unresolved_references": indices.unresolved_references,
                }
                add_span_attributes(span, summary)
                self._logger.info(
                    "Pronunciation dictionary loaded",
                    context={**summary, "elapsed_ms": round(elapsed * 1000, 3)},
                )

    def _build_indices(self) -> _Indices:
        by_pronunciation_id = self._parse_words(self.config.words_path)
        unresolved = 0

        by_word_multi: Dict[str, Tuple[Pronunciation, ...]] = {}
        path = self.config.multiples_path
        for line_number, fields in _read_records(path):
            if len(fields) < 2:
                raise FormatError(
                    path, line_number, "expected a word followed by pronunciation ids"
                )
            word, *pronunciation_ids = fields
            resolved, missing = self._resolve(
                by_pronunciation_id, pronunciation_ids, path, line_number, "multiples"
            )
            unresolved += missing
            if resolved:
                self._register(
                    by_word_multi, normalize_word(word), resolved, path, line_number, "multiples"
                )

        by_rhyme_key: Dict[str, Tuple[Pronunciation, ...]] = {}
        path = self.config.rhymes_path
        for line_number, fields in _read_records(path):
            if len(fields) < 2:
                raise FormatError(
                    path, line_number, "expected a rhyme key followed by pronunciation ids"
                )
            rhyme_key, *pronunciation_ids = fields
            resolved, missing = self._resolve(
                by_pronunciation_id, pronunciation_ids, path, line_number, "rhymes"
            )
            unresolved += missing
            if resolved:
                self._register(
                    by_rhyme_key, rhyme_key, resolved, path, line_number, "rhymes"
                )

        return _Indices(
            by_pronunciation_id=by_pronunciation_id,
            by_word_multi=by_word_multi,
            by_rhyme_key=by_rhyme_key,
            unresolved_references=unresolved,
        )

    def _parse_words(self, path: Path) -> Dict[str, Pronunciation]:
        by_pronunciation_id: Dict[str, Pronunciation] = {}
        for line_number, fields in _read_records(path):
            if len(fields) != 3:
                raise FormatError(
                    path,
                    line_number,
                    f"expected 3 fields (id, rhyme key, syllables), got {len(fields)}",
                )
            pronunciation_id, rhyme_key, raw_syllables = fields
            # Plain ASCII digits only; int() would also take "+1", "1_0" or "١".
            if not (raw_syllables.isascii() and raw_syllables.isdigit()) or int(raw_syllables) < 1:
                raise FormatError(
                    path, line_number, f"invalid syllable count {raw_syllables!r}"
                )
            pronunciation = Pronunciation(
                word=word_from_pronunciation_id(pronunciation_id),
                pronunciation_id=pronunciation_id,
                num_syllables=int(raw_syllables),
                rhyme_key=rhyme_key,
            )
            self._register(
                by_pronunciation_id, pronunciation_id, pronunciation, path, line_number, "words"
            )
        return by_pronunciation_id

    def _register(
        self,
        index: Dict[str, Any],
        key: str,
        value: Any,
        path: Path,
        line_number: int,
        source: str,
    ) -> None:
        """Store ``value`` under ``key``; a repeated key keeps the last line."""

        if key in index:
            _DUPLICATE_ENTRIES.labels(source=source).inc()
            self._logger.warning(
                "Duplicate dictionary entry replaces an earlier line",
                context={"key": key, "path": str(path), "line": line_number},
            )
        index[key] = value

    def _resolve(
        self,
        by_pronunciation_id: Dict[str, Pronunciation],
        pronunciation_ids: List[str],
        path: Path,
        line_number: int,
        source: str,
    ) -> Tuple[Tuple[Pronunciation, ...], int]:
        resolved: List[Pronunciation] = []
        missing = 0
        for pronunciation_id in pronunciation_ids:
            pronunciation = by_pronunciation_id.get(pronunciation_id)
            if pronunciation is None:
                missing += 1
                _UNRESOLVED_REFERENCES.labels(source=source).inc()
                self._logger.debug(
                    "Dropping unresolved pronunciation id",
                    context={
                        "pronunciation_id": pronunciation_id,
                        "path": str(path),
                        "line": line_number,
                    },
                )
                continue
            resolved.append(pronunciation)
        return tuple(resolved), missing

    # Queries ---------------------------------------------------------------
    def get_pronunciations(self, word: str) -> List[Pronunciation]:
        """Return every known pronunciation of ``word``; never empty.

        Words absent from the dictionary get a single synthesised record
        whose syllable count comes from :func:`estimate_syllable_count`.
        """

        self.load()
        normalized = normalize_word(word)

        multiple = self._by_word_multi.get(normalized)
        if multiple is not None:
            _LOOKUPS.labels(source="multiple").inc()
            return list(multiple)

        single = self._by_pronunciation_id.get(normalized)
        if single is not None:
            _LOOKUPS.labels(source="single").inc()
            return [single]

        _LOOKUPS.labels(source="heuristic").inc()
        return [
            Pronunciation(
                word=normalized,
                pronunciation_id=None,
                num_syllables=estimate_syllable_count(normalized.lower()),
                rhyme_key=None,
            )
        ]

    def get_rhymes(self, pronunciation: Pronunciation) -> List[Pronunciation]:
        """Return pronunciations sharing ``pronunciation``'s rhyme key.

        The pronunciation itself is excluded. Heuristic pronunciations have
        no rhyme key and yield an empty list.
        """

        self.load()
        if pronunciation.rhyme_key is None:
            return []

        group = self._by_rhyme_key.get(pronunciation.rhyme_key, ())
        return [
            candidate
            for candidate in group
            if candidate is not pronunciation
            and candidate.pronunciation_id != pronunciation.pronunciation_id
        ]

    def lookup(self, pronunciation_id: str) -> Optional[Pronunciation]:
        """Return the dictionary record for ``pronunciation_id`` if present."""

        self.load()
        return self._by_pronunciation_id.get(pronunciation_id)

    def rhyme_keys_for(self, word: str) -> List[str]:
        return distinct_rhyme_keys(self.get_pronunciations(word))


_default_store: Optional[PronunciationStore] = None
_default_store_lock = threading.Lock()


def get_default_store() -> PronunciationStore:
    """Return the process-wide store configured from the environment."""

    global _default_store

    if _default_store is None:
        with _default_store_lock:
            if _default_store is None:
                _default_store = PronunciationStore(DictionaryConfig.from_env())
    return _default_store


__all__ = ["PronunciationStore", "get_default_store"]
