#!/usr/bin/env python3
"""Regenerate the phrase_rhymes dictionary files from the CMU dictionary.

Writes ``words.txt``, ``multiple.txt`` and ``rhymes.txt`` into the output
directory (the bundled data directory by default) using the copy of CMUdict
shipped with :mod:`pronouncing`.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Tuple

import pronouncing

from phrase_rhymes.core.config import (
    DATA_DIR,
    MULTIPLES_FILENAME,
    RHYMES_FILENAME,
    WORDS_FILENAME,
)
from phrase_rhymes.utils import configure_logging, get_logger

logger = get_logger(__name__).bind(component="build_dictionary")


@dataclass
class DictionaryTables:
    """Rows for the three dictionary files, in output order."""

    entries: List[Tuple[str, str, int]] = field(default_factory=list)
    multiples: Dict[str, List[str]] = field(default_factory=dict)
    rhymes: Dict[str, List[str]] = field(default_factory=dict)


def rhyme_key_for(phones: str) -> str:
    """Join the phones from the last stressed vowel onwards with ``-``."""

    return "-".join(pronouncing.rhyming_part(phones).split())


def pronunciation_ids(words: Iterable[str]) -> List[str]:
    """Number repeated words CMU style: ``READ``, ``READ(2)``, ``READ(3)``."""

    seen: Dict[str, int] = {}
    ids: List[str] = []
    for word in words:
        normalized = word.upper()
        seen[normalized] = seen.get(normalized, 0) + 1
        count = seen[normalized]
        ids.append(normalized if count == 1 else f"{normalized}({count})")
    return ids


def build_entries(pronunciations: Sequence[Tuple[str, str]]) -> DictionaryTables:
    """Turn ``(word, phones)`` pairs into dictionary rows."""

    tables = DictionaryTables()
    by_word: Dict[str, List[str]] = {}
    ids = pronunciation_ids(word for word, _ in pronunciations)

    for pronunciation_id, (word, phones) in zip(ids, pronunciations):
        rhyme_key = rhyme_key_for(phones)
        syllables = max(1, pronouncing.syllable_count(phones))
        tables.entries.append((pronunciation_id, rhyme_key, syllables))
        by_word.setdefault(word.upper(), []).append(pronunciation_id)
        tables.rhymes.setdefault(rhyme_key, []).append(pronunciation_id)

    tables.multiples = {word: ids for word, ids in by_word.items() if len(ids) > 1}
    return tables


def write_dictionary(tables: DictionaryTables, output_dir: Path) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)

    with (output_dir / WORDS_FILENAME).open("w", encoding="utf-8") as handle:
        for pronunciation_id, rhyme_key, syllables in tables.entries:
            handle.write(f"{pronunciation_id} {rhyme_key} {syllables}\n")

    with (output_dir / MULTIPLES_FILENAME).open("w", encoding="utf-8") as handle:
        for word, ids in tables.multiples.items():
            handle.write(" ".join([word, *ids]) + "\n")

    with (output_dir / RHYMES_FILENAME).open("w", encoding="utf-8") as handle:
        for rhyme_key, ids in tables.rhymes.items():
            handle.write(" ".join([rhyme_key, *ids]) + "\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build the phrase_rhymes dictionary files from CMUdict."
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=DATA_DIR,
        help="Directory receiving words.txt, multiple.txt and rhymes.txt.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to PHRASE_RHYMES_LOG_LEVEL or INFO).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    pronouncing.init_cmu()
    tables = build_entries(pronouncing.pronunciations)
    write_dictionary(tables, args.output_dir)

    logger.info(
        "Dictionary files written",
        context={
            "output_dir": str(args.output_dir),
            "pronunciations": len(tables.entries),
            "multiple_words": len(tables.multiples),
            "rhyme_keys": len(tables.rhymes),
        },
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
