"""Location of the three dictionary files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DATA_DIR = Path(__file__).resolve().parents[1] / "data"

WORDS_FILENAME = "words.txt"
MULTIPLES_FILENAME = "multiple.txt"
RHYMES_FILENAME = "rhymes.txt"

WORDS_PATH_ENV_VAR = "PHRASE_RHYMES_WORDS_PATH"
MULTIPLES_PATH_ENV_VAR = "PHRASE_RHYMES_MULTIPLES_PATH"
RHYMES_PATH_ENV_VAR = "PHRASE_RHYMES_RHYMES_PATH"


def _env_path(environ: Mapping[str, str], name: str, default: Path) -> Path:
    value = environ.get(name, "")
    if not value or not value.strip():
        return default
    return Path(value.strip()).expanduser()


@dataclass(frozen=True)
class DictionaryConfig:
    """Paths of the primary word list, multiples list and rhyme list."""

    words_path: Path = DATA_DIR / WORDS_FILENAME
    multiples_path: Path = DATA_DIR / MULTIPLES_FILENAME
    rhymes_path: Path = DATA_DIR / RHYMES_FILENAME

    @classmethod
    def from_directory(cls, directory: Path | str) -> "DictionaryConfig":
        base = Path(directory)
        return cls(
            words_path=base / WORDS_FILENAME,
            multiples_path=base / MULTIPLES_FILENAME,
            rhymes_path=base / RHYMES_FILENAME,
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DictionaryConfig":
        """Build a config from ``PHRASE_RHYMES_*_PATH`` variables.

        Unset or blank variables fall back to the files bundled with the
        package.
        """

        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            words_path=_env_path(env, WORDS_PATH_ENV_VAR, defaults.words_path),
            multiples_path=_env_path(
                env, MULTIPLES_PATH_ENV_VAR, defaults.multiples_path
            ),
            rhymes_path=_env_path(env, RHYMES_PATH_ENV_VAR, defaults.rhymes_path),
        )


__all__ = [
    "DATA_DIR",
    "DictionaryConfig",
    "MULTIPLES_FILENAME",
    "MULTIPLES_PATH_ENV_VAR",
    "RHYMES_FILENAME",
    "RHYMES_PATH_ENV_VAR",
    "WORDS_FILENAME",
    "WORDS_PATH_ENV_VAR",
]
