import sys
from pathlib import Path
from textwrap import dedent

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
for path in (PROJECT_ROOT, PROJECT_ROOT / "scripts"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from phrase_rhymes.core import DictionaryConfig, PronunciationStore


SAMPLE_WORDS = """\
READ(1) K-EED 1
READ(2) K-ED 1
SEED(1) K-EED 1
BEAD(1) K-EED 1
BED K-ED 1
ORANGE K-ORANGE 2
POETRY K-OETRY 3
"""

SAMPLE_MULTIPLES = """\
READ READ(1) READ(2)
"""

SAMPLE_RHYMES = """\
K-EED READ(1) SEED(1) BEAD(1)
K-ED READ(2) BED
K-ORANGE ORANGE
K-OETRY POETRY
"""


@pytest.fixture
def dictionary_files(tmp_path):
    """Factory writing the three dictionary files and returning their config."""

    def _write(
        words: str = SAMPLE_WORDS,
        multiples: str = SAMPLE_MULTIPLES,
        rhymes: str = SAMPLE_RHYMES,
    ) -> DictionaryConfig:
        config = DictionaryConfig.from_directory(tmp_path)
        config.words_path.write_text(dedent(words), encoding="utf-8")
        config.multiples_path.write_text(dedent(multiples), encoding="utf-8")
        config.rhymes_path.write_text(dedent(rhymes), encoding="utf-8")
        return config

    return _write


@pytest.fixture
def sample_store(dictionary_files):
    return PronunciationStore(dictionary_files())


@pytest.fixture
def bundled_store():
    """Store reading the dictionary files shipped with the package."""

    return PronunciationStore()
