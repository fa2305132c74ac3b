from pathlib import Path

from phrase_rhymes.core import config as config_module
from phrase_rhymes.core import pronunciation_store
from phrase_rhymes.core.config import DATA_DIR, DictionaryConfig


def test_defaults_point_at_bundled_data():
    config = DictionaryConfig()

    assert config.words_path == DATA_DIR / "words.txt"
    assert config.multiples_path == DATA_DIR / "multiple.txt"
    assert config.rhymes_path == DATA_DIR / "rhymes.txt"
    assert config.words_path.exists()


def test_from_env_overrides_individual_paths(tmp_path):
    environ = {
        config_module.WORDS_PATH_ENV_VAR: str(tmp_path / "w.txt"),
        config_module.RHYMES_PATH_ENV_VAR: "  ",
    }

    config = DictionaryConfig.from_env(environ)

    assert config.words_path == tmp_path / "w.txt"
    assert config.multiples_path == DictionaryConfig().multiples_path
    assert config.rhymes_path == DictionaryConfig().rhymes_path


def test_from_directory_uses_standard_filenames(tmp_path):
    config = DictionaryConfig.from_directory(tmp_path)

    assert config.words_path == tmp_path / "words.txt"
    assert config.multiples_path == tmp_path / "multiple.txt"
    assert config.rhymes_path == tmp_path / "rhymes.txt"


def test_default_store_is_shared_and_reads_environment(monkeypatch, dictionary_files):
    config = dictionary_files()
    monkeypatch.setenv(config_module.WORDS_PATH_ENV_VAR, str(config.words_path))
    monkeypatch.setattr(pronunciation_store, "_default_store", None)

    store = pronunciation_store.get_default_store()

    assert store is pronunciation_store.get_default_store()
    assert store.config.words_path == Path(config.words_path)
    assert store.config.rhymes_path == DictionaryConfig().rhymes_path
