from phrase_rhymes.core import Phrase, PronunciationStore, tokenize_phrase
from phrase_rhymes.utils.syllables import estimate_syllable_count


def test_tokenize_phrase_uppercases_and_drops_punctuation():
    assert tokenize_phrase("To be, or not -- to beer!") == ["TO", "BE", "OR", "NOT", "TO", "BEER"]
    assert tokenize_phrase("don't stop") == ["DON'T", "STOP"]
    assert tokenize_phrase("") == []


def test_phrase_syllables_and_rhymes_from_bundled_dictionary(bundled_store):
    phrase = Phrase("to be or not to beer", store=bundled_store)

    assert phrase.syllables == 6
    assert phrase.last_word == "beer"
    assert phrase.is_dictionary_word
    assert phrase.rhyme_key == "IH1-R"
    assert phrase.flat_rhymes == ["adhere", "deer", "here"]


def test_phrase_with_homograph_returns_rhymes_per_key(bundled_store):
    phrase = Phrase("I read", store=bundled_store)

    assert phrase.rhyme_keys == ["IY1-D", "EH1-D"]
    assert phrase.rhymes == {
        "IY1-D": ["bead", "lead", "need", "seed"],
        "EH1-D": ["bed", "head", "lead", "red"],
    }
    assert phrase.syllables == estimate_syllable_count("i") + 1


def test_phrase_uses_first_pronunciation_for_syllables(sample_store):
    phrase = Phrase("Poetry read", store=sample_store)

    assert phrase.syllables == 4


def test_unknown_last_word_has_no_rhymes(sample_store):
    phrase = Phrase("a glorpflex", store=sample_store)

    assert not phrase.is_dictionary_word
    assert phrase.rhyme_keys == []
    assert phrase.rhyme_key is None
    assert phrase.rhymes == {}
    assert phrase.flat_rhymes == []
    assert phrase.last_word == "glorpflex"
    assert phrase.syllables == estimate_syllable_count("a") + estimate_syllable_count(
        "glorpflex"
    )


def test_empty_phrase(sample_store):
    phrase = Phrase("?!", store=sample_store)

    assert phrase.syllables == 0
    assert phrase.last_word == ""
    assert not phrase.is_dictionary_word
    assert phrase.rhymes == {}


def test_rhymes_are_computed_once(sample_store, monkeypatch):
    phrase = Phrase("bed", store=sample_store)
    calls = []
    original = sample_store.get_rhymes

    def counting_get_rhymes(pronunciation):
        calls.append(pronunciation)
        return original(pronunciation)

    monkeypatch.setattr(sample_store, "get_rhymes", counting_get_rhymes)

    assert phrase.rhymes == {"K-ED": ["read"]}
    assert phrase.rhymes == {"K-ED": ["read"]}
    assert len(calls) == 1


def test_phrase_defaults_to_process_store(monkeypatch, sample_store):
    from phrase_rhymes.core import phrase as phrase_module

    monkeypatch.setattr(phrase_module, "get_default_store", lambda: sample_store)

    assert Phrase("bed").store is sample_store
    assert isinstance(Phrase("bed").store, PronunciationStore)
