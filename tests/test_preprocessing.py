import json

from sentimental.preprocessing import tokenize


def test_lowercases_and_strips_punctuation():
    assert tokenize("I love, ruby!") == ["i", "love", "ruby"]
    assert tokenize("I love, ruby") == tokenize("I love ruby")


def test_keeps_emoticons():
    assert tokenize("I love ruby <3") == ["i", "love", "ruby", "<3"]
    assert tokenize("great :-) ok :(") == ["great", ":-)", "ok", ":("]
    assert tokenize("so good :-),") == ["so", "good", ":-)"]


def test_french_accents_and_apostrophes():
    assert tokenize("Êtes-vous amoureux de ruby?")[0] == "êtes"
    assert tokenize("J'adore le ruby") == ["j'adore", "le", "ruby"]
    assert tokenize("J’adore le ruby") == ["j'adore", "le", "ruby"]
    assert tokenize("c'est nul, c'est pas bien") == ["c'est", "nul", "c'est", "pas", "bien"]


def test_quotes_and_punctuation_runs_dropped():
    assert tokenize("'cool' ... ?! , .") == ["cool"]


def test_empty_and_blank_input():
    assert tokenize("") == []
    assert tokenize("   \t\n") == []
    assert tokenize(None) == []


def test_attached_punctuation_splits_words():
    assert tokenize("I (love) ruby") == ["i", "love", "ruby"]
    assert tokenize('I "love" ruby') == ["i", "love", "ruby"]
    assert tokenize("great,awesome") == ["great", "awesome"]
    assert tokenize("I hate...javascript") == ["i", "hate", "javascript"]
    assert tokenize("open-source") == ["open", "source"]
    assert tokenize("Êtes-vous") == ["êtes", "vous"]


def test_emoticons_attached_to_words():
    assert tokenize("ruby<3") == ["ruby", "<3"]
    assert tokenize("cool:D") == ["cool", ":d"]
    assert tokenize("à 10:30") == ["à", "10", "30"]


def test_lexicon_keys_survive_tokenization(data_dir):
    for path in sorted(data_dir.glob("*.json")):
        for key in json.loads(path.read_text(encoding="utf-8")):
            assert tokenize(key) == key.split(), f"{path.name}: {key!r}"
