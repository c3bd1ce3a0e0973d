from sentimental.ngrams import longest_matches, window_passes
from sentimental.preprocessing import tokenize


def phrases(matches):
    return [m.phrase for m in matches]


def test_longest_phrase_wins_and_consumes_tokens():
    words = {"happy hour": 1.0, "not happy hour": -5.0, "happy": 0.5}
    tokens = tokenize("why not happy hour, but happy so hour?")
    matches = longest_matches(tokens, words, {}, max_size=3)
    assert phrases(matches) == ["why", "not happy hour", "but", "happy", "so", "hour"]
    assert [m.start for m in matches] == [0, 1, 4, 5, 6, 7]
    assert sum(m.size for m in matches) == len(tokens)


def test_phrase_longer_than_window_never_matches():
    words = {"happy hour": 1.0, "not so happy hour": -5.0}
    matches = longest_matches(tokenize("why not so happy hour ?"), words, {}, max_size=3)
    assert [m.phrase for m in matches if m.matched] == ["happy hour"]


def test_window_of_one_is_word_lookup():
    words = {"happy hour": 1.0, "happy": 0.5}
    matches = longest_matches(["happy", "hour"], words, {}, max_size=1)
    assert phrases(matches) == ["happy", "hour"]
    assert [m.weight for m in matches] == [0.5, 0.0]


def test_influencer_lookup_is_separate_and_takes_precedence():
    words = {"really": 9.0, "love": 1.0}
    infl = {"really": 2.0, "kind of": 0.5}
    matches = longest_matches(["really", "kind", "of", "love"], words, infl, max_size=2)
    assert phrases(matches) == ["really", "kind of", "love"]
    assert matches[0].is_influencer and matches[0].weight == 0.0
    assert matches[1].multiplier == 0.5
    assert not matches[2].is_influencer


def test_window_larger_than_text():
    matches = longest_matches(["love"], {"love": 1.0}, {}, max_size=4)
    assert phrases(matches) == ["love"]


def test_empty_tokens():
    assert longest_matches([], {"a": 1.0}, {}, max_size=3) == []
    assert [list(p) for p in window_passes([], {"a": 1.0}, {}, max_size=2)] == [[], []]


def test_window_passes_scan_every_size():
    words = {"happy hour": 1.0, "not happy hour": -5.0}
    tokens = tokenize("why not happy hour")
    passes = list(window_passes(tokens, words, {}, max_size=3))
    assert [len(p) for p in passes] == [4, 3, 2]
    assert [m.phrase for p in passes for m in p if m.matched] == ["happy hour", "not happy hour"]
