import pytest

from sentimental.influence import modulate, total
from sentimental.ngrams import Match


def word(phrase, weight, start=0):
    return Match(phrase, start, 1, weight=weight)


def infl(phrase, multiplier, start=0):
    return Match(phrase, start, 1, multiplier=multiplier)


def test_influencer_boosts_next_match_only():
    out = modulate([infl("really", 2.0), word("love", 1.0), word("hate", -1.0)])
    assert [m.effective for m in out] == [0.0, 2.0, -1.0]
    assert total(out) == pytest.approx(1.0)


def test_consecutive_influencers_compose():
    out = modulate([infl("really", 2.0), infl("really", 2.0), word("love", 1.0)])
    assert total(out) == pytest.approx(4.0)
    out = modulate([infl("very", 1.5), infl("not", -1.0), word("good", 1.0)])
    assert total(out) == pytest.approx(-1.5)


def test_influence_is_spent_on_unmatched_token():
    out = modulate([infl("really", 2.0), word("ruby", 0.0), word("love", 1.0)])
    assert total(out) == pytest.approx(1.0)


def test_trailing_influencer_contributes_nothing():
    out = modulate([word("love", 1.0), infl("really", 3.0)])
    assert total(out) == pytest.approx(1.0)


def test_input_matches_untouched():
    matches = [infl("really", 2.0), word("love", 1.0)]
    modulate(matches)
    assert matches[1].effective == 0.0
