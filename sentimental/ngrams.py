"""
N-gram lookup of token sequences against the word_scores / influencers tables.

Two matching modes:
  • "longest"      greedy longest-first, non-overlapping: at each position try
                   windows of W, W-1, ..., 1 tokens; the first phrase found in
                   either table consumes its tokens, otherwise one unmatched
                   token is consumed. No backtracking.
  • "all-windows"  (default) every window size 1..W is scanned independently over the
                   whole token stream (one pass per size, overlapping).

Phrases longer than W never match in either mode.
"""

from dataclasses import dataclass
from typing import Iterator, Mapping, Optional

LONGEST = "longest"
ALL_WINDOWS = "all-windows"
MATCHING_MODES = (LONGEST, ALL_WINDOWS)


@dataclass(frozen=True)
class Match:
    phrase: str
    start: int              # index of the first token
    size: int               # number of tokens consumed
    weight: float = 0.0     # lexicon weight, 0.0 when unmatched or influencer
    multiplier: Optional[float] = None   # set only for influencers
    effective: float = 0.0  # weight after influence, filled in by modulate()

    @property
    def is_influencer(self) -> bool:
        return self.multiplier is not None

    @property
    def matched(self) -> bool:
        return self.is_influencer or self.weight != 0.0


def _lookup(phrase, start, size, word_scores, influencers):
    # influencer-hood is checked on its own table first; a phrase present in
    # both acts as an influencer
    if phrase in influencers:
        return Match(phrase, start, size, multiplier=float(influencers[phrase]))
    if phrase in word_scores:
        return Match(phrase, start, size, weight=float(word_scores[phrase]))
    return None


def longest_matches(
    tokens: list[str],
    word_scores: Mapping[str, float],
    influencers: Mapping[str, float],
    max_size: int = 1,
) -> list[Match]:
    matches = []
    pos = 0
    while pos < len(tokens):
        found = None
        for size in range(min(max_size, len(tokens) - pos), 0, -1):
            phrase = " ".join(tokens[pos:pos + size])
            found = _lookup(phrase, pos, size, word_scores, influencers)
            if found is not None:
                break
        if found is None:
            found = Match(tokens[pos], pos, 1)
        matches.append(found)
        pos += found.size
    return matches


def window_passes(
    tokens: list[str],
    word_scores: Mapping[str, float],
    influencers: Mapping[str, float],
    max_size: int = 1,
) -> Iterator[list[Match]]:
    """Yield one match sequence per window size, 1 through ``max_size``."""
    for size in range(1, max_size + 1):
        passes = []
        for pos in range(len(tokens) - size + 1):
            phrase = " ".join(tokens[pos:pos + size])
            found = _lookup(phrase, pos, size, word_scores, influencers)
            passes.append(found if found is not None else Match(phrase, pos, size))
        yield passes
