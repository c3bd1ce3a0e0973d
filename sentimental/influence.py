"""
Apply influencer multipliers to the match that immediately follows them.

"i really really love ruby"  ->  love * really * really
"i really , hate ..."        ->  unchanged: the influence is spent on the
                                 next match even when it scores nothing
"""

from dataclasses import replace

from .ngrams import Match


def modulate(matches: list[Match]) -> list[Match]:
    modulated = []
    pending = 1.0
    for match in matches:
        if match.is_influencer:
            pending *= match.multiplier
            modulated.append(replace(match, effective=0.0))
        else:
            modulated.append(replace(match, effective=match.weight * pending))
            pending = 1.0
    return modulated


def total(matches: list[Match]) -> float:
    return sum(m.effective for m in matches)
