"""
Lexicon sentiment scorer for short English / French texts.

    tokens  = preprocessing.tokenize(text)
    matches = ngrams.window_passes(...)    one pass per window size 1..W
              or ngrams.longest_matches(...) with matching="longest"
    matches = influence.modulate(matches)
    score   = sum(effective weights)      (0 if a neutral regexp matches)
    label   = positive / negative / neutral against +-threshold

Usage:
    analyzer = Sentimental(threshold=0.1)
    analyzer.load_defaults()
    analyzer.sentiment("I love ruby <3")     # Sentiment.POSITIVE
"""

import enum
import logging
from pathlib import Path
from types import MappingProxyType

import regex as re

from . import influence
from .config import check_matching, check_ngrams, check_threshold, validate_config
from .exceptions import InvalidPatternError
from .io_utils import read_json_mapping, read_tsv_mapping, to_number
from .ngrams import ALL_WINDOWS, longest_matches, window_passes
from .preprocessing import tokenize

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_WORD_FILES = ("slang", "en_words", "fr_words")
DEFAULT_INFLUENCER_FILE = "influencers"


class Sentiment(str, enum.Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"

    def __str__(self):
        return self.value


def compile_pattern(pattern):
    """Compile a neutral regexp; already-compiled patterns are kept as they are."""
    if isinstance(pattern, str):
        try:
            return re.compile(pattern)
        except re.error as e:
            raise InvalidPatternError(pattern, str(e)) from e
    if callable(getattr(pattern, "search", None)):
        return pattern
    raise InvalidPatternError(pattern, "expected a string or a compiled pattern")


def _normalize_key(key):
    # keys go through the same tokenizer as the text they are matched against
    return " ".join(tokenize(str(key)))


class Sentimental:

    def __init__(self, threshold=0.0, word_scores=None, influencers=None,
                 neutral_regexps=None, ngrams=1, matching=ALL_WINDOWS):
        self._threshold = check_threshold(threshold)
        self._ngrams = check_ngrams(ngrams)
        self._matching = check_matching(matching)
        self._word_scores = {}
        self._influencers = {}
        self._neutral_regexps = []
        if word_scores:
            self.load_word_scores(word_scores)
        if influencers:
            self.load_influencers(influencers)
        if neutral_regexps:
            self.load_neutral_patterns(neutral_regexps)

    @classmethod
    def from_config(cls, cfg):
        cfg = validate_config(cfg)
        analyzer = cls(threshold=cfg["threshold"], ngrams=cfg["ngrams"],
                       matching=cfg["matching"], neutral_regexps=cfg["neutral_regexps"])
        if cfg["load_defaults"]:
            analyzer.load_defaults()
        for path in cfg["word_files"]:
            analyzer.load_words_file(path)
        for path in cfg["influencer_files"]:
            analyzer.load_influencers_file(path)
        return analyzer

    def __repr__(self):
        return (f"<Sentimental threshold={self._threshold} ngrams={self._ngrams} "
                f"matching={self._matching!r} words={len(self._word_scores)} "
                f"influencers={len(self._influencers)} "
                f"neutral_regexps={len(self._neutral_regexps)}>")

    # --- read-only state ---------------------------------------------------

    @property
    def threshold(self) -> float:
        return self._threshold

    @property
    def ngrams(self) -> int:
        return self._ngrams

    @property
    def matching(self) -> str:
        return self._matching

    @property
    def word_scores(self):
        return MappingProxyType(self._word_scores)

    @property
    def influencers(self):
        return MappingProxyType(self._influencers)

    @property
    def neutral_regexps(self):
        return tuple(self._neutral_regexps)

    # --- loading -------------------------------------------------------------

    def _merge(self, target, mapping, source):
        staged = {}
        for key, value in dict(mapping).items():
            phrase = _normalize_key(key)
            if not phrase:
                logger.warning(f"{source}: skipping key {key!r}, it contains no tokens")
                continue
            staged[phrase] = to_number(source, key, value)
        target.update(staged)
        return len(staged)

    def load_word_scores(self, mapping, source="<mapping>"):
        n = self._merge(self._word_scores, mapping, source)
        logger.debug(f"Merged {n} word scores from {source} (total {len(self._word_scores)})")
        return self

    def load_influencers(self, mapping, source="<mapping>"):
        n = self._merge(self._influencers, mapping, source)
        logger.debug(f"Merged {n} influencers from {source} (total {len(self._influencers)})")
        return self

    def load_neutral_patterns(self, patterns):
        if isinstance(patterns, str):
            patterns = [patterns]
        compiled = [compile_pattern(p) for p in patterns]
        self._neutral_regexps.extend(compiled)
        return self

    def add_neutral_regexp(self, pattern):
        return self.load_neutral_patterns([pattern])

    def load_from_json(self, filename):
        return self.load_word_scores(read_json_mapping(filename), source=str(filename))

    def load_influencers_from_json(self, filename):
        return self.load_influencers(read_json_mapping(filename), source=str(filename))

    def load_from_tsv(self, filename):
        return self.load_word_scores(read_tsv_mapping(filename), source=str(filename))

    def load_influencers_from_tsv(self, filename):
        return self.load_influencers(read_tsv_mapping(filename), source=str(filename))

    def load_words_file(self, filename):
        """Load a ``.json`` dictionary, anything else is read as tab-separated."""
        if Path(filename).suffix.lower() == ".json":
            return self.load_from_json(filename)
        return self.load_from_tsv(filename)

    def load_influencers_file(self, filename):
        if Path(filename).suffix.lower() == ".json":
            return self.load_influencers_from_json(filename)
        return self.load_influencers_from_tsv(filename)

    def load_defaults(self):
        for name in DEFAULT_WORD_FILES:
            self.load_from_json(DATA_DIR / f"{name}.json")
        self.load_influencers_from_json(DATA_DIR / f"{DEFAULT_INFLUENCER_FILE}.json")
        logger.info(f"Loaded default dictionaries: {len(self._word_scores)} word scores, "
                    f"{len(self._influencers)} influencers")
        return self

    # --- scoring -------------------------------------------------------------

    def is_neutral(self, text) -> bool:
        text = text or ""
        return any(p.search(text) for p in self._neutral_regexps)

    def explain(self, text) -> list:
        """Matches of ``text`` with their effective (influenced) weights."""
        tokens = tokenize(text or "")
        if self._matching == ALL_WINDOWS:
            matches = []
            for window in window_passes(tokens, self._word_scores,
                                        self._influencers, self._ngrams):
                matches.extend(influence.modulate(window))
            return matches
        return influence.modulate(
            longest_matches(tokens, self._word_scores, self._influencers, self._ngrams))

    def analyze(self, text):
        """Return ``(score, matches)``; a neutral regexp match gives ``(0.0, [])``."""
        if self.is_neutral(text):
            logger.debug(f"Neutral pattern matched {text!r}")
            return 0.0, []
        matches = self.explain(text)
        result = influence.total(matches)
        if logger.isEnabledFor(logging.DEBUG):
            hits = [(m.phrase, m.effective) for m in matches if m.matched]
            logger.debug(f"score={result:.4f} for {text!r} matches={hits}")
        return result, matches

    def score(self, text) -> float:
        return self.analyze(text)[0]

    def label(self, score) -> Sentiment:
        if score > self._threshold:
            return Sentiment.POSITIVE
        if score < -self._threshold:
            return Sentiment.NEGATIVE
        return Sentiment.NEUTRAL

    def sentiment(self, text) -> Sentiment:
        return self.label(self.score(text))

    def classify(self, text) -> bool:
        return self.sentiment(text) is Sentiment.POSITIVE
