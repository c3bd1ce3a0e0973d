#!/usr/bin/env python3
"""
Score short English / French texts from the command line.

Usage:
    python sentimental_cli.py "I love ruby <3" "je ne sais pas"
    python sentimental_cli.py --config config.yml --explain --out out --fig "I really love ruby"

Prints one JSON object per text: {"text", "score", "sentiment"[, "neutral", "matches"]}.
"""

import argparse, json, sys

from sentimental.config import load_config, validate_config
from sentimental.exceptions import ConfigError, SentimentalError
from sentimental.logging_utils import init_logger
from sentimental.ngrams import MATCHING_MODES
from sentimental.sentiment import Sentimental


def match_record(m):
    return {"phrase": m.phrase, "start": m.start, "size": m.size,
            "weight": m.weight, "multiplier": m.multiplier, "effective": m.effective}


def build_cfg(args):
    cfg = load_config(args.config) if args.config else validate_config({})
    overrides = {
        "threshold": args.threshold,
        "ngrams": args.ngrams,
        "matching": args.matching,
        "out_dir": args.out,
        "log_dir": args.log_dir,
        "log_level": args.log_level,
    }
    cfg.update({k: v for k, v in overrides.items() if v is not None})
    cfg["word_files"] = cfg["word_files"] + args.words
    cfg["influencer_files"] = cfg["influencer_files"] + args.influencers
    cfg["neutral_regexps"] = cfg["neutral_regexps"] + args.neutral
    if args.no_defaults:
        cfg["load_defaults"] = False
    return validate_config(cfg)


def main(cfg, texts, explain=False, figs=False):
    logger = init_logger("sentimental", cfg)
    analyzer = Sentimental.from_config(cfg)
    logger.info(f"Scoring {len(texts)} text(s) with {analyzer!r}")

    records, analyses = [], []
    for text in texts:
        score, matches = analyzer.analyze(text)
        record = {"text": text,
                  "score": score,
                  "sentiment": str(analyzer.label(score))}
        if explain:
            # a neutral regexp overrides the lexicon, nothing contributed
            record["neutral"] = analyzer.is_neutral(text)
            record["matches"] = [match_record(m) for m in matches if m.matched]
        records.append(record)
        analyses.append(matches)
        print(json.dumps(record, ensure_ascii=False))

    if cfg["out_dir"]:
        from sentimental import io_utils
        io_utils.prepare_dirs(cfg)
        path = io_utils.write_jsonl(records, "sentiment.jsonl", cfg)
        logger.info(f"Wrote {len(records)} record(s) to {path}")

    # optional visualisations
    if figs:
        if not cfg["out_dir"]:
            raise ConfigError("out_dir", None, "required when saving figures")
        # lazy import, matplotlib is slow to load
        from sentimental import visualization
        for i, (text, matches) in enumerate(zip(texts, analyses)):
            visualization.make_contribution_fig(matches, cfg,
                                                name=f"contributions_{i}.png", title=text[:60])
        visualization.make_sentiment_fig(records, cfg)
    return records


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    ap.add_argument("texts", nargs="+", metavar="TEXT")
    ap.add_argument("--config", "-c", default=None)
    ap.add_argument("--threshold", "-t", type=float, default=None)
    ap.add_argument("--ngrams", "-n", type=int, default=None)
    ap.add_argument("--matching", choices=MATCHING_MODES, default=None)
    ap.add_argument("--words", action="append", default=[], metavar="FILE",
                    help="extra word-score dictionary (.json or tab-separated)")
    ap.add_argument("--influencers", action="append", default=[], metavar="FILE")
    ap.add_argument("--neutral", action="append", default=[], metavar="REGEXP")
    ap.add_argument("--no-defaults", action="store_true")
    ap.add_argument("--explain", action="store_true")
    ap.add_argument("--out", default=None, help="write sentiment.jsonl (and figs/) here")
    ap.add_argument("--fig", action="store_true")
    ap.add_argument("--log-dir", default=None)
    ap.add_argument("--log-level", default=None)
    return ap.parse_args(argv)


def run(argv=None):
    args = parse_args(argv)
    try:
        cfg = build_cfg(args)
        main(cfg, args.texts, explain=args.explain, figs=args.fig)
    except SentimentalError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(run())
