"""
YAML configuration for the scorer and its driver.

Example ``config.yml``::

    threshold: 0.1
    ngrams: 3
    matching: all-windows      # or "longest"
    load_defaults: true
    word_files: [my_words.json, extra.tsv]
    influencer_files: []
    neutral_regexps: ['\\?\\s*$']
    log_dir: logs
    log_level: INFO
    out_dir: out
    fig_dpi: 120
"""

from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .exceptions import ConfigError
from .ngrams import ALL_WINDOWS, MATCHING_MODES

yaml = YAML(typ="safe")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULTS = {
    "threshold": 0.0,
    "ngrams": 1,
    "matching": ALL_WINDOWS,
    "load_defaults": True,
    "word_files": [],
    "influencer_files": [],
    "neutral_regexps": [],
    "log_dir": None,
    "log_level": "INFO",
    "out_dir": None,
    "fig_dpi": 120,
}


def load_config(path):
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.load(f)
    except FileNotFoundError as e:
        raise ConfigError("config", str(path), "file not found") from e
    except YAMLError as e:
        raise ConfigError("config", str(path), f"invalid YAML: {e}") from e
    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise ConfigError("config", str(path), "top level must be a mapping")
    return validate_config(cfg)


def check_threshold(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError("threshold", value, "must be a number")
    if value < 0:
        raise ConfigError("threshold", value, "must be >= 0")
    return float(value)


def check_ngrams(value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError("ngrams", value, "must be an integer")
    if value < 1:
        raise ConfigError("ngrams", value, "must be >= 1")
    return value


def check_matching(value):
    if value not in MATCHING_MODES:
        raise ConfigError("matching", value, f"must be one of {', '.join(MATCHING_MODES)}")
    return value


def check_log_level(value):
    if str(value).upper() not in LOG_LEVELS:
        raise ConfigError("log_level", value, f"must be one of {', '.join(LOG_LEVELS)}")
    return str(value).upper()


def validate_config(cfg):
    """Return a copy of ``cfg`` with defaults filled in and values checked."""
    merged = {**DEFAULTS, **{k: v for k, v in cfg.items() if v is not None}}
    merged["threshold"] = check_threshold(merged["threshold"])
    merged["ngrams"] = check_ngrams(merged["ngrams"])
    merged["matching"] = check_matching(merged["matching"])
    merged["log_level"] = check_log_level(merged["log_level"])
    for key in ("word_files", "influencer_files", "neutral_regexps"):
        if isinstance(merged[key], str):
            merged[key] = [merged[key]]
        if not isinstance(merged[key], (list, tuple)):
            raise ConfigError(key, merged[key], "must be a list")
        merged[key] = list(merged[key])
    return merged
