import pytest, pathlib, yaml

from sentimental.sentiment import Sentimental


@pytest.fixture(scope="session")
def tiny_cfg(tmp_path_factory):
    """Minimal config with a toy word list and influencer list on disk."""
    tmpdir = tmp_path_factory.mktemp("data")
    words_file = tmpdir / "toy_words.json"
    words_file.write_text('{"grand": 1.0, "affreux": -1.0, "happy hour": 2.0}', encoding="utf-8")
    infl_file = tmpdir / "toy_influencers.tsv"
    infl_file.write_text("# phrase\tmultiplier\nhyper\t3\n", encoding="utf-8")
    cfg = {
        "threshold": 0.1,
        "ngrams": 2,
        "matching": "longest",
        "load_defaults": True,
        "word_files": [str(words_file)],
        "influencer_files": [str(infl_file)],
        "neutral_regexps": [r"^\s*/ignore"],
        "out_dir": str(tmpdir / "out"),
        "log_dir": str(tmpdir / "log"),
        "log_level": "DEBUG",
        "fig_dpi": 50,
    }
    config_file = tmpdir / "config.yml"
    config_file.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    cfg["config_file"] = str(config_file)
    return cfg


@pytest.fixture
def loader():
    return Sentimental(threshold=0.1)


@pytest.fixture
def analyzer():
    return Sentimental(threshold=0.1).load_defaults()


@pytest.fixture
def data_dir():
    import sentimental.sentiment
    return pathlib.Path(sentimental.sentiment.DATA_DIR)
