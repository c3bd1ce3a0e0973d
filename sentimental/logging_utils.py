import logging, datetime, pathlib

FMT = "%(asctime)s  %(levelname)-8s %(name)s :: %(message)s"


def init_logger(name: str, cfg, tag: str = "score"):
    """Timestamped file under cfg["log_dir"] when set, stderr otherwise."""
    if cfg.get("log_dir"):
        ts = datetime.datetime.now().strftime("%Y%m%d-%H%M%S")
        log_dir = pathlib.Path(cfg["log_dir"])
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_dir / f"log_{tag}_{ts}.txt", encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(FMT))

    logger = logging.getLogger(name)
    logger.setLevel(str(cfg.get("log_level") or "INFO").upper())
    for old in logger.handlers[:]:
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)
    logger.propagate = False
    return logger
