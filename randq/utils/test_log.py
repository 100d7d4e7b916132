import logging
from pathlib import Path

from .log import STAT, Logger, load_stats


def test_stat_to_file(tmp_path: Path) -> None:
    logger = Logger("randq-test")
    log_path = tmp_path.joinpath("logs", "stats.txt")
    logger.set_file(log_path)
    logger.stat("reservoir", dict(k=3, items_seen=10))
    logger.info("not a stat")
    logger.close()
    stats = load_stats(log_path)
    assert len(stats) == 1
    assert stats[0]["name"] == "reservoir"
    assert stats[0]["k"] == 3
    assert "elapsed-time" in stats[0]
    assert load_stats(log_path, name="other") == []


def test_stat_before_set_file(tmp_path: Path) -> None:
    logger = Logger("randq-test")
    logger.stat("reservoir", dict(k=1))
    log_path = tmp_path.joinpath("stats.txt")
    logger.set_file(log_path)
    assert logger.isEnabledFor(STAT)
    logger.stat("reservoir", dict(k=2))
    logger.close()
    stats = load_stats(log_path)
    assert len(stats) == 1
    assert stats[0]["k"] == 2


def test_stat_disabled_by_default(tmp_path: Path) -> None:
    logger = Logger("randq-test")
    assert not logger.isEnabledFor(STAT)
    logger.set_stderr(logging.WARNING)
    assert not logger.isEnabledFor(STAT)
    logger.close()
    assert logger.handlers == []
