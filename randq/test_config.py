import logging
from pathlib import Path

from .config import Config
from .utils import STAT, Logger


def test_config_rng_uses_seed() -> None:
    c = Config()
    c.seed = 5
    assert [c.rng().uniform_int(50) for _ in range(3)] == [
        c.rng().uniform_int(50) for _ in range(3)
    ]


def test_config_setup_logger(tmp_path: Path) -> None:
    c = Config()
    c.logger = Logger("randq-config-test")
    c.set_verbose(True)
    assert c.log_level == logging.DEBUG
    c.logfile = tmp_path.joinpath("stats.txt")
    logger = c.setup_logger()
    assert logger.isEnabledFor(STAT)
    assert logger.isEnabledFor(logging.DEBUG)
    assert len(logger.handlers) == 2
    logger.close()
    assert "randq-config-test" not in repr(c)
