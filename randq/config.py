import logging
from pathlib import Path
from typing import Optional

from .prelude import Seed
from .utils import LOGGER, STAT, Logger, Rng


class Config:
    def __init__(self) -> None:
        # For the cases you want reproducible output
        self.seed: Seed = None

        # Number of items kept by the reservoir sampler
        self.sample_size = 0

        # Logger and logging level
        self.logger: Logger = LOGGER
        self.log_level = logging.WARNING
        self.logfile: Optional[Path] = None

    def rng(self) -> Rng:
        return Rng(self.seed)

    def set_verbose(self, verbose: bool) -> None:
        self.log_level = logging.DEBUG if verbose else logging.WARNING

    def setup_logger(self) -> Logger:
        self.logger.set_stderr(self.log_level)
        if self.logfile is not None:
            self.logger.set_file(self.logfile, STAT)
        return self.logger

    def __repr__(self) -> str:
        d = filter(lambda x: x[0] != "logger", self.__dict__.items())
        return "Config: " + str(dict(d))
