from .log import LOGGER, STAT, Logger, load_stats
from .rng import Rng, default_rng, seed
