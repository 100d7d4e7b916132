from .collections import LinkedDeque, RandomizedQueue
from .config import Config
from .errors import (
    EmptyContainerError,
    InvalidArgumentError,
    RandqError,
    UnsupportedOperationError,
)
from .sampling import ReservoirSampler, reservoir_sample
from .utils import Rng, seed

__version__ = "0.1.0"
