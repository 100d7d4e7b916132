"""Uniform random integers shared by the randomized containers
"""
from typing import List, Optional, Sequence

import numpy as np

from ..errors import InvalidArgumentError
from ..prelude import Seed, T


class Rng:
    """Thin wrapper of numpy.random.Generator.
    `Generator.integers` is unbiased over the half-open range, which the
    randomized queue and the reservoir sampler rely on.
    """

    def __init__(self, seed: Seed = None) -> None:
        self.inner = np.random.default_rng(seed)

    def uniform_int(self, bound: int) -> int:
        """Sample an integer from [0, bound)
        """
        if bound <= 0:
            raise InvalidArgumentError(
                "[Rng::uniform_int] bound must be positive, but got {}".format(bound)
            )
        return int(self.inner.integers(bound))

    def permutation(self, n: int) -> np.ndarray:
        return self.inner.permutation(n)

    def shuffled(self, items: Sequence[T]) -> List[T]:
        return [items[i] for i in self.permutation(len(items))]

    def __repr__(self) -> str:
        return "Rng({})".format(self.inner.bit_generator.__class__.__name__)


_DEFAULT: Optional[Rng] = None


def default_rng() -> Rng:
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = Rng()
    return _DEFAULT


def seed(value: Seed) -> None:
    """Reseed the process-wide generator in place, so that containers already
    holding it see the new stream too.
    """
    default_rng().inner = np.random.default_rng(value)
