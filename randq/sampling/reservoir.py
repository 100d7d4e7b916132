from typing import Generic, Iterable, Optional

from ..collections import RandomizedQueue
from ..errors import InvalidArgumentError
from ..prelude import T
from ..utils.log import LOGGER, Logger
from ..utils.rng import Rng, default_rng


class ReservoirSampler(Generic[T]):
    """
    Keeps k items sampled uniformly at random from all items appended,
    using memory proportional to k only.
    After N >= k appends, each item is held with probability k / N.
    """

    def __init__(self, k: int, rng: Optional[Rng] = None, logger: Logger = LOGGER) -> None:
        if k < 0:
            raise InvalidArgumentError(
                "[ReservoirSampler::__init__] k must be non-negative, but got {}".format(k)
            )
        self.k = k
        self.rng = default_rng() if rng is None else rng
        self.logger = logger
        self.queue: RandomizedQueue[T] = RandomizedQueue(rng=self.rng, logger=logger)
        self.items_taken = 0
        self.items_seen = 0

    def append(self, item: T) -> None:
        if item is None:
            raise InvalidArgumentError("[ReservoirSampler::append] item is None")
        if self.k == 0:
            return
        if self.items_taken < self.k:
            self.queue.enqueue(item)
            self.items_taken += 1
            return

        self.items_seen += 1
        if self.rng.uniform_int(self.k + self.items_seen) < self.k:
            self.queue.dequeue()
            self.queue.enqueue(item)

    def extend(self, items: Iterable[T]) -> None:
        for item in items:
            self.append(item)

    def result(self) -> RandomizedQueue[T]:
        """The sampled items. Each iteration over it gives a fresh random order.
        """
        if self.items_taken == 0:
            return RandomizedQueue(rng=self.rng, logger=self.logger)
        return self.queue

    def __len__(self) -> int:
        return len(self.queue)


def reservoir_sample(
    items: Iterable[T], k: int, rng: Optional[Rng] = None, logger: Logger = LOGGER,
) -> RandomizedQueue[T]:
    """Sample min(k, N) items uniformly at random from a finite stream of N items
    """
    sampler: ReservoirSampler[T] = ReservoirSampler(k, rng=rng, logger=logger)
    sampler.extend(items)
    logger.stat(
        "reservoir",
        dict(k=k, items_taken=sampler.items_taken, items_seen=sampler.items_seen),
    )
    return sampler.result()
