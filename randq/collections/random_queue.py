"""Randomized queue on a resizing circular array
"""
from typing import Generic, Iterator, List, Optional

from ..errors import EmptyContainerError, InvalidArgumentError, UnsupportedOperationError
from ..prelude import T
from ..utils.log import LOGGER, Logger
from ..utils.rng import Rng, default_rng


class RandomizedQueue(Generic[T]):
    """A queue whose dequeue/sample pick an item uniformly at random,
    and whose iterators visit items in independent uniformly random orders.

    enqueue/dequeue/sample take amortized O(1) time; creating an iterator
    takes O(n). Not thread-safe.
    """

    INIT_CAPACITY = 8
    MIN_CAPACITY = 4

    def __init__(self, rng: Optional[Rng] = None, logger: Logger = LOGGER) -> None:
        self._rng = default_rng() if rng is None else rng
        self._logger = logger
        self._buf: List[Optional[T]] = [None] * self.INIT_CAPACITY
        self._n = 0
        self._first = 0

    @property
    def capacity(self) -> int:
        return len(self._buf)

    def is_empty(self) -> bool:
        return self._n == 0

    def size(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def _resize(self, capacity: int) -> None:
        assert capacity >= self._n
        cap = len(self._buf)
        buf: List[Optional[T]] = [None] * capacity
        for i in range(self._n):
            buf[i] = self._buf[(self._first + i) % cap]
        self._logger.debug("RandomizedQueue: resize %d -> %d (n=%d)", cap, capacity, self._n)
        self._buf = buf
        self._first = 0

    def enqueue(self, item: T) -> None:
        if item is None:
            raise InvalidArgumentError("[RandomizedQueue::enqueue] item is None")
        if self._n == len(self._buf):
            self._resize(2 * len(self._buf))
        self._buf[(self._first + self._n) % len(self._buf)] = item
        self._n += 1

    def dequeue(self) -> T:
        if self._n == 0:
            raise EmptyContainerError("[RandomizedQueue::dequeue] Empty")
        cap = len(self._buf)
        removed = (self._first + self._rng.uniform_int(self._n)) % cap
        item = self._buf[removed]
        # Keep the live window contiguous: the first slot is the one vacated
        self._buf[removed] = self._buf[self._first]
        self._buf[self._first] = None
        self._first = (self._first + 1) % cap
        self._n -= 1
        if self._n > 0 and self._n == cap // 4 and cap // 2 >= self.MIN_CAPACITY:
            self._resize(cap // 2)
        return item  # type: ignore

    def sample(self) -> T:
        if self._n == 0:
            raise EmptyContainerError("[RandomizedQueue::sample] Empty")
        index = (self._first + self._rng.uniform_int(self._n)) % len(self._buf)
        return self._buf[index]  # type: ignore

    def iterator(self) -> "QueueIterator[T]":
        cap = len(self._buf)
        items = [self._buf[(self._first + i) % cap] for i in range(self._n)]
        return QueueIterator(self._rng.shuffled(items))  # type: ignore

    def __iter__(self) -> "QueueIterator[T]":
        return self.iterator()

    def __repr__(self) -> str:
        cap = len(self._buf)
        items = [self._buf[(self._first + i) % cap] for i in range(self._n)]
        return "RandomizedQueue({}, capacity={})".format(items, cap)


class QueueIterator(Iterator[T]):
    """Iterates over a private, already shuffled copy of the queue
    """

    def __init__(self, items: List[T]) -> None:
        self._items = items
        self._index = 0

    def __iter__(self) -> "QueueIterator[T]":
        return self

    def __next__(self) -> T:
        if self._index >= len(self._items):
            raise StopIteration
        item = self._items[self._index]
        self._index += 1
        return item

    def __length_hint__(self) -> int:
        return len(self._items) - self._index

    def remove(self) -> None:
        raise UnsupportedOperationError("[QueueIterator::remove] Unsupported")
