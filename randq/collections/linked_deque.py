"""Implementation of deque using a doubly-linked list
"""
from typing import Generic, Iterator, Optional

from ..errors import EmptyContainerError, InvalidArgumentError, UnsupportedOperationError
from ..prelude import T


class _Node(Generic[T]):
    __slots__ = ("item", "next", "prev", "removed_from_front", "resume_after")

    def __init__(self, item: T) -> None:
        self.item: Optional[T] = item
        self.next: Optional["_Node[T]"] = None
        self.prev: Optional["_Node[T]"] = None
        self.removed_from_front = False
        # Node before this one when it was removed from the back
        self.resume_after: Optional["_Node[T]"] = None

    def unlink(self, from_front: bool) -> None:
        if not from_front:
            self.resume_after = self.prev
        self.item = None
        self.next = None
        self.prev = None
        self.removed_from_front = from_front


class LinkedDeque(Generic[T]):
    """Double-ended queue with O(1) worst case push/pop at both ends.
    Not thread-safe.
    """

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def add_first(self, item: T) -> None:
        if item is None:
            raise InvalidArgumentError("[LinkedDeque::add_first] item is None")
        node = _Node(item)
        if self._head is None:
            self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
        self._head = node
        self._size += 1

    def add_last(self, item: T) -> None:
        if item is None:
            raise InvalidArgumentError("[LinkedDeque::add_last] item is None")
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            node.prev = self._tail
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove_first(self) -> T:
        old_head = self._head
        if old_head is None:
            raise EmptyContainerError("[LinkedDeque::remove_first] Empty")
        item = old_head.item
        self._head = old_head.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        old_head.unlink(True)
        return item  # type: ignore

    def remove_last(self) -> T:
        old_tail = self._tail
        if old_tail is None:
            raise EmptyContainerError("[LinkedDeque::remove_last] Empty")
        item = old_tail.item
        self._tail = old_tail.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        old_tail.unlink(False)
        return item  # type: ignore

    def iterator(self) -> "DequeIterator[T]":
        return DequeIterator(self)

    def __iter__(self) -> "DequeIterator[T]":
        return self.iterator()

    def __repr__(self) -> str:
        return "LinkedDeque({})".format(list(self))


class DequeIterator(Iterator[T]):
    """Lazy front-to-back iterator, remembering the last node it yielded.
    If that node has been removed meanwhile, it was either the head (then
    everything before it is gone too, so we continue from the current head)
    or the tail (then we continue after the node that preceded it).
    """

    def __init__(self, deque: LinkedDeque[T]) -> None:
        self._deque = deque
        self._last: Optional[_Node[T]] = None
        self._started = False
        self._done = False

    def __iter__(self) -> "DequeIterator[T]":
        return self

    def __next__(self) -> T:
        if self._done:
            raise StopIteration
        node = self._next_node()
        if node is None:
            self._done = True
            self._last = None
            raise StopIteration
        self._started = True
        self._last = node
        return node.item  # type: ignore

    def _next_node(self) -> Optional[_Node[T]]:
        last = self._last
        if not self._started:
            return self._deque._head
        while last is not None and last.item is None:
            if last.removed_from_front:
                return self._deque._head
            last = last.resume_after
        if last is None:
            # Everything visited is gone, so whatever is left is new
            return self._deque._head
        return last.next

    def remove(self) -> None:
        raise UnsupportedOperationError("[DequeIterator::remove] Unsupported")
