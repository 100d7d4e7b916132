from .linked_deque import DequeIterator, LinkedDeque
from .random_queue import QueueIterator, RandomizedQueue
