"""FIFO queue with 1-based positional peek, insert and remove.

The live range is bounded by two cursors: ``head`` (oldest element) and
``tail`` (newest). Length is always ``tail - head + 1`` and an empty queue has
``head == tail + 1``. The backing DynamicArray holds exactly the live range,
so logical position ``n`` lives at storage index ``n - 1``.

Insert and remove shift elements toward whichever end of the queue is nearer
to the target position, so at most about half the queue moves.
"""

import operator
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from dynamic_array import DynamicArray
from empty_policy import as_policy

__version__ = "0.1"

T = TypeVar('T')


class QueueError(IndexError):
    pass


class EmptyQueueError(QueueError):
    pass


class IndexOutOfRangeError(QueueError):
    def __init__(self, operation: str, index: int, length: int) -> None:
        super().__init__(f"{operation}: index {index} out of range for queue of length {length}")
        self.index = index
        self.length = length


def _position(index) -> int:
    if isinstance(index, bool):
        raise TypeError("position must be an integer")
    try:
        return operator.index(index)
    except TypeError:
        raise TypeError("position must be an integer") from None


class IndexedQueue(Generic[T]):
    def __init__(self, *values: T, on_empty: Optional[Callable[[], None]] = None) -> None:
        self._buffer = DynamicArray()
        self._head = 1
        self._tail = 0
        self._on_empty = as_policy(on_empty)
        for value in values:
            self.push(value)

    @property
    def head(self) -> int:
        return self._head

    @property
    def tail(self) -> int:
        return self._tail

    @property
    def on_empty(self) -> Callable[[], None]:
        return self._on_empty

    def length(self) -> int:
        return self._tail - self._head + 1

    def size(self) -> int:
        return self.length()

    def is_empty(self) -> bool:
        return self._head > self._tail

    def peek(self, n: int = 1) -> T:
        n = _position(n)
        if n < 1 or n > self.length():
            raise IndexOutOfRangeError("peek", n, self.length())
        return self._buffer.at(n - 1)

    def push(self, value: T) -> None:
        self._buffer.push_back(value)
        self._tail += 1

    def pop(self) -> T:
        """Remove and return the oldest value.

        On an empty queue the empty policy runs first; if it returns,
        EmptyQueueError is raised.
        """
        if self._head > self._tail:
            self._on_empty()
            raise EmptyQueueError("pop from empty queue")
        value = self._buffer.pop_front()
        self._head += 1
        return value

    def insert(self, n: int, value: T) -> None:
        """Insert value so that it becomes the element at position n.

        Valid positions are 1 through length + 1; length + 1 appends.
        """
        n = _position(n)
        length = self.length()
        if n < 1 or n > length + 1:
            raise IndexOutOfRangeError("insert", n, length)

        target = self._head + n - 1
        if target <= (self._head + self._tail) // 2:
            # Grow to the left and slide the first n - 1 values down one slot.
            self._buffer.push_front(None)
            for i in range(n - 1):
                self._buffer.set_at(i, self._buffer.at(i + 1))
            self._buffer.set_at(n - 1, value)
            self._head -= 1
        else:
            self._buffer.push_back(None)
            for i in range(length, n - 1, -1):
                self._buffer.set_at(i, self._buffer.at(i - 1))
            self._buffer.set_at(n - 1, value)
            self._tail += 1

    def remove(self, n: int) -> T:
        """Remove and return the element at position n (1 through length)."""
        n = _position(n)
        length = self.length()
        if n < 1 or n > length:
            raise IndexOutOfRangeError("remove", n, length)

        value = self._buffer.at(n - 1)
        target = self._head + n - 1
        if target <= (self._head + self._tail) // 2:
            for i in range(n - 1, 0, -1):
                self._buffer.set_at(i, self._buffer.at(i - 1))
            self._buffer.pop_front()
            self._head += 1
        else:
            for i in range(n - 1, length - 1):
                self._buffer.set_at(i, self._buffer.at(i + 1))
            self._buffer.pop_back()
            self._tail -= 1
        return value

    def set_empty_handler(self, handler: Optional[Callable[[], None]]) -> Callable[[], None]:
        """Install a new empty policy and return the previous one.

        None restores the default fatal policy. A plain callable is wrapped
        in a CustomPolicy.
        """
        previous = self._on_empty
        self._on_empty = as_policy(handler)
        return previous

    def clear(self) -> None:
        self._buffer.clear()
        self._head = 1
        self._tail = 0

    def copy(self) -> 'IndexedQueue[T]':
        clone: IndexedQueue[T] = IndexedQueue(on_empty=self._on_empty)
        clone._buffer = self._buffer.copy()
        clone._head = self._head
        clone._tail = self._tail
        return clone

    def to_list(self) -> List[T]:
        return list(self._buffer)

    def __iter__(self) -> Iterator[T]:
        return iter(self._buffer)

    def __len__(self) -> int:
        return self.length()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"IndexedQueue({self.to_list()!r})"
