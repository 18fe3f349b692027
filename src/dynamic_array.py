"""Growable array with amortized O(1) growth at both ends.

Storage is a Python list with free slots kept before and after the live
elements. Index 0 is always the first live element, whatever the offset of
that element inside the underlying list.
"""

_MIN_CAPACITY = 4


class DynamicArray:
    def __init__(self):
        self._data = []
        self._start = 0
        self._size = 0

    def at(self, index):
        if index < 0 or index >= self._size:
            raise IndexError("DynamicArray.at: index out of range")
        return self._data[self._start + index]

    def set_at(self, index, value):
        if index < 0 or index >= self._size:
            raise IndexError("DynamicArray.set_at: index out of range")
        self._data[self._start + index] = value

    def front(self):
        if self._size == 0:
            raise IndexError("DynamicArray.front: array is empty")
        return self._data[self._start]

    def back(self):
        if self._size == 0:
            raise IndexError("DynamicArray.back: array is empty")
        return self._data[self._start + self._size - 1]

    def size(self):
        return self._size

    def capacity(self):
        return len(self._data)

    def empty(self):
        return self._size == 0

    def push_back(self, value):
        if self._start + self._size == len(self._data):
            self._relocate(0, max(self._size, _MIN_CAPACITY))
        self._data[self._start + self._size] = value
        self._size += 1

    def push_front(self, value):
        if self._start == 0:
            back_room = len(self._data) - self._size
            self._relocate(max(self._size, _MIN_CAPACITY), back_room)
        self._start -= 1
        self._data[self._start] = value
        self._size += 1

    def pop_back(self):
        if self._size == 0:
            raise IndexError("DynamicArray.pop_back: array is empty")
        index = self._start + self._size - 1
        value = self._data[index]
        self._data[index] = None
        self._size -= 1
        self._maybe_shrink()
        return value

    def pop_front(self):
        if self._size == 0:
            raise IndexError("DynamicArray.pop_front: array is empty")
        value = self._data[self._start]
        self._data[self._start] = None
        self._start += 1
        self._size -= 1
        self._maybe_shrink()
        return value

    def clear(self):
        self._data = []
        self._start = 0
        self._size = 0

    def copy(self):
        clone = DynamicArray()
        clone._data = self._data.copy()
        clone._start = self._start
        clone._size = self._size
        return clone

    def _relocate(self, front_room, back_room):
        """Move the live elements into a new list with the given free slots."""
        new_data = [None] * (front_room + self._size + back_room)
        for i in range(self._size):
            new_data[front_room + i] = self._data[self._start + i]
        self._data = new_data
        self._start = front_room

    def _maybe_shrink(self):
        if self._size == 0:
            self._start = 0
            if len(self._data) > _MIN_CAPACITY:
                self._data = [None] * _MIN_CAPACITY
            return
        if len(self._data) > _MIN_CAPACITY and self._size * 4 <= len(self._data):
            self._relocate(0, self._size)

    def __iter__(self):
        for i in range(self._size):
            yield self._data[self._start + i]

    def __len__(self):
        return self._size
