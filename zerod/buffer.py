"""A growable array of fixed-size byte elements."""

from __future__ import annotations

from collections.abc import Iterator


class Buffer:
    """Stores elements of exactly ``stride`` bytes, growing capacity by doubling."""

    def __init__(self, stride: int) -> None:
        if stride < 0:
            raise ValueError(f"stride must be non-negative, got {stride}")
        self.stride = stride
        self._items: list[bytearray] = []
        self._capacity = 0

    @property
    def capacity(self) -> int:
        """Number of elements that fit before the next growth step."""
        return self._capacity

    def _prepare_push(self) -> None:
        if len(self._items) == self._capacity:
            self._capacity = 1 if self._capacity == 0 else self._capacity * 2

    def free(self) -> None:
        """Drop every element and release the capacity."""
        self._items.clear()
        self._capacity = 0

    def clear(self) -> None:
        """Zero the contents of every element; the length is kept."""
        for item in self._items:
            item[:] = bytes(len(item))

    def push(self, elem: bytes | bytearray | memoryview) -> bytearray:
        """Append a copy of ``elem`` and return the stored element."""
        data = bytes(elem)
        if len(data) != self.stride:
            raise ValueError(
                f"element must be {self.stride} bytes long, got {len(data)}"
            )
        self._prepare_push()
        item = bytearray(data)
        self._items.append(item)
        return item

    def push_zeros(self) -> bytearray:
        """Append a zeroed element and return it."""
        self._prepare_push()
        item = bytearray(self.stride)
        self._items.append(item)
        return item

    def at(self, index: int) -> bytearray | None:
        """Return the element at ``index``, or None when it is out of range."""
        if index < 0 or index >= len(self._items):
            return None
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[bytearray]:
        return iter(self._items)