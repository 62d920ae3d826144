from __future__ import annotations

from typing import IO, Iterator, List, Optional, Tuple, Union

from .fingerprint import bucket_hash


DEFAULT_CAPACITY = 1 << 10

Value = Union[str, int]


class Entry:
    __slots__ = ("key", "value", "next")

    def __init__(self, key: Optional[str], value: Optional[Value], next: Optional[Entry] = None) -> None:
        self.key = key
        self.value = value
        self.next = next

    def format(self, stream: IO[str]) -> None:
        stream.write(f"{self.key}\t{self.value}\n")


def _check_value(value: object) -> None:
    # bool is an int subclass but not a meaningful table value
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise TypeError(f"Table values must be str or int, got {type(value).__name__}")


def _check_key(key: object) -> None:
    if not isinstance(key, str):
        raise TypeError(f"Table keys must be str, got {type(key).__name__}")


class ChainedTable:
    """
    Separate chaining hash table mapping str keys to str or int values.

    Each bucket is a sentinel Entry whose `next` heads the chain. New entries
    are linked at the head of their chain; inserting an existing key updates
    its value in place. The capacity is fixed for the lifetime of the table.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity or DEFAULT_CAPACITY
        self._buckets: List[Entry] = [Entry(None, None) for _ in range(self._capacity)]
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def _sentinel(self, key: str) -> Entry:
        return self._buckets[bucket_hash(key) % self._capacity]

    def _find(self, key: str) -> Optional[Entry]:
        curr = self._sentinel(key).next
        while curr is not None:
            if curr.key == key:
                return curr
            curr = curr.next
        return None

    def insert(self, key: str, value: Value) -> None:
        _check_key(key)
        _check_value(value)
        existing = self._find(key)
        if existing is not None:
            existing.value = value
            return
        head = self._sentinel(key)
        entry = Entry(key, value, head.next)
        head.next = entry
        self._size += 1

    def search(self, key: str) -> Optional[Value]:
        """Return the value stored for key, or None if it is absent."""
        _check_key(key)
        entry = self._find(key)
        return entry.value if entry is not None else None

    def remove(self, key: str) -> bool:
        _check_key(key)
        prev = self._sentinel(key)
        curr = prev.next
        while curr is not None:
            if curr.key == key:
                prev.next = curr.next
                curr.next = None
                self._size -= 1
                return True
            prev, curr = curr, curr.next
        return False

    def items(self) -> Iterator[Tuple[str, Value]]:
        for head in self._buckets:
            curr = head.next
            while curr is not None:
                yield curr.key, curr.value  # type: ignore[misc]
                curr = curr.next

    def format(self, stream: IO[str]) -> None:
        """Write every entry as `key<TAB>value`, one per line."""
        for head in self._buckets:
            curr = head.next
            while curr is not None:
                curr.format(stream)
                curr = curr.next

    def clear(self) -> None:
        for head in self._buckets:
            curr = head.next
            head.next = None
            while curr is not None:
                nxt = curr.next
                curr.next = None
                curr = nxt
        self._size = 0
