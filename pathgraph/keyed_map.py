"""Chained hash table with load-factor driven growth.

`KeyedMap` stores unique keys in an array of buckets. Each bucket is a list of
entries scanned linearly for an identical or equal key (as `dict` does, so a
NaN key can be found again). The bucket index of a key is
``abs(hash(key)) % capacity``. After every successful ``put`` the table doubles
its capacity (see `pathgraph.config.MAP_CONFIG`) once the load factor reaches
the configured threshold, rehashing every entry into the new bucket array.

Keys must support the hashing protocol (``__hash__`` and ``__eq__``). ``None``
is reserved as the absent-key sentinel and is rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

from pathgraph.config import MAP_CONFIG
from pathgraph.errors import DuplicateKeyError, InvalidKeyError, KeyNotFoundError
from pathgraph.logging import get_logger

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger = get_logger(__name__)


@dataclass
class _Entry(Generic[K, V]):
    __slots__ = ("key", "value")

    key: K
    value: V


class KeyedMap(Generic[K, V]):
    """A hash map with separate chaining and capacity doubling.

    Duplicate keys are rejected rather than overwritten. Removal never shrinks
    the bucket array.

    Attributes:
        _buckets: Bucket array; each bucket is a list of `_Entry` objects.
        _size: Number of stored entries.
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        """Initialize an empty map.

        Args:
            capacity: Initial number of buckets. Defaults to
                ``MAP_CONFIG.default_capacity``.

        Raises:
            ValueError: If ``capacity`` is not positive.
        """
        if capacity is None:
            capacity = MAP_CONFIG.default_capacity
        if capacity <= 0:
            raise ValueError(f"Capacity must be greater than 0, got {capacity}.")
        self._buckets: List[List[_Entry[K, V]]] = [[] for _ in range(capacity)]
        self._size: int = 0

    #
    # Core operations
    #
    def put(self, key: K, value: V) -> None:
        """Store a new key/value pair.

        Args:
            key: Hashable key, not ``None``.
            value: Value to associate with ``key``.

        Raises:
            InvalidKeyError: If ``key`` is ``None`` or unhashable.
            DuplicateKeyError: If ``key`` is already present.
        """
        if key is None:
            raise InvalidKeyError("Key cannot be None.")
        try:
            index = self._index_for(key, len(self._buckets))
        except TypeError as exc:
            raise InvalidKeyError(f"Key {key!r} is not hashable.") from exc

        bucket = self._buckets[index]
        for entry in bucket:
            if entry.key is key or entry.key == key:
                raise DuplicateKeyError(f"Key {key!r} already exists.")

        bucket.append(_Entry(key, value))
        self._size += 1

        if MAP_CONFIG.should_grow(self._size, len(self._buckets)):
            self._resize(MAP_CONFIG.next_capacity(len(self._buckets)))

    def get(self, key: K) -> V:
        """Return the value stored for ``key``.

        Raises:
            KeyNotFoundError: If ``key`` is not present.
        """
        entry = self._find(key)
        if entry is None:
            raise KeyNotFoundError(f"Key {key!r} not found.")
        return entry.value

    def contains_key(self, key: Any) -> bool:
        """Return True if ``key`` is present. Never raises."""
        return self._find(key) is not None

    def remove(self, key: K) -> V:
        """Detach ``key`` and return its value.

        Raises:
            KeyNotFoundError: If ``key`` is not present.
        """
        bucket = self._bucket_or_none(key)
        if bucket is not None:
            for pos, entry in enumerate(bucket):
                if entry.key is key or entry.key == key:
                    del bucket[pos]
                    self._size -= 1
                    return entry.value
        raise KeyNotFoundError(f"Key {key!r} not found.")

    def clear(self) -> None:
        """Remove every entry. Capacity is unchanged."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0

    def size(self) -> int:
        """Return the number of stored entries."""
        return self._size

    def capacity(self) -> int:
        """Return the number of buckets."""
        return len(self._buckets)

    def load_factor(self) -> float:
        """Return ``size / capacity``."""
        return self._size / len(self._buckets)

    #
    # Mapping-style helpers
    #
    def keys(self) -> Iterator[K]:
        """Iterate over keys in bucket order."""
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key

    def values(self) -> Iterator[V]:
        """Iterate over values in bucket order."""
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.value

    def items(self) -> Iterator[Tuple[K, V]]:
        """Iterate over ``(key, value)`` pairs in bucket order."""
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key, entry.value

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(size={self._size}, "
            f"capacity={len(self._buckets)})"
        )

    #
    # Internals
    #
    @staticmethod
    def _index_for(key: Any, capacity: int) -> int:
        return abs(hash(key)) % capacity

    def _bucket_or_none(self, key: Any) -> Optional[List[_Entry[K, V]]]:
        if key is None:
            return None
        try:
            return self._buckets[self._index_for(key, len(self._buckets))]
        except TypeError:
            # Unhashable keys can never have been stored
            return None

    def _find(self, key: Any) -> Optional[_Entry[K, V]]:
        bucket = self._bucket_or_none(key)
        if bucket is None:
            return None
        for entry in bucket:
            if entry.key is key or entry.key == key:
                return entry
        return None

    def _resize(self, new_capacity: int) -> None:
        """Rehash every entry into a fresh bucket array of ``new_capacity``."""
        old_capacity = len(self._buckets)
        new_buckets: List[List[_Entry[K, V]]] = [[] for _ in range(new_capacity)]
        for bucket in self._buckets:
            for entry in bucket:
                new_buckets[self._index_for(entry.key, new_capacity)].append(entry)
        self._buckets = new_buckets
        logger.debug(
            "KeyedMap resized from %d to %d buckets (%d entries)",
            old_capacity,
            new_capacity,
            self._size,
        )
