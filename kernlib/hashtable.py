"""Chained hash table keyed by a caller-supplied hash and ordering."""

from __future__ import annotations

import operator
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar, Union

T = TypeVar("T")

HashFunc = Callable[[Any], int]
Less = Callable[[Any, Any], bool]
Action = Callable[[Any], None]

_FNV_32_PRIME = 16777619
_FNV_32_BASIS = 2166136261
_MASK_32 = 0xFFFFFFFF

_MIN_BUCKETS = 4
_BEST_ELEMS_PER_BUCKET = 2


class HashTable(Generic[T]):
    """A hash table of items compared by a ``less(a, b)`` predicate.

    Two items are equal when neither is less than the other.  The number of
    buckets is always a power of two, at least four, and follows the number
    of elements after every insertion, replacement and deletion.
    """

    def __init__(self, hash_func: HashFunc, less: Optional[Less] = None) -> None:
        self._hash = hash_func
        self._less = less or operator.lt
        self._buckets: list[list[T]] = [[] for _ in range(_MIN_BUCKETS)]
        self._count = 0

    # -- internals --------------------------------------------------------

    def _bucket_for(self, item: T) -> list[T]:
        index = self._hash(item) & (len(self._buckets) - 1)
        return self._buckets[index]

    def _index_in(self, bucket: list[T], item: T) -> Optional[int]:
        for index, existing in enumerate(bucket):
            if not self._less(existing, item) and not self._less(item, existing):
                return index
        return None

    def _rehash(self) -> None:
        wanted = max(self._count // _BEST_ELEMS_PER_BUCKET, _MIN_BUCKETS)
        wanted = 1 << (wanted.bit_length() - 1)
        if wanted == len(self._buckets):
            return
        old_buckets = self._buckets
        self._buckets = [[] for _ in range(wanted)]
        for bucket in old_buckets:
            for item in bucket:
                self._bucket_for(item).insert(0, item)

    # -- search, insertion, deletion --------------------------------------

    def insert(self, item: T) -> Optional[T]:
        """Insert ITEM unless an equal one is present; return that one or None."""
        bucket = self._bucket_for(item)
        index = self._index_in(bucket, item)
        old = None if index is None else bucket[index]
        if index is None:
            bucket.insert(0, item)
            self._count += 1
        self._rehash()
        return old

    def replace(self, item: T) -> Optional[T]:
        """Insert ITEM, displacing any equal item, which is returned."""
        bucket = self._bucket_for(item)
        index = self._index_in(bucket, item)
        old = None
        if index is not None:
            old = bucket.pop(index)
            self._count -= 1
        bucket.insert(0, item)
        self._count += 1
        self._rehash()
        return old

    def find(self, item: T) -> Optional[T]:
        """Return the stored item equal to ITEM, or None."""
        bucket = self._bucket_for(item)
        index = self._index_in(bucket, item)
        return None if index is None else bucket[index]

    def delete(self, item: T) -> Optional[T]:
        """Remove and return the stored item equal to ITEM, or None."""
        bucket = self._bucket_for(item)
        index = self._index_in(bucket, item)
        if index is None:
            return None
        found = bucket.pop(index)
        self._count -= 1
        self._rehash()
        return found

    def __contains__(self, item: object) -> bool:
        bucket = self._bucket_for(item)  # type: ignore[arg-type]
        return self._index_in(bucket, item) is not None  # type: ignore[arg-type]

    # -- life cycle and iteration -----------------------------------------

    def clear(self, destructor: Optional[Action] = None) -> None:
        """Remove every item, passing each to DESTRUCTOR when it is given."""
        for bucket in self._buckets:
            if destructor is not None:
                for item in bucket:
                    destructor(item)
            bucket.clear()
        self._count = 0

    def apply(self, action: Action) -> None:
        """Call ACTION on every item, in table order."""
        if action is None:
            raise TypeError("action must be callable")
        for item in list(self):
            action(item)

    def __iter__(self) -> Iterator[T]:
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return self._count

    def bucket_count(self) -> int:
        """Return the current number of buckets."""
        return len(self._buckets)

    def __repr__(self) -> str:
        return f"HashTable({list(self)!r})"


def _fnv(data: bytes) -> int:
    value = _FNV_32_BASIS
    for byte in data:
        value = ((value * _FNV_32_PRIME) & _MASK_32) ^ byte
    return value


def hash_bytes(data: Union[bytes, bytearray, memoryview]) -> int:
    """Return the 32-bit Fowler-Noll-Vo hash of DATA."""
    if data is None:
        raise TypeError("data must be a bytes-like object")
    return _fnv(bytes(data))


def hash_string(text: Union[str, bytes]) -> int:
    """Return the hash of TEXT up to its first NUL character.

    A str is hashed as its UTF-8 encoding.
    """
    if text is None:
        raise TypeError("text must be str or bytes")
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return _fnv(raw.split(b"\0", 1)[0])


def hash_int(value: int) -> int:
    """Return the hash of VALUE as a 32-bit little-endian integer."""
    return _fnv((value & _MASK_32).to_bytes(4, "little"))