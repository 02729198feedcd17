"""
Keyed Ordered Collection.

The container behind every multi-valued slot of a request (bool buckets, sorts,
suggesters, inner hits). It supports two insertion modes:

1. **Keyed**: the caller provides a key; an existing entry with the same key is
   replaced in place (last write wins, position kept).
2. **Unkeyed**: a fresh sequential key is generated; the value is always appended.
"""

from typing import Dict, Generic, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")


class KeyedCollection(Generic[T]):
    """
    Insertion-ordered mapping with auto-generated keys for unkeyed inserts.

    Auto keys have the form `"{prefix}{n}"` with `n` counting up from 0 per
    collection; a generated key that collides with a caller-provided one is
    skipped, so an unkeyed insert never replaces anything.
    """

    def __init__(self, prefix: str = "_"):
        self._prefix = prefix
        self._items: Dict[str, T] = {}
        self._counter = 0

    def add(self, value: T, key: Optional[str] = None) -> str:
        """
        Stores `value` under `key`, or under a new auto key when `key` is None.

        Returns:
            The key the value was stored under.
        """
        if key is None:
            key = self._next_key()
        self._items[key] = value
        return key

    def _next_key(self) -> str:
        while True:
            key = f"{self._prefix}{self._counter}"
            self._counter += 1
            if key not in self._items:
                return key

    def get(self, key: str) -> Optional[T]:
        return self._items.get(key)

    def remove(self, key: str) -> Optional[T]:
        return self._items.pop(key, None)

    def items(self) -> Iterator[Tuple[str, T]]:
        return iter(list(self._items.items()))

    def values(self) -> Iterator[T]:
        return iter(list(self._items.values()))

    def to_mapping(self) -> Dict[str, T]:
        """Returns a shallow copy of the stored entries in insertion order."""
        return dict(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
