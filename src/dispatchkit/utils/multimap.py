"""A multimap associating each key with a set of values."""

from typing import (
    AbstractSet,
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    KeysView,
    List,
    Set,
    Tuple,
    TypeVar,
)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V", bound=Hashable)


class MultiHashSetMap(Generic[K, V]):
    """A multimap backed by a dict of sets.

    Duplicate values for a key are eliminated. Keys never map to an empty set:
    removing the last value of a key removes the key.
    """

    def __init__(self) -> None:
        self._map: Dict[K, Set[V]] = {}

    def add(self, key: K, value: V) -> bool:
        """Associate ``value`` with ``key``, returning True if it was not already."""
        values = self._map.setdefault(key, set())
        if value in values:
            return False
        values.add(value)
        return True

    def add_all(self, key: K, values: Iterable[V]) -> bool:
        """Associate every value with ``key``, returning True if any was new."""
        changed = False
        for value in values:
            changed = self.add(key, value) or changed
        return changed

    def get(self, key: K) -> AbstractSet[V]:
        """Return the values associated with ``key`` (an empty set if none)."""
        return frozenset(self._map.get(key, ()))

    def contains(self, key: K, value: V) -> bool:
        return value in self._map.get(key, ())

    def remove(self, key: K, value: V) -> bool:
        """Dissociate ``value`` from ``key``, returning True if it was associated."""
        values = self._map.get(key)
        if values is None or value not in values:
            return False
        values.remove(value)
        if not values:
            del self._map[key]
        return True

    def remove_all(self, key: K) -> AbstractSet[V]:
        """Remove ``key`` and return the values it was associated with."""
        return frozenset(self._map.pop(key, ()))

    def keys(self) -> KeysView:
        return self._map.keys()

    def values(self) -> List[V]:
        """Return every value of the multimap (a value appears once per key holding it)."""
        return [value for values in self._map.values() for value in values]

    def items(self) -> Iterator[Tuple[K, V]]:
        """Iterate over every (key, value) association."""
        for key, values in self._map.items():
            for value in values:
                yield key, value

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __iter__(self) -> Iterator[K]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"MultiHashSetMap({self._map!r})"
