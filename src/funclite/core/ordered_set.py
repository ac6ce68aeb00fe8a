"""Immutable set that remembers insertion order."""

import typing as tp
from collections.abc import Set

__all__ = ["OrderedSet"]

T = tp.TypeVar("T")


class OrderedSet(Set, tp.Generic[T]):
    """Read-only set whose iteration order is the order of first insertion.

    Duplicates collapse onto the first occurrence. Equality follows the
    ``collections.abc.Set`` contract, so ordering is ignored when comparing and
    an ``OrderedSet`` equals a ``set`` or ``frozenset`` holding the same values.
    Set operators inherited from ``Set`` (``|``, ``&``, ``-``, ``^``) return new
    ``OrderedSet`` instances.

    Examples:
        >>> OrderedSet([3, 1, 3, 2])
        OrderedSet([3, 1, 2])
        >>> OrderedSet([1, 2]) == {2, 1}
        True
    """

    __slots__ = ("_items",)

    def __init__(self, values: tp.Iterable[T] = ()) -> None:
        self._items: tp.Dict[T, None] = dict.fromkeys(values)

    @classmethod
    def from_iterable(
        cls,
        values: tp.Iterable[T],
        key: tp.Optional[tp.Callable[[T], tp.Hashable]] = None,
    ) -> "OrderedSet[T]":
        """Build a set, optionally deduplicating on a derived key.

        Args:
            values: Source elements, consumed once.
            key: Identity function. Two elements with equal ``key`` results are
                duplicates and only the first one is kept. Defaults to the
                elements' own equality.

        Returns:
            A new ``OrderedSet``.
        """
        if key is None:
            return cls(values)

        seen: tp.Set[tp.Hashable] = set()
        kept: tp.List[T] = []
        for value in values:
            identity = key(value)
            if identity in seen:
                continue
            seen.add(identity)
            kept.append(value)
        return cls(kept)

    def __contains__(self, value: object) -> bool:
        try:
            return value in self._items
        except TypeError:
            # Unhashable values can never be members
            return False

    def __iter__(self) -> tp.Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __hash__(self) -> int:
        return self._hash()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"
