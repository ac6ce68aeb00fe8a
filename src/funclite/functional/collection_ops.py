"""Functional traversal and transformation helpers for in-memory collections.

The helpers never mutate their inputs. Every result is a freshly built,
read-only container owned by the caller:

    - ordered sequences are returned as ``tuple``
    - sets are returned as insertion-ordered ``OrderedSet``
    - groupings are returned as a read-only ``MappingProxyType`` of tuples
    - partial results (``find``, ``head_option``) are returned as ``Option``

Exceptions raised by caller-supplied functions and predicates propagate
unchanged. ``new_list`` and ``add_all`` are the explicit exceptions that work
with mutable builders.

Note:
    ``map`` and ``filter`` shadow the builtins of the same name when imported
    with ``from funclite.functional.collection_ops import *``.

Examples:
    >>> from funclite.functional import collection_ops as ops
    >>> ops.map([1, 2, 3], lambda x: x * 10)
    (10, 20, 30)
    >>> ops.mk_string(ops.set_of(1, 2, 2, 3), "(", ":", ")")
    '(1:2:3)'
    >>> dict(ops.group_by([1, 2, 3, 4], lambda n: n % 2))
    {1: (1, 3), 0: (2, 4)}
"""

import typing as tp
from collections.abc import Iterable, MutableSequence, MutableSet, Set, Sized
from types import MappingProxyType

from pydantic import BaseModel

from funclite.core.option import NOTHING, Option, option_of
from funclite.core.ordered_set import OrderedSet
from funclite.core.types import Effect, Function, KeyFunction, Predicate

__all__ = [
    "of",
    "new_list",
    "iterable",
    "identity",
    "map",
    "add_all",
    "flat_map",
    "flatten",
    "filter",
    "mk_string",
    "group_by",
    "forall",
    "exists",
    "find",
    "head_option",
    "is_empty",
    "set_of",
    "foreach",
    "difference",
]

A = tp.TypeVar("A")
B = tp.TypeVar("B")
K = tp.TypeVar("K", bound=tp.Hashable)


def of(*values: A) -> tp.Tuple[A, ...]:
    """Collect the positional arguments into an immutable sequence."""
    return values


def new_list(values: tp.Iterable[A] = ()) -> tp.List[A]:
    """Return a new mutable list holding ``values`` in order."""
    return list(values)


class _IteratorView(tp.Generic[A]):
    __slots__ = ("_iterator",)

    def __init__(self, iterator: tp.Iterator[A]) -> None:
        self._iterator = iterator

    def __iter__(self) -> tp.Iterator[A]:
        return self._iterator


def iterable(iterator: tp.Iterator[A]) -> tp.Iterable[A]:
    """Expose a one-shot iterator as an iterable.

    Every ``iter()`` call returns the same underlying iterator, so the result
    can only be traversed once.
    """
    return _IteratorView(iterator)


def identity(value: A) -> A:
    return value


def map(values: tp.Iterable[A], f: Function[A, B]) -> tp.Tuple[B, ...]:
    """Apply ``f`` to every element.

    Args:
        values: Source elements.
        f: Transformation applied once per element, in order.

    Returns:
        A tuple with one result per input element.
    """
    return tuple(f(value) for value in values)


def add_all(target: tp.Any, values: tp.Iterable[A]) -> tp.Any:
    """Add every element of ``values`` to a caller-owned mutable collection.

    Args:
        target: A mutable sequence (elements appended) or mutable set
            (elements added).
        values: Elements to add, in order.

    Returns:
        ``target`` itself, after mutation.

    Raises:
        TypeError: If ``target`` is neither a mutable sequence nor a mutable set.
    """
    if isinstance(target, MutableSequence):
        for value in values:
            target.append(value)
    elif isinstance(target, MutableSet):
        for value in values:
            target.add(value)
    else:
        raise TypeError(
            f"add_all expects a mutable sequence or set, got {type(target).__name__}."
        )
    return target


def flat_map(
    values: tp.Iterable[A], f: Function[A, tp.Iterable[B]]
) -> tp.Tuple[B, ...]:
    """Apply ``f`` to every element and concatenate the resulting iterables in order."""
    result: tp.List[B] = []
    for value in values:
        result.extend(f(value))
    return tuple(result)


def flatten(nested: tp.Iterable[tp.Iterable[A]]) -> tp.Tuple[A, ...]:
    """Concatenate nested iterables in order. Same as ``flat_map(nested, identity)``."""
    return tuple(item for inner in nested for item in inner)


def filter(values: tp.Iterable[A], predicate: Predicate[A]) -> tp.Tuple[A, ...]:
    """Keep the elements for which ``predicate`` is true, preserving their order."""
    return tuple(value for value in values if predicate(value))


def mk_string(
    values: tp.Iterable[tp.Any],
    *args: str,
    start: tp.Optional[str] = None,
    sep: tp.Optional[str] = None,
    end: tp.Optional[str] = None,
) -> str:
    """Render elements with ``str`` and join them.

    Accepted call shapes:

        - ``mk_string(values)``: elements concatenated.
        - ``mk_string(values, sep)``: elements joined by ``sep``.
        - ``mk_string(values, start, sep, end)``: joined by ``sep`` and wrapped
          in ``start`` and ``end``.
        - ``mk_string(values, start=..., sep=..., end=...)``: any subset of the
          parts by keyword, the others default to ``""``.

    Args:
        values: Elements to render.
        *args: Either nothing, ``(sep,)`` or ``(start, sep, end)``.
        start: Prefix, keyword form.
        sep: Separator, keyword form.
        end: Suffix, keyword form.

    Returns:
        The rendered string. An empty input gives ``start + end``.

    Raises:
        TypeError: If ``args`` has any other length, or if positional and
            keyword parts are mixed.

    Examples:
        >>> mk_string([1, 2, 3, 4, 5], ":")
        '1:2:3:4:5'
        >>> mk_string([], "[", ", ", "]")
        '[]'
    """
    keywords = (start, sep, end)
    if any(part is not None for part in keywords):
        if args:
            raise TypeError(
                "mk_string takes its parts either positionally or by keyword, not both."
            )
        start, sep, end = (part or "" for part in keywords)
    elif len(args) == 0:
        start, sep, end = "", "", ""
    elif len(args) == 1:
        start, sep, end = "", args[0], ""
    elif len(args) == 3:
        start, sep, end = args
    else:
        raise TypeError(
            "mk_string takes a separator or a (start, separator, end) triple, "
            f"got {len(args)} extra arguments."
        )
    return start + sep.join(str(value) for value in values) + end


def group_by(
    values: tp.Iterable[A], key: KeyFunction[A, K]
) -> tp.Mapping[K, tp.Tuple[A, ...]]:
    """Partition elements into buckets keyed by ``key``.

    ``key`` is called exactly once per element. Buckets appear in the order in
    which their key was first produced and keep the relative order of their
    elements.

    Args:
        values: Source elements.
        key: Grouping function; results must be hashable.

    Returns:
        A read-only mapping from key to a tuple of elements.
    """
    buckets: tp.Dict[K, tp.List[A]] = {}
    for value in values:
        buckets.setdefault(key(value), []).append(value)
    return MappingProxyType(
        {bucket_key: tuple(bucket) for bucket_key, bucket in buckets.items()}
    )


def forall(values: tp.Iterable[A], predicate: Predicate[A]) -> bool:
    """True iff every element satisfies ``predicate``. Stops at the first failure."""
    for value in values:
        if not predicate(value):
            return False
    return True


def exists(values: tp.Iterable[A], predicate: Predicate[A]) -> bool:
    """True iff some element satisfies ``predicate``. Stops at the first match."""
    for value in values:
        if predicate(value):
            return True
    return False


def find(values: tp.Iterable[A], predicate: Predicate[A]) -> "Option[A]":
    """Return the first element satisfying ``predicate``.

    Returns:
        ``Some(element)`` for the first match in iteration order, ``NOTHING``
        when no element matches or when the matching element is ``None``.
    """
    for value in values:
        if predicate(value):
            return option_of(value)
    return NOTHING


def head_option(values: tp.Iterable[A]) -> "Option[A]":
    """Return the first element, or ``NOTHING`` when there is none.

    At most one element is drawn from ``values``.
    """
    for value in values:
        return option_of(value)
    return NOTHING


def is_empty(values: tp.Iterable[tp.Any]) -> bool:
    """True iff ``values`` holds no element.

    Sized collections are checked with ``len``. Other iterables are probed by
    requesting one element from a fresh iterator; for a one-shot iterator that
    element is consumed.
    """
    if isinstance(values, Sized):
        return len(values) == 0
    for _ in values:
        return False
    return True


def set_of(
    *values: tp.Any, key: tp.Optional[tp.Callable[[tp.Any], tp.Hashable]] = None
) -> OrderedSet:
    """Build an insertion-ordered set of unique values.

    ``set_of(1, 2, 2)`` collects its arguments. A single iterable argument is
    treated as the source collection, so ``set_of([1, 2, 2])`` gives the same
    result. ``str``, ``bytes`` and pydantic models such as ``Some`` are never
    unpacked. To build a set holding one tuple, wrap it in a list:
    ``set_of([(1, 2)])``.

    Args:
        *values: The elements, or a single iterable of elements.
        key: Optional identity function; elements with equal keys are
            duplicates. Defaults to natural equality.

    Returns:
        A new ``OrderedSet`` keeping the first occurrence of each element.
    """
    if len(values) == 1 and _is_collection(values[0]):
        source = values[0]
    else:
        source = values
    return OrderedSet.from_iterable(source, key=key)


def foreach(values: tp.Iterable[A], effect: Effect[A]) -> None:
    """Call ``effect`` once per element, in order. Return values are discarded."""
    for value in values:
        effect(value)


def difference(
    left: tp.Iterable[A],
    right: tp.Iterable[A],
    key: tp.Optional[tp.Callable[[A], tp.Hashable]] = None,
) -> OrderedSet:
    """Elements of ``left`` that do not occur in ``right``.

    Args:
        left: Elements to keep, in this order.
        right: Elements to remove.
        key: Optional identity function applied to both sides.

    Returns:
        A new ``OrderedSet`` in ``left``'s iteration order.
    """
    if key is None:
        excluded = right if isinstance(right, Set) else set(right)
        return OrderedSet(value for value in left if value not in excluded)

    excluded_keys = {key(value) for value in right}
    return OrderedSet.from_iterable(
        (value for value in left if key(value) not in excluded_keys), key=key
    )


def _is_collection(value: tp.Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(
        value, (str, bytes, BaseModel)
    )
