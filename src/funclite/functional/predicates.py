"""Reusable predicates and predicate combinators.

Every factory returns a new callable so predicates can be passed straight to
``forall``, ``exists``, ``filter`` and ``find``.

Examples:
    >>> from funclite.functional.collection_ops import forall
    >>> forall([1, 2, 3], positive())
    True
    >>> small_even = and_(lambda n: n % 2 == 0, lambda n: n < 10)
    >>> small_even(4), small_even(12)
    (True, False)
"""

import typing as tp

from funclite.core.types import Predicate

__all__ = [
    "always_true",
    "always_false",
    "positive",
    "negative",
    "is_none",
    "not_none",
    "equal_to",
    "is_in",
    "not_",
    "and_",
    "or_",
]


def always_true() -> Predicate[tp.Any]:
    return lambda value: True


def always_false() -> Predicate[tp.Any]:
    return lambda value: False


def positive() -> Predicate[tp.Any]:
    """Strictly greater than zero."""
    return lambda value: value > 0


def negative() -> Predicate[tp.Any]:
    """Strictly less than zero."""
    return lambda value: value < 0


def is_none() -> Predicate[tp.Any]:
    return lambda value: value is None


def not_none() -> Predicate[tp.Any]:
    return lambda value: value is not None


def equal_to(expected: tp.Any) -> Predicate[tp.Any]:
    return lambda value: value == expected


def is_in(collection: tp.Container[tp.Any]) -> Predicate[tp.Any]:
    """Membership in ``collection``, which is captured by reference."""
    return lambda value: value in collection


def not_(predicate: Predicate[tp.Any]) -> Predicate[tp.Any]:
    return lambda value: not predicate(value)


def and_(*predicates: Predicate[tp.Any]) -> Predicate[tp.Any]:
    """Conjunction of ``predicates``, evaluated left to right.

    Evaluation stops at the first predicate that fails. With no predicates the
    result always holds.
    """
    return lambda value: all(predicate(value) for predicate in predicates)


def or_(*predicates: Predicate[tp.Any]) -> Predicate[tp.Any]:
    """Disjunction of ``predicates``, evaluated left to right.

    Evaluation stops at the first predicate that holds. With no predicates the
    result never holds.
    """
    return lambda value: any(predicate(value) for predicate in predicates)
