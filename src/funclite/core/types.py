"""Reusable type definitions for the funclite collection helpers.

Type Aliases:
    Function: A unary callable transforming an ``A`` into a ``B``.
    Predicate: A unary callable testing an element and returning a boolean.
    Effect: A unary callable invoked only for its side effect.
    KeyFunction: A unary callable deriving a grouping or identity key.

These aliases are shared by the functional helpers and the ``Option`` type so
signatures stay consistent across the package.
"""

import typing as tp

__all__ = [
    "A",
    "B",
    "K",
    "Function",
    "Predicate",
    "Effect",
    "KeyFunction",
]

A = tp.TypeVar("A")
B = tp.TypeVar("B")
K = tp.TypeVar("K", bound=tp.Hashable)

# A pure transformation of one element
Function = tp.Callable[[A], B]

# A pure boolean test of one element
Predicate = tp.Callable[[A], bool]

# A procedure called once per element, its return value is ignored
Effect = tp.Callable[[A], tp.Any]

# Derives the key used for grouping or identity comparison
KeyFunction = tp.Callable[[A], K]
