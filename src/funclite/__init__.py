"""Functional-style helpers for in-memory collections."""

from funclite.core.option import Option, Some, Nothing, NOTHING, option_of
from funclite.core.ordered_set import OrderedSet
from funclite.functional.collection_ops import (
    of,
    new_list,
    iterable,
    identity,
    map,
    add_all,
    flat_map,
    flatten,
    filter,
    mk_string,
    group_by,
    forall,
    exists,
    find,
    head_option,
    is_empty,
    set_of,
    foreach,
    difference,
)
from funclite.preconditions import check_not_none, check_argument

__version__ = "0.1.0"

__all__ = [
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "option_of",
    "OrderedSet",
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
    "check_not_none",
    "check_argument",
]
