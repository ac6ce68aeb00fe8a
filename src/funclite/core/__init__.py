"""Core data structures shared by the functional helpers."""

from funclite.core.option import Option, Some, Nothing, NOTHING, option_of
from funclite.core.ordered_set import OrderedSet
from funclite.core.types import Function, Predicate, Effect, KeyFunction

__all__ = [
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "option_of",
    "OrderedSet",
    "Function",
    "Predicate",
    "Effect",
    "KeyFunction",
]
