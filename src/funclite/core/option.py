"""Option type representing a value that may be absent.

``Option[T]`` is a sum type of two immutable pydantic models:

    - ``Some(value)`` wraps a present value.
    - ``Nothing`` marks absence. ``NOTHING`` is the shared instance.

It is the "not found" marker in results such as ``find`` and ``head_option``.
A ``None`` value is never wrapped: ``option_of(None)``, and a ``find`` or
``head_option`` hit on a ``None`` element, all give ``NOTHING``.

Examples:
    >>> from funclite.core.option import Some, NOTHING, option_of
    >>> Some(3).map(lambda x: x * 2)
    Some(value=6)
    >>> option_of(None) is NOTHING
    True
    >>> NOTHING.get_or_else(0)
    0
"""

import typing as tp

from pydantic import BaseModel, ConfigDict

from .types import Function, Predicate

__all__ = [
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "option_of",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")


class Some(BaseModel, tp.Generic[T]):
    """A present value.

    Attributes:
        value: The wrapped value.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: T

    def __init__(self, value: T) -> None:
        super().__init__(value=value)

    @property
    def is_some(self) -> bool:
        return True

    @property
    def is_empty(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return True

    def get(self) -> T:
        return self.value

    def get_or_else(self, default: tp.Any) -> T:
        return self.value

    def or_none(self) -> tp.Optional[T]:
        return self.value

    def map(self, f: Function[T, U]) -> "Option[U]":
        """Apply ``f`` to the value. A ``None`` result collapses to ``NOTHING``."""
        return option_of(f(self.value))

    def flat_map(self, f: Function[T, "Option[U]"]) -> "Option[U]":
        return f(self.value)

    def filter(self, predicate: Predicate[T]) -> "Option[T]":
        return self if predicate(self.value) else NOTHING

    def to_tuple(self) -> tp.Tuple[T]:
        return (self.value,)


class Nothing(BaseModel):
    """The absent value. Use the ``NOTHING`` instance rather than building new ones."""

    model_config = ConfigDict(frozen=True)

    @property
    def is_some(self) -> bool:
        return False

    @property
    def is_empty(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return False

    def get(self) -> tp.NoReturn:
        raise ValueError("Cannot get a value from Nothing.")

    def get_or_else(self, default: U) -> U:
        return default

    def or_none(self) -> None:
        return None

    def map(self, f: Function[tp.Any, U]) -> "Nothing":
        return self

    def flat_map(self, f: Function[tp.Any, "Option[U]"]) -> "Nothing":
        return self

    def filter(self, predicate: Predicate[tp.Any]) -> "Nothing":
        return self

    def to_tuple(self) -> tp.Tuple[()]:
        return ()


NOTHING = Nothing()

Option = tp.Union[Some[T], Nothing]


def option_of(value: tp.Optional[T]) -> "Option[T]":
    """Wrap a possibly-``None`` value.

    Args:
        value: Any value, ``None`` meaning absent.

    Returns:
        ``NOTHING`` when ``value`` is ``None``, otherwise ``Some(value)``.
    """
    if value is None:
        return NOTHING
    return Some(value)
