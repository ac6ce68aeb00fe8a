"""Guard clauses for validating caller-supplied arguments.

Both helpers raise ``ValueError`` with a message built using ``%``-style
positional formatting. The message is only formatted when arguments are given,
so a literal ``%`` in a plain message is kept as is.

Examples:
    >>> check_not_none("AAPL", "symbol is required")
    'AAPL'
    >>> check_argument(3 > 0, "expected a positive value, got %s", 3)
"""

import typing as tp

from funclite.logger.logger import get_logger

__all__ = ["check_not_none", "check_argument"]

T = tp.TypeVar("T")

logger = get_logger(__name__)


def _format(message: str, args: tp.Tuple[tp.Any, ...]) -> str:
    return message % args if args else message


def check_not_none(
    value: tp.Optional[T], message: str = "input was None", *args: tp.Any
) -> T:
    """Reject a missing value.

    Args:
        value: The value to check.
        message: Error message, optionally containing ``%`` placeholders.
        *args: Positional values substituted into ``message``.

    Returns:
        ``value`` unchanged, so the check can be used inline.

    Raises:
        ValueError: If ``value`` is ``None``.
    """
    if value is None:
        error = _format(message, args)
        logger.debug("Rejected missing argument: %s", error)
        raise ValueError(error)
    return value


def check_argument(condition: bool, message: str, *args: tp.Any) -> None:
    """Reject an argument that fails ``condition``.

    Raises:
        ValueError: If ``condition`` is falsy.
    """
    if not condition:
        error = _format(message, args)
        logger.debug("Rejected invalid argument: %s", error)
        raise ValueError(error)
