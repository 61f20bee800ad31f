"""Ordering helpers shared by the temporal value types.

Every ordered type in Tempus (Instant, LocalDate, LocalTime, LocalDateTime,
Duration) implements the rich comparison operators. The functions here
reduce over those operators so each type can expose ``min_of`` and
``max_of`` without repeating the loop.
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol, TypeVar

from tempus.errors import EmptyInputError


class _Ordered(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=_Ordered)


def compare(left: _Ordered, right: _Ordered) -> int:
    """Compare two values of the same temporal type.

    Returns:
        -1 if left < right, 0 if equal, 1 if left > right.

    Examples:
        >>> from tempus.core.local_date import LocalDate
        >>> compare(LocalDate.of(2024, 1, 1), LocalDate.of(2024, 1, 2))
        -1
    """
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def min_of(values: Iterable[T], *, name: str = "min_of") -> T:
    """Return the earliest of the given values.

    Values are reduced pairwise; on ties the first one seen is kept.

    Args:
        values: One or more values of the same ordered type.
        name: Operation name used in the error message.

    Raises:
        EmptyInputError: If values is empty.

    Examples:
        >>> from tempus.core.local_date import LocalDate
        >>> min_of([LocalDate.of(2024, 1, 20), LocalDate.of(2024, 1, 15)])
        LocalDate(2024, 1, 15)
    """
    iterator = iter(values)
    try:
        result = next(iterator)
    except StopIteration:
        raise EmptyInputError(f"{name}() requires at least one value") from None

    for value in iterator:
        if value < result:
            result = value
    return result


def max_of(values: Iterable[T], *, name: str = "max_of") -> T:
    """Return the latest of the given values.

    Values are reduced pairwise; on ties the first one seen is kept.

    Args:
        values: One or more values of the same ordered type.
        name: Operation name used in the error message.

    Raises:
        EmptyInputError: If values is empty.

    Examples:
        >>> from tempus.core.local_date import LocalDate
        >>> max_of([LocalDate.of(2024, 1, 20), LocalDate.of(2024, 1, 15)])
        LocalDate(2024, 1, 20)
    """
    iterator = iter(values)
    try:
        result = next(iterator)
    except StopIteration:
        raise EmptyInputError(f"{name}() requires at least one value") from None

    for value in iterator:
        if value > result:
            result = value
    return result


__all__ = [
    "compare",
    "min_of",
    "max_of",
]
