"""
Lazy producers and the ``take`` materializer.

A producer is anything with a zero-argument ``next()`` method that returns
the next value and advances its own state. Producers have no end signal;
callers decide how much to draw with ``take``.

Manifesto:
    - **Shape over inheritance:** Iterable is a Protocol, any object with
      ``next()`` qualifies
    - **Draw on demand:** Nothing is computed until take() asks for it
    - **Observable state:** A producer continues from where the last take()
      left it

Architecture:
    ::

        ┌──────────────┐   next() x count   ┌───────────────┐
        │ Iterable[A]  │ ─────────────────> │ take() -> [A] │
        │  (Numbers)   │                    └───────────────┘
        └──────────────┘

Examples:
    >>> from fungi.iterable import Numbers, take
    >>> take(Numbers(), 5)
    [0, 1, 2, 3, 4]
    >>> numbers = Numbers(20)
    >>> numbers.next(), numbers.next()
    (20, 21)
    >>> take(numbers, 2)
    [22, 23]

Guardrails:
    ❌ DON'T: Share one producer between threads
    ✅ DO: Give each consumer its own producer instance

Tags:
    iterable, lazy, producer, protocol, fungi

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from fungi.errors import InvalidCountError
from fungi.logging import get_logger

logger = get_logger(__name__)

A = TypeVar("A", covariant=True)
B = TypeVar("B")


@runtime_checkable
class Iterable(Protocol[A]):
    """
    A lazy collection resolved one item at a time.

    Implementations define a single method, ``next()``, returning the next
    item in the series and advancing internal state.
    """

    def next(self) -> A:
        """Return the next item and advance."""
        ...


class Numbers:
    """
    Counting producer: ``current``, ``current + 1``, ``current + 2``, ...

    Never terminates. Also usable as a Python iterator, so
    ``itertools.islice(Numbers(), 3)`` works as expected.

    Examples:
        >>> n = Numbers()
        >>> [n.next() for _ in range(3)]
        [0, 1, 2]
        >>> n
        Numbers(current=3)
    """

    __slots__ = ("current",)

    def __init__(self, current: int = 0):
        self.current = current

    def next(self) -> int:
        value = self.current
        self.current += 1
        return value

    def __iter__(self) -> Numbers:
        return self

    def __next__(self) -> int:
        return self.next()

    def __repr__(self) -> str:
        return f"Numbers(current={self.current!r})"


def take(producer: Iterable[B], count: int) -> list[B]:
    """
    Draw exactly ``count`` values from ``producer``, in draw order.

    ``take(producer, 0)`` returns ``[]`` without touching the producer.

    Args:
        producer: Any object implementing the Iterable protocol
        count: Number of draws, must be a non-negative int

    Returns:
        New list of length ``count``

    Raises:
        InvalidCountError: count is negative or not an int; no draws are made
    """
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise InvalidCountError(count)

    result = [producer.next() for _ in range(count)]
    logger.debug("take.drained", count=count, producer=type(producer).__name__)
    return result


__all__ = [
    "Iterable",
    "Numbers",
    "take",
]
