"""
List transformation primitives.

Map, fold, filter and membership over finite ordered sequences, plus a
mapping variant of map. Every function returns a freshly allocated
container and leaves its input untouched. None of them raise on their own:
an empty input gives an empty (or identity) result, and an exception raised
by a caller-supplied callable propagates as-is.

Manifesto:
    - **Order is meaning:** Results follow input order, first to last
    - **Fresh output:** Inputs are never mutated
    - **Fixed signatures:** fold's reducer takes (item, accumulator), in
      that order, because non-commutative reducers depend on it

Examples:
    >>> from fungi.lists import map_list, fold, filter_list, includes
    >>> map_list([1, 2, 4], lambda i: i + 1)
    [2, 3, 5]
    >>> fold(lambda item, acc: acc + len(item), 0, ["go", "help", "test"])
    10
    >>> filter_list(lambda age: age >= 18, [8, 41, 17, 18, 15])
    [41, 18]
    >>> includes(["Aquaman", "Batman"], "Robin")
    False

Tags:
    map, fold, filter, includes, collections, fungi

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")
A = TypeVar("A")
B = TypeVar("B")


def map_list(sequence: Sequence[T], transform: Callable[[T], U]) -> list[U]:
    """
    Apply ``transform`` to every element, preserving order.

    The result always has the same length as ``sequence`` and
    ``result[i] == transform(sequence[i])``.

    Args:
        sequence: Elements to transform
        transform: Total function applied to each element

    Returns:
        New list of transformed elements
    """
    return [transform(item) for item in sequence]


def map_dict(mapping: Mapping[K, T], transform: Callable[[T], U]) -> dict[K, U]:
    """Apply ``transform`` to every value of ``mapping``, keeping the key set."""
    return {key: transform(value) for key, value in mapping.items()}


def fold(reducer: Callable[[A, B], B], initial: B, sequence: Sequence[A]) -> B:
    """
    Reduce ``sequence`` to a single value, first element to last.

    ``reducer`` is called as ``reducer(item, accumulator)``. Folding an
    empty sequence returns ``initial`` unchanged.

    Examples:
        >>> fold(lambda item, acc: acc + [item], [], "abc")
        ['a', 'b', 'c']
        >>> fold(lambda item, acc: item - acc, 0, [1, 2, 3])
        2
    """
    acc = initial
    for item in sequence:
        acc = reducer(item, acc)
    return acc


def filter_list(predicate: Callable[[T], bool], sequence: Sequence[T]) -> list[T]:
    """Keep the elements for which ``predicate`` is true, in their original order."""
    return [item for item in sequence if predicate(item)]


def includes(sequence: Sequence[T], target: T) -> bool:
    """Return True if any element equals ``target``; stops at the first match."""
    for item in sequence:
        if item == target:
            return True
    return False


__all__ = [
    "map_list",
    "map_dict",
    "fold",
    "filter_list",
    "includes",
]
