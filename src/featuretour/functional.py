# src/featuretour/functional.py
"""
Built-in style functional helpers: predicates, function chaining,
comparators and an optional-value container.
"""

import functools
from typing import Any, Callable, Generic, Optional as _Opt, TypeVar

T = TypeVar("T")
R = TypeVar("R")
V = TypeVar("V")

Predicate = Callable[[T], bool]
Comparator = Callable[[T, T], int]


def negate(predicate: Predicate) -> Predicate:
    """Logical negation of a predicate."""
    return lambda value: not predicate(value)


def both(first: Predicate, second: Predicate) -> Predicate:
    """Short-circuiting logical AND of two predicates."""
    return lambda value: first(value) and second(value)


def either(first: Predicate, second: Predicate) -> Predicate:
    """Short-circuiting logical OR of two predicates."""
    return lambda value: first(value) or second(value)


def non_null(value: Any) -> bool:
    return value is not None


def and_then(first: Callable[[T], R], then: Callable[[R], V]) -> Callable[[T], V]:
    """Return a function applying ``first`` and then ``then`` to its result."""
    return lambda value: then(first(value))


def compose(outer: Callable[[R], V], inner: Callable[[T], R]) -> Callable[[T], V]:
    """Return a function applying ``inner`` first, then ``outer``."""
    return and_then(inner, outer)


def compare(a: Any, b: Any) -> int:
    """Three-way comparison: negative, zero or positive."""
    return (a > b) - (a < b)


def comparing(key: Callable[[T], Any]) -> Comparator:
    """Build a comparator from a key extractor."""
    return lambda a, b: compare(key(a), key(b))


def reversed_order(comparator: Comparator) -> Comparator:
    return lambda a, b: comparator(b, a)


def sort_with(items, comparator: Comparator) -> list:
    """Sort a copy of ``items`` using a three-way comparator."""
    return sorted(items, key=functools.cmp_to_key(comparator))


class Optional(Generic[T]):
    """A container which may or may not hold a non-None value."""

    __slots__ = ("_value",)

    def __init__(self, value: _Opt[T] = None):
        self._value = value

    @classmethod
    def of(cls, value: T) -> "Optional[T]":
        if value is None:
            raise ValueError("Optional.of() requires a non-None value")
        return cls(value)

    @classmethod
    def of_nullable(cls, value: _Opt[T]) -> "Optional[T]":
        return cls(value)

    @classmethod
    def empty(cls) -> "Optional[T]":
        return cls(None)

    def is_present(self) -> bool:
        return self._value is not None

    def get(self) -> T:
        if self._value is None:
            raise ValueError("No value present")
        return self._value

    def or_else(self, other: T) -> T:
        return self._value if self._value is not None else other

    def if_present(self, consumer: Callable[[T], Any]) -> None:
        if self._value is not None:
            consumer(self._value)

    def map(self, mapper: Callable[[T], R]) -> "Optional[R]":
        if self._value is None:
            return Optional.empty()
        return Optional.of_nullable(mapper(self._value))

    def __eq__(self, other) -> bool:
        return isinstance(other, Optional) and self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        if self._value is None:
            return "Optional.empty"
        return f"Optional[{self._value!r}]"
