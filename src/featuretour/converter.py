# src/featuretour/converter.py
"""
Single-method conversion abstraction.
"""

from typing import Protocol, TypeVar

F = TypeVar("F", contravariant=True)
T = TypeVar("T", covariant=True)


class Converter(Protocol[F, T]):
    """Anything that turns an F into a T.

    Plain functions, lambdas and bound methods all satisfy it through
    ``__call__``; ``convert`` calls it by name.
    """

    def __call__(self, value: F) -> T:
        ...


def convert(converter: Converter[F, T], value: F) -> T:
    """Apply a converter. Errors raised by the converter propagate unchanged."""
    return converter(value)


class Something:
    """Holder of an instance method used as a converter."""

    def starts_with(self, s: str) -> str:
        return s[0]
