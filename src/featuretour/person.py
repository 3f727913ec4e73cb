# src/featuretour/person.py
"""
A two-field name record and the factory abstraction that builds it.
"""

from typing import Optional, Protocol


class Person:
    """A first and last name.

    ``Person()`` without arguments generates numbered default names.
    """

    cnt = 0

    def __init__(self, first_name: Optional[str] = None, last_name: Optional[str] = None):
        if first_name is None and last_name is None:
            Person.cnt += 1
            first_name = f"default firstName {Person.cnt}"
            last_name = f"default lastName {Person.cnt}"
        self.first_name = first_name
        self.last_name = last_name

    def __repr__(self) -> str:
        return f"Person(first_name={self.first_name!r}, last_name={self.last_name!r})"


class PersonFactory(Protocol):
    """Builds a person from a first and a last name."""

    def __call__(self, first_name: str, last_name: str) -> Person:
        ...
