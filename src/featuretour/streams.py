# src/featuretour/streams.py
"""
Pipeline operations over a collection of strings.
"""

import functools
from typing import Iterable, List

from .functional import Optional

SAMPLE_COLLECTION = ("ddd2", "aaa2", "bbb1", "aaa1", "bbb3", "ccc", "bbb2", "ddd1")


def filter_prefix(items: Iterable[str], prefix: str) -> List[str]:
    """Keep the items starting with ``prefix``, preserving order."""
    return [s for s in items if s.startswith(prefix)]


def sorted_filter_prefix(items: Iterable[str], prefix: str) -> List[str]:
    return filter_prefix(sorted(items), prefix)


def upper_sorted(items: Iterable[str]) -> List[str]:
    return sorted(map(str.upper, items))


def any_match_prefix(items: Iterable[str], prefix: str) -> bool:
    return any(s.startswith(prefix) for s in items)


def count_prefix(items: Iterable[str], prefix: str) -> int:
    return sum(1 for s in items if s.startswith(prefix))


def reduce_joined(items: Iterable[str], separator: str = "#") -> Optional[str]:
    """Join the sorted items with ``separator``; empty input gives an empty Optional."""
    ordered = sorted(items)
    if not ordered:
        return Optional.empty()
    return Optional.of(functools.reduce(lambda s1, s2: s1 + separator + s2, ordered))
