# src/featuretour/maps.py
"""
Dictionary helpers mirroring put-if-absent and compute-if-present.
"""

from typing import Callable, Dict, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def put_if_absent(mapping: Dict[K, V], key: K, value: V) -> Optional[V]:
    """Store ``value`` unless ``key`` maps to a non-None value; return the previous value, if any."""
    previous = mapping.get(key)
    if previous is None:
        mapping[key] = value
    return previous


def compute_if_present(mapping: Dict[K, V], key: K,
                       remapping: Callable[[K, V], Optional[V]]) -> Optional[V]:
    """Recompute the value for a present key.

    A ``None`` result removes the key. Absent keys are left untouched.
    """
    if key not in mapping or mapping[key] is None:
        return None
    new_value = remapping(key, mapping[key])
    if new_value is None:
        del mapping[key]
    else:
        mapping[key] = new_value
    return new_value


def build_value_map(size: int = 10) -> Dict[int, str]:
    """Return ``{i: "val<i>"}`` for ``0 <= i < size``."""
    values: Dict[int, str] = {}
    for i in range(size):
        put_if_absent(values, i, f"val{i}")
    return values
