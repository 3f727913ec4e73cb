# src/featuretour/config.py
"""
Configuration and data structures for the feature tour.
"""

from dataclasses import dataclass, field
from typing import Tuple

from .enums import Section


def _all_sections() -> Tuple[int, ...]:
    return tuple(section.number for section in Section)


@dataclass
class TourConfig:
    """Tour run configuration."""
    sections: Tuple[int, ...] = field(default_factory=_all_sections)
    parallel_sort_size: int = 1_000_000  # Number of random identifiers to sort
    workers: int = 0  # 0 = one worker per logical core
    zone1: str = "Europe/Berlin"
    zone2: str = "Brazil/East"
    show_all_zones: bool = True  # Print every available zone id in section 10

    # Debug/Verbose mode
    verbose: bool = False  # Enable detailed logging for debugging

    def selected_sections(self):
        """Return the selected sections as enum members, in tour order."""
        return [Section.from_number(number) for number in sorted(set(self.sections))]


@dataclass
class SortTiming:
    """Result of a timed sort."""
    count: int
    millis: int
