# src/featuretour/enums.py
"""
Enumeration types for the feature tour.
"""

from enum import Enum


class Section(Enum):
    """Numbered sections of the tour, in the order they are printed."""
    DEFAULT_METHODS = (1, "Default Methods for Interfaces")
    LAMBDA_EXPRESSIONS = (2, "Lambda expressions")
    FUNCTIONAL_INTERFACES = (3, "Functional Interfaces")
    METHOD_REFERENCES = (4, "Method and Constructor References")
    LAMBDA_SCOPES = (5, "Lambda Scopes")
    BUILTIN_FUNCTIONAL_INTERFACES = (6, "Built-in Functional Interfaces")
    STREAMS = (7, "Streams")
    PARALLEL_STREAMS = (8, "Parallel Streams")
    MAP = (9, "Map")
    DATE_API = (10, "Date API")
    ANNOTATIONS = (11, "Annotations")
    HIDDEN_FEATURES = (12, "Hidden Features")

    @property
    def number(self) -> int:
        return self.value[0]

    @property
    def title(self) -> str:
        return self.value[1]

    @property
    def header(self) -> str:
        """Console header line for this section."""
        return f"+-- {self.number}. {self.title}"

    @classmethod
    def from_number(cls, number: int) -> "Section":
        for section in cls:
            if section.number == number:
                return section
        raise ValueError(f"No section numbered {number}")
