# src/featuretour/__init__.py
"""
featuretour: a printed walk through functional programming features
Callables, closures, pipelines, parallel sorting, dictionaries and dates
"""

__version__ = "0.1.0"

from .enums import Section
from .config import TourConfig, SortTiming
from .converter import Converter, Something, convert
from .formula import Formula, ScaledSqrtFormula
from .person import Person, PersonFactory
from .functional import Optional
from .system import number_of_cores
from .sections import run_tour

__all__ = [
    "Section",
    "TourConfig",
    "SortTiming",
    "Converter",
    "Something",
    "convert",
    "Formula",
    "ScaledSqrtFormula",
    "Person",
    "PersonFactory",
    "Optional",
    "number_of_cores",
    "run_tour",
]
