# src/featuretour/formula.py
"""
An abstract calculation with a default helper method.
"""

import math
from abc import ABC, abstractmethod


class Formula(ABC):
    """Subclasses supply calculate(); sqrt() comes for free."""

    @abstractmethod
    def calculate(self, a: int) -> float:
        ...

    def sqrt(self, a: int) -> float:
        return math.sqrt(a)


class ScaledSqrtFormula(Formula):
    """Square root of the input scaled by 100."""

    def calculate(self, a: int) -> float:
        return self.sqrt(a * 100)
