# src/featuretour/system.py
"""
Host information helpers.
"""

import psutil


def number_of_cores() -> int:
    """Returns the number of logical cores of the actual system."""
    return psutil.cpu_count(logical=True) or 1
