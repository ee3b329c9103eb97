"""
Domain models and value objects.
"""

from src.core.domain.value_range import ValueRange

__all__ = [
    "ValueRange",
]
