"""
Core math modules

Численные примитивы для анимации и раскладки: ограничение, нормализация,
линейная интерполяция с определённым поведением на NaN/Inf.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    all_finite,
    is_valid_float,
)

# Interpolation
from src.core.math.interpolation import (
    clamp,
    lerp,
    normalize_clamped,
)

__all__ = [
    # Numerical Safeguards
    "all_finite",
    "is_valid_float",
    # Interpolation
    "clamp",
    "lerp",
    "normalize_clamped",
]
