"""
Numerical Safeguards — проверки конечности значений

Проверки конечности float для одного значения и для набора значений.
NaN, +Inf и -Inf считаются невалидными.

Используется модулем interpolation для выбора fallback-поведения
при невалидных входах.

ИНВАРИАНТЫ:
1. Функции никогда не бросают исключений для float входов
2. Все операции детерминированы и не имеют побочных эффектов
"""

import math


# =============================================================================
# ПРОВЕРКИ КОНЕЧНОСТИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def all_finite(*values: float) -> bool:
    """
    Проверка, что все переданные значения конечные.

    Args:
        *values: Проверяемые значения

    Returns:
        True если ни одно значение не NaN/Inf (для пустого набора тоже True)

    Examples:
        >>> all_finite(1.0, 2.0, 3.0)
        True
        >>> all_finite(1.0, float('nan'))
        False
    """
    return all(math.isfinite(v) for v in values)
