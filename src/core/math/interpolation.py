"""
Interpolation — ограничение, нормализация и линейная интерполяция

Три чистые функции для кода анимации и раскладки UI:
- clamp: ограничение значения диапазоном (с допуском перевёрнутых границ)
- normalize_clamped: отображение [min, max] → [0, 1] с ограничением
- lerp: линейная интерполяция между start и end

ПОВЕДЕНИЕ ПРИ NaN/Inf (различается намеренно, вызывающий код на него опирается):
1. clamp             → lower в том виде, как он передан (до перестановки);
                        NaN в границе при конечном value → NaN
2. normalize_clamped → 0
3. lerp              → start без изменений

Ни одна функция не бросает исключений.
"""

import math

from src.core.math.numerical_safeguards import all_finite, is_valid_float


def clamp(value: float, lower: float, upper: float) -> float:
    """
    Ограничение значения диапазоном [lower, upper] включительно.

    Если lower > upper, границы переставляются местами.

    Args:
        value: Исходное значение
        lower: Нижняя граница
        upper: Верхняя граница

    Returns:
        value, ограниченное диапазоном. Для NaN/Inf value
        возвращается lower как передан (до перестановки).
        Если value конечное, а lower или upper равен NaN, возвращается NaN.
        Бесконечные границы допустимы и работают как обычные.

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(15.0, 10.0, 0.0)
        10.0
        >>> clamp(float('nan'), 3.0, 7.0)
        3.0
    """
    if not is_valid_float(value):
        return lower

    if math.isnan(lower) or math.isnan(upper):
        return math.nan

    if lower > upper:
        lower, upper = upper, lower

    return min(max(value, lower), upper)


def normalize_clamped(value: float, min_value: float, max_value: float) -> float:
    """
    Нормализация value из [min_value, max_value] в [0, 1].

    Формула: clamp((value - min_value) / (max_value - min_value), 0.0, 1.0)

    Вырожденный диапазон (max_value == min_value): ступенька,
    1 если value >= max_value, иначе 0.

    Args:
        value: Исходное значение
        min_value: Начало диапазона
        max_value: Конец диапазона (может быть меньше min_value)

    Returns:
        Значение в [0, 1]; 0 если любой аргумент NaN/Inf

    Examples:
        >>> normalize_clamped(5.0, 0.0, 10.0)
        0.5
        >>> normalize_clamped(7.0, 5.0, 5.0)
        1.0
    """
    if not all_finite(value, min_value, max_value):
        return 0.0

    if max_value == min_value:
        return 1.0 if value >= max_value else 0.0

    return clamp((value - min_value) / (max_value - min_value), 0.0, 1.0)


def lerp(start: float, end: float, t: float) -> float:
    """
    Линейная интерполяция: start + (end - start) * t.

    t не ограничивается: t вне [0, 1] даёт экстраполяцию.
    Если любой аргумент NaN/Inf, возвращается start без изменений.
    """
    if not all_finite(start, end, t):
        return start

    return start + (end - start) * t
