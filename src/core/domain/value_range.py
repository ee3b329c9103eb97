"""
ValueRange — Модель диапазона значений

Immutable Pydantic модель пары границ (lower, upper), к которой привязаны
операции clamp / normalize / lerp из модуля interpolation.
Соответствует схеме src/core/contracts/schema/value_range.json.

Границы обязаны быть конечными. Перевёрнутый диапазон (lower > upper)
допустим: операции сохраняют семантику функций interpolation.
"""

from pydantic import BaseModel, Field, field_validator

from src.core.math.interpolation import clamp, lerp, normalize_clamped
from src.core.math.numerical_safeguards import is_valid_float


class ValueRange(BaseModel):
    """
    Диапазон значений [lower, upper].

    Immutable модель (frozen=True): ordered() и другие преобразования
    возвращают новый экземпляр.
    """

    lower: float = Field(..., description="Нижняя граница (как задана)")
    upper: float = Field(..., description="Верхняя граница (как задана)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("lower", "upper")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """Границы не могут быть NaN/Inf."""
        if not is_valid_float(v):
            raise ValueError(f"range bound must be finite, got {v}")
        return v

    @property
    def width(self) -> float:
        """Ширина диапазона (отрицательная для перевёрнутого)."""
        return self.upper - self.lower

    @property
    def is_degenerate(self) -> bool:
        """True если lower == upper (нулевая ширина)."""
        return self.upper == self.lower

    @property
    def is_inverted(self) -> bool:
        return self.lower > self.upper

    def ordered(self) -> "ValueRange":
        """Диапазон с lower <= upper."""
        if self.is_inverted:
            return ValueRange(lower=self.upper, upper=self.lower)
        return self

    def contains(self, value: float) -> bool:
        """
        Проверка попадания value в диапазон (включительно, порядок границ не важен).

        NaN/Inf никогда не попадают в диапазон.
        """
        if not is_valid_float(value):
            return False
        bounds = self.ordered()
        return bounds.lower <= value <= bounds.upper

    def clamp(self, value: float) -> float:
        """
        Ограничение value диапазоном.

        Для NaN/Inf возвращает self.lower (как задан, без перестановки).
        """
        return clamp(value, self.lower, self.upper)

    def normalize(self, value: float) -> float:
        """
        Положение value в диапазоне как доля [0, 1].

        Для NaN/Inf возвращает 0.0. Вырожденный диапазон даёт ступеньку.
        """
        return normalize_clamped(value, self.lower, self.upper)

    def lerp(self, t: float) -> float:
        """
        Точка на доле t от lower к upper (t не ограничивается).

        Для NaN/Inf t возвращает self.lower.
        """
        return lerp(self.lower, self.upper, t)

    def remap(self, value: float, target: "ValueRange") -> float:
        """
        Перенос value из этого диапазона в target с ограничением.

        Эквивалентно target.lerp(self.normalize(value)).
        """
        return target.lerp(self.normalize(value))
