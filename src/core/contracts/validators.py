"""
JSON Schema Contract Validators

Контракты сериализованных value objects проверяются по JSON Schema
(Draft 2020-12) с одним дополнительным ключевым словом:

- "finite": true: число не может быть NaN/Inf. В JSON Schema такого
  ограничения нет, а json.loads принимает NaN и Infinity.

Схемы лежат в schema/ рядом с модулем и поставляются как package data.
Загрузчик по умолчанию создаётся при первом обращении, не при импорте.

Схемы:
- value_range.json (сериализованный ValueRange)
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator

from jsonschema import Draft202012Validator, SchemaError, ValidationError
from jsonschema.validators import extend

from src.core.math.numerical_safeguards import is_valid_float

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# FINITE KEYWORD
# =============================================================================


def _finite(validator, finite: bool, instance: Any, schema: Dict[str, Any]) -> Iterator[ValidationError]:
    # int в JSON всегда конечный, проверяются только float
    if finite and isinstance(instance, float) and not is_valid_float(instance):
        yield ValidationError(f"{instance!r} is not a finite number")


FiniteValidator = extend(Draft202012Validator, {"finite": _finite})


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем.

    Args:
        schema_dir: Каталог со схемами (default: schema/ рядом с модулем)

    Raises:
        RuntimeError: Если каталог не существует
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")
        self.schema_dir = schema_dir
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени без расширения (например, 'value_range').

        Raises:
            FileNotFoundError: Если файла схемы нет
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если схема не проходит meta-validation
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{schema_name}.json"
        try:
            schema = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise FileNotFoundError(f"Schema not found: {path}") from e

        try:
            FiniteValidator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        logger.debug("Loaded schema %s from %s", schema_name, path)
        self._cache[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def default_loader() -> SchemaLoader:
    """Общий загрузчик для каталога схем пакета."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор данных против одной схемы.

    Подклассы задают schema_name.
    """

    schema_name: str

    def __init__(self, loader: SchemaLoader | None = None):
        self.schema = (loader or default_loader()).load_schema(self.schema_name)
        self._validator = FiniteValidator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первая найденная ошибка
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self._validator.iter_errors(data)


class ValueRangeValidator(ContractValidator):
    """Валидатор контракта value_range: числовые конечные lower/upper."""

    schema_name = "value_range"


def validate_value_range(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного диапазона.

    Принимает ровно те данные, которые принимает ValueRange.model_validate.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ValueRangeValidator().validate(data)
