"""
Contract Validation Module

Валидация JSON контрактов (сериализованных value objects).
"""

from .validators import (
    SCHEMA_DIR,
    ContractValidator,
    FiniteValidator,
    SchemaLoader,
    ValueRangeValidator,
    default_loader,
    validate_value_range,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FiniteValidator",
    "ValueRangeValidator",
    # Functions
    "default_loader",
    "validate_value_range",
]
