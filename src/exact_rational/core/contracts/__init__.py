"""
Contract Validation Module

Проверка сериализованных дробей: JSON Schema контракт rational.json,
каноническая форма и чтение в Rational.
"""

from .validators import (
    RationalContract,
    load_rational_schema,
    read_rational,
    validate_rational,
)

__all__ = [
    # Classes
    "RationalContract",
    # Functions
    "load_rational_schema",
    "read_rational",
    "validate_rational",
]
