"""
Domain модели и value objects

Значимый тип Rational, правила разбора входных значений, ошибки и
сериализуемая запись RationalRecord.
"""

from exact_rational.core.domain.errors import (
    DivisionByZero,
    NonIntegerExponent,
    ParseError,
    RationalError,
)
from exact_rational.core.domain.parsing import (
    parse_decimal_string,
    parse_fraction_string,
    to_fraction_parts,
)
from exact_rational.core.domain.rational import Numeric, Rational
from exact_rational.core.domain.record import RationalRecord

__all__ = [
    # Errors
    "RationalError",
    "DivisionByZero",
    "ParseError",
    "NonIntegerExponent",
    # Parsing
    "parse_decimal_string",
    "parse_fraction_string",
    "to_fraction_parts",
    # Rational
    "Numeric",
    "Rational",
    "RationalRecord",
]
