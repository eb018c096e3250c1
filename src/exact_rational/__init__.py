"""
exact-rational — точная рациональная арифметика произвольной точности
"""

from exact_rational.core.domain import (
    DivisionByZero,
    NonIntegerExponent,
    ParseError,
    Rational,
    RationalError,
    RationalRecord,
)

__all__ = [
    "Rational",
    "RationalRecord",
    "RationalError",
    "DivisionByZero",
    "ParseError",
    "NonIntegerExponent",
]
