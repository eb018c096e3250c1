"""
Core math modules для exact-rational

Целочисленные примитивы и long division без float-промежуточных значений.
"""

# Integer Utils
from exact_rational.core.math.integer_utils import (
    DECIMAL_BASE,
    decimal_to_int,
    digit_count,
    gcd,
    int_abs,
    int_to_decimal,
    power_of_ten,
    random_integer,
    reduce_fraction,
    validate_int,
    validate_non_negative_int,
)

# Long Division
from exact_rational.core.math.long_division import (
    DEFAULT_DECIMAL_PRECISION,
    iter_fraction_blocks,
    next_carry,
    render_decimal,
)

__all__ = [
    # Integer Utils — Constants
    "DECIMAL_BASE",
    # Integer Utils — Functions
    "decimal_to_int",
    "digit_count",
    "gcd",
    "int_abs",
    "int_to_decimal",
    "power_of_ten",
    "random_integer",
    "reduce_fraction",
    # Integer Utils — Validation
    "validate_int",
    "validate_non_negative_int",
    # Long Division — Constants
    "DEFAULT_DECIMAL_PRECISION",
    # Long Division — Functions
    "iter_fraction_blocks",
    "next_carry",
    "render_decimal",
]
