"""
Parsing — преобразование входных значений в пару numerator/denominator

Поддерживаемые формы:
- int                → (value, 1), без нормализации
- float              → repr(value) → десятичная строка
- decimal.Decimal    → str(value)  → десятичная строка
- fractions.Fraction → (numerator, denominator)
- str                → десятичная запись ("-12.5", "1e-7", ".5") или дробь ("3/4")

Десятичная строка разбирается посимвольно: цифры накапливаются в одно
целое (value = value * 10 + digit), цифры после точки дополнительно
увеличивают счётчик знаков. Результат: value / 10**places, сокращённый.
Знак снимается до сканирования и возвращается после.

Rational-операнды обрабатывает сам Rational.from_value; этот модуль
работает только с примитивами и не импортирует тип Rational.
"""

import math
import re
from decimal import Decimal
from fractions import Fraction
from typing import Final

from exact_rational.core.domain.errors import DivisionByZero, ParseError
from exact_rational.core.math.integer_utils import (
    DECIMAL_BASE,
    decimal_to_int,
    int_abs,
    power_of_ten,
    reduce_fraction,
)

# =============================================================================
# ГРАММАТИКА
# =============================================================================

# [+-] цифры [. цифры] [e [+-] цифры]; хотя бы одна цифра в мантиссе
DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<sign>[+-]?)"
    r"(?P<mantissa>[0-9]+\.?[0-9]*|\.[0-9]+)"
    r"(?:[eE](?P<exponent>[+-]?[0-9]+))?"
)

INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

FRACTION_SEPARATOR: Final[str] = "/"

# Предел |exponent| в десятичной записи ("1e100001" отвергается)
MAX_DECIMAL_EXPONENT: Final[int] = 100_000


# =============================================================================
# СТРОКИ
# =============================================================================


def parse_integer_literal(text: str) -> int:
    """
    Целочисленный литерал: [+-]цифры, пробелы по краям игнорируются.

    Raises:
        ValueError: Если строка пустая или не является целым литералом
    """
    literal = text.strip()

    if not literal:
        raise ValueError("found empty string where an integer was expected")

    if INTEGER_PATTERN.fullmatch(literal) is None:
        raise ValueError(f"{literal!r} is not an integer literal")

    return decimal_to_int(literal)


def parse_decimal_string(text: str) -> tuple[int, int]:
    """
    Разбор десятичной записи в сокращённую пару.

    Args:
        text: Строка вида "12.50", "-0.001", "+3", ".5", "2.5e-3"

    Returns:
        (numerator, denominator), denominator > 0

    Raises:
        ParseError: Если строка не является десятичной записью или
            |exponent| > MAX_DECIMAL_EXPONENT

    Examples:
        >>> parse_decimal_string("0.75")
        (3, 4)
        >>> parse_decimal_string("-12.50")
        (-25, 2)
        >>> parse_decimal_string("1e-3")
        (1, 1000)
    """
    match = DECIMAL_PATTERN.fullmatch(text.strip())
    if match is None:
        raise ParseError(text, "not a decimal numeral")

    value = 0
    decimal_places = 0
    found_dot = False

    for char in match.group("mantissa"):
        if char == ".":
            found_dot = True
            continue

        value = DECIMAL_BASE * value + int(char)
        if found_dot:
            decimal_places += 1

    exponent = decimal_to_int(match.group("exponent") or "0")
    if int_abs(exponent) > MAX_DECIMAL_EXPONENT:
        raise ParseError(text, f"exponent out of range (limit {MAX_DECIMAL_EXPONENT})")

    if exponent >= decimal_places:
        value *= power_of_ten(exponent - decimal_places)
        decimal_places = 0
    else:
        decimal_places -= exponent

    if match.group("sign") == "-":
        value = -value

    return reduce_fraction(value, power_of_ten(decimal_places))


def parse_fraction_string(text: str) -> tuple[int, int]:
    """
    Разбор дроби "numerator/denominator" в сокращённую пару.

    Левая часть — числитель, правая — знаменатель.

    Args:
        text: Строка вида "3/4", "-6/8", " 10 / -4 "

    Returns:
        (numerator, denominator), denominator > 0

    Raises:
        ParseError: Если '/' не ровно один, часть пустая или не целое
        DivisionByZero: Если знаменатель равен нулю

    Examples:
        >>> parse_fraction_string("6/8")
        (3, 4)
        >>> parse_fraction_string("1/-2")
        (-1, 2)
    """
    parts = text.split(FRACTION_SEPARATOR)
    if len(parts) != 2:
        raise ParseError(
            text, f"expected exactly one '{FRACTION_SEPARATOR}', found {len(parts) - 1}"
        )

    try:
        numerator = parse_integer_literal(parts[0])
        denominator = parse_integer_literal(parts[1])
    except ValueError as exc:
        raise ParseError(text, "invalid fraction", cause=exc) from exc

    if denominator == 0:
        raise DivisionByZero(f"Cannot read {text!r}: denominator is zero")

    return reduce_fraction(numerator, denominator)


def parse_string(text: str) -> tuple[int, int]:
    """Десятичная запись или дробь, в зависимости от наличия '/'."""
    if FRACTION_SEPARATOR in text:
        return parse_fraction_string(text)

    if DECIMAL_PATTERN.fullmatch(text.strip()) is None:
        raise ParseError(text, "neither a decimal numeral nor an 'integer/integer' fraction")

    return parse_decimal_string(text)


# =============================================================================
# ЧИСЛА
# =============================================================================


def parse_float(value: float) -> tuple[int, int]:
    """
    float → пара через его текстовую форму (repr).

    Воспроизводятся ровно те цифры, которые печатает Python: 0.1 → 1/10,
    а не двоичное приближение 3602879701896397/36028797018963968.

    Raises:
        ParseError: Для NaN/Inf
    """
    if not math.isfinite(value):
        raise ParseError(value, "float must be finite")

    return parse_decimal_string(repr(value))


def parse_decimal(value: Decimal) -> tuple[int, int]:
    """
    Decimal → пара через str(value) (включая экспоненциальную форму 1E+2).

    Raises:
        ParseError: Для NaN/Infinity
    """
    if not value.is_finite():
        raise ParseError(value, "Decimal must be finite")

    return parse_decimal_string(str(value))


def to_fraction_parts(value: object) -> tuple[int, int]:
    """
    Преобразование примитивного значения в пару numerator/denominator.

    int возвращается как (value, 1) без нормализации; остальные формы
    возвращаются сокращёнными, с положительным знаменателем.

    Args:
        value: int, float, Decimal, Fraction или str

    Returns:
        (numerator, denominator)

    Raises:
        ParseError: Если тип не поддерживается или строка некорректна
        DivisionByZero: Если в строке дроби знаменатель равен нулю
    """
    # bool — подкласс int, но как число не принимается
    if isinstance(value, bool):
        raise ParseError(value, "bool is not a number")

    if isinstance(value, int):
        return value, 1

    if isinstance(value, float):
        return parse_float(value)

    if isinstance(value, Decimal):
        return parse_decimal(value)

    if isinstance(value, Fraction):
        return value.numerator, value.denominator

    if isinstance(value, str):
        return parse_string(value)

    raise ParseError(value, f"unsupported type {type(value).__name__}")
