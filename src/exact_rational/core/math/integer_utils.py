"""
Integer Utils — целочисленные примитивы для точной арифметики

Модуль содержит чистые функции над Python int (произвольная точность):
- НОД (алгоритм Евклида) и модуль числа
- Количество десятичных цифр (для long division)
- Десятичная запись и разбор int любой длины (без лимита str(int))
- Случайное целое в полуинтервале [min, max)
- Валидация целочисленных параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(a, b) >= 0 для любых a, b; gcd(0, 0) == 0
2. digit_count(0) == 1
3. Результаты точны: float служит только начальной оценкой в digit_count
4. decimal_to_int(int_to_decimal(x)) == x для любого x
"""

import math
import random
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления для рендеринга и парсинга
DECIMAL_BASE: Final[int] = 10

LOG10_2: Final[float] = math.log10(2)

# Длина куска при переводе int <-> str; ниже минимально допустимого
# значения sys.set_int_max_str_digits() (640)
STR_CHUNK_DIGITS: Final[int] = 512


# =============================================================================
# НОД И МОДУЛЬ
# =============================================================================


def int_abs(value: int) -> int:
    """
    Модуль целого числа.

    Examples:
        >>> int_abs(-7)
        7
        >>> int_abs(0)
        0
    """
    return -value if value < 0 else value


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Результат всегда неотрицательный. Если один из аргументов равен нулю,
    возвращается модуль другого; gcd(0, 0) == 0 (алгоритм завершается сразу).

    Args:
        a: Первое целое (любой знак)
        b: Второе целое (любой знак)

    Returns:
        Неотрицательный НОД

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-4, 6)
        2
        >>> gcd(0, -5)
        5
        >>> gcd(0, 0)
        0
    """
    a = int_abs(a)
    b = int_abs(b)

    while b:
        a, b = b, a % b

    return a


def reduce_fraction(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Сокращение пары numerator/denominator на НОД.

    Знак переносится в числитель: знаменатель результата всегда
    положительный, иначе сравнения перекрёстным умножением дают
    неверный знак. 0/d сокращается до 0/1.

    Args:
        numerator: Числитель
        denominator: Знаменатель (ненулевой)

    Returns:
        (numerator, denominator) в несократимом виде, denominator > 0

    Raises:
        ValueError: Если denominator == 0

    Examples:
        >>> reduce_fraction(6, 8)
        (3, 4)
        >>> reduce_fraction(3, -6)
        (-1, 2)
        >>> reduce_fraction(0, -5)
        (0, 1)
    """
    if denominator == 0:
        raise ValueError("denominator must be nonzero")

    divisor = gcd(numerator, denominator)
    if denominator < 0:
        divisor = -divisor

    return numerator // divisor, denominator // divisor


# =============================================================================
# ДЕСЯТИЧНЫЕ ЦИФРЫ
# =============================================================================


def digit_count(value: int) -> int:
    """
    Количество десятичных цифр в записи числа (без знака).

    Используется в long division для подсчёта ведущих нулей блока.
    Оценка по bit_length уточняется сравнением со степенями 10, поэтому
    результат точен для int любой длины и не зависит от лимита
    sys.get_int_max_str_digits().

    Examples:
        >>> digit_count(0)
        1
        >>> digit_count(999)
        3
        >>> digit_count(-1000)
        4
    """
    magnitude = int_abs(value)
    if magnitude < DECIMAL_BASE:
        return 1

    count = int((magnitude.bit_length() - 1) * LOG10_2) + 1
    while count > 1 and magnitude < power_of_ten(count - 1):
        count -= 1
    while magnitude >= power_of_ten(count):
        count += 1

    return count


def power_of_ten(exponent: int) -> int:
    """
    10 ** exponent для неотрицательного exponent.

    Raises:
        ValueError: Если exponent < 0
    """
    validate_non_negative_int(exponent, "exponent")
    return DECIMAL_BASE**exponent


# =============================================================================
# ДЕСЯТИЧНАЯ ЗАПИСЬ
# =============================================================================


def int_to_decimal(value: int) -> str:
    """
    Десятичная запись int любой длины.

    str(int) отказывает после sys.get_int_max_str_digits() цифр (4300 по
    умолчанию), поэтому длинные числа делятся пополам через divmod на
    10**k, а половины склеиваются с дополнением нулями.

    Examples:
        >>> int_to_decimal(-1200)
        '-1200'
        >>> len(int_to_decimal(10**5000))
        5001
    """
    if value < 0:
        return "-" + _digits_of(-value, 0)
    return _digits_of(value, 0)


def _digits_of(magnitude: int, width: int) -> str:
    """Цифры неотрицательного числа, дополненные нулями слева до width."""
    if magnitude < power_of_ten(STR_CHUNK_DIGITS):
        return str(magnitude).zfill(width)

    low_width = digit_count(magnitude) // 2
    high, low = divmod(magnitude, power_of_ten(low_width))

    return _digits_of(high, width - low_width) + _digits_of(low, low_width)


def decimal_to_int(text: str) -> int:
    """
    int из строки [+-]цифры любой длины.

    Обратная операция к int_to_decimal; строка должна быть уже проверена
    (только цифры и необязательный знак).

    Raises:
        ValueError: Если строка не является целым литералом

    Examples:
        >>> decimal_to_int("-0042")
        -42
    """
    sign = 1
    digits = text
    if text.startswith(("+", "-")):
        sign = -1 if text[0] == "-" else 1
        digits = text[1:]

    return sign * _int_from_digits(digits)


def _int_from_digits(digits: str) -> int:
    if len(digits) <= STR_CHUNK_DIGITS:
        return int(digits)

    low_width = len(digits) // 2
    high = _int_from_digits(digits[:-low_width])
    low = _int_from_digits(digits[-low_width:])

    return high * power_of_ten(low_width) + low


# =============================================================================
# СЛУЧАЙНЫЕ ЧИСЛА
# =============================================================================


def random_integer(
    min_value: int,
    max_value: int,
    rng: random.Random | None = None,
) -> int:
    """
    Случайное целое в полуинтервале [min_value, max_value).

    Args:
        min_value: Нижняя граница (включительно)
        max_value: Верхняя граница (исключительно)
        rng: Источник случайности (default: модуль random)

    Returns:
        Целое min_value <= x < max_value

    Raises:
        ValueError: Если max_value <= min_value
    """
    if max_value <= min_value:
        raise ValueError(
            f"max_value must be greater than min_value, got [{min_value}, {max_value})"
        )

    source = rng if rng is not None else random
    return source.randrange(min_value, max_value)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_int(value: object, name: str) -> None:
    """
    Валидация, что значение — int (bool не допускается).

    Raises:
        TypeError: Если value не int или является bool
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация, что значение — неотрицательный int.

    Raises:
        TypeError: Если value не int
        ValueError: Если value < 0
    """
    validate_int(value, name)

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {int_to_decimal(value)}")
