"""
Long Division — десятичный рендеринг дроби без float

Перевод numerator/denominator в десятичную строку с заданным числом
дробных цифр. Деление выполняется блоками: на каждом шаге остаток
домножается на 10**extra_zeros, где extra_zeros выравнивает количество
цифр остатка с количеством цифр делителя. Блок дополняется ведущими
нулями, иначе серии нулей внутри разложения (1/1000 = 0.001) теряются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат — точное разложение, усечённое (не округлённое) до precision цифр
2. Остаток всегда < denominator, поэтому блок < 10**extra_zeros
3. precision <= 0 → только целая часть, без точки
4. Никаких float-промежуточных значений

АЛГОРИТМ:
    extra_zeros = digits(d - 1) - digits(remainder) + 1
    carry       = remainder * 10**extra_zeros
    block       = carry // d                   (ровно extra_zeros цифр с нулями)
    remainder   = carry - block * d
"""

from typing import Final, Iterator

from exact_rational.core.math.integer_utils import (
    digit_count,
    int_abs,
    int_to_decimal,
    power_of_ten,
    validate_int,
)

# =============================================================================
# ПАРАМЕТРЫ РЕНДЕРИНГА
# =============================================================================

# Количество дробных цифр по умолчанию
DEFAULT_DECIMAL_PRECISION: Final[int] = 16

DECIMAL_POINT: Final[str] = "."


# =============================================================================
# LONG DIVISION
# =============================================================================


def next_carry(
    remainder: int,
    denominator: int,
    denominator_digits: int | None = None,
) -> tuple[int, int]:
    """
    Масштабирование остатка для следующего блока long division.

    Предполагается 0 < remainder < denominator.

    Args:
        remainder: Текущий остаток
        denominator: Делитель (положительный)
        denominator_digits: digit_count(denominator - 1), если уже посчитан

    Returns:
        (carry, extra_zeros): масштабированный остаток и ширина блока в цифрах

    Examples:
        >>> next_carry(1, 1000)
        (1000, 3)
        >>> next_carry(9, 11)
        (900, 2)
    """
    if denominator_digits is None:
        denominator_digits = digit_count(denominator - 1)

    extra_zeros = denominator_digits - digit_count(remainder) + 1
    return remainder * power_of_ten(extra_zeros), extra_zeros


def iter_fraction_blocks(remainder: int, denominator: int) -> Iterator[str]:
    """
    Генератор блоков дробной части.

    Каждый блок — строка ровно из extra_zeros цифр (ведущие нули включены).
    Генератор завершается, когда остаток становится нулевым; для
    периодических дробей он бесконечен, ограничение задаёт вызывающий код.

    Args:
        remainder: Начальный остаток (0 <= remainder < denominator)
        denominator: Делитель (положительный)

    Yields:
        Строки цифр очередного блока
    """
    denominator_digits = digit_count(denominator - 1)

    while remainder:
        carry, extra_zeros = next_carry(remainder, denominator, denominator_digits)
        block = carry // denominator

        yield int_to_decimal(block).zfill(extra_zeros)

        remainder = carry - block * denominator


def render_decimal(
    numerator: int,
    denominator: int,
    precision: int = DEFAULT_DECIMAL_PRECISION,
) -> str:
    """
    Десятичная запись numerator/denominator с усечением до precision цифр.

    Знаменатель должен быть положительным (нормализуйте дробь заранее).
    Для отрицательных значений целая часть усекается к нулю; знак '-'
    ставится перед разложением модуля, если выводится дробная часть.

    Args:
        numerator: Числитель (любой знак)
        denominator: Знаменатель (> 0)
        precision: Максимум дробных цифр; <= 0 трактуется как 0

    Returns:
        Строка вида "123", "0.001" или "-0.3333"

    Raises:
        TypeError: Если аргументы не int
        ValueError: Если denominator <= 0

    Examples:
        >>> render_decimal(1, 1000, 5)
        '0.001'
        >>> render_decimal(1, 3, 4)
        '0.3333'
        >>> render_decimal(-7, 2, 0)
        '-3'
        >>> render_decimal(1, 11, 6)
        '0.090909'
    """
    validate_int(numerator, "numerator")
    validate_int(denominator, "denominator")
    validate_int(precision, "precision")

    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {int_to_decimal(denominator)}")

    magnitude = int_abs(numerator)
    integer_part, remainder = divmod(magnitude, denominator)
    negative = numerator < 0

    if remainder == 0 or precision <= 0:
        # Усечение к нулю: -7/2 → -3
        return int_to_decimal(-integer_part if negative else integer_part)

    digits: list[str] = []
    emitted = 0

    for block in iter_fraction_blocks(remainder, denominator):
        digits.append(block)
        emitted += len(block)
        if emitted >= precision:
            break

    fraction = "".join(digits)[:precision]
    sign = "-" if negative else ""

    return f"{sign}{int_to_decimal(integer_part)}{DECIMAL_POINT}{fraction}"
