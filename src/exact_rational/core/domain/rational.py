"""
Rational — точное рациональное число произвольной точности

Значение numerator / denominator, где оба компонента — Python int.

Immutable value type: каждая операция возвращает новый экземпляр.
Арифметика всегда нормализует результат (сокращение на НОД и
положительный знаменатель). Сырой конструктор Rational(n, d) хранит пару
как есть, поэтому сравнения учитывают знак знаменателей явно.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator != 0 (иначе DivisionByZero при создании)
2. После normalize(): gcd(|numerator|, denominator) == 1 и denominator > 0
3. Десятичный рендеринг не использует float (см. long_division)
4. Сравнения через перекрёстное умножение: a/b ? c/d ⇔ a*d ? c*b

Операнды именованных методов (Numeric) проходят через from_value:
Rational, int, float, Decimal, Fraction, str ("0.75", "3/4"). Операторы
сравнения (==, <, ...) читают float по точному двоичному значению.
"""

import math
import operator
from decimal import Decimal
from fractions import Fraction
from typing import Callable, Union

from exact_rational.core.domain.errors import DivisionByZero, NonIntegerExponent
from exact_rational.core.domain.parsing import to_fraction_parts
from exact_rational.core.domain.record import RationalRecord
from exact_rational.core.math.integer_utils import (
    int_abs,
    int_to_decimal,
    reduce_fraction,
    validate_int,
)
from exact_rational.core.math.long_division import DEFAULT_DECIMAL_PRECISION, render_decimal

Numeric = Union["Rational", int, float, Decimal, Fraction, str]


class Rational:
    """
    Точная дробь numerator/denominator.

    Examples:
        >>> Rational.from_value("3/4").add("0.25")
        Rational(1, 1)
        >>> Rational(1, 3).to_decimal_string(5)
        '0.33333'
        >>> Rational(2, 4).to_fraction_string()
        '2/4'
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1):
        """
        Args:
            numerator: Числитель
            denominator: Знаменатель (default: 1)

        Raises:
            TypeError: Если компоненты не int
            DivisionByZero: Если denominator == 0
        """
        validate_int(numerator, "numerator")
        validate_int(denominator, "denominator")

        if denominator == 0:
            raise DivisionByZero()

        self._numerator = numerator
        self._denominator = denominator

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def from_value(cls, value: Numeric) -> "Rational":
        """
        Создание Rational из int, float, Decimal, Fraction, str или Rational.

        Для Rational возвращается копия с той же (возможно несокращённой) парой.
        int сохраняется как value/1. Строки и дробные числа возвращаются
        сокращёнными.

        Args:
            value: Исходное значение

        Returns:
            Rational, равный value

        Raises:
            ParseError: Если значение не распознано
            DivisionByZero: Если строка дроби имеет нулевой знаменатель
        """
        if isinstance(value, Rational):
            return cls(value._numerator, value._denominator)

        numerator, denominator = to_fraction_parts(value)
        return cls(numerator, denominator)

    @classmethod
    def from_record(cls, record: RationalRecord) -> "Rational":
        """Rational из сериализованной записи (пара без нормализации)."""
        return cls(record.numerator, record.denominator)

    @classmethod
    def _reduced(cls, numerator: int, denominator: int) -> "Rational":
        if denominator == 0:
            raise DivisionByZero()
        return cls(*reduce_fraction(numerator, denominator))

    @staticmethod
    def _coerce(other: Numeric) -> "Rational":
        if isinstance(other, Rational):
            return other
        return Rational.from_value(other)

    def normalize(self) -> "Rational":
        """
        Равная по значению дробь в несократимом виде с denominator > 0.

        Examples:
            >>> Rational(6, -8).normalize()
            Rational(-3, 4)
        """
        return self._reduced(self._numerator, self._denominator)

    def negate(self) -> "Rational":
        """(-a)/b, без нормализации."""
        return Rational(-self._numerator, self._denominator)

    def to_record(self) -> RationalRecord:
        return RationalRecord(numerator=self._numerator, denominator=self._denominator)

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def add(self, other: Numeric) -> "Rational":
        """a/b + c/d = (a*d + c*b) / (b*d)"""
        o = self._coerce(other)
        return self._reduced(
            self._numerator * o._denominator + o._numerator * self._denominator,
            self._denominator * o._denominator,
        )

    def subtract(self, other: Numeric) -> "Rational":
        """a/b - c/d = a/b + (-c)/d"""
        return self.add(self._coerce(other).negate())

    def multiply(self, other: Numeric) -> "Rational":
        """a/b * c/d = (a*c) / (b*d)"""
        o = self._coerce(other)
        return self._reduced(
            self._numerator * o._numerator,
            self._denominator * o._denominator,
        )

    def divide(self, other: Numeric) -> "Rational":
        """
        a/b ÷ c/d = (a*d) / (b*c)

        Raises:
            DivisionByZero: Если значение делителя равно нулю
        """
        o = self._coerce(other)
        return self._reduced(
            self._numerator * o._denominator,
            self._denominator * o._numerator,
        )

    def pow(self, other: Numeric) -> "Rational":
        """
        Целая степень дроби.

        Показатель приводится через from_value и нормализуется; он обязан
        быть целым. Для n >= 0: a**n / b**n. Для n < 0: сначала обратная
        дробь, затем степень |n|. Дробные показатели (корни) не поддерживаются.

        Raises:
            NonIntegerExponent: Если показатель не целый
            DivisionByZero: Если ноль возводится в отрицательную степень

        Examples:
            >>> Rational(2, 3).pow(-2)
            Rational(9, 4)
            >>> Rational(5, 7).pow(0)
            Rational(1, 1)
        """
        exponent = self._coerce(other).normalize()

        if exponent._denominator != 1:
            raise NonIntegerExponent(
                f"Exponent must be an integer, got {exponent.to_fraction_string()}"
            )

        n = exponent._numerator
        if n >= 0:
            return self._reduced(self._numerator**n, self._denominator**n)

        if self._numerator == 0:
            raise DivisionByZero("Cannot raise zero to a negative power")

        return self._reduced(self._denominator ** (-n), self._numerator ** (-n))

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def _cross(self, other: "Rational") -> tuple[int, int]:
        """
        Перекрёстные произведения (a*d, c*b) с поправкой на знак b*d.

        Для несокращённых дробей с отрицательным знаменателем неравенства
        переворачиваются, поэтому при b*d < 0 обе стороны меняют знак.
        """
        lhs = self._numerator * other._denominator
        rhs = other._numerator * self._denominator

        if (self._denominator < 0) != (other._denominator < 0):
            return -lhs, -rhs

        return lhs, rhs

    def _compare(self, other: Numeric, op: Callable[[int, int], bool]) -> bool:
        lhs, rhs = self._cross(self._coerce(other))
        return op(lhs, rhs)

    def equals(self, other: Numeric) -> bool:
        return self._compare(other, operator.eq)

    def less_than(self, other: Numeric) -> bool:
        return self._compare(other, operator.lt)

    def less_or_equal(self, other: Numeric) -> bool:
        return self._compare(other, operator.le)

    def greater_than(self, other: Numeric) -> bool:
        return self._compare(other, operator.gt)

    def greater_or_equal(self, other: Numeric) -> bool:
        return self._compare(other, operator.ge)

    # =========================================================================
    # RENDERING
    # =========================================================================

    def to_approximate_number(self) -> float:
        """
        Приближённое значение во float (с потерей точности).

        Raises:
            OverflowError: Если значение вне диапазона float
        """
        return self._numerator / self._denominator

    def to_fraction_string(self) -> str:
        """Строка "numerator/denominator" без нормализации."""
        return f"{int_to_decimal(self._numerator)}/{int_to_decimal(self._denominator)}"

    def to_decimal_string(self, precision: int = DEFAULT_DECIMAL_PRECISION) -> str:
        """
        Десятичная запись через long division, усечённая до precision цифр.

        Args:
            precision: Максимум дробных цифр; <= 0 → только целая часть

        Returns:
            Точное разложение, если оно короче precision, иначе усечённое

        Examples:
            >>> Rational(1, 1000).to_decimal_string(5)
            '0.001'
            >>> Rational(22, 7).to_decimal_string(4)
            '3.1428'
            >>> Rational(7, 2).to_decimal_string(0)
            '3'
        """
        numerator, denominator = reduce_fraction(self._numerator, self._denominator)
        return render_decimal(numerator, denominator, precision)

    # =========================================================================
    # PYTHON PROTOCOLS
    # =========================================================================

    def __repr__(self) -> str:
        return f"Rational({int_to_decimal(self._numerator)}, {int_to_decimal(self._denominator)})"

    def __str__(self) -> str:
        return self.to_fraction_string()

    def __float__(self) -> float:
        return self.to_approximate_number()

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __hash__(self) -> int:
        # Совпадает с hash(int), hash(float) и hash(Fraction) для равных по == значений
        return hash(Fraction(self._numerator, self._denominator))

    def __neg__(self) -> "Rational":
        return self.negate().normalize()

    def __pos__(self) -> "Rational":
        return self.normalize()

    def __abs__(self) -> "Rational":
        return self._reduced(int_abs(self._numerator), int_abs(self._denominator))

    def __add__(self, other):
        o = _operand(other)
        return NotImplemented if o is None else self.add(o)

    def __radd__(self, other):
        o = _operand(other)
        return NotImplemented if o is None else o.add(self)

    def __sub__(self, other):
        o = _operand(other)
        return NotImplemented if o is None else self.subtract(o)

    def __rsub__(self, other):
        o = _operand(other)
        return NotImplemented if o is None else o.subtract(self)

    def __mul__(self, other):
        o = _operand(other)
        return NotImplemented if o is None else self.multiply(o)

    def __rmul__(self, other):
        o = _operand(other)
        return NotImplemented if o is None else o.multiply(self)

    def __truediv__(self, other):
        o = _operand(other)
        return NotImplemented if o is None else self.divide(o)

    def __rtruediv__(self, other):
        o = _operand(other)
        return NotImplemented if o is None else o.divide(self)

    def __pow__(self, other, modulo=None):
        if modulo is not None:
            return NotImplemented
        o = _operand(other)
        return NotImplemented if o is None else self.pow(o)

    def __rpow__(self, other):
        o = _operand(other)
        return NotImplemented if o is None else o.pow(self)

    def __eq__(self, other):
        if _non_finite(other) is not None:
            return False
        o = _comparand(other)
        return NotImplemented if o is None else self.equals(o)

    def __lt__(self, other):
        return self._rich_compare(other, operator.lt)

    def __le__(self, other):
        return self._rich_compare(other, operator.le)

    def __gt__(self, other):
        return self._rich_compare(other, operator.gt)

    def __ge__(self, other):
        return self._rich_compare(other, operator.ge)

    def _rich_compare(self, other, op: Callable[[int, int], bool]):
        special = _non_finite(other)
        if special is not None:
            # Любое конечное значение сравнивается с ±inf/nan так же, как 0.0
            return op(0.0, special)
        o = _comparand(other)
        return NotImplemented if o is None else self._compare(o, op)


# =============================================================================
# OPERATOR OPERANDS
# =============================================================================


def _non_finite(value: object) -> float | None:
    """inf/nan для неконечных float и Decimal, иначе None."""
    if isinstance(value, float) and not math.isfinite(value):
        return value
    if isinstance(value, Decimal) and not value.is_finite():
        return math.nan if value.is_nan() else float(value)
    return None


def _operand(value: object) -> Rational | None:
    """
    Операнд для операторов Python: числа, но не строки и не bool.

    None означает NotImplemented: "1/2" + Rational(1) должно падать с
    TypeError, а не молча парсить строку.
    """
    if isinstance(value, Rational):
        return value

    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float, Decimal, Fraction)):
        return Rational.from_value(value)

    return None


def _comparand(value: object) -> Rational | None:
    """
    Операнд для ==, <, <=, >, >=.

    float берётся по точному двоичному значению, как в Fraction:
    Rational(1, 10) != 0.1. Именованные методы (equals, less_than, ...)
    читают float через repr.
    """
    if isinstance(value, float):
        return Rational(*value.as_integer_ratio())
    return _operand(value)
