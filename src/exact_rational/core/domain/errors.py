"""
Exceptions для Rational

Все ошибки поднимаются синхронно в точке обнаружения и не перехватываются
внутри библиотеки: каждая из них означает некорректный вход вызывающего кода.
"""


class RationalError(Exception):
    """Базовый класс ошибок точной арифметики."""


class DivisionByZero(RationalError, ZeroDivisionError):
    """
    Знаменатель стал бы равен нулю.

    Возникает при:
    - Rational(n, 0)
    - делении на операнд с нулевым значением
    - отрицательной степени нуля
    - строке дроби вида "3/0"
    """

    def __init__(self, message: str = "Cannot divide by zero"):
        super().__init__(message)


class ParseError(RationalError, ValueError):
    """
    Значение не удалось преобразовать в Rational.

    Attributes:
        value: Исходное значение
        cause: Вложенная ошибка разбора (если есть)
    """

    def __init__(self, value: object, reason: str, cause: BaseException | None = None):
        self.value = value
        self.cause = cause

        message = f"Cannot read {value!r}: {reason}"
        if cause is not None:
            message = f"{message} (caused by {type(cause).__name__}: {cause})"

        super().__init__(message)


class NonIntegerExponent(RationalError, ValueError):
    """Показатель степени не является целым числом (корни не поддерживаются)."""
