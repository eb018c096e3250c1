"""
Rational Contract — проверка сериализованной дроби

Сериализованная дробь — JSON-объект из двух половин строки "n/d":
    {"numerator": "-3", "denominator": "4"}

Проверка в три шага:
1. Структура и синтаксис целых: JSON Schema (schema/rational.json)
2. Каноническая форма (canonical=True): запись совпадает с
   Rational.normalize().to_record(), т.е. denominator > 0, НОД == 1,
   без '+' и ведущих нулей
3. to_rational: то, что прошло контракт, принимает RationalRecord

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нулевой знаменатель отвергается схемой ("0", "-0", "000")
2. Для любого r: r.normalize().to_record().model_dump(mode="json")
   проходит канонический контракт
"""

import json
import re
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

from exact_rational.core.domain.parsing import parse_integer_literal
from exact_rational.core.domain.rational import Rational
from exact_rational.core.domain.record import RationalRecord
from exact_rational.core.math.integer_utils import gcd

SCHEMA_PACKAGE: Final[str] = "exact_rational.core.contracts"
SCHEMA_FILE: Final[str] = "rational.json"

# Каноническая десятичная запись целого: без '+', без ведущих нулей, без "-0"
CANONICAL_INTEGER: Final[re.Pattern[str]] = re.compile(r"0|-?[1-9][0-9]*")


# =============================================================================
# SCHEMA
# =============================================================================


@lru_cache(maxsize=1)
def load_rational_schema() -> Dict[str, Any]:
    """
    Загрузка rational.json из ресурсов пакета (с кэшированием).

    Raises:
        ValueError: Если файл не является валидной JSON Schema
    """
    source = resources.files(SCHEMA_PACKAGE) / "schema" / SCHEMA_FILE
    schema = json.loads(source.read_text(encoding="utf-8"))

    # Валидируем саму схему (meta-validation)
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {SCHEMA_FILE}: {e}") from e

    return schema


# =============================================================================
# CONTRACT
# =============================================================================


class RationalContract:
    """
    Контракт сериализованной дроби.

    Args:
        canonical: Требовать несократимую запись с положительным знаменателем

    Examples:
        >>> RationalContract().is_valid({"numerator": "2", "denominator": "-4"})
        True
        >>> RationalContract(canonical=True).is_valid({"numerator": "2", "denominator": "-4"})
        False
    """

    def __init__(self, canonical: bool = False):
        self.canonical = canonical
        self._validator = Draft202012Validator(load_rational_schema())

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """
        Все нарушения контракта.

        Канонические проверки выполняются только для структурно валидных
        данных.
        """
        schema_errors = list(self._validator.iter_errors(data))
        yield from schema_errors

        if schema_errors or not self.canonical:
            return

        yield from _canonical_errors(data)

    def is_valid(self, data: Any) -> bool:
        return next(self.iter_errors(data), None) is None

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Наиболее релевантное нарушение контракта
        """
        error = best_match(self.iter_errors(data))
        if error is not None:
            raise error

    def to_rational(self, data: Any) -> Rational:
        """
        Проверка контракта и чтение записи в Rational (пара без нормализации).

        Raises:
            ValidationError: Если данные нарушают контракт
        """
        self.validate(data)
        return Rational.from_record(RationalRecord.model_validate(data))


def _canonical_errors(data: Dict[str, str]) -> Iterator[ValidationError]:
    for field in ("numerator", "denominator"):
        if CANONICAL_INTEGER.fullmatch(data[field]) is None:
            yield ValidationError(
                f"{data[field]!r} is not a canonical integer",
                validator="canonical",
                path=(field,),
                instance=data[field],
            )

    numerator = parse_integer_literal(data["numerator"])
    denominator = parse_integer_literal(data["denominator"])

    if denominator < 0:
        yield ValidationError(
            "denominator must be positive in canonical form",
            validator="canonical",
            path=("denominator",),
            instance=data["denominator"],
        )

    if gcd(numerator, denominator) != 1:
        yield ValidationError(
            f"{data['numerator']}/{data['denominator']} is not reduced",
            validator="canonical",
            instance=data,
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_rational(data: Dict[str, Any], canonical: bool = False) -> None:
    """
    Валидация сериализованной дроби.

    Args:
        data: Данные для валидации (например, record.model_dump(mode="json"))
        canonical: Требовать каноническую форму

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    RationalContract(canonical).validate(data)


def read_rational(data: Dict[str, Any], canonical: bool = False) -> Rational:
    """Проверенное чтение сериализованной дроби в Rational."""
    return RationalContract(canonical).to_rational(data)
