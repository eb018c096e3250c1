"""
RationalRecord — сериализуемое представление Rational

Immutable Pydantic модель для обмена дробями через JSON. Члены записи —
две половины строки "numerator/denominator" (to_fraction_string), так что
запись не вводит нового числового формата, а раскладывает существующий.
Целые передаются десятичными строками: JSON-потребители с double-числами
теряют точность уже после 2**53.

Формат (соответствует contracts/schema/rational.json):
    {"numerator": "-3", "denominator": "4"}
"""

from pydantic import BaseModel, Field, field_serializer, field_validator

from exact_rational.core.domain.parsing import parse_integer_literal
from exact_rational.core.math.integer_utils import int_to_decimal


class RationalRecord(BaseModel):
    """
    Пара numerator/denominator в виде, пригодном для JSON.

    Immutable модель (frozen=True). Нормализация не выполняется: запись
    хранит ровно ту пару, из которой была создана.
    """

    numerator: int = Field(..., description="Числитель (любой знак)")
    denominator: int = Field(..., description="Знаменатель (ненулевой)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("numerator", "denominator", mode="before")
    @classmethod
    def parse_integer(cls, v: object) -> object:
        """Десятичные строки → int; bool не принимается."""
        if isinstance(v, bool):
            raise ValueError("bool is not an integer")
        if isinstance(v, str):
            return parse_integer_literal(v)
        return v

    @field_validator("denominator")
    @classmethod
    def validate_denominator_nonzero(cls, v: int) -> int:
        """Знаменатель не может быть нулём."""
        if v == 0:
            raise ValueError("denominator must be nonzero")
        return v

    @field_serializer("numerator", "denominator", when_used="json")
    def serialize_integer(self, v: int) -> str:
        return int_to_decimal(v)
