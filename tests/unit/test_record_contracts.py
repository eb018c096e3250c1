"""
Tests for RationalRecord and JSON Schema Contract Validators

Покрывает:
- Создание и валидация RationalRecord (Pydantic V2)
- JSON сериализация/десериализация без потери точности
- Immutability (frozen=True)
- JSON Schema compliance (rational.json) и каноническая форма
- Интеграция Rational ↔ RationalRecord ↔ JSON
"""

import pytest
from jsonschema import Draft202012Validator
from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from exact_rational import Rational, RationalRecord
from exact_rational.core.contracts import (
    RationalContract,
    load_rational_schema,
    read_rational,
    validate_rational,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_rational_data():
    """Валидная сериализованная дробь."""
    return {"numerator": "-3", "denominator": "4"}


@pytest.fixture
def big_rational():
    """Дробь с компонентами за пределами double/int64."""
    return Rational(-(10**40) - 7, 3 * 10**25)


# =============================================================================
# RationalRecord
# =============================================================================


class TestRationalRecord:
    """Тесты Pydantic модели RationalRecord"""

    def test_from_ints(self) -> None:
        record = RationalRecord(numerator=3, denominator=4)
        assert record.numerator == 3
        assert record.denominator == 4

    def test_from_strings(self, valid_rational_data) -> None:
        record = RationalRecord(**valid_rational_data)
        assert (record.numerator, record.denominator) == (-3, 4)

    def test_json_dump_uses_strings(self) -> None:
        record = RationalRecord(numerator=10**30, denominator=7)
        assert record.model_dump() == {"numerator": 10**30, "denominator": 7}
        assert record.model_dump(mode="json") == {
            "numerator": str(10**30),
            "denominator": "7",
        }

    def test_json_round_trip_is_exact(self, big_rational) -> None:
        payload = big_rational.to_record().model_dump_json()
        restored = RationalRecord.model_validate_json(payload)
        assert restored.numerator == big_rational.numerator
        assert restored.denominator == big_rational.denominator

    def test_json_beyond_str_limit(self) -> None:
        """Целые длиннее лимита str(int) в 4300 цифр"""
        record = RationalRecord(numerator=10**5000, denominator=3)
        assert record.model_dump(mode="json")["numerator"] == "1" + "0" * 5000

        restored = RationalRecord.model_validate_json(record.model_dump_json())
        assert restored.numerator == 10**5000

    def test_json_numbers_accepted(self) -> None:
        record = RationalRecord.model_validate_json('{"numerator": 3, "denominator": -4}')
        assert (record.numerator, record.denominator) == (3, -4)

    def test_zero_denominator_rejected(self) -> None:
        with pytest.raises(ValidationError, match="denominator must be nonzero"):
            RationalRecord(numerator=1, denominator=0)
        with pytest.raises(ValidationError):
            RationalRecord(numerator="1", denominator="-0")

    @pytest.mark.parametrize("bad", ["1.5", "abc", "", True])
    def test_invalid_integer_rejected(self, bad) -> None:
        with pytest.raises(ValidationError):
            RationalRecord(numerator=bad, denominator=1)

    def test_missing_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RationalRecord(numerator=1)

    def test_immutable(self) -> None:
        record = RationalRecord(numerator=1, denominator=2)
        with pytest.raises(ValidationError):
            record.numerator = 5


class TestRationalRecordIntegration:
    """Rational ↔ RationalRecord"""

    def test_to_record_keeps_raw_pair(self) -> None:
        record = Rational(2, -4).to_record()
        assert (record.numerator, record.denominator) == (2, -4)

    def test_from_record(self) -> None:
        r = Rational.from_record(RationalRecord(numerator="6", denominator="8"))
        assert (r.numerator, r.denominator) == (6, 8)
        assert r.equals("3/4")

    def test_full_round_trip(self, big_rational) -> None:
        payload = big_rational.to_record().model_dump_json()
        restored = Rational.from_record(RationalRecord.model_validate_json(payload))
        assert restored.to_fraction_string() == big_rational.to_fraction_string()


# =============================================================================
# JSON Schema contracts
# =============================================================================


class TestRationalSchema:
    """Тесты загрузки rational.json"""

    def test_load_rational_schema(self) -> None:
        schema = load_rational_schema()
        assert schema["title"] == "Rational"
        assert set(schema["required"]) == {"numerator", "denominator"}
        Draft202012Validator.check_schema(schema)

    def test_schema_is_cached(self) -> None:
        assert load_rational_schema() is load_rational_schema()


class TestRationalContract:
    """Тесты контракта сериализованной дроби"""

    def test_valid_data(self, valid_rational_data) -> None:
        validate_rational(valid_rational_data)
        assert RationalContract().is_valid(valid_rational_data)

    def test_record_dump_conforms(self, big_rational) -> None:
        validate_rational(big_rational.to_record().model_dump(mode="json"))

    @pytest.mark.parametrize("denominator", ["0", "-0", "000", "+0"])
    def test_zero_denominator_violates(self, denominator) -> None:
        with pytest.raises(SchemaValidationError):
            validate_rational({"numerator": "1", "denominator": denominator})

    @pytest.mark.parametrize(
        "data",
        [
            {"numerator": "1"},
            {"numerator": 1, "denominator": "2"},
            {"numerator": "1.5", "denominator": "2"},
            {"numerator": "1", "denominator": "2", "scale": "3"},
            ["1", "2"],
        ],
    )
    def test_invalid_data(self, data) -> None:
        assert not RationalContract().is_valid(data)
        with pytest.raises(SchemaValidationError):
            validate_rational(data)

    def test_iter_errors_reports_all(self) -> None:
        errors = list(RationalContract().iter_errors({"numerator": 1, "denominator": "0"}))
        assert len(errors) == 2


class TestCanonicalContract:
    """Каноническая форма: denominator > 0, НОД == 1, без '+' и ведущих нулей"""

    @pytest.mark.parametrize(
        "data",
        [
            {"numerator": "-3", "denominator": "4"},
            {"numerator": "0", "denominator": "1"},
            {"numerator": "7", "denominator": "1"},
        ],
    )
    def test_canonical_data(self, data) -> None:
        validate_rational(data, canonical=True)

    def test_normalized_record_is_canonical(self, big_rational) -> None:
        for r in (big_rational, Rational(6, -8), Rational(0, -5), Rational(10**5000, 4)):
            data = r.normalize().to_record().model_dump(mode="json")
            assert RationalContract(canonical=True).is_valid(data)

    def test_raw_record_is_only_structurally_valid(self) -> None:
        data = Rational(2, -4).to_record().model_dump(mode="json")
        assert RationalContract().is_valid(data)
        assert not RationalContract(canonical=True).is_valid(data)

    def test_negative_denominator(self) -> None:
        with pytest.raises(SchemaValidationError, match="denominator must be positive"):
            validate_rational({"numerator": "1", "denominator": "-3"}, canonical=True)

    @pytest.mark.parametrize(
        "data",
        [
            {"numerator": "2", "denominator": "4"},
            {"numerator": "0", "denominator": "5"},
        ],
    )
    def test_unreduced(self, data) -> None:
        with pytest.raises(SchemaValidationError, match="is not reduced"):
            validate_rational(data, canonical=True)

    @pytest.mark.parametrize(
        "data",
        [
            {"numerator": "+3", "denominator": "4"},
            {"numerator": "03", "denominator": "4"},
            {"numerator": "-0", "denominator": "1"},
            {"numerator": "3", "denominator": "+4"},
        ],
    )
    def test_non_canonical_integer_text(self, data) -> None:
        errors = list(RationalContract(canonical=True).iter_errors(data))
        assert any("is not a canonical integer" in e.message for e in errors)

    def test_canonical_error_paths(self) -> None:
        errors = list(
            RationalContract(canonical=True).iter_errors({"numerator": "1", "denominator": "-3"})
        )
        assert [list(e.path) for e in errors] == [["denominator"]]


class TestReadRational:
    """Проверенное чтение в Rational (контракт + RationalRecord)"""

    def test_keeps_raw_pair(self) -> None:
        r = read_rational({"numerator": "6", "denominator": "-8"})
        assert (r.numerator, r.denominator) == (6, -8)

    def test_canonical_read(self) -> None:
        r = read_rational({"numerator": "-3", "denominator": "4"}, canonical=True)
        assert r.equals("-0.75")

    def test_agrees_with_record_model(self, big_rational) -> None:
        data = big_rational.to_record().model_dump(mode="json")
        via_contract = RationalContract().to_rational(data)
        via_record = Rational.from_record(RationalRecord.model_validate(data))
        assert via_contract.to_fraction_string() == via_record.to_fraction_string()

    def test_rejected_before_record(self) -> None:
        with pytest.raises(SchemaValidationError):
            read_rational({"numerator": "1", "denominator": "0"})
        with pytest.raises(SchemaValidationError):
            read_rational({"numerator": "2", "denominator": "4"}, canonical=True)
