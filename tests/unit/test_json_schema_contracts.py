"""
Tests for JSON Schema Contract Validators

Тестирование limb_sequence контракта:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required / типов / диапазона uint32
- Интеграция с Pydantic моделью LimbSequence
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from limbint.core.contracts import (
    LimbSequenceValidator,
    SchemaLoader,
    validate_limb_sequence,
)
from limbint.core.domain import LIMB_MASK, LimbSequence
from limbint.core.math import multiply, parse_decimal


@pytest.fixture
def valid_limb_sequence():
    """Валидный экспорт LimbSequence."""
    return {"limbs": [3461744650, 2330743505, 1228788904, 542101086]}


class TestSchemaLoader:
    """Тесты SchemaLoader"""

    def test_schema_loads_and_is_cached(self) -> None:
        loader = SchemaLoader()
        schema = loader.load_schema("limb_sequence")
        assert schema["title"] == "LimbSequence"
        assert loader.load_schema("limb_sequence") is schema

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(
            json.dumps({"type": "no-such-type"}), encoding="utf-8"
        )
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


class TestLimbSequenceContract:
    """Тесты limb_sequence контракта"""

    def test_valid(self, valid_limb_sequence) -> None:
        validate_limb_sequence(valid_limb_sequence)
        assert LimbSequenceValidator().is_valid(valid_limb_sequence)

    def test_missing_limbs(self) -> None:
        with pytest.raises(ValidationError):
            validate_limb_sequence({})

    def test_empty_limbs(self) -> None:
        with pytest.raises(ValidationError):
            validate_limb_sequence({"limbs": []})

    def test_limb_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            validate_limb_sequence({"limbs": [LIMB_MASK + 1]})
        with pytest.raises(ValidationError):
            validate_limb_sequence({"limbs": [-1]})

    def test_non_integer_limb(self) -> None:
        assert not LimbSequenceValidator().is_valid({"limbs": [1.5]})
        assert not LimbSequenceValidator().is_valid({"limbs": ["1"]})

    def test_additional_properties_rejected(self) -> None:
        with pytest.raises(ValidationError):
            validate_limb_sequence({"limbs": [1], "sign": -1})

    def test_iter_errors_reports_each_violation(self) -> None:
        errors = list(LimbSequenceValidator().iter_errors({"limbs": [-1, LIMB_MASK + 1]}))
        assert len(errors) == 2


class TestPydanticIntegration:
    """Экспорт модели соответствует схеме"""

    def test_model_dump_conforms(self) -> None:
        value = multiply(
            parse_decimal("123456789012345678901234567890"),
            parse_decimal("987654321"),
        )
        validate_limb_sequence(value.model_dump(mode="json"))

    def test_roundtrip_through_json(self, valid_limb_sequence) -> None:
        payload = json.dumps(valid_limb_sequence)
        restored = LimbSequence.model_validate_json(payload)
        assert restored == parse_decimal("42949672963434342343243324343232890890")

    def test_zero_conforms(self) -> None:
        validate_limb_sequence(LimbSequence.zero().model_dump(mode="json"))
