"""Unit tests for Dog request validation."""

from __future__ import annotations

import math

import pytest

from kennel.shared.core.exceptions import ValidationError
from kennel.shared.schemas.dog import DogCreate, DogResponse, DogUpdate, parse_payload


@pytest.mark.unit
class TestDogCreate:
    def test_valid(self) -> None:
        dog = parse_payload(DogCreate, {"name": "Rex", "breed": "Lab", "description": "Friendly", "age": 3})
        assert dog.name == "Rex"
        assert dog.age == 3

    def test_invalid_keys_in_body_order(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse_payload(
                DogCreate,
                {"zeta": 1, "name": "Rex", "breed": "Lab", "alpha": 2, "description": "x", "age": 1},
            )
        assert exc_info.value.errors == ["'zeta' is not a valid key", "'alpha' is not a valid key"]

    def test_no_coercion(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse_payload(DogCreate, {"name": 1, "breed": "Lab", "description": ["x"], "age": "5"})
        assert exc_info.value.errors == [
            "name should be a string",
            "description should be a string",
            "age should be a number",
        ]

    def test_age_must_be_finite(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse_payload(DogCreate, {"name": "Rex", "breed": "Lab", "description": "x", "age": math.nan})
        assert exc_info.value.errors == ["age should be a number"]

    def test_bool_is_not_a_number(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse_payload(DogCreate, {"name": "Rex", "breed": "Lab", "description": "x", "age": False})
        assert exc_info.value.errors == ["age should be a number"]

    def test_to_dict(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse_payload(DogCreate, {})
        assert exc_info.value.status_code == 400
        assert exc_info.value.to_dict() == {
            "errors": [
                "name should be a string",
                "breed should be a string",
                "description should be a string",
                "age should be a number",
            ]
        }


@pytest.mark.unit
class TestDogUpdate:
    def test_changes_only_present_fields(self) -> None:
        update = parse_payload(DogUpdate, {"age": 10})
        assert update.changes() == {"age": 10}

    def test_empty_body(self) -> None:
        assert parse_payload(DogUpdate, {}).changes() == {}

    def test_null_fails_type_check(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse_payload(DogUpdate, {"breed": None, "age": None})
        assert exc_info.value.errors == ["breed should be a string", "age should be a number"]

    def test_invalid_key(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse_payload(DogUpdate, {"id": 3})
        assert exc_info.value.errors == ["'id' is not a valid key"]


@pytest.mark.unit
class TestDogResponse:
    def test_whole_age_serializes_as_integer(self) -> None:
        dog = DogResponse(id=1, name="Rex", breed="Lab", description="Friendly", age=3.0)
        assert dog.model_dump_json() == '{"id":1,"name":"Rex","breed":"Lab","description":"Friendly","age":3}'

    def test_fractional_age_is_unchanged(self) -> None:
        dog = DogResponse(id=1, name="Rex", breed="Lab", description="Friendly", age=2.5)
        assert dog.model_dump(mode="json")["age"] == 2.5

    def test_python_dump_keeps_float(self) -> None:
        dog = DogResponse(id=1, name="Rex", breed="Lab", description="Friendly", age=3)
        assert dog.model_dump()["age"] == 3.0
