"""
Dog-related Pydantic schemas.

Request bodies are validated declaratively: each schema maps field names to
strict validators and forbids unknown keys. parse_payload() runs a schema
and turns pydantic's structured errors into the flat list of messages the
API returns:

    "'foo' is not a valid key"      ← one per unknown key, body order
    "name should be a string"       ← one per failing field, schema order
    "age should be a number"
"""

from typing import Any, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic import ValidationError as PydanticValidationError

from kennel.shared.core.exceptions import ValidationError
from kennel.shared.schemas.common import BaseSchema


SchemaType = TypeVar("SchemaType", bound=BaseModel)

# Human name used in "<field> should be a <kind>" messages
KIND_NAMES: dict[Any, str] = {
    str: "string",
    float: "number",
}

# Past this, numbers are written in exponent form by JSON clients anyway
WHOLE_NUMBER_LIMIT = 1e21


class DogCreate(BaseModel):
    """Body of POST /dogs: all four fields required."""

    # strict: no coercion ("5" is not a number, 5 is not a string, bools are neither)
    model_config = ConfigDict(extra="forbid", strict=True)

    name: str
    breed: str
    description: str
    age: float = Field(allow_inf_nan=False)


class DogUpdate(BaseModel):
    """
    Body of PATCH /dogs/{id}: any subset of the four fields.

    Defaults are never validated, so an absent field stays unset while an
    explicit null still fails its type check.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    name: str = None  # type: ignore[assignment]
    breed: str = None  # type: ignore[assignment]
    description: str = None  # type: ignore[assignment]
    age: float = Field(default=None, allow_inf_nan=False)  # type: ignore[assignment]

    def changes(self) -> dict[str, Any]:
        """Only the fields present in the request body."""
        return self.model_dump(exclude_unset=True)


class DogResponse(BaseSchema):
    """A persisted Dog."""

    id: int
    name: str
    breed: str
    description: str
    age: float

    @field_serializer("age", when_used="json")
    def serialize_age(self, age: float) -> Union[int, float]:
        """Whole ages go out as integers (3, not 3.0)."""
        if float(age).is_integer() and abs(age) < WHOLE_NUMBER_LIMIT:
            return int(age)
        return age


def _field_message(schema: Type[BaseModel], field: str) -> str:
    kind = KIND_NAMES.get(schema.model_fields[field].annotation, "valid value")
    return f"{field} should be a {kind}"


def collect_errors(
    schema: Type[BaseModel],
    payload: dict[str, Any],
    exc: PydanticValidationError,
) -> list[str]:
    """
    Translate a pydantic ValidationError into API error messages.

    Args:
        schema: The schema that was validated
        payload: The raw request body
        exc: The error pydantic raised

    Returns:
        Invalid-key messages (in body order) followed by field messages
        (in schema order), at most one message per field
    """
    invalid_keys: set[str] = set()
    failed_fields: set[str] = set()

    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else ""
        if error["type"] == "extra_forbidden":
            invalid_keys.add(field)
        elif field in schema.model_fields:
            failed_fields.add(field)

    messages = [f"'{key}' is not a valid key" for key in payload if key in invalid_keys]
    messages.extend(_field_message(schema, field) for field in schema.model_fields if field in failed_fields)
    return messages


def parse_payload(schema: Type[SchemaType], payload: dict[str, Any]) -> SchemaType:
    """
    Validate a request body against a schema.

    Raises:
        ValidationError: With every problem found in the body
    """
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(collect_errors(schema, payload, exc)) from exc
