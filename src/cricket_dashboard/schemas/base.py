"""Shared pydantic plumbing: camelCase I/O and error-code translation."""

from typing import Any, ClassVar, Dict, Mapping, NamedTuple, Optional, Type

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from ..errors import ApiError

# Largest value a signed 64-bit INTEGER column holds
MAX_DB_INT = 2**63 - 1


class FieldErrors(NamedTuple):
    """Machine codes reported for one input field."""

    missing: str
    invalid: str
    message: str


class CamelModel(BaseModel):
    """Base schema speaking camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    error_codes: ClassVar[Mapping[str, FieldErrors]] = {}


class UpdateModel(CamelModel):
    """Base for partial updates: every field optional, explicit nulls rejected.

    Fields listed in ``nullable_fields`` may be cleared with ``null``.
    """

    nullable_fields: ClassVar[frozenset] = frozenset()

    @field_validator("*")
    @classmethod
    def reject_null(cls, value: Any, info):
        if value is None and info.field_name not in cls.nullable_fields:
            raise ValueError("must not be null")
        return value

    def changes(self) -> Dict[str, Any]:
        """Return only the fields supplied by the caller, keyed by column name."""
        return self.model_dump(exclude_unset=True)


class ResponseModel(CamelModel):
    """Base for rows rendered back to clients."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def translate_validation_error(exc: ValidationError, schema: Type[CamelModel]) -> ApiError:
    """Turn the first pydantic error into a 400 carrying a stable machine code.

    Validators may raise ``PydanticCustomError`` whose type is itself the code
    (upper case); otherwise the schema's ``error_codes`` table decides.
    """
    error = exc.errors()[0]
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else None
    error_type = error.get("type", "")
    codes: Optional[FieldErrors] = schema.error_codes.get(field) if field else None

    if error_type.isupper():
        return ApiError(400, error.get("msg", "Invalid value"), error_type)
    if codes is None:
        return ApiError(400, f"Invalid request body: {error.get('msg', 'invalid value')}", "INVALID_BODY")
    if error_type == "missing" and len(loc) == 1:
        return ApiError(400, f"{field} is required", codes.missing)
    return ApiError(400, codes.message, codes.invalid)


def parse_payload(schema: Type[CamelModel], payload: Optional[Mapping[str, Any]]):
    """Validate a raw JSON object against ``schema`` or raise a coded ``ApiError``."""
    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise ApiError(400, "Request body must be a JSON object", "INVALID_BODY")
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise translate_validation_error(exc, schema) from exc
