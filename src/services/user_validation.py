"""Validation rules for user requests.

One pydantic schema per operation. ``validate()`` turns pydantic's
exception into a plain outcome so callers never depend on library-specific
result objects.
"""

from dataclasses import dataclass, field
from typing import Annotated, Any, Optional

from bson import ObjectId
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictStr
from pydantic import ValidationError as PydanticValidationError

from domain.model.errors import FieldError

INVALID_ID_MESSAGE = "must be a valid object identifier (24 hex characters)"


def _check_object_id(value: str) -> str:
    if not ObjectId.is_valid(value):
        raise ValueError(INVALID_ID_MESSAGE)
    return value


def _strip(value: str) -> str:
    return value.strip()


ObjectIdStr = Annotated[StrictStr, AfterValidator(_check_object_id)]
TrimmedStr = Annotated[StrictStr, AfterValidator(_strip)]


class _UserSchema(BaseModel):
    # Unknown keys are rejected, aliases are the wire names.
    model_config = ConfigDict(extra='forbid')


class FindByIdRequest(_UserSchema):
    id: ObjectIdStr


class DeleteByIdRequest(FindByIdRequest):
    pass


class CreateRequest(_UserSchema):
    email: StrictStr = Field(..., min_length=1)
    full_name: Optional[TrimmedStr] = Field(None, alias='fullName')


class UpdateRequest(_UserSchema):
    id: ObjectIdStr
    # Optional, but an explicit null is rejected: email stays required.
    email: StrictStr = Field(None, min_length=1)
    full_name: Optional[TrimmedStr] = Field(None, alias='fullName')

    def changes(self) -> dict:
        """Fields the client actually supplied, keyed by domain name."""
        return self.model_dump(exclude={'id'}, exclude_unset=True)


@dataclass
class ValidationResult:
    """Outcome of a validation pass: either a parsed value or field errors."""
    value: Any = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def message(self) -> str:
        return "; ".join(str(e) for e in self.errors)


def _field_name(loc: tuple) -> str:
    return ".".join(str(part) for part in loc)


def _reason(error: dict) -> str:
    """Human-readable reason for one pydantic error entry."""
    if error['type'] == 'missing':
        return "is required"
    if error['type'] == 'extra_forbidden':
        return "is not allowed"
    if error['type'] == 'value_error':
        # pydantic prefixes custom ValueError messages
        return str(error['ctx']['error']) if 'ctx' in error else error['msg']
    return error['msg'][0].lower() + error['msg'][1:]


def validate(schema: type[BaseModel], payload: Any) -> ValidationResult:
    """Check payload against schema.

    Never raises for bad input; every problem is reported as a FieldError.
    """
    try:
        return ValidationResult(value=schema.model_validate(payload))
    except PydanticValidationError as e:
        errors = [
            FieldError(field=_field_name(err['loc']), message=_reason(err))
            for err in e.errors()
        ]
        return ValidationResult(errors=errors)


def find_by_id(payload: Any) -> ValidationResult:
    return validate(FindByIdRequest, payload)


def create(payload: Any) -> ValidationResult:
    return validate(CreateRequest, payload)


def update_by_id(payload: Any) -> ValidationResult:
    return validate(UpdateRequest, payload)


def delete_by_id(payload: Any) -> ValidationResult:
    return validate(DeleteByIdRequest, payload)
