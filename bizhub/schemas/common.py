from datetime import datetime
from typing import Annotated, TypeVar

from pydantic import AfterValidator, BaseModel, ValidationError as PydanticValidationError, conint

from bizhub.core.dates import as_utc
from bizhub.core.errors import ValidationError

UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]

DB_INT_MIN = -(2**63)
DB_INT_MAX = 2**63 - 1

# Wider values overflow the driver instead of failing a lookup.
DbInt = conint(ge=DB_INT_MIN, le=DB_INT_MAX)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def reject_null(value):
    if value is None:
        raise ValueError("field may be omitted but not set to null")
    return value


def validate_input(schema: type[SchemaT], data) -> SchemaT:
    """Coerce a mapping (or an already-built model) into ``schema``.

    Pydantic errors are re-raised as the service-level ``ValidationError``.
    """
    if isinstance(data, schema):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(data or {})
    except PydanticValidationError as exc:
        raise ValidationError(str(exc)) from exc


def changed_fields(payload: BaseModel, *, exclude: tuple[str, ...] = ("id",)) -> dict:
    """Fields the caller actually sent; explicit nulls are kept."""
    return {
        key: getattr(payload, key)
        for key in payload.model_fields_set
        if key not in exclude
    }


class IdInput(BaseModel):
    id: DbInt


class SuccessResult(BaseModel):
    success: bool = True


class CountResult(BaseModel):
    count: int
