import re
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bizhub.schemas.common import DbInt, UTCDateTime, reject_null

CustomerStatus = Literal["active", "inactive", "pending"]

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _check_email(value: str) -> str:
    value = value.strip()
    if not _EMAIL_RE.match(value):
        raise ValueError("invalid email address")
    return value


class CustomerCreate(BaseModel):
    name: str = Field(min_length=1)
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    company: Optional[str] = None
    status: CustomerStatus = "active"

    @field_validator("email")
    @classmethod
    def _valid_email(cls, value):
        return _check_email(value)


class CustomerUpdate(BaseModel):
    id: DbInt
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    company: Optional[str] = None
    status: Optional[CustomerStatus] = None

    @field_validator("name", "email", "status", mode="before")
    @classmethod
    def _required_columns_not_null(cls, value):
        return reject_null(value)

    @field_validator("email")
    @classmethod
    def _valid_email(cls, value):
        return _check_email(value)


class CustomerFilters(BaseModel):
    status: Optional[CustomerStatus] = None
    search: Optional[str] = None


class CustomerRead(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str]
    address: Optional[str]
    company: Optional[str]
    status: CustomerStatus
    created_at: UTCDateTime
    updated_at: UTCDateTime

    model_config = ConfigDict(from_attributes=True)
