from decimal import Decimal
from typing import Annotated, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    condecimal,
    field_serializer,
    field_validator,
)

from bizhub.schemas.common import DbInt, UTCDateTime, reject_null

_CENTS = Decimal("0.01")


def _quantize_price(value: Decimal) -> Decimal:
    return value.quantize(_CENTS)


Price = Annotated[
    condecimal(gt=0, max_digits=10, decimal_places=2),
    AfterValidator(_quantize_price),
]


class ProductCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    price: Price
    sku: str = Field(min_length=1)
    category: Optional[str] = None


class ProductUpdate(BaseModel):
    id: DbInt
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[Price] = None
    sku: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None

    @field_validator("name", "price", "sku", mode="before")
    @classmethod
    def _required_columns_not_null(cls, value):
        return reject_null(value)


class ProductFilters(BaseModel):
    category: Optional[str] = None
    search: Optional[str] = None


class ProductRead(BaseModel):
    id: int
    name: str
    description: Optional[str]
    price: Decimal
    sku: str
    category: Optional[str]
    created_at: UTCDateTime
    updated_at: UTCDateTime

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("price")
    def _price_as_string(self, value: Decimal) -> str:
        return str(_quantize_price(Decimal(value)))
