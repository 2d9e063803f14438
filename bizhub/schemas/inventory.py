from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bizhub.schemas.common import DB_INT_MAX, DbInt, UTCDateTime, reject_null


class InventoryCreate(BaseModel):
    product_id: DbInt
    quantity: int = Field(ge=0, le=DB_INT_MAX)
    min_stock_level: int = Field(ge=0, le=DB_INT_MAX)
    max_stock_level: int = Field(ge=1, le=DB_INT_MAX)
    location: Optional[str] = None


class InventoryUpdate(BaseModel):
    id: DbInt
    product_id: Optional[DbInt] = None
    quantity: Optional[int] = Field(None, ge=0, le=DB_INT_MAX)
    min_stock_level: Optional[int] = Field(None, ge=0, le=DB_INT_MAX)
    max_stock_level: Optional[int] = Field(None, ge=1, le=DB_INT_MAX)
    location: Optional[str] = None

    @field_validator("product_id", "quantity", "min_stock_level", "max_stock_level", mode="before")
    @classmethod
    def _required_columns_not_null(cls, value):
        return reject_null(value)


class InventoryFilters(BaseModel):
    location: Optional[str] = None
    low_stock_only: bool = False


class InventoryRead(BaseModel):
    id: int
    product_id: int
    quantity: int
    min_stock_level: int
    max_stock_level: int
    location: Optional[str]
    last_updated: UTCDateTime
    product_name: Optional[str] = None
    product_sku: Optional[str] = None
    product_category: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_row(cls, row) -> "InventoryRead":
        base = cls.model_validate(row.Inventory).model_dump()
        base["product_name"] = row.product_name
        base["product_sku"] = row.product_sku
        base["product_category"] = row.product_category
        return cls(**base)
