from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Index, Integer, String

from bizhub.database.base import Base


class Inventory(Base):
    __tablename__ = "inventory"

    id = Column(Integer, primary_key=True)

    # Logical link only; a product may be deleted out from under a row.
    product_id = Column(Integer, nullable=False)

    quantity = Column(Integer, nullable=False)
    min_stock_level = Column(Integer, nullable=False)
    max_stock_level = Column(Integer, nullable=False)
    location = Column(String)

    last_updated = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_inventory_product", "product_id"),
        Index("idx_inventory_location", "location"),
    )


__all__ = ["Inventory"]
