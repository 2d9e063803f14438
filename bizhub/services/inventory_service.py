import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bizhub.core import notification_rules as rules
from bizhub.core.dates import utcnow
from bizhub.core.errors import NotFoundError
from bizhub.core.notification_rules import EntityRef, ProductLabel
from bizhub.database.session import commit_or_rollback
from bizhub.models.inventory import Inventory
from bizhub.models.product import Product
from bizhub.schemas.common import changed_fields, validate_input
from bizhub.schemas.inventory import InventoryCreate, InventoryFilters, InventoryUpdate
from bizhub.services.cascade import delete_entity
from bizhub.services.notification_service import emit

logger = logging.getLogger(__name__)


def _product_label(db: Session, product_id: int) -> Optional[ProductLabel]:
    # Only feeds notification text; an unresolvable product is not an error.
    try:
        product = db.get(Product, product_id)
    except SQLAlchemyError:
        db.rollback()
        logger.warning("Product lookup failed for product_id=%s", product_id, exc_info=True)
        return None
    if product is None:
        return None
    return ProductLabel(name=product.name, sku=product.sku)


def _with_product_columns():
    return select(
        Inventory,
        Product.name.label("product_name"),
        Product.sku.label("product_sku"),
        Product.category.label("product_category"),
    ).outerjoin(Product, Product.id == Inventory.product_id)


def create_inventory(db: Session, payload) -> Inventory:
    payload = validate_input(InventoryCreate, payload)
    inventory = Inventory(**payload.model_dump(), last_updated=utcnow())
    db.add(inventory)
    commit_or_rollback(db)

    emit(db, rules.inventory_created(inventory, _product_label(db, inventory.product_id)))
    return inventory


def list_inventory(db: Session, filters=None):
    """Inventory rows joined with their product's name, SKU and category.

    ``low_stock_only`` keeps rows at or below the minimum, which is wider
    than the strict check that raises low stock notifications.
    """
    filters = validate_input(InventoryFilters, filters)
    stmt = _with_product_columns()
    if filters.location:
        stmt = stmt.where(Inventory.location == filters.location)
    if filters.low_stock_only:
        stmt = stmt.where(Inventory.quantity <= Inventory.min_stock_level)
    return db.execute(stmt.order_by(Inventory.id)).all()


def get_inventory(db: Session, inventory_id: int) -> Optional[Inventory]:
    return db.get(Inventory, inventory_id)


def get_inventory_detail(db: Session, inventory_id: int):
    stmt = _with_product_columns().where(Inventory.id == inventory_id)
    return db.execute(stmt).first()


def update_inventory(db: Session, payload) -> Inventory:
    payload = validate_input(InventoryUpdate, payload)
    inventory = db.get(Inventory, payload.id)
    if inventory is None:
        raise NotFoundError("Inventory item", payload.id)

    for field, value in changed_fields(payload).items():
        setattr(inventory, field, value)
    inventory.last_updated = utcnow()
    commit_or_rollback(db)

    emit(db, rules.inventory_updated(inventory, _product_label(db, inventory.product_id)))
    return inventory


def delete_inventory(db: Session, inventory_id: int) -> bool:
    return delete_entity(db, Inventory, EntityRef("inventory", inventory_id))


__all__ = [
    "create_inventory",
    "delete_inventory",
    "get_inventory",
    "get_inventory_detail",
    "list_inventory",
    "update_inventory",
]
