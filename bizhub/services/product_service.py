import logging
from typing import Optional

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from bizhub.core.dates import utcnow
from bizhub.core.errors import ConflictError, NotFoundError
from bizhub.models.inventory import Inventory
from bizhub.models.product import Product
from bizhub.schemas.common import changed_fields, validate_input
from bizhub.schemas.product import ProductCreate, ProductFilters, ProductUpdate
from bizhub.services.cascade import purge_notifications

logger = logging.getLogger(__name__)


def _sku_taken(db: Session, sku: str, exclude_id: Optional[int] = None) -> bool:
    stmt = select(Product.id).where(Product.sku == sku)
    if exclude_id is not None:
        stmt = stmt.where(Product.id != exclude_id)
    return db.execute(stmt.limit(1)).first() is not None


def _commit_product(db: Session, conflict_message: str) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        # Lost a race with a concurrent insert of the same SKU.
        raise ConflictError(conflict_message) from exc
    except SQLAlchemyError:
        db.rollback()
        raise


def create_product(db: Session, payload) -> Product:
    payload = validate_input(ProductCreate, payload)
    conflict_message = "Product with SKU '{}' already exists".format(payload.sku)
    if _sku_taken(db, payload.sku):
        raise ConflictError(conflict_message)

    now = utcnow()
    product = Product(**payload.model_dump(), created_at=now, updated_at=now)
    db.add(product)
    _commit_product(db, conflict_message)
    return product


def list_products(db: Session, filters=None) -> list[Product]:
    filters = validate_input(ProductFilters, filters)
    stmt = select(Product)
    if filters.category:
        stmt = stmt.where(Product.category == filters.category)
    if filters.search:
        stmt = stmt.where(
            or_(
                Product.name.icontains(filters.search, autoescape=True),
                Product.sku.icontains(filters.search, autoescape=True),
            )
        )
    return list(db.execute(stmt.order_by(Product.id)).scalars().all())


def get_product(db: Session, product_id: int) -> Optional[Product]:
    return db.get(Product, product_id)


def update_product(db: Session, payload) -> Product:
    payload = validate_input(ProductUpdate, payload)
    product = db.get(Product, payload.id)
    if product is None:
        raise NotFoundError("Product", payload.id)

    changes = changed_fields(payload)
    conflict_message = "SKU '{}' already exists for another product".format(changes.get("sku"))
    if "sku" in changes and _sku_taken(db, changes["sku"], exclude_id=product.id):
        raise ConflictError(conflict_message)

    for field, value in changes.items():
        setattr(product, field, value)
    product.updated_at = utcnow()
    _commit_product(db, conflict_message)
    return product


def delete_product(db: Session, product_id: int) -> bool:
    """Delete a product, its inventory rows and every notification for either."""
    try:
        inventory_ids = list(
            db.execute(select(Inventory.id).where(Inventory.product_id == product_id)).scalars()
        )
        purge_notifications(db, "inventory", inventory_ids)
        if inventory_ids:
            db.execute(
                delete(Inventory)
                .where(Inventory.id.in_(inventory_ids))
                .execution_options(synchronize_session="fetch")
            )
        purge_notifications(db, "product", [product_id])
        result = db.execute(
            delete(Product)
            .where(Product.id == product_id)
            .execution_options(synchronize_session="fetch")
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    if inventory_ids:
        logger.info(
            "Product %s deleted with %s inventory row(s)",
            product_id,
            len(inventory_ids),
        )
    return bool(result.rowcount)


__all__ = ["create_product", "delete_product", "get_product", "list_products", "update_product"]
