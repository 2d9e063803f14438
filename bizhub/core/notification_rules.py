"""Decision rules that turn entity mutations into notification drafts.

Every rule is a pure function of the records involved and returns either a
``NotificationDraft`` or ``None``. Persisting the draft is the caller's job,
so the rules run the same against ORM rows, schemas or plain stand-ins.
"""

from dataclasses import dataclass
from typing import Optional

from bizhub.core.constants import (
    ALERTING_PRIORITIES,
    COMPLETED_STATUS,
    ENTITY_TYPES,
    NOTIFICATION_TYPES,
    UNKNOWN_PRODUCT_NAME,
    UNKNOWN_PRODUCT_SKU,
)


@dataclass(frozen=True)
class EntityRef:
    entity_type: str
    entity_id: int

    def __post_init__(self):
        if self.entity_type not in ENTITY_TYPES:
            raise ValueError("Unknown entity type: {}".format(self.entity_type))
        if self.entity_id is None:
            raise ValueError("entity_id is required for an entity reference")


@dataclass(frozen=True)
class NotificationDraft:
    title: str
    message: str
    type: str
    ref: Optional[EntityRef] = None

    def __post_init__(self):
        if self.type not in NOTIFICATION_TYPES:
            raise ValueError("Unknown notification type: {}".format(self.type))


@dataclass(frozen=True)
class ProductLabel:
    name: str
    sku: str


UNKNOWN_PRODUCT = ProductLabel(name=UNKNOWN_PRODUCT_NAME, sku=UNKNOWN_PRODUCT_SKU)


def is_low_stock(quantity, min_stock_level) -> bool:
    # Strict: sitting exactly on the minimum is not an alert.
    return quantity < min_stock_level


def task_created(task) -> Optional[NotificationDraft]:
    if task.priority not in ALERTING_PRIORITIES:
        return None
    return NotificationDraft(
        title="New {} priority task created".format(task.priority),
        message='Task "{}" has been created with {} priority'.format(task.title, task.priority),
        type="info",
        ref=EntityRef("task", task.id),
    )


def task_updated(previous_status: str, task) -> Optional[NotificationDraft]:
    if previous_status == COMPLETED_STATUS or task.status != COMPLETED_STATUS:
        return None
    return NotificationDraft(
        title="Task Completed",
        message='Task "{}" has been marked as completed'.format(task.title),
        type="success",
        ref=EntityRef("task", task.id),
    )


def inventory_created(inventory, product: Optional[ProductLabel]) -> Optional[NotificationDraft]:
    if not is_low_stock(inventory.quantity, inventory.min_stock_level):
        return None
    product = product or UNKNOWN_PRODUCT
    return NotificationDraft(
        title="Low Stock Alert",
        message=(
            "Low stock alert: {} (SKU: {}) has quantity {}, "
            "which is below the minimum stock level of {}"
        ).format(product.name, product.sku, inventory.quantity, inventory.min_stock_level),
        type="warning",
        ref=EntityRef("inventory", inventory.id),
    )


def inventory_updated(inventory, product: Optional[ProductLabel]) -> Optional[NotificationDraft]:
    """Evaluate a stored inventory row after a partial update.

    ``inventory`` must already hold the merged values: supplied fields from
    the update, previous values for everything else.
    """
    if not is_low_stock(inventory.quantity, inventory.min_stock_level):
        return None
    product = product or UNKNOWN_PRODUCT
    return NotificationDraft(
        title="Low Stock Alert",
        message="{} inventory is below minimum stock level. Current: {}, Minimum: {}".format(
            product.name,
            inventory.quantity,
            inventory.min_stock_level,
        ),
        type="warning",
        ref=EntityRef("inventory", inventory.id),
    )


__all__ = [
    "EntityRef",
    "NotificationDraft",
    "ProductLabel",
    "UNKNOWN_PRODUCT",
    "inventory_created",
    "inventory_updated",
    "is_low_stock",
    "task_created",
    "task_updated",
]
