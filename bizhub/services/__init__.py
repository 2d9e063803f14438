from bizhub.services.customer_service import create_customer, delete_customer, update_customer
from bizhub.services.inventory_service import create_inventory, delete_inventory, update_inventory
from bizhub.services.notification_service import (
    count_unread,
    create_notification,
    list_notifications,
    mark_all_read,
    mark_read,
)
from bizhub.services.product_service import create_product, delete_product, update_product
from bizhub.services.task_service import create_task, delete_task, update_task

__all__ = [
    "count_unread",
    "create_customer",
    "create_inventory",
    "create_notification",
    "create_product",
    "create_task",
    "delete_customer",
    "delete_inventory",
    "delete_product",
    "delete_task",
    "list_notifications",
    "mark_all_read",
    "mark_read",
    "update_customer",
    "update_inventory",
    "update_product",
    "update_task",
]
