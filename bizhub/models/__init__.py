import importlib

from bizhub.models.customer import Customer
from bizhub.models.inventory import Inventory
from bizhub.models.notification import Notification
from bizhub.models.product import Product
from bizhub.models.task import Task


def import_all_models() -> None:
    for module_name in (
        "bizhub.models.customer",
        "bizhub.models.inventory",
        "bizhub.models.notification",
        "bizhub.models.product",
        "bizhub.models.task",
    ):
        importlib.import_module(module_name)


__all__ = [
    "Customer",
    "Inventory",
    "Notification",
    "Product",
    "Task",
    "import_all_models",
]
