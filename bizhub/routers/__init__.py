from bizhub.routers.customers import router as customers_router
from bizhub.routers.health import router as health_router
from bizhub.routers.inventory import router as inventory_router
from bizhub.routers.notifications import router as notifications_router
from bizhub.routers.products import router as products_router
from bizhub.routers.tasks import router as tasks_router

__all__ = [
    "customers_router",
    "health_router",
    "inventory_router",
    "notifications_router",
    "products_router",
    "tasks_router",
]
