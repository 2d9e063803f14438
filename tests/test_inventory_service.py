import unittest
from unittest.mock import patch

from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from bizhub.core.errors import NotFoundError, ValidationError
from bizhub.models.notification import Notification
from bizhub.models.product import Product
from bizhub.services import inventory_service, product_service
from tests.support import make_session


class InventoryServiceTest(unittest.TestCase):
    def setUp(self):
        self.engine, self.db = make_session()
        self.product = product_service.create_product(
            self.db,
            {"name": "Test Product", "price": "25.00", "sku": "TEST-001"},
        )

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def _notifications(self):
        return self.db.execute(select(Notification).order_by(Notification.id)).scalars().all()

    def _create(self, **overrides):
        values = {
            "product_id": self.product.id,
            "quantity": 20,
            "min_stock_level": 10,
            "max_stock_level": 100,
            "location": "Warehouse A",
        }
        values.update(overrides)
        return inventory_service.create_inventory(self.db, values)

    def test_create_below_minimum_warns(self):
        inventory = self._create(quantity=5, min_stock_level=10)

        notifications = self._notifications()
        self.assertEqual(len(notifications), 1)
        notification = notifications[0]
        self.assertEqual(notification.title, "Low Stock Alert")
        self.assertEqual(notification.type, "warning")
        self.assertEqual(notification.entity_type, "inventory")
        self.assertEqual(notification.entity_id, inventory.id)
        self.assertIn("Test Product", notification.message)
        self.assertIn("TEST-001", notification.message)
        self.assertIn("5", notification.message)
        self.assertIn("10", notification.message)

    def test_create_at_minimum_is_silent(self):
        self._create(quantity=10, min_stock_level=10)
        self.assertEqual(self._notifications(), [])

    def test_create_with_unknown_product_still_succeeds(self):
        inventory = self._create(product_id=9999, quantity=1, min_stock_level=2)
        self.assertIsNotNone(inventory_service.get_inventory(self.db, inventory.id))
        self.assertIn("Unknown Product", self._notifications()[0].message)

    def test_create_validates_ranges(self):
        for overrides in ({"quantity": -1}, {"min_stock_level": -1}, {"max_stock_level": 0}):
            with self.subTest(overrides=overrides):
                with self.assertRaises(ValidationError):
                    self._create(**overrides)

    def test_min_above_max_is_accepted(self):
        inventory = self._create(quantity=50, min_stock_level=40, max_stock_level=30)
        self.assertEqual(inventory.min_stock_level, 40)

    def test_update_uses_merged_values(self):
        inventory = self._create(quantity=20, min_stock_level=10)

        inventory_service.update_inventory(self.db, {"id": inventory.id, "quantity": 5})
        notifications = self._notifications()
        self.assertEqual(len(notifications), 1)
        self.assertIn("Test Product", notifications[0].message)
        self.assertIn("Current: 5", notifications[0].message)
        self.assertIn("Minimum: 10", notifications[0].message)

        # Lowering the minimum alone clears the condition.
        inventory_service.update_inventory(self.db, {"id": inventory.id, "min_stock_level": 5})
        self.assertEqual(len(self._notifications()), 1)

        # Raising only the minimum re-triggers with the stored quantity.
        inventory_service.update_inventory(self.db, {"id": inventory.id, "min_stock_level": 60})
        notifications = self._notifications()
        self.assertEqual(len(notifications), 2)
        self.assertIn("Current: 5", notifications[1].message)
        self.assertIn("Minimum: 60", notifications[1].message)

    def test_update_without_changes_refreshes_timestamp(self):
        inventory = self._create()
        before = inventory.last_updated
        updated = inventory_service.update_inventory(self.db, {"id": inventory.id})
        self.assertGreaterEqual(updated.last_updated, before)
        self.assertEqual(updated.location, "Warehouse A")

    def test_update_with_dangling_product_falls_back(self):
        inventory = self._create(quantity=20)
        inventory_service.update_inventory(self.db, {"id": inventory.id, "product_id": 4242, "quantity": 1})
        self.assertIn("Unknown Product", self._notifications()[0].message)

    def test_update_missing_inventory(self):
        with self.assertRaises(NotFoundError):
            inventory_service.update_inventory(self.db, {"id": 999, "quantity": 1})

    def test_list_filters(self):
        self._create(quantity=50, location="Warehouse A")
        self._create(quantity=10, min_stock_level=10, location="Warehouse B")
        self._create(quantity=3, min_stock_level=10, location="Warehouse B")

        rows = inventory_service.list_inventory(self.db)
        self.assertEqual(len(rows), 3)
        self.assertEqual(rows[0].product_name, "Test Product")
        self.assertEqual(rows[0].product_sku, "TEST-001")

        by_location = inventory_service.list_inventory(self.db, {"location": "Warehouse B"})
        self.assertEqual(len(by_location), 2)

        # The listing filter is inclusive, unlike the notification trigger.
        low = inventory_service.list_inventory(self.db, {"low_stock_only": True})
        self.assertEqual(sorted(row.Inventory.quantity for row in low), [3, 10])

    def test_list_keeps_rows_without_product(self):
        self._create(product_id=777)
        rows = inventory_service.list_inventory(self.db)
        self.assertEqual(len(rows), 1)
        self.assertIsNone(rows[0].product_name)

    def test_delete_is_idempotent(self):
        inventory = self._create(quantity=1)
        self.assertTrue(inventory_service.delete_inventory(self.db, inventory.id))
        self.assertFalse(inventory_service.delete_inventory(self.db, inventory.id))
        self.assertIsNone(inventory_service.get_inventory(self.db, inventory.id))
        self.assertEqual(self._notifications(), [])

    def test_product_lookup_error_falls_back_to_unknown_product(self):
        real_get = self.db.get

        def failing_get(model, ident, *args, **kwargs):
            if model is Product:
                raise OperationalError("SELECT products", {}, Exception("database is locked"))
            return real_get(model, ident, *args, **kwargs)

        with patch.object(self.db, "get", side_effect=failing_get):
            with self.assertLogs("bizhub.services.inventory_service", level="WARNING"):
                inventory = self._create(quantity=1, min_stock_level=2)

        self.assertIsNotNone(inventory_service.get_inventory(self.db, inventory.id))
        notifications = self._notifications()
        self.assertEqual(len(notifications), 1)
        self.assertEqual(
            notifications[0].message,
            "Low stock alert: Unknown Product (SKU: N/A) has quantity 1, "
            "which is below the minimum stock level of 2",
        )

    def test_out_of_range_quantities_are_rejected(self):
        for field in ("product_id", "quantity", "min_stock_level", "max_stock_level"):
            with self.subTest(field=field):
                with self.assertRaises(ValidationError):
                    self._create(**{field: 2**70})
        self.assertEqual(inventory_service.list_inventory(self.db), [])


if __name__ == "__main__":
    unittest.main()
