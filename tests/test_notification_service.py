import unittest
from datetime import datetime, timedelta, timezone

from bizhub.core.errors import NotFoundError, ValidationError
from bizhub.models.notification import Notification
from bizhub.models.task import Task
from bizhub.services import notification_service, task_service
from tests.support import make_session


class NotificationServiceTest(unittest.TestCase):
    def setUp(self):
        self.engine, self.db = make_session()

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def _create(self, title="System notice", **overrides):
        values = {"title": title, "message": "Something happened", "type": "info"}
        values.update(overrides)
        return notification_service.create_notification(self.db, values)

    def test_create_starts_unread(self):
        notification = self._create(entity_type="product", entity_id=3)
        self.assertFalse(notification.read)
        self.assertEqual(notification.entity_type, "product")
        self.assertEqual(notification.entity_id, 3)
        self.assertEqual(notification.ref.entity_id, 3)
        self.assertIsNotNone(notification.created_at)

    def test_create_without_reference(self):
        notification = self._create()
        self.assertIsNone(notification.entity_type)
        self.assertIsNone(notification.entity_id)
        self.assertIsNone(notification.ref)

    def test_reference_must_be_paired(self):
        with self.assertRaises(ValidationError):
            self._create(entity_type="task")
        with self.assertRaises(ValidationError):
            self._create(entity_id=4)

    def test_create_rejects_unknown_type(self):
        with self.assertRaises(ValidationError):
            self._create(type="critical")

    def test_list_newest_first_with_stable_ties(self):
        base = datetime(2026, 3, 1, tzinfo=timezone.utc)
        for title, offset in (("old", 0), ("tie-a", 5), ("tie-b", 5), ("new", 10)):
            self.db.add(
                Notification(
                    title=title,
                    message="m",
                    type="info",
                    created_at=base + timedelta(minutes=offset),
                )
            )
        self.db.commit()

        titles = [n.title for n in notification_service.list_notifications(self.db)]
        self.assertEqual(titles, ["new", "tie-a", "tie-b", "old"])

    def test_unread_count_matches_list(self):
        first = self._create("one")
        self._create("two")
        self._create("three")
        notification_service.mark_read(self.db, first.id)

        unread = [n for n in notification_service.list_notifications(self.db) if not n.read]
        self.assertEqual(notification_service.count_unread(self.db), len(unread))
        self.assertEqual(notification_service.count_unread(self.db), 2)

    def test_mark_read_is_idempotent(self):
        notification = self._create()
        self.assertTrue(notification_service.mark_read(self.db, notification.id).read)
        self.assertTrue(notification_service.mark_read(self.db, notification.id).read)

    def test_mark_read_missing(self):
        with self.assertRaisesRegex(NotFoundError, "Notification with id 404 not found"):
            notification_service.mark_read(self.db, 404)

    def test_mark_all_read(self):
        first = self._create("one")
        self._create("two")
        self._create("three")
        notification_service.mark_read(self.db, first.id)

        notification_service.mark_all_read(self.db)

        self.assertEqual(notification_service.count_unread(self.db), 0)
        self.assertTrue(all(n.read for n in notification_service.list_notifications(self.db)))

    def test_mark_all_read_on_empty_store(self):
        notification_service.mark_all_read(self.db)
        self.assertEqual(notification_service.count_unread(self.db), 0)

    def test_failed_notification_keeps_entity_mutation(self):
        Notification.__table__.drop(self.engine)

        with self.assertLogs("bizhub.services.notification_service", level="ERROR"):
            task = task_service.create_task(self.db, {"title": "Urgent", "priority": "urgent"})

        stored = self.db.get(Task, task.id)
        self.assertIsNotNone(stored)
        self.assertEqual(stored.title, "Urgent")


if __name__ == "__main__":
    unittest.main()
