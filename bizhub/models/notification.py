from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Enum, Index, Integer, String, Text

from bizhub.core.constants import ENTITY_TYPES, NOTIFICATION_TYPES
from bizhub.core.notification_rules import EntityRef
from bizhub.database.base import Base


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    type = Column(
        Enum(*NOTIFICATION_TYPES, name="notification_type", native_enum=False, validate_strings=True),
        nullable=False,
    )
    read = Column(Boolean, nullable=False, default=False)

    # Soft reference to the entity that caused the notification. No foreign
    # key: the id space is per entity type.
    entity_type = Column(
        Enum(*ENTITY_TYPES, name="entity_type", native_enum=False, validate_strings=True),
    )
    entity_id = Column(Integer)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_notifications_entity", "entity_type", "entity_id"),
        Index("idx_notifications_read", "read"),
        Index("idx_notifications_created_at", "created_at"),
    )

    @property
    def ref(self):
        if self.entity_type is None or self.entity_id is None:
            return None
        return EntityRef(self.entity_type, self.entity_id)


__all__ = ["Notification"]
