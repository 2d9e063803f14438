from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, Index, Integer, String, Text

from bizhub.core.constants import TASK_PRIORITIES, TASK_STATUSES
from bizhub.database.base import Base


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    description = Column(Text)

    status = Column(
        Enum(*TASK_STATUSES, name="task_status", native_enum=False, validate_strings=True),
        nullable=False,
        default="pending",
    )
    priority = Column(
        Enum(*TASK_PRIORITIES, name="task_priority", native_enum=False, validate_strings=True),
        nullable=False,
        default="medium",
    )
    due_date = Column(DateTime(timezone=True))

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_tasks_status_priority", "status", "priority"),
        Index("idx_tasks_created_at", "created_at"),
    )


__all__ = ["Task"]
