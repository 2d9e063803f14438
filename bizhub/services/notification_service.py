import logging
from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bizhub.core.dates import utcnow
from bizhub.core.errors import NotFoundError
from bizhub.core.notification_rules import NotificationDraft
from bizhub.database.session import commit_or_rollback
from bizhub.models.notification import Notification
from bizhub.schemas.common import validate_input
from bizhub.schemas.notification import NotificationCreate

logger = logging.getLogger(__name__)


def _from_draft(draft: NotificationDraft) -> Notification:
    ref = draft.ref
    return Notification(
        title=draft.title,
        message=draft.message,
        type=draft.type,
        read=False,
        entity_type=ref.entity_type if ref else None,
        entity_id=ref.entity_id if ref else None,
        created_at=utcnow(),
    )


def create_notification(db: Session, payload) -> Notification:
    payload = validate_input(NotificationCreate, payload)
    notification = _from_draft(
        NotificationDraft(
            title=payload.title,
            message=payload.message,
            type=payload.type,
            ref=payload.ref,
        )
    )
    db.add(notification)
    commit_or_rollback(db)
    return notification


def emit(db: Session, draft: Optional[NotificationDraft]) -> Optional[Notification]:
    """Persist a rule outcome without putting the caller's mutation at risk.

    Runs after the entity change has been committed; a failed insert is
    rolled back on its own and logged.
    """
    if draft is None:
        return None

    notification = _from_draft(draft)
    context = {"entity_type": notification.entity_type, "entity_id": notification.entity_id}
    try:
        db.add(notification)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(
            "Failed to record notification %r for %s", draft.title, draft.ref, extra=context
        )
        return None

    logger.info(
        "Notification %s recorded: %s (%s)",
        notification.id,
        draft.title,
        draft.ref,
        extra=context,
    )
    return notification


def list_notifications(db: Session) -> list[Notification]:
    stmt = select(Notification).order_by(
        Notification.created_at.desc(),
        Notification.id.asc(),
    )
    return list(db.execute(stmt).scalars().all())


def count_unread(db: Session) -> int:
    stmt = select(func.count(Notification.id)).where(Notification.read.is_(False))
    return int(db.execute(stmt).scalar_one())


def mark_read(db: Session, notification_id: int) -> Notification:
    notification = db.get(Notification, notification_id)
    if notification is None:
        raise NotFoundError("Notification", notification_id)
    notification.read = True
    commit_or_rollback(db)
    return notification


def mark_all_read(db: Session) -> int:
    result = db.execute(
        update(Notification)
        .where(Notification.read.is_(False))
        .values(read=True)
        .execution_options(synchronize_session="fetch")
    )
    commit_or_rollback(db)
    return result.rowcount or 0


__all__ = [
    "count_unread",
    "create_notification",
    "emit",
    "list_notifications",
    "mark_all_read",
    "mark_read",
]
