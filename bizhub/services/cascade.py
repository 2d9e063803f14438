"""Removal of notifications that point at deleted entities.

The purge runs in the same transaction as the entity delete, so a failure
leaves both the entity and its notifications in place.
"""

import logging
from typing import Iterable

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bizhub.core.notification_rules import EntityRef
from bizhub.models.notification import Notification

logger = logging.getLogger(__name__)


def purge_notifications(db: Session, entity_type: str, entity_ids: Iterable[int]) -> int:
    ids = list(entity_ids)
    if not ids:
        return 0
    result = db.execute(
        delete(Notification)
        .where(
            Notification.entity_type == entity_type,
            Notification.entity_id.in_(ids),
        )
        .execution_options(synchronize_session="fetch")
    )
    purged = result.rowcount or 0
    logger.debug("Purged %s notification(s) for %s %s", purged, entity_type, ids)
    return purged


def delete_entity(db: Session, model, ref: EntityRef) -> bool:
    """Delete one entity row together with its notifications.

    Returns whether a row was removed; a missing id is not an error.
    """
    try:
        purge_notifications(db, ref.entity_type, [ref.entity_id])
        result = db.execute(
            delete(model)
            .where(model.id == ref.entity_id)
            .execution_options(synchronize_session="fetch")
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    return bool(result.rowcount)


__all__ = ["delete_entity", "purge_notifications"]
