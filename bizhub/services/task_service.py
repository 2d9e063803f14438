from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from bizhub.core import notification_rules as rules
from bizhub.core.dates import utcnow
from bizhub.core.errors import NotFoundError
from bizhub.core.notification_rules import EntityRef
from bizhub.database.session import commit_or_rollback
from bizhub.models.task import Task
from bizhub.schemas.common import changed_fields, validate_input
from bizhub.schemas.task import TaskCreate, TaskFilters, TaskUpdate
from bizhub.services.cascade import delete_entity
from bizhub.services.notification_service import emit


def create_task(db: Session, payload) -> Task:
    payload = validate_input(TaskCreate, payload)
    now = utcnow()
    task = Task(**payload.model_dump(), created_at=now, updated_at=now)
    db.add(task)
    commit_or_rollback(db)

    emit(db, rules.task_created(task))
    return task


def list_tasks(db: Session, filters=None) -> list[Task]:
    filters = validate_input(TaskFilters, filters)
    stmt = select(Task)
    if filters.status:
        stmt = stmt.where(Task.status == filters.status)
    if filters.priority:
        stmt = stmt.where(Task.priority == filters.priority)
    if filters.due_date_from:
        stmt = stmt.where(Task.due_date >= filters.due_date_from)
    if filters.due_date_to:
        stmt = stmt.where(Task.due_date <= filters.due_date_to)
    stmt = stmt.order_by(Task.created_at.desc(), Task.id.asc())
    return list(db.execute(stmt).scalars().all())


def get_task(db: Session, task_id: int) -> Optional[Task]:
    return db.get(Task, task_id)


def update_task(db: Session, payload) -> Task:
    payload = validate_input(TaskUpdate, payload)
    task = db.get(Task, payload.id)
    if task is None:
        raise NotFoundError("Task", payload.id)

    previous_status = task.status
    for field, value in changed_fields(payload).items():
        setattr(task, field, value)
    task.updated_at = utcnow()
    commit_or_rollback(db)

    emit(db, rules.task_updated(previous_status, task))
    return task


def delete_task(db: Session, task_id: int) -> bool:
    return delete_entity(db, Task, EntityRef("task", task_id))


__all__ = ["create_task", "delete_task", "get_task", "list_tasks", "update_task"]
