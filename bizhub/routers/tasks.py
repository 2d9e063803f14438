from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from bizhub.core.errors import BizhubError
from bizhub.dependencies import get_db, require_auth
from bizhub.routers.common import RPC_PREFIX, http_error
from bizhub.schemas.common import SuccessResult, IdInput
from bizhub.schemas.task import TaskCreate, TaskFilters, TaskRead, TaskUpdate
from bizhub.services import task_service

router = APIRouter(prefix=RPC_PREFIX, tags=["Tasks"])


@router.post("/createTask", response_model=TaskRead)
def create_task(payload: TaskCreate, db: Session = Depends(get_db), _auth=Depends(require_auth)):
    try:
        return task_service.create_task(db, payload)
    except BizhubError as exc:
        raise http_error(exc) from exc


@router.post("/getTasks", response_model=list[TaskRead])
def get_tasks(filters: Optional[TaskFilters] = Body(None), db: Session = Depends(get_db)):
    return task_service.list_tasks(db, filters)


@router.post("/getTaskById", response_model=Optional[TaskRead])
def get_task_by_id(payload: IdInput, db: Session = Depends(get_db)):
    return task_service.get_task(db, payload.id)


@router.post("/updateTask", response_model=TaskRead)
def update_task(payload: TaskUpdate, db: Session = Depends(get_db), _auth=Depends(require_auth)):
    try:
        return task_service.update_task(db, payload)
    except BizhubError as exc:
        raise http_error(exc) from exc


@router.post("/deleteTask", response_model=SuccessResult)
def delete_task(payload: IdInput, db: Session = Depends(get_db), _auth=Depends(require_auth)):
    task_service.delete_task(db, payload.id)
    return SuccessResult()


__all__ = ["router"]
