from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bizhub.schemas.common import DbInt, UTCDateTime, reject_null

TaskStatus = Literal["pending", "in_progress", "completed", "cancelled"]
TaskPriority = Literal["low", "medium", "high", "urgent"]


class TaskCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    status: TaskStatus = "pending"
    priority: TaskPriority = "medium"
    due_date: Optional[UTCDateTime] = None


class TaskUpdate(BaseModel):
    id: DbInt
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[UTCDateTime] = None

    @field_validator("title", "status", "priority", mode="before")
    @classmethod
    def _required_columns_not_null(cls, value):
        return reject_null(value)


class TaskFilters(BaseModel):
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date_from: Optional[UTCDateTime] = None
    due_date_to: Optional[UTCDateTime] = None


class TaskRead(BaseModel):
    id: int
    title: str
    description: Optional[str]
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[UTCDateTime]
    created_at: UTCDateTime
    updated_at: UTCDateTime

    model_config = ConfigDict(from_attributes=True)
