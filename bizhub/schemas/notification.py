from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bizhub.core.notification_rules import EntityRef
from bizhub.schemas.common import DbInt, UTCDateTime

NotificationType = Literal["info", "warning", "error", "success"]
EntityType = Literal["task", "product", "inventory", "customer"]


class NotificationCreate(BaseModel):
    title: str = Field(min_length=1)
    message: str = Field(min_length=1)
    type: NotificationType
    entity_type: Optional[EntityType] = None
    entity_id: Optional[DbInt] = None

    @model_validator(mode="after")
    def _entity_reference_paired(self):
        if (self.entity_type is None) != (self.entity_id is None):
            raise ValueError("entity_type and entity_id must be provided together")
        return self

    @property
    def ref(self) -> Optional[EntityRef]:
        if self.entity_type is None:
            return None
        return EntityRef(self.entity_type, self.entity_id)


class NotificationRead(BaseModel):
    id: int
    title: str
    message: str
    type: NotificationType
    read: bool
    entity_type: Optional[EntityType]
    entity_id: Optional[int]
    created_at: UTCDateTime

    model_config = ConfigDict(from_attributes=True)
