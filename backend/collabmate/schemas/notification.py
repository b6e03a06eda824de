import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, computed_field


class NotificationRead(BaseModel):
    id: int
    user_id: uuid.UUID
    type: str
    title: str
    body: str
    link: Optional[str] = None
    read_at: Optional[datetime] = None
    created_at: datetime

    @computed_field
    @property
    def is_read(self) -> bool:
        return self.read_at is not None

    model_config = {"from_attributes": True}


class UnreadCount(BaseModel):
    count: int


class MarkReadResponse(BaseModel):
    ok: bool = True
    updated: int = 0
