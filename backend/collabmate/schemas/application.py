import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from collabmate.schemas.enums import RequestStatus
from collabmate.schemas.lifecycle import LifecycleResult
from collabmate.schemas.user import UserSummary


class ApplicationCreate(BaseModel):
    message: Optional[str] = None

    @field_validator("message")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        trimmed = value.strip()
        return trimmed or None


class ApplicationRead(BaseModel):
    id: int
    project_id: int
    user_id: uuid.UUID
    message: Optional[str] = None
    status: RequestStatus
    created_at: datetime
    updated_at: datetime
    applicant: Optional[UserSummary] = None

    model_config = {"from_attributes": True}


class ApplicationResult(ApplicationRead, LifecycleResult):
    pass
