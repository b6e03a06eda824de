import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from collabmate.schemas.enums import RequestStatus
from collabmate.schemas.lifecycle import LifecycleResult
from collabmate.schemas.user import UserSummary


class SkillSwapCreate(BaseModel):
    to_user_id: uuid.UUID
    # missing or blank skills are rejected by the service with a domain error, not a 422
    offered_skill: Optional[str] = Field(None, max_length=255)
    requested_skill: Optional[str] = Field(None, max_length=255)
    message: Optional[str] = None


class SkillSwapRead(BaseModel):
    id: int
    from_user_id: uuid.UUID
    to_user_id: uuid.UUID
    offered_skill: str
    requested_skill: str
    message: str
    status: RequestStatus
    created_at: datetime
    updated_at: datetime
    from_user: Optional[UserSummary] = None
    to_user: Optional[UserSummary] = None

    model_config = {"from_attributes": True}


class SkillSwapResult(SkillSwapRead, LifecycleResult):
    pass


class SwapMessageCreate(BaseModel):
    message: Optional[str] = Field(None, max_length=2000)


class SwapMessageRead(BaseModel):
    id: int
    swap_id: int
    sender_id: uuid.UUID
    message: str
    created_at: datetime
    sender: Optional[UserSummary] = None

    model_config = {"from_attributes": True}


class StatusHistoryRead(BaseModel):
    id: int
    swap_id: int
    status: RequestStatus
    changed_by: uuid.UUID
    created_at: datetime

    model_config = {"from_attributes": True}
