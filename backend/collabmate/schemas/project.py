import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from collabmate.schemas.enums import ProjectStatus
from collabmate.schemas.user import UserSummary


class ProjectBase(BaseModel):
    title: str
    description: Optional[str] = None
    required_skills: Optional[str] = None

    @field_validator("title")
    @classmethod
    def _strip_title(cls, value: str) -> str:
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("title must not be empty")
        return trimmed


class ProjectCreate(ProjectBase):
    pass


class ProjectRead(ProjectBase):
    id: int
    creator_id: uuid.UUID
    status: ProjectStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProjectMemberRead(BaseModel):
    user: UserSummary
    role: str
    added_at: datetime
