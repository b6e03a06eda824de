import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class UserBase(BaseModel):
    email: str
    full_name: Optional[str] = None


class UserCreate(UserBase):
    password: str
    bio: Optional[str] = None
    avatar_url: Optional[str] = None


class UserRead(UserBase):
    id: uuid.UUID
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    is_active: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class UserSummary(BaseModel):
    """Public slice of a user embedded in request projections."""

    id: uuid.UUID
    full_name: Optional[str] = None
    email: str
    avatar_url: Optional[str] = None

    model_config = {"from_attributes": True}


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
