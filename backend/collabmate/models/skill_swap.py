from collabmate.db import Base
from collabmate.models.user import User
from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

_STATUS_CHECK = "status IN ('pending', 'accepted', 'declined')"


class SkillSwap(Base):
    __tablename__ = "skill_swap"

    id = Column(Integer, primary_key=True, autoincrement=True)
    from_user_id = Column(UUID(as_uuid=True), ForeignKey("user.id"), nullable=False, index=True)
    to_user_id = Column(UUID(as_uuid=True), ForeignKey("user.id"), nullable=False, index=True)
    offered_skill = Column(String(255), nullable=False)
    requested_skill = Column(String(255), nullable=False)
    message = Column(Text, nullable=False, default="")
    status = Column(String(20), nullable=False, default="pending")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    from_user = relationship(User, foreign_keys=[from_user_id])
    to_user = relationship(User, foreign_keys=[to_user_id])

    __table_args__ = (
        CheckConstraint(_STATUS_CHECK, name="skill_swap_status"),
        CheckConstraint("from_user_id <> to_user_id", name="skill_swap_distinct_users"),
    )


class SkillSwapMessage(Base):
    __tablename__ = "skill_swap_message"

    id = Column(Integer, primary_key=True, autoincrement=True)
    swap_id = Column(Integer, ForeignKey("skill_swap.id"), nullable=False, index=True)
    sender_id = Column(UUID(as_uuid=True), ForeignKey("user.id"), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    sender = relationship(User)


class SkillSwapStatusHistory(Base):
    __tablename__ = "skill_swap_status_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    swap_id = Column(Integer, ForeignKey("skill_swap.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False)
    changed_by = Column(UUID(as_uuid=True), ForeignKey("user.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (CheckConstraint(_STATUS_CHECK, name="skill_swap_history_status"),)
