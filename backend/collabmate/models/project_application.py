from collabmate.db import Base
from collabmate.models.project import Project
from collabmate.models.user import User
from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    func,
    text,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship


class ProjectApplication(Base):
    __tablename__ = "project_application"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("project.id"), nullable=False)
    user_id = Column(UUID(as_uuid=True), ForeignKey("user.id"), nullable=False)
    message = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="pending")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    project = relationship(Project, back_populates="applications")
    applicant = relationship(User, backref="applications")

    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'accepted', 'declined')", name="project_application_status"
        ),
        # one open application per applicant and project
        Index(
            "uq_project_application_pending",
            "project_id",
            "user_id",
            unique=True,
            postgresql_where=text("status = 'pending'"),
            sqlite_where=text("status = 'pending'"),
        ),
    )
