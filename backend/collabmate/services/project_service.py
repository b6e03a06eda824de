from __future__ import annotations

import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from collabmate import models
from collabmate.core.exceptions import ResourceNotFound
from collabmate.schemas.enums import ProjectMemberRole


def get_project_or_404(db: Session, project_id: int) -> models.Project:
    project = db.get(models.Project, project_id)
    if project is None:
        raise ResourceNotFound("Project", project_id)
    return project


def is_project_member(db: Session, project_id: int, user_id: uuid.UUID) -> bool:
    return db.get(models.ProjectMember, (project_id, user_id)) is not None


def ensure_project_member(
    db: Session,
    project_id: int,
    user_id: uuid.UUID,
    *,
    role: ProjectMemberRole = ProjectMemberRole.MEMBER,
) -> bool:
    """
    Add a user to a project's working group if not already there.

    Returns True when a row was inserted. A concurrent insert of the same pair
    loses on the primary key and is treated as already present.
    """
    if is_project_member(db, project_id, user_id):
        return False

    db.add(models.ProjectMember(project_id=project_id, user_id=user_id, role=role.value))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return False
    return True


def create_project(
    db: Session,
    *,
    creator_id: uuid.UUID,
    title: str,
    description: str | None = None,
    required_skills: str | None = None,
) -> models.Project:
    project = models.Project(
        title=title,
        description=description,
        required_skills=required_skills,
        creator_id=creator_id,
    )
    db.add(project)
    db.flush()
    # the creator is part of the working group from the start
    db.add(
        models.ProjectMember(
            project_id=project.id, user_id=creator_id, role=ProjectMemberRole.OWNER.value
        )
    )
    db.commit()
    db.refresh(project)
    return project


def list_project_members(db: Session, project_id: int) -> list[models.ProjectMember]:
    return (
        db.query(models.ProjectMember)
        .filter(models.ProjectMember.project_id == project_id)
        .order_by(models.ProjectMember.added_at.asc())
        .all()
    )
