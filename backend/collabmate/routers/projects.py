from collabmate import models
from collabmate.db import get_db
from collabmate.routers.auth import get_current_user
from collabmate.schemas import ProjectCreate, ProjectMemberRead, ProjectRead, UserSummary
from collabmate.services import project_service
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project(
    payload: ProjectCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> ProjectRead:
    project = project_service.create_project(
        db,
        creator_id=current_user.id,
        title=payload.title,
        description=payload.description,
        required_skills=payload.required_skills,
    )
    return ProjectRead.model_validate(project, from_attributes=True)


@router.get("/{project_id}", response_model=ProjectRead)
def get_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> ProjectRead:
    project = project_service.get_project_or_404(db, project_id)
    return ProjectRead.model_validate(project, from_attributes=True)


@router.get("/{project_id}/members", response_model=list[ProjectMemberRead])
def list_project_members(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> list[ProjectMemberRead]:
    project = project_service.get_project_or_404(db, project_id)
    memberships = project_service.list_project_members(db, project.id)
    return [
        ProjectMemberRead(
            user=UserSummary.model_validate(m.user, from_attributes=True),
            role=m.role,
            added_at=m.added_at,
        )
        for m in memberships
    ]
