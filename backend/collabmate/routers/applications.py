from collabmate import models
from collabmate.core.rate_limit import RATE_LIMITS, limiter
from collabmate.db import get_db
from collabmate.routers.auth import get_current_user
from collabmate.schemas import ApplicationCreate, ApplicationRead, ApplicationResult, StatusUpdate
from collabmate.services import application_service
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

router = APIRouter(prefix="/api", tags=["applications"])


@router.post(
    "/projects/{project_id}/applications",
    response_model=ApplicationResult,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(RATE_LIMITS["request_create"])
def submit_application(
    request: Request,
    project_id: int,
    payload: ApplicationCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> ApplicationResult:
    """
    Apply to join a project.

    - **409**: already a member, or a pending application already exists
    """
    outcome = application_service.submit_application(
        db, project_id, current_user.id, payload.message
    )
    return ApplicationResult.from_outcome(outcome)


@router.get("/projects/{project_id}/applications", response_model=list[ApplicationRead])
def list_project_applications(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> list[ApplicationRead]:
    applications = application_service.list_project_applications(db, project_id, current_user.id)
    return [ApplicationRead.model_validate(a, from_attributes=True) for a in applications]


@router.get("/applications/mine", response_model=list[ApplicationRead])
def list_my_applications(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> list[ApplicationRead]:
    applications = application_service.list_my_applications(db, current_user.id)
    return [ApplicationRead.model_validate(a, from_attributes=True) for a in applications]


@router.patch("/applications/{application_id}", response_model=ApplicationResult)
@limiter.limit(RATE_LIMITS["request_decide"])
def transition_application(
    request: Request,
    application_id: int,
    payload: StatusUpdate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> ApplicationResult:
    """
    Accept or decline a pending application (project creator only).

    A side effect that could not be written (membership, notification) does not
    undo the decision; the response then has ``partial_failure`` set.
    """
    outcome = application_service.transition_application(
        db, application_id, current_user.id, payload.status
    )
    return ApplicationResult.from_outcome(outcome)
