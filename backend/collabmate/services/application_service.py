"""
Project-join application state machine.

    pending --accept--> accepted
    pending --decline--> declined

Both targets are terminal. The pending check and the status write are one
conditional UPDATE, so of two racing decisions exactly one matches a row and
the other sees ``InvalidStateTransition``. Uniqueness of the pending
application per (project, applicant) is a partial unique index; a duplicate
submit surfaces as ``IntegrityError`` on commit and becomes ``ConflictError``.
"""

from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from collabmate import models
from collabmate.core.exceptions import ConflictError, InvalidStateTransition, ResourceNotFound
from collabmate.core.logging import get_logger
from collabmate.schemas.enums import DecisionStatus, NotificationType, RequestStatus
from collabmate.services import guards, notification_service, project_service
from collabmate.services.side_effects import LifecycleOutcome, SideEffectRunner

logger = get_logger(__name__)


def get_application_or_404(db: Session, application_id: int) -> models.ProjectApplication:
    application = db.get(models.ProjectApplication, application_id)
    if application is None:
        raise ResourceNotFound("Application", application_id)
    return application


def submit_application(
    db: Session,
    project_id: int,
    applicant_id: uuid.UUID,
    message: Optional[str] = None,
) -> LifecycleOutcome[models.ProjectApplication]:
    project = project_service.get_project_or_404(db, project_id)
    if project_service.is_project_member(db, project.id, applicant_id):
        raise ConflictError("Already a member of this project")

    application = models.ProjectApplication(
        project_id=project.id,
        user_id=applicant_id,
        message=message,
        status=RequestStatus.PENDING.value,
    )
    db.add(application)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("You already have a pending application for this project")
    db.refresh(application)

    logger.info(
        "application_submitted",
        application_id=application.id,
        project_id=project.id,
        applicant_id=str(applicant_id),
    )

    runner = SideEffectRunner(
        db, entity="application", entity_id=application.id, operation="submit"
    )
    runner.run(
        "notification",
        notification_service.create_notification,
        user_id=project.creator_id,
        type=NotificationType.APPLICATION_CREATED,
        title="New project application",
        body=f"Someone applied to your project: {project.title}",
        link=f"/project/{project.id}",
    )
    return runner.outcome(application)


def transition_application(
    db: Session,
    application_id: int,
    caller_id: uuid.UUID,
    new_status: str,
) -> LifecycleOutcome[models.ProjectApplication]:
    target = guards.parse_decision(new_status)
    application = get_application_or_404(db, application_id)
    project = project_service.get_project_or_404(db, application.project_id)
    guards.require_project_creator(project, caller_id, action="decide applications for this project")

    updated = (
        db.query(models.ProjectApplication)
        .filter(
            models.ProjectApplication.id == application.id,
            models.ProjectApplication.status == RequestStatus.PENDING.value,
        )
        .update({models.ProjectApplication.status: target.value}, synchronize_session=False)
    )
    if updated != 1:
        db.rollback()
        db.refresh(application)
        raise InvalidStateTransition("Application", application.id, application.status, target.value)
    db.commit()
    db.refresh(application)

    logger.info(
        "application_transitioned",
        application_id=application.id,
        project_id=project.id,
        status=target.value,
        decided_by=str(caller_id),
    )

    runner = SideEffectRunner(
        db, entity="application", entity_id=application.id, operation="transition"
    )
    if target is DecisionStatus.ACCEPTED:
        runner.run(
            "membership",
            project_service.ensure_project_member,
            application.project_id,
            application.user_id,
        )
    runner.run(
        "notification",
        notification_service.create_notification,
        user_id=application.user_id,
        type=f"application_{target.value}",
        title=f"Application {target.value}",
        body=f"Your application for project #{application.project_id} was {target.value}.",
        link=f"/project/{application.project_id}",
    )
    return runner.outcome(application)


def list_project_applications(
    db: Session, project_id: int, caller_id: uuid.UUID
) -> list[models.ProjectApplication]:
    project = project_service.get_project_or_404(db, project_id)
    guards.require_project_creator(project, caller_id, action="view applications for this project")
    return (
        db.query(models.ProjectApplication)
        .options(joinedload(models.ProjectApplication.applicant))
        .filter(models.ProjectApplication.project_id == project.id)
        .order_by(models.ProjectApplication.created_at.desc(), models.ProjectApplication.id.desc())
        .all()
    )


def list_my_applications(db: Session, caller_id: uuid.UUID) -> list[models.ProjectApplication]:
    return (
        db.query(models.ProjectApplication)
        .filter(models.ProjectApplication.user_id == caller_id)
        .order_by(models.ProjectApplication.created_at.desc(), models.ProjectApplication.id.desc())
        .all()
    )
