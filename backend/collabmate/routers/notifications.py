from collabmate import models
from collabmate.core.settings import settings
from collabmate.db import get_db
from collabmate.routers.auth import get_current_user
from collabmate.schemas import MarkReadResponse, NotificationRead, PaginatedResponse, UnreadCount
from collabmate.services import notification_service
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.get("", response_model=PaginatedResponse[NotificationRead])
def list_notifications(
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> PaginatedResponse[NotificationRead]:
    """
    List the caller's notifications, newest first.

    - **skip**: Number of items to skip (default: 0)
    - **limit**: Number of items to return (default: 20, max: 100)
    """
    limit = min(limit, settings.notifications_page_limit)
    total, items = notification_service.list_notifications(
        db, current_user.id, skip=skip, limit=limit
    )
    return PaginatedResponse(
        total=total,
        skip=skip,
        limit=limit,
        items=[NotificationRead.model_validate(n, from_attributes=True) for n in items],
    )


@router.get("/unread-count", response_model=UnreadCount)
def get_unread_count(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> UnreadCount:
    return UnreadCount(count=notification_service.unread_count(db, current_user.id))


@router.patch("/{notification_id}/read", response_model=MarkReadResponse)
def mark_notification_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> MarkReadResponse:
    # unknown or foreign ids succeed silently so other users' ids are not revealed
    updated = notification_service.mark_read(db, notification_id, current_user.id)
    return MarkReadResponse(ok=True, updated=updated)


@router.post("/mark-all-read", response_model=MarkReadResponse)
def mark_all_notifications_read(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> MarkReadResponse:
    updated = notification_service.mark_all_read(db, current_user.id)
    return MarkReadResponse(ok=True, updated=updated)
