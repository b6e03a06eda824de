"""
Notification sink: append-only records addressed to a user.

Creation happens only as a side effect of a lifecycle transition and is always
driven through ``SideEffectRunner``, which owns the commit. Read-state updates
are single conditional statements scoped to the owner, so a foreign or unknown
id simply matches nothing.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from collabmate import models
from collabmate.schemas.enums import NotificationType


def create_notification(
    db: Session,
    *,
    user_id: uuid.UUID,
    type: NotificationType | str,
    title: str,
    body: str,
    link: Optional[str] = None,
) -> models.Notification:
    notification = models.Notification(
        user_id=user_id,
        type=type.value if isinstance(type, NotificationType) else type,
        title=title,
        body=body,
        link=link,
    )
    db.add(notification)
    db.flush()
    return notification


def list_notifications(
    db: Session, user_id: uuid.UUID, *, skip: int = 0, limit: int = 100
) -> tuple[int, list[models.Notification]]:
    query = db.query(models.Notification).filter(models.Notification.user_id == user_id)
    total = query.with_entities(func.count(models.Notification.id)).scalar() or 0
    items = (
        query.order_by(models.Notification.created_at.desc(), models.Notification.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )
    return total, items


def unread_count(db: Session, user_id: uuid.UUID) -> int:
    return (
        db.query(func.count(models.Notification.id))
        .filter(models.Notification.user_id == user_id, models.Notification.read_at.is_(None))
        .scalar()
    ) or 0


def mark_read(db: Session, notification_id: int, user_id: uuid.UUID) -> int:
    """Mark one of the caller's notifications read; 0 when missing, foreign or already read."""
    updated = (
        db.query(models.Notification)
        .filter(
            models.Notification.id == notification_id,
            models.Notification.user_id == user_id,
            models.Notification.read_at.is_(None),
        )
        .update({models.Notification.read_at: datetime.now(timezone.utc)}, synchronize_session=False)
    )
    db.commit()
    return updated


def mark_all_read(db: Session, user_id: uuid.UUID) -> int:
    updated = (
        db.query(models.Notification)
        .filter(models.Notification.user_id == user_id, models.Notification.read_at.is_(None))
        .update({models.Notification.read_at: datetime.now(timezone.utc)}, synchronize_session=False)
    )
    db.commit()
    return updated
