"""
Skill swap state machine, thread messages and status history.

A swap starts ``pending`` and only its recipient may move it to ``accepted`` or
``declined``; both are terminal. Every status the swap has held has exactly one
history row: creation writes the swap and its first row in one transaction,
and a decision writes the conditional status update and its row in one
transaction. The thread stays open to both participants whatever the status.
"""

from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from collabmate import models
from collabmate.core.exceptions import InvalidInput, InvalidStateTransition, ResourceNotFound
from collabmate.core.logging import get_logger
from collabmate.schemas.enums import NotificationType, RequestStatus
from collabmate.services import guards, notification_service
from collabmate.services.side_effects import LifecycleOutcome, SideEffectRunner

logger = get_logger(__name__)

SWAPS_LINK = "/skill-swaps"


def get_swap_or_404(db: Session, swap_id: int) -> models.SkillSwap:
    swap = db.get(models.SkillSwap, swap_id)
    if swap is None:
        raise ResourceNotFound("Skill swap", swap_id)
    return swap


def propose_swap(
    db: Session,
    initiator_id: uuid.UUID,
    recipient_id: uuid.UUID,
    offered_skill: Optional[str],
    requested_skill: Optional[str],
    message: Optional[str] = None,
) -> LifecycleOutcome[models.SkillSwap]:
    offered = (offered_skill or "").strip()
    requested = (requested_skill or "").strip()
    if not offered or not requested:
        raise InvalidInput("Both offered_skill and requested_skill are required")
    if recipient_id == initiator_id:
        raise InvalidInput("You cannot propose a skill swap to yourself")
    if db.get(models.User, recipient_id) is None:
        raise ResourceNotFound("User", recipient_id)

    swap = models.SkillSwap(
        from_user_id=initiator_id,
        to_user_id=recipient_id,
        offered_skill=offered,
        requested_skill=requested,
        message=(message or "").strip(),
        status=RequestStatus.PENDING.value,
    )
    db.add(swap)
    db.flush()
    db.add(
        models.SkillSwapStatusHistory(
            swap_id=swap.id, status=RequestStatus.PENDING.value, changed_by=initiator_id
        )
    )
    db.commit()
    db.refresh(swap)

    logger.info(
        "skill_swap_proposed",
        swap_id=swap.id,
        from_user_id=str(initiator_id),
        to_user_id=str(recipient_id),
    )

    runner = SideEffectRunner(db, entity="skill_swap", entity_id=swap.id, operation="propose")
    runner.run(
        "notification",
        notification_service.create_notification,
        user_id=recipient_id,
        type=NotificationType.SWAP_PROPOSED,
        title="New skill swap request",
        body=f"You were offered {offered} in exchange for {requested}.",
        link=SWAPS_LINK,
    )
    return runner.outcome(swap)


def change_swap_status(
    db: Session,
    swap_id: int,
    caller_id: uuid.UUID,
    new_status: str,
) -> LifecycleOutcome[models.SkillSwap]:
    target = guards.parse_decision(new_status)
    swap = get_swap_or_404(db, swap_id)
    guards.require_swap_recipient(swap, caller_id)

    updated = (
        db.query(models.SkillSwap)
        .filter(
            models.SkillSwap.id == swap.id,
            models.SkillSwap.status == RequestStatus.PENDING.value,
        )
        .update({models.SkillSwap.status: target.value}, synchronize_session=False)
    )
    if updated != 1:
        db.rollback()
        db.refresh(swap)
        raise InvalidStateTransition("Skill swap", swap.id, swap.status, target.value)
    db.add(models.SkillSwapStatusHistory(swap_id=swap.id, status=target.value, changed_by=caller_id))
    db.commit()
    db.refresh(swap)

    logger.info(
        "skill_swap_status_changed",
        swap_id=swap.id,
        status=target.value,
        changed_by=str(caller_id),
    )

    runner = SideEffectRunner(db, entity="skill_swap", entity_id=swap.id, operation="change_status")
    runner.run(
        "notification",
        notification_service.create_notification,
        user_id=swap.from_user_id,
        type=f"swap_{target.value}",
        title=f"Skill swap {target.value}",
        body=f"Your skill swap request was {target.value}.",
        link=SWAPS_LINK,
    )
    return runner.outcome(swap)


def post_message(
    db: Session, swap_id: int, sender_id: uuid.UUID, text: Optional[str]
) -> models.SkillSwapMessage:
    body = (text or "").strip()
    if not body:
        raise InvalidInput("Message is required")
    swap = get_swap_or_404(db, swap_id)
    guards.require_swap_participant(swap, sender_id, action="post in this skill swap")

    message = models.SkillSwapMessage(swap_id=swap.id, sender_id=sender_id, message=body)
    db.add(message)
    db.commit()
    db.refresh(message)
    return message


def list_messages(db: Session, swap_id: int, caller_id: uuid.UUID) -> list[models.SkillSwapMessage]:
    swap = get_swap_or_404(db, swap_id)
    guards.require_swap_participant(swap, caller_id, action="read this skill swap")
    return (
        db.query(models.SkillSwapMessage)
        .options(joinedload(models.SkillSwapMessage.sender))
        .filter(models.SkillSwapMessage.swap_id == swap.id)
        .order_by(models.SkillSwapMessage.created_at.asc(), models.SkillSwapMessage.id.asc())
        .all()
    )


def list_history(
    db: Session, swap_id: int, caller_id: uuid.UUID
) -> list[models.SkillSwapStatusHistory]:
    swap = get_swap_or_404(db, swap_id)
    guards.require_swap_participant(swap, caller_id, action="read this skill swap")
    return (
        db.query(models.SkillSwapStatusHistory)
        .filter(models.SkillSwapStatusHistory.swap_id == swap.id)
        .order_by(
            models.SkillSwapStatusHistory.created_at.asc(),
            models.SkillSwapStatusHistory.id.asc(),
        )
        .all()
    )


def get_swap(db: Session, swap_id: int, caller_id: uuid.UUID) -> models.SkillSwap:
    swap = get_swap_or_404(db, swap_id)
    guards.require_swap_participant(swap, caller_id, action="read this skill swap")
    return swap


def list_my_swaps(db: Session, caller_id: uuid.UUID) -> list[models.SkillSwap]:
    return (
        db.query(models.SkillSwap)
        .options(joinedload(models.SkillSwap.from_user), joinedload(models.SkillSwap.to_user))
        .filter(or_(models.SkillSwap.from_user_id == caller_id, models.SkillSwap.to_user_id == caller_id))
        .order_by(models.SkillSwap.created_at.desc(), models.SkillSwap.id.desc())
        .all()
    )
