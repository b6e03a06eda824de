"""Checks run by the lifecycle engine before any mutation.

Absence is always reported by the caller of these helpers (``ResourceNotFound``)
before entitlement is checked here, so a 404 and a 403 are never conflated.
"""

import uuid

from collabmate import models
from collabmate.core.exceptions import InvalidInput, PermissionDenied
from collabmate.schemas.enums import DecisionStatus


def parse_decision(value: str) -> DecisionStatus:
    try:
        return DecisionStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in DecisionStatus)
        raise InvalidInput(f"Invalid status '{value}'; expected one of: {allowed}")


def require_project_creator(project: models.Project, user_id: uuid.UUID, action: str) -> None:
    if project.creator_id != user_id:
        raise PermissionDenied(action=action)


def require_swap_recipient(swap: models.SkillSwap, user_id: uuid.UUID) -> None:
    if swap.to_user_id != user_id:
        raise PermissionDenied(action="decide on this skill swap (recipient only)")


def is_swap_participant(swap: models.SkillSwap, user_id: uuid.UUID) -> bool:
    return user_id in (swap.from_user_id, swap.to_user_id)


def require_swap_participant(swap: models.SkillSwap, user_id: uuid.UUID, action: str) -> None:
    if not is_swap_participant(swap, user_id):
        raise PermissionDenied(action=action)
