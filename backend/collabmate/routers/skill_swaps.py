from collabmate import models
from collabmate.core.rate_limit import RATE_LIMITS, limiter
from collabmate.db import get_db
from collabmate.routers.auth import get_current_user
from collabmate.schemas import (
    SkillSwapCreate,
    SkillSwapRead,
    SkillSwapResult,
    StatusHistoryRead,
    StatusUpdate,
    SwapMessageCreate,
    SwapMessageRead,
)
from collabmate.services import skill_swap_service
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

router = APIRouter(prefix="/api/skill-swaps", tags=["skill-swaps"])


@router.get("", response_model=list[SkillSwapRead])
def list_my_swaps(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> list[SkillSwapRead]:
    swaps = skill_swap_service.list_my_swaps(db, current_user.id)
    return [SkillSwapRead.model_validate(s, from_attributes=True) for s in swaps]


@router.post("", response_model=SkillSwapResult, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_LIMITS["request_create"])
def propose_swap(
    request: Request,
    payload: SkillSwapCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> SkillSwapResult:
    outcome = skill_swap_service.propose_swap(
        db,
        current_user.id,
        payload.to_user_id,
        payload.offered_skill,
        payload.requested_skill,
        payload.message,
    )
    return SkillSwapResult.from_outcome(outcome)


@router.get("/{swap_id}", response_model=SkillSwapRead)
def get_swap(
    swap_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> SkillSwapRead:
    swap = skill_swap_service.get_swap(db, swap_id, current_user.id)
    return SkillSwapRead.model_validate(swap, from_attributes=True)


@router.patch("/{swap_id}/status", response_model=SkillSwapResult)
@limiter.limit(RATE_LIMITS["request_decide"])
def change_swap_status(
    request: Request,
    swap_id: int,
    payload: StatusUpdate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> SkillSwapResult:
    """Accept or decline a pending swap (recipient only)."""
    outcome = skill_swap_service.change_swap_status(db, swap_id, current_user.id, payload.status)
    return SkillSwapResult.from_outcome(outcome)


@router.get("/{swap_id}/messages", response_model=list[SwapMessageRead])
def list_swap_messages(
    swap_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> list[SwapMessageRead]:
    messages = skill_swap_service.list_messages(db, swap_id, current_user.id)
    return [SwapMessageRead.model_validate(m, from_attributes=True) for m in messages]


@router.post(
    "/{swap_id}/messages", response_model=SwapMessageRead, status_code=status.HTTP_201_CREATED
)
@limiter.limit(RATE_LIMITS["swap_messages"])
def post_swap_message(
    request: Request,
    swap_id: int,
    payload: SwapMessageCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> SwapMessageRead:
    message = skill_swap_service.post_message(db, swap_id, current_user.id, payload.message)
    return SwapMessageRead.model_validate(message, from_attributes=True)


@router.get("/{swap_id}/history", response_model=list[StatusHistoryRead])
def list_swap_history(
    swap_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> list[StatusHistoryRead]:
    history = skill_swap_service.list_history(db, swap_id, current_user.id)
    return [StatusHistoryRead.model_validate(h, from_attributes=True) for h in history]
