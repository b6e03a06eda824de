"""
Best-effort side effects of request lifecycle transitions.

A transition first commits its primary write (the status change, the new
request row). Dependent writes such as notifications and memberships then run
one by one, each committed on its own. A failure in one of them never undoes
the primary write; it is logged with enough context to reconcile later and
handed back to the caller as a fault, so the HTTP layer can flag the response
as a partial failure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from sqlalchemy.orm import Session

from collabmate.core.logging import get_logger
from collabmate.schemas.lifecycle import SideEffectWarning

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class SideEffectFault:
    entity: str
    entity_id: int
    operation: str
    effect: str
    error: str

    def to_warning(self) -> SideEffectWarning:
        return SideEffectWarning(
            effect=self.effect,
            message=f"{self.effect} for {self.entity} {self.entity_id} was not recorded",
        )


@dataclass
class LifecycleOutcome(Generic[T]):
    """Primary entity of a lifecycle operation plus the faults of its side effects."""

    entity: T
    faults: list[SideEffectFault] = field(default_factory=list)

    @property
    def partial_failure(self) -> bool:
        return bool(self.faults)

    def warnings(self) -> list[SideEffectWarning]:
        return [fault.to_warning() for fault in self.faults]


class SideEffectRunner:
    def __init__(self, db: Session, *, entity: str, entity_id: int, operation: str):
        self.db = db
        self.entity = entity
        self.entity_id = entity_id
        self.operation = operation
        self.faults: list[SideEffectFault] = []

    def run(self, effect: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> bool:
        """Run ``func(db, *args, **kwargs)`` and commit; record a fault instead of raising."""
        try:
            func(self.db, *args, **kwargs)
            self.db.commit()
        except Exception as exc:  # noqa: BLE001 - the primary write is already committed
            self.db.rollback()
            fault = SideEffectFault(
                entity=self.entity,
                entity_id=self.entity_id,
                operation=self.operation,
                effect=effect,
                error=str(exc),
            )
            self.faults.append(fault)
            logger.warning(
                "side_effect_failed",
                entity=self.entity,
                entity_id=self.entity_id,
                operation=self.operation,
                effect=effect,
                error=str(exc),
                error_type=type(exc).__name__,
                exc_info=True,
            )
            return False
        return True

    def outcome(self, entity: T) -> LifecycleOutcome[T]:
        return LifecycleOutcome(entity=entity, faults=list(self.faults))
