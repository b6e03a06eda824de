from pydantic import BaseModel, Field


class SideEffectWarning(BaseModel):
    """A side effect that did not complete after the primary write committed."""

    effect: str
    message: str


class StatusUpdate(BaseModel):
    # validated by the engine so that an unknown status is a 400, not a 422
    status: str


class LifecycleResult(BaseModel):
    partial_failure: bool = False
    warnings: list[SideEffectWarning] = Field(default_factory=list)

    @classmethod
    def from_outcome(cls, outcome):
        """Build the response for a ``LifecycleOutcome``: the entity plus its side-effect faults."""
        result = cls.model_validate(outcome.entity, from_attributes=True)
        return result.model_copy(
            update={"partial_failure": outcome.partial_failure, "warnings": outcome.warnings()}
        )
