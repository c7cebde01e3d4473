"""Result entities for stressgen.

Applying a setter never raises; instead it reports what happened through
these models so skipped properties stay visible when debugging fixtures.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from stressgen.domain.enums import ApplyStatus


class SetterOutcome(BaseModel):
    """Outcome of applying one setter to one target."""

    model_config = ConfigDict(frozen=True)

    identity: str  # "<field> / <method>"
    status: ApplyStatus
    error: str | None = None
    initializer: SetterOutcome | None = None  # collection setters only

    @property
    def succeeded(self) -> bool:
        return self.status.succeeded


class PopulationReport(BaseModel):
    """Outcomes of applying a full plan to one target instance."""

    target: str  # qualified class name
    outcomes: list[SetterOutcome] = Field(default_factory=list)

    @property
    def applied(self) -> list[str]:
        return [o.identity for o in self.outcomes if o.succeeded]

    @property
    def skipped(self) -> list[str]:
        return [o.identity for o in self.outcomes if not o.succeeded]

    def outcome_for(self, identity: str) -> SetterOutcome | None:
        """Return the first outcome recorded for *identity*, or ``None``."""
        for outcome in self.outcomes:
            if outcome.identity == identity:
                return outcome
        return None
