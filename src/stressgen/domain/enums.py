"""Domain enumerations for stressgen."""

from __future__ import annotations

from enum import Enum


class ApplyStatus(str, Enum):
    """How a single setter ended up on a target instance."""

    APPLIED = "applied"
    APPLIED_FORCED = "applied-forced"  # succeeded only after relaxing access
    SKIPPED = "skipped"

    @property
    def succeeded(self) -> bool:
        return self is not ApplyStatus.SKIPPED


class SetterKind(str, Enum):
    """Shape of a resolved setter."""

    DIRECT = "direct"
    COLLECTION = "collection"
