"""Scheduler configuration."""

from dataclasses import dataclass, field
from typing import Any

from ..models import Confidence
from .constants import (
    BREAK_BLOCK_MINUTES,
    CONFIDENCE_WEIGHTS,
    LEAD_IN_DAYS,
    STUDY_BLOCK_MINUTES,
)


@dataclass(frozen=True)
class SchedulerSettings:
    """Tunable parameters for the slot filler.

    Defaults reproduce the standard 40/10 study rhythm with a four-day
    exam lead-in.
    """

    study_block_minutes: int = STUDY_BLOCK_MINUTES
    break_block_minutes: int = BREAK_BLOCK_MINUTES
    lead_in_days: int = LEAD_IN_DAYS
    confidence_weights: dict[Confidence, int] = field(
        default_factory=lambda: dict(CONFIDENCE_WEIGHTS)
    )

    def __post_init__(self) -> None:
        if self.study_block_minutes <= 0:
            raise ValueError(
                f"study_block_minutes must be positive, got {self.study_block_minutes}"
            )
        if self.break_block_minutes <= 0:
            raise ValueError(
                f"break_block_minutes must be positive, got {self.break_block_minutes}"
            )
        if self.lead_in_days < 0:
            raise ValueError(f"lead_in_days must not be negative, got {self.lead_in_days}")

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "SchedulerSettings":
        """Create settings from a partial mapping; missing keys keep their defaults."""
        if not data:
            return cls()

        kwargs: dict[str, Any] = {}
        for name in ("study_block_minutes", "break_block_minutes", "lead_in_days"):
            if data.get(name) is not None:
                kwargs[name] = int(data[name])

        weights = data.get("confidence_weights")
        if weights:
            merged = dict(CONFIDENCE_WEIGHTS)
            merged.update({Confidence(key): int(value) for key, value in weights.items()})
            kwargs["confidence_weights"] = merged

        return cls(**kwargs)

    def weight(self, confidence: Confidence | None) -> int:
        """Scheduling weight for a confidence rating (0 when unknown)."""
        return self.confidence_weights.get(confidence, 0)
