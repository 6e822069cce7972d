"""Life-state data models."""
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Tier:
    """One row of the tier table. Lower bounds are inclusive."""

    name: str
    lower_bound: float  # home currency
    message: str  # message key
    animation_key: str
    text: str  # English display text for the message key
    color: str
    emoji: str


@dataclass(frozen=True)
class LifeState:
    """Classification of a total. Derived on demand, never stored."""

    total_expense: float
    tier: str
    message: str
    animation_key: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalExpense": self.total_expense,
            "tier": self.tier,
            "message": self.message,
            "animationKey": self.animation_key,
        }


@dataclass(frozen=True)
class LifeStateReport:
    """Everything the dashboard shows for a total."""

    state: LifeState
    progress: float  # 0-100 within the current tier
    next_threshold: Optional[float]  # None when the tier is unbounded
    remaining_amount: float
    color: str
    emoji: str
    text: str
