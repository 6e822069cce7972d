"""Life-state classification of spending totals."""

from .classifier import (
    TIERS,
    classify,
    describe,
    get_tier,
    next_tier_threshold,
    progress_within_tier,
    remaining_to_next_tier,
)
from .models import LifeState, LifeStateReport, Tier

__all__ = [
    "LifeState",
    "LifeStateReport",
    "TIERS",
    "Tier",
    "classify",
    "describe",
    "get_tier",
    "next_tier_threshold",
    "progress_within_tier",
    "remaining_to_next_tier",
]
