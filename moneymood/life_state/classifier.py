"""
Maps a home-currency total onto a life-state tier.

Tiers are evaluated from the highest lower bound down; the first tier whose
bound is <= total wins, so a total sitting exactly on a boundary belongs
to the higher tier.
"""
from typing import Optional, Tuple

from moneymood.life_state.models import LifeState, LifeStateReport, Tier


TIERS: Tuple[Tier, ...] = (
    Tier(
        name="luxury",
        lower_bound=0,
        message="relaxed-cafe-day",
        animation_key="luxury-apartment",
        text="Relaxed at a café today ☕️",
        color="#4CAF50",
        emoji="🏰",
    ),
    Tier(
        name="modest",
        lower_bound=50000,
        message="instant-noodles",
        animation_key="modest-apartment",
        text="Instant noodles for dinner tonight 🍜",
        color="#FF9800",
        emoji="🏠",
    ),
    Tier(
        name="homeless",
        lower_bound=80000,
        message="sleeping-under-bridge",
        animation_key="homeless",
        text="Sleeping under the bridge tonight... 🥶",
        color="#F44336",
        emoji="🌉",
    ),
    Tier(
        name="ghost",
        lower_bound=100000,
        message="disconnected-from-reality",
        animation_key="ghost",
        text="Out of money and disconnected from this world 💸👻",
        color="#9C27B0",
        emoji="👻",
    ),
)

TIER_NAMES = tuple(tier.name for tier in TIERS)


def get_tier(name: str) -> Tier:
    for tier in TIERS:
        if tier.name == name:
            return tier
    raise KeyError(f"Unknown tier: {name}")


def tier_for(total: float) -> Tier:
    for tier in reversed(TIERS):
        if tier.lower_bound <= total:
            return tier
    # Below every bound (negative totals)
    return TIERS[0]


def classify(total: float) -> LifeState:
    tier = tier_for(total)
    return LifeState(
        total_expense=total,
        tier=tier.name,
        message=tier.message,
        animation_key=tier.animation_key,
    )


def next_tier_threshold(tier: str) -> Optional[float]:
    """Lower bound of the tier above ``tier``; None for the top tier."""
    index = TIER_NAMES.index(get_tier(tier).name)
    if index + 1 >= len(TIERS):
        return None
    return TIERS[index + 1].lower_bound


def progress_within_tier(total: float) -> float:
    """Percentage of the way from the current tier's bound to the next one."""
    tier = tier_for(total)
    upper = next_tier_threshold(tier.name)
    if upper is None:
        return 100.0
    progress = (total - tier.lower_bound) / (upper - tier.lower_bound) * 100
    return min(100.0, max(0.0, progress))


def remaining_to_next_tier(total: float) -> float:
    """Amount left before the next tier; 0 when already in the top tier."""
    upper = next_tier_threshold(tier_for(total).name)
    if upper is None:
        return 0
    return max(0, upper - total)


def describe(total: float) -> LifeStateReport:
    tier = tier_for(total)
    return LifeStateReport(
        state=classify(total),
        progress=progress_within_tier(total),
        next_threshold=next_tier_threshold(tier.name),
        remaining_amount=remaining_to_next_tier(total),
        color=tier.color,
        emoji=tier.emoji,
        text=tier.text,
    )
