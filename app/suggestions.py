import logging
import random
from datetime import date
from typing import Any

from app.content import DEFAULT_CONTENT, ContentTables

logger = logging.getLogger(__name__)

TIER_LABELS = {"quick": "≤1h drive", "weekend": "1–3h"}
SPECIAL_TIER_LABEL = "Special Alps Trip"


def season_for_month(month: int) -> str:
    if month < 1 or month > 12:
        raise ValueError(f"Month must be 1-12, got {month}.")
    if month == 12 or month <= 2:
        return "Winter"
    if month <= 5:
        return "Spring"
    if month <= 8:
        return "Summer"
    return "Autumn"


def current_season(today: date | None = None) -> str:
    return season_for_month((today or date.today()).month)


def tier_label(tier: str) -> str:
    return TIER_LABELS.get(tier, SPECIAL_TIER_LABEL)


class SuggestionEngine:
    """Picks suggestions out of the static content tables.

    ``rng`` only needs a ``choice(seq)`` method. It defaults to an unseeded
    ``random.Random`` so every call may differ; pass a seeded instance to get
    a reproducible sequence.
    """

    def __init__(self, content: ContentTables = DEFAULT_CONTENT, rng: Any = None) -> None:
        self.content = content
        self.rng = rng if rng is not None else random.Random()

    def detox_menu(self, level: str) -> tuple[str, ...]:
        return self.content.detox_menu[level]

    def pick_outdoor_break(self, minutes: int) -> str:
        choice = self.rng.choice(self.content.outdoor_breaks[minutes])
        logger.info("Outdoor break for %s min: %s", minutes, choice)
        return choice

    def pick_adventure(self, season: str, tier: str) -> str:
        by_tier = self.content.seasonal_adventures[season]
        if not by_tier.get(tier):
            tier = "quick"
        suggestion = f"{self.rng.choice(by_tier[tier])} — {tier_label(tier)}"
        logger.info("Adventure for %s/%s: %s", season, tier, suggestion)
        return suggestion
