import copy
import logging
from datetime import date
from typing import Any

from app.content import (
    ADVENTURE_TIERS,
    DEFAULT_ADVENTURE_TIER,
    DEFAULT_CONTENT,
    DEFAULT_EVENING_ENERGY,
    OUTDOOR_BREAK_MINUTES,
    ContentTables,
    default_language,
    default_morning_ritual,
    default_pain_recovery,
    default_sport_plan,
)
from app.store import PreferenceStore
from app.suggestions import SuggestionEngine, current_season

logger = logging.getLogger(__name__)

MORNING_RITUAL_KEY = "morningRitual"
SPORT_PLAN_KEY = "sportPlan"
PAIN_RECOVERY_KEY = "painRecovery"
LANGUAGE_KEY = "language"


class MountainFlow:
    """In-memory owner of all app state.

    Persisted slices are read from the store once, here, and written back
    after every change. Selectors and generated suggestions are transient and
    reset to their defaults with every new instance.
    """

    def __init__(
        self,
        store: PreferenceStore,
        content: ContentTables = DEFAULT_CONTENT,
        engine: SuggestionEngine | None = None,
    ) -> None:
        self.store = store
        self.content = content
        self.engine = engine or SuggestionEngine(content)

        self.morning_ritual: dict[str, bool] = store.load(MORNING_RITUAL_KEY, default_morning_ritual())
        self.sport_plan: dict[str, list[Any]] = store.load(SPORT_PLAN_KEY, default_sport_plan())
        self.pain_recovery: dict[str, Any] = store.load(PAIN_RECOVERY_KEY, default_pain_recovery())
        self.language: dict[str, Any] = store.load(LANGUAGE_KEY, default_language())

        self.evening_energy = DEFAULT_EVENING_ENERGY
        self.outdoor_break = ""
        self.adventure_tier = DEFAULT_ADVENTURE_TIER
        self.adventure = ""

        for key, value in self.persisted().items():
            store.save(key, value)

    def persisted(self) -> dict[str, Any]:
        return {
            MORNING_RITUAL_KEY: self.morning_ritual,
            SPORT_PLAN_KEY: self.sport_plan,
            PAIN_RECOVERY_KEY: self.pain_recovery,
            LANGUAGE_KEY: self.language,
        }

    def toggle_morning_item(self, key: str) -> dict[str, bool]:
        if key not in self.morning_ritual:
            raise KeyError(key)
        self.morning_ritual = {**self.morning_ritual, key: not self.morning_ritual[key]}
        self.store.save(MORNING_RITUAL_KEY, self.morning_ritual)
        logger.info("Morning item %s set to %s", key, self.morning_ritual[key])
        return self.morning_ritual

    def set_evening_energy(self, level: str) -> None:
        if level not in self.content.detox_menu:
            raise ValueError(f"Unknown energy level: {level}")
        self.evening_energy = level

    def detox_list(self) -> list[str]:
        return list(self.engine.detox_menu(self.evening_energy))

    def request_outdoor_break(self, minutes: int) -> str:
        self.outdoor_break = self.engine.pick_outdoor_break(minutes)
        return self.outdoor_break

    def set_adventure_distance_tier(self, tier: str) -> None:
        if tier not in ADVENTURE_TIERS:
            raise ValueError(f"Unknown distance tier: {tier}")
        self.adventure_tier = tier

    def request_adventure(self, today: date | None = None) -> str:
        self.adventure = self.engine.pick_adventure(current_season(today), self.adventure_tier)
        return self.adventure

    def snapshot(self, today: date | None = None) -> dict[str, Any]:
        return {
            "morning_ritual": dict(self.morning_ritual),
            "evening_energy": self.evening_energy,
            "evening_energy_options": list(self.content.detox_menu.keys()),
            "detox_menu": self.detox_list(),
            "outdoor_break": self.outdoor_break,
            "outdoor_break_minutes": list(OUTDOOR_BREAK_MINUTES),
            "adventure_tier": self.adventure_tier,
            "adventure_tiers": list(ADVENTURE_TIERS),
            "adventure": self.adventure,
            "season": current_season(today),
            "sport_plan": copy.deepcopy(self.sport_plan),
            "pain_recovery": copy.deepcopy(self.pain_recovery),
            "language": copy.deepcopy(self.language),
        }
