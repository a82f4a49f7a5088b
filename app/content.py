from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

MORNING_RITUAL_KEYS = ("sunlight", "movement", "intention", "breath", "hydration")
EVENING_ENERGY_OPTIONS = ("UltraLow", "Low", "Medium", "High")
DEFAULT_EVENING_ENERGY = "Low"
OUTDOOR_BREAK_MINUTES = (15, 30, 45)
ADVENTURE_TIERS = ("quick", "weekend", "special")
DEFAULT_ADVENTURE_TIER = "quick"
SEASONS = ("Winter", "Spring", "Summer", "Autumn")


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Plain dict/list copy of a frozen table, for JSON responses."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw(v) for v in value]
    return value


DETOX_MENU = _freeze(
    {
        "UltraLow": [
            "Lie on floor + 10 slow breaths",
            "Drink water + look out the window 2 min",
            "Barefoot balcony/doorstep air",
            "One-cat-cow + one neck roll",
            "Lights off, eyes closed 3 min",
        ],
        "Low": [
            "10 min mobility",
            "Yoga Nidra / NSDR",
            "Light language audio",
            "Tea + journal",
            "Fiction reading",
            "Eye relaxation",
        ],
        "Medium": [
            "Babbel + short writing",
            "Strength + mobility combo",
            "Learn new recipe",
            "Breathwork + meditation",
            "Organize one small space",
        ],
        "High": [
            "Deep strength session",
            "Creative project",
            "Long planning session",
            "Cold exposure + breathwork",
        ],
    }
)

# Milestones for the evening detox ladder. Not wired to any action yet.
PROGRESSIVE_DETOX = _freeze(
    {
        "Day1": "No social media after 20:00",
        "Day3": "No algorithmic content after dinner",
        "Day7": "Only intentional media",
        "Day14": "Full evening screen-free",
        "SOS": "UltraLow mode only — zero self-judgment",
    }
)

OUTDOOR_BREAKS = _freeze(
    {
        15: ["Sunlight walk", "Breathing + horizon gaze", "Mobility laps"],
        30: ["Easy jog", "Forest loop walk", "Stairs + stretch"],
        45: ["Short trail run", "Hilly interval walk", "Easy bike spin"],
    }
)

SEASONAL_ADVENTURES = _freeze(
    {
        "Winter": {
            "quick": ["Brauneck snowshoe sunset lap", "Local valley winter run", "Lenggries cold exposure walk"],
            "weekend": ["Tegernsee winter hike", "Achensee snowshoe tour", "Karwendel winter valley"],
            "special": ["Stubai ski touring weekend", "Arlberg winter trip"],
            "bad": ["Indoor climbing session", "Strength + mobility marathon", "Sauna + stretch"],
        },
        "Spring": {
            "quick": ["Isar river flow run", "Jachenau forest hike", "Local hill intervals"],
            "weekend": ["Waterfall hikes Alpspitze", "Tegernsee ridge hikes"],
            "special": ["Dolomites spring climbing", "Zillertal trail weekend"],
            "bad": ["Technique bouldering", "Long yoga + core", "Route planning workshop"],
        },
        "Summer": {
            "quick": ["Evening trail above Lenggries", "Sylvenstein loop run"],
            "weekend": ["Karwendel ridge hike", "Via ferrata Achensee"],
            "special": ["Western Alps hut-to-hut", "Dolomites multi-day trek"],
            "bad": ["Indoor endurance circuit", "Breathwork + heat theory", "Creative deep dive"],
        },
        "Autumn": {
            "quick": ["Foliage valley run", "Local peak sunset hike"],
            "weekend": ["Karwendel golden ridge hike", "Tegernsee panorama run"],
            "special": ["Southern Alps photography trip"],
            "bad": ["Strength cycle test", "Mobility recovery day", "Training review + planning"],
        },
    }
)


def default_morning_ritual() -> dict[str, bool]:
    return {key: False for key in MORNING_RITUAL_KEYS}


def default_sport_plan() -> dict[str, list[Any]]:
    return {"climbing": [], "running": [], "skiing": []}


def default_pain_recovery() -> dict[str, int]:
    return {"pain": 0, "recovery": 100}


def default_language() -> dict[str, int]:
    return {"French": 0, "Spanish": 0, "Swedish": 0, "Italian": 0}


@dataclass(frozen=True)
class ContentTables:
    detox_menu: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: DETOX_MENU)
    progressive_detox: Mapping[str, str] = field(default_factory=lambda: PROGRESSIVE_DETOX)
    outdoor_breaks: Mapping[int, tuple[str, ...]] = field(default_factory=lambda: OUTDOOR_BREAKS)
    seasonal_adventures: Mapping[str, Mapping[str, tuple[str, ...]]] = field(default_factory=lambda: SEASONAL_ADVENTURES)

    def as_dict(self) -> dict[str, Any]:
        return {
            "detox_menu": thaw(self.detox_menu),
            "progressive_detox": thaw(self.progressive_detox),
            "outdoor_breaks": {str(k): thaw(v) for k, v in self.outdoor_breaks.items()},
            "seasonal_adventures": thaw(self.seasonal_adventures),
        }


DEFAULT_CONTENT = ContentTables()
