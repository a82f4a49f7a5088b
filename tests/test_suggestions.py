"""Tests for the season resolver and the suggestion engine."""

from collections import Counter
from datetime import date
from types import MappingProxyType

import pytest

from app.content import DEFAULT_CONTENT, ContentTables, OUTDOOR_BREAKS, SEASONAL_ADVENTURES
from app.suggestions import SuggestionEngine, current_season, season_for_month, tier_label

EXPECTED_SEASONS = {
    1: "Winter",
    2: "Winter",
    3: "Spring",
    4: "Spring",
    5: "Spring",
    6: "Summer",
    7: "Summer",
    8: "Summer",
    9: "Autumn",
    10: "Autumn",
    11: "Autumn",
    12: "Winter",
}


@pytest.mark.parametrize("month,season", sorted(EXPECTED_SEASONS.items()))
def test_season_for_every_month(month, season):
    assert season_for_month(month) == season


@pytest.mark.parametrize("month", [0, 13, -1])
def test_season_for_month_out_of_range(month):
    with pytest.raises(ValueError):
        season_for_month(month)


def test_current_season_uses_given_date():
    assert current_season(date(2025, 12, 31)) == "Winter"
    assert current_season(date(2026, 3, 1)) == "Spring"
    assert current_season(date(2026, 8, 31)) == "Summer"
    assert current_season(date(2026, 11, 30)) == "Autumn"


def test_current_season_defaults_to_today():
    assert current_season() == season_for_month(date.today().month)


def test_tier_labels():
    assert tier_label("quick") == "≤1h drive"
    assert tier_label("weekend") == "1–3h"
    assert tier_label("special") == "Special Alps Trip"
    assert tier_label("bad") == "Special Alps Trip"


def test_outdoor_break_stays_within_table():
    engine = SuggestionEngine()
    options = set(OUTDOOR_BREAKS[15])
    for _ in range(50):
        assert engine.pick_outdoor_break(15) in options


def test_outdoor_break_covers_every_option():
    engine = SuggestionEngine()
    counts = Counter(engine.pick_outdoor_break(15) for _ in range(1000))
    assert set(counts) == {"Sunlight walk", "Breathing + horizon gaze", "Mobility laps"}


def test_outdoor_break_follows_injected_source(scripted):
    engine = SuggestionEngine(rng=scripted(2, 0))
    assert engine.pick_outdoor_break(45) == "Easy bike spin"
    assert engine.pick_outdoor_break(30) == "Easy jog"


def test_outdoor_break_undefined_duration_raises():
    with pytest.raises(KeyError):
        SuggestionEngine().pick_outdoor_break(20)


def test_winter_special_adventure():
    engine = SuggestionEngine()
    starts = ("Stubai ski touring weekend", "Arlberg winter trip")
    for _ in range(20):
        suggestion = engine.pick_adventure("Winter", "special")
        item, suffix = suggestion.split(" — ")
        assert item in starts
        assert suffix == "Special Alps Trip"


def test_unknown_tier_falls_back_to_quick(scripted):
    rng = scripted(1)
    engine = SuggestionEngine(rng=rng)

    assert engine.pick_adventure("Winter", "unknown-tier") == "Local valley winter run — ≤1h drive"
    assert rng.seen == [SEASONAL_ADVENTURES["Winter"]["quick"]]


def test_weekend_adventure_suffix(scripted):
    engine = SuggestionEngine(rng=scripted(0))
    assert engine.pick_adventure("Summer", "weekend") == "Karwendel ridge hike — 1–3h"


def test_bad_weather_tier_uses_special_label(scripted):
    engine = SuggestionEngine(rng=scripted(2))
    assert engine.pick_adventure("Autumn", "bad") == "Training review + planning — Special Alps Trip"


@pytest.mark.parametrize("season", ["Winter", "Spring", "Summer", "Autumn"])
@pytest.mark.parametrize("tier", ["quick", "weekend", "special", "bad"])
def test_every_documented_key_yields_a_table_entry(season, tier):
    suggestion = SuggestionEngine().pick_adventure(season, tier)
    item = suggestion.split(" — ")[0]
    assert item in SEASONAL_ADVENTURES[season][tier]


def test_unknown_season_raises():
    with pytest.raises(KeyError):
        SuggestionEngine().pick_adventure("Monsoon", "quick")


def test_detox_menu_rows():
    engine = SuggestionEngine()
    assert len(engine.detox_menu("UltraLow")) == 5
    assert len(engine.detox_menu("Low")) == 6
    assert len(engine.detox_menu("Medium")) == 5
    assert len(engine.detox_menu("High")) == 4


def test_custom_content_is_used(scripted):
    content = ContentTables(outdoor_breaks=MappingProxyType({10: ("Balcony stretch",)}))
    engine = SuggestionEngine(content, rng=scripted(0))
    assert engine.pick_outdoor_break(10) == "Balcony stretch"


def test_content_tables_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_CONTENT.detox_menu["Low"] = ("Doomscroll",)
    with pytest.raises(TypeError):
        DEFAULT_CONTENT.seasonal_adventures["Winter"]["quick"] = ()
    assert isinstance(DEFAULT_CONTENT.outdoor_breaks[15], tuple)


def test_content_as_dict_is_plain_json():
    data = DEFAULT_CONTENT.as_dict()
    assert data["outdoor_breaks"]["30"] == ["Easy jog", "Forest loop walk", "Stairs + stretch"]
    assert data["progressive_detox"]["SOS"] == "UltraLow mode only — zero self-judgment"
    assert data["seasonal_adventures"]["Autumn"]["special"] == ["Southern Alps photography trip"]
