"""Tests for persona_lab/engine/tci.py: conversion and growth simulation."""

import pytest

from persona_lab.config import get_settings
from persona_lab.engine.tci import (
    confidence,
    convert,
    convert_character,
    convert_temperament,
    simulate_growth,
)
from persona_lab.errors import InvalidInputError
from persona_lab.personality_types import BigFiveTraits

TEMPERAMENT_FIELDS = (
    "novelty_seeking_curiosity",
    "impulsiveness",
    "extravagance",
    "disorderliness",
    "harm_avoidance",
    "reward_dependence",
    "persistence",
)
CHARACTER_FIELDS = ("self_directedness", "cooperativeness", "self_transcendence")


def _traits(**overrides: float) -> BigFiveTraits:
    values = dict(openness=50, conscientiousness=50, extraversion=50, agreeableness=50, neuroticism=50)
    values.update(overrides)
    return BigFiveTraits(**values)


MIXED = dict(openness=80, conscientiousness=80, extraversion=20, agreeableness=20, neuroticism=20)


class TestTemperament:
    def test_neutral_profile(self):
        """All traits at 50 → every temperament trait at 50."""
        temperament = convert_temperament(_traits())
        for field in TEMPERAMENT_FIELDS:
            assert getattr(temperament, field) == pytest.approx(50)

    def test_mixed_profile(self):
        """O80 C80 E20 A20 N20 temperament."""
        t = convert_temperament(_traits(**MIXED))
        assert t.novelty_seeking_curiosity == pytest.approx(62)
        assert t.impulsiveness == pytest.approx(20)
        assert t.extravagance == pytest.approx(20)
        assert t.disorderliness == pytest.approx(20)
        assert t.harm_avoidance == pytest.approx(38)
        assert t.reward_dependence == pytest.approx(20)
        assert t.persistence == pytest.approx(80)


class TestCharacter:
    def test_mixed_profile(self):
        """O80 C80 E20 A20 N20 character."""
        c = convert_character(_traits(**MIXED))
        assert c.self_directedness == pytest.approx(80)
        assert c.cooperativeness == pytest.approx(32)
        assert c.self_transcendence == pytest.approx(56)

    @pytest.mark.parametrize("value", [0, 100])
    def test_extremes_in_range(self, value):
        profile = convert(_traits(openness=value, conscientiousness=value, extraversion=value,
                                  agreeableness=value, neuroticism=100 - value))
        for field in TEMPERAMENT_FIELDS:
            assert 0 <= getattr(profile.temperament, field) <= 100
        for field in CHARACTER_FIELDS:
            assert 0 <= getattr(profile.character, field) <= 100


class TestConfidence:
    def test_flat_profile_is_certain(self):
        """Zero variance → 100."""
        assert confidence(_traits()) == 100

    def test_small_spread(self):
        """Variance 1.6 → 98.4."""
        traits = _traits(openness=52, conscientiousness=50, extraversion=50, agreeableness=50, neuroticism=48)
        assert confidence(traits) == pytest.approx(98.4)

    def test_floor(self):
        """Large spread → floored at 60."""
        # variance 864
        assert confidence(_traits(**MIXED)) == 60


class TestGrowth:
    def test_zero_time_changes_nothing(self):
        """No elapsed time → developed equals initial."""
        profile = convert(_traits(**MIXED))
        growth = simulate_growth(profile, 0, rate=0.3)
        assert growth.developed == profile
        assert growth.initial is profile

    def test_half_rate_one_step(self):
        """Rate 0.5 for one unit closes half of each gap."""
        profile = convert(_traits(**MIXED))
        growth = simulate_growth(profile, 1, rate=0.5)
        assert growth.developed.character.self_directedness == pytest.approx(90)
        assert growth.developed.character.cooperativeness == pytest.approx(66)
        assert growth.time_span == 1

    def test_temperament_is_stable(self):
        """Growth never touches temperament or confidence."""
        profile = convert(_traits(**MIXED))
        growth = simulate_growth(profile, 10, rate=0.2)
        assert growth.developed.temperament == profile.temperament
        assert growth.developed.confidence == profile.confidence

    def test_growth_is_monotonic(self):
        """Longer spans never reduce character traits."""
        profile = convert(_traits(**MIXED))
        short = simulate_growth(profile, 1, rate=0.1).developed.character
        long = simulate_growth(profile, 5, rate=0.1).developed.character
        for field in CHARACTER_FIELDS:
            assert getattr(profile.character, field) <= getattr(short, field) <= getattr(long, field) <= 100

    def test_default_rate_from_settings(self):
        """No rate → configured growth rate."""
        profile = convert(_traits(**MIXED))
        rate = get_settings().growth_rate
        growth = simulate_growth(profile, 1)
        expected = 80 + 20 * rate
        assert growth.developed.character.self_directedness == pytest.approx(expected)

    def test_negative_time_rejected(self):
        with pytest.raises(InvalidInputError, match="time_span") as exc_info:
            simulate_growth(convert(_traits()), -1)
        assert exc_info.value.fields == ["time_span"]

    def test_nan_time_rejected(self):
        """NaN time span → InvalidInputError, not a model error."""
        with pytest.raises(InvalidInputError, match="time_span"):
            simulate_growth(convert(_traits()), float("nan"), rate=0.1)

    @pytest.mark.parametrize("rate", [-0.1, 1.5, float("nan")])
    def test_bad_rate_rejected(self, rate):
        with pytest.raises(InvalidInputError, match="rate"):
            simulate_growth(convert(_traits()), 1, rate=rate)
